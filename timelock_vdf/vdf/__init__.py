"""Wesolowski VDF over an RSA modulus."""

from .VDFSetup import VDFSetup
from .UnsolvedVDF import UnsolvedVDF
from .SolvedVDF import SolvedVDF
from .UnsolvedVDFBuilder import UnsolvedVDFBuilder
from .HashToPrime import challenge_prime
from .LongDivisionProver import LongDivisionProver
from .SequentialVDFSolver import SequentialVDFSolver
from .EfficientVDFSolver import EfficientVDFSolver
from .VDFVerifier import VDFVerifier
from .VDFFactory import VDFFactory
from .abstract.IUnsolvedVDFBuilder import IUnsolvedVDFBuilder
from .abstract.ISequentialVDFSolver import ISequentialVDFSolver
from .abstract.IEfficientVDFSolver import IEfficientVDFSolver
from .abstract.IVDFVerifier import IVDFVerifier
from .abstract.IVDFFactory import IVDFFactory

__all__ = [
    "VDFSetup",
    "UnsolvedVDF",
    "SolvedVDF",
    "UnsolvedVDFBuilder",
    "challenge_prime",
    "LongDivisionProver",
    "SequentialVDFSolver",
    "EfficientVDFSolver",
    "VDFVerifier",
    "VDFFactory",
    "IUnsolvedVDFBuilder",
    "ISequentialVDFSolver",
    "IEfficientVDFSolver",
    "IVDFVerifier",
    "IVDFFactory",
]
