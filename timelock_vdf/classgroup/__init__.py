"""VDFs over imaginary quadratic class groups, keyed by a challenge."""

from .abstract.IVDF import IVDF
from .WesolowskiVDF import WesolowskiVDF
from .PietrzakVDF import PietrzakVDF
from .VDFParams import ProofType, VDFParams

__all__ = ["IVDF", "WesolowskiVDF", "PietrzakVDF", "ProofType", "VDFParams"]
