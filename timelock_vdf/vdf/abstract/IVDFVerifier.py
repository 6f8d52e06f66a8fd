from abc import ABC, abstractmethod

from ..SolvedVDF import SolvedVDF
from ..UnsolvedVDF import UnsolvedVDF


class IVDFVerifier(ABC):
    """Abstract base class defining the interface for a VDF verifier."""

    @staticmethod
    @abstractmethod
    def verify(solved: SolvedVDF, unsolved: UnsolvedVDF) -> None:
        """Raise an InvalidProof subclass unless solved is a valid solution of unsolved."""

    @staticmethod
    @abstractmethod
    def is_valid(solved: SolvedVDF, unsolved: UnsolvedVDF) -> bool:
        """Boolean form of verify."""
