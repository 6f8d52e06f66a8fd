from abc import ABC, abstractmethod
from typing import List, Tuple

from ...rsa import RSA
from ..SolvedVDF import SolvedVDF
from ..UnsolvedVDF import UnsolvedVDF


class IVDFFactory(ABC):
    """Abstract base class defining the interface for a VDF factory."""

    @abstractmethod
    def create_instance(self) -> Tuple[UnsolvedVDF, RSA, SolvedVDF]:
        """Create a new VDF instance with its solution.

        Returns:
            Tuple[UnsolvedVDF, RSA, SolvedVDF]: A tuple containing:
                - The public instance
                - The RSA trapdoor used to create it
                - The solution y and proof pi
        """

    @abstractmethod
    def create_many(self, amount: int) -> List[Tuple[UnsolvedVDF, RSA, SolvedVDF]]:
        """Create multiple VDF instances with solutions in parallel.

        Args:
            amount (int): Number of instances to create

        Returns:
            List[Tuple[UnsolvedVDF, RSA, SolvedVDF]]: One tuple per instance
        """
