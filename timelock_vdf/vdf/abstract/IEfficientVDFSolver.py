from abc import ABC, abstractmethod
from typing import List, Tuple

from ...group import RSAGroupElement
from ...rsa import RSA
from ..SolvedVDF import SolvedVDF
from ..UnsolvedVDF import UnsolvedVDF


class IEfficientVDFSolver(ABC):
    """Abstract base class defining the interface for a VDF solver holding the trapdoor."""

    @staticmethod
    @abstractmethod
    def solve_y(rsa: RSA, unsolved: UnsolvedVDF) -> RSAGroupElement:
        """Compute y alone with two modular exponentiations.

        Args:
            rsa (RSA): The RSA instance with private parameters
            unsolved (UnsolvedVDF): The instance

        Returns:
            RSAGroupElement: y = g^(2^t) mod N
        """

    @staticmethod
    @abstractmethod
    def solve(rsa: RSA, unsolved: UnsolvedVDF) -> SolvedVDF:
        """Evaluate and prove the VDF using RSA private parameters.

        Args:
            rsa (RSA): The RSA instance with private parameters
            unsolved (UnsolvedVDF): The instance to solve

        Returns:
            SolvedVDF: The instance with y and pi
        """

    @staticmethod
    @abstractmethod
    def solve_many(instances: List[Tuple[RSA, UnsolvedVDF]]) -> List[SolvedVDF]:
        """Solve multiple instances in parallel using multiprocessing.

        Args:
            instances: List of tuples containing (RSA, instance) pairs to solve

        Returns:
            List[SolvedVDF]: Solutions in the same order as the input
        """
