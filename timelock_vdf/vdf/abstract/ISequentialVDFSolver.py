from abc import ABC, abstractmethod
from threading import Event
from typing import List, Optional

from ..SolvedVDF import SolvedVDF
from ..UnsolvedVDF import UnsolvedVDF


class ISequentialVDFSolver(ABC):
    """Abstract base class defining the interface for a sequential VDF solver."""

    @staticmethod
    @abstractmethod
    def solve(unsolved: UnsolvedVDF, stop_event: Optional[Event] = None) -> SolvedVDF:
        """Evaluate and prove the VDF without the RSA trapdoor.

        Args:
            unsolved (UnsolvedVDF): The instance to solve
            stop_event (Event): Optional interrupt

        Returns:
            SolvedVDF: The instance with y and pi
        """

    @staticmethod
    @abstractmethod
    def solve_many(instances: List[UnsolvedVDF]) -> List[SolvedVDF]:
        """Solve independent instances in parallel.

        Args:
            instances: Instances to solve

        Returns:
            List[SolvedVDF]: Solutions in input order
        """
