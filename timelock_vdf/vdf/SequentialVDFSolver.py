import logging
from multiprocessing import Pool
from threading import Event
from typing import List, Optional

from ..utils.SystemSpecs import SystemSpecs
from .abstract.ISequentialVDFSolver import ISequentialVDFSolver
from .HashToPrime import challenge_prime
from .LongDivisionProver import LongDivisionProver
from .SolvedVDF import SolvedVDF
from .UnsolvedVDF import UnsolvedVDF

logger = logging.getLogger(__name__)


class SequentialVDFSolver(ISequentialVDFSolver):
    """Implementation of the sequential VDF solver."""

    @staticmethod
    def solve(unsolved: UnsolvedVDF, stop_event: Optional[Event] = None) -> SolvedVDF:
        """Evaluate the VDF without the trapdoor and prove the result.

        This implementation:
        1. Hashes x into the group, g = H_G(N, x)
        2. Squares g t times in sequence to get y = g^(2^t) mod N
        3. Derives the challenge prime l from (t, N, g, y)
        4. Builds pi = g^floor(2^t / l) by long division, another t steps

        Args:
            unsolved (UnsolvedVDF): The instance to solve
            stop_event (Event): Optional event that interrupts both loops

        Returns:
            SolvedVDF: The instance with y and pi
        """
        t = unsolved.get_t()
        logger.debug("Solving VDF sequentially, t=%d", t)
        g = unsolved.get_generator()
        y = g.repeated_square(t, stop_event)
        l = challenge_prime(unsolved.get_setup(), g, y)
        pi, _ = LongDivisionProver.prove(g, t, l, stop_event)
        return SolvedVDF(unsolved, y.value, pi.value)

    @staticmethod
    def solve_many(instances: List[UnsolvedVDF]) -> List[SolvedVDF]:
        """
        Solve independent VDF instances in parallel using multiprocessing.

        Args:
            instances: Instances to solve

        Returns:
            List of solved instances in the same order as the input
        """
        if not instances:
            return []
        num_workers = SystemSpecs.get_num_parallel_processes(len(instances))
        logger.info("Solving %d VDF instances with %d workers", len(instances), num_workers)
        with Pool(num_workers) as pool:
            return pool.map(SequentialVDFSolver._solve_single, instances)

    # Private Methods
    # --------------

    @staticmethod
    def _solve_single(unsolved: UnsolvedVDF) -> SolvedVDF:
        """Helper method to solve a single instance for multiprocessing."""
        return SequentialVDFSolver.solve(unsolved)
