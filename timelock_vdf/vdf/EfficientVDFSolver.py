import logging
from multiprocessing import Pool
from typing import List, Tuple

from ..group import RSAGroupElement
from ..mpc import MPC
from ..protocol_constants import TWO
from ..rsa.RSA import RSA
from ..utils.SystemSpecs import SystemSpecs
from .abstract.IEfficientVDFSolver import IEfficientVDFSolver
from .HashToPrime import challenge_prime
from .LongDivisionProver import LongDivisionProver
from .SolvedVDF import SolvedVDF
from .UnsolvedVDF import UnsolvedVDF

logger = logging.getLogger(__name__)


class EfficientVDFSolver(IEfficientVDFSolver):
    """Implementation of the VDF solver using the RSA trapdoor."""

    @staticmethod
    def solve_y(rsa: RSA, unsolved: UnsolvedVDF) -> RSAGroupElement:
        # y = g^(2^t mod phi) mod N, equal to t squarings because g is a unit
        EfficientVDFSolver._check_modulus(rsa, unsolved)
        exponent = MPC.powmod(TWO, unsolved.get_t(), rsa.get_phi())
        return unsolved.get_generator().pow(exponent)

    @staticmethod
    def solve(rsa: RSA, unsolved: UnsolvedVDF) -> SolvedVDF:
        """Evaluate and prove the VDF with the trapdoor.

        With r = 2^t mod l and l invertible mod phi, the proof is
        pi = g^((2^t - r) * l^-1 mod phi). If l shares a factor with phi the
        proof falls back to long division.

        Args:
            rsa (RSA): Trapdoor for the instance modulus
            unsolved (UnsolvedVDF): The instance to solve

        Returns:
            SolvedVDF: Same y and pi as the sequential solver
        """
        t = unsolved.get_t()
        phi = rsa.get_phi()
        g = unsolved.get_generator()
        y = EfficientVDFSolver.solve_y(rsa, unsolved)
        l = challenge_prime(unsolved.get_setup(), g, y)

        if MPC.gcd(l, phi) == 1:
            r = MPC.powmod(TWO, t, l)
            exponent = MPC.mulmod(
                MPC.powmod(TWO, t, phi) - r, MPC.invert(l, phi), phi
            )
            pi = g.pow(exponent)
        else:
            logger.debug("Challenge prime divides phi, proving by long division")
            pi, _ = LongDivisionProver.prove(g, t, l)
        return SolvedVDF(unsolved, y.value, pi.value)

    @staticmethod
    def solve_many(instances: List[Tuple[RSA, UnsolvedVDF]]) -> List[SolvedVDF]:
        """
        Solve multiple VDF instances in parallel using multiprocessing.

        Args:
            instances: List of tuples containing (RSA, instance) pairs to solve

        Returns:
            List of solved instances in the same order as the input
        """
        if not instances:
            return []
        num_workers = SystemSpecs.get_num_parallel_processes(len(instances))
        with Pool(num_workers) as pool:
            return pool.map(EfficientVDFSolver._solve_single, instances)

    # Private Methods
    # --------------

    @staticmethod
    def _solve_single(args: Tuple[RSA, UnsolvedVDF]) -> SolvedVDF:
        """Helper method to solve a single instance for multiprocessing."""
        rsa, unsolved = args
        return EfficientVDFSolver.solve(rsa, unsolved)

    @staticmethod
    def _check_modulus(rsa: RSA, unsolved: UnsolvedVDF) -> None:
        if rsa.get_N() != unsolved.get_N():
            raise ValueError("RSA trapdoor does not match the instance modulus")
