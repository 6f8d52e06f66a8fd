import logging
import multiprocessing
from typing import List, Optional, Tuple

from ..errors import InvalidIterations
from ..mpc.types import Integer
from ..protocol_constants import SEED_BIT_SIZE
from ..random import Random
from ..rsa.RSA import RSA
from ..utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables
from ..utils.SystemSpecs import SystemSpecs
from .abstract.IVDFFactory import IVDFFactory
from .EfficientVDFSolver import EfficientVDFSolver
from .SolvedVDF import SolvedVDF
from .UnsolvedVDF import UnsolvedVDF
from .UnsolvedVDFBuilder import UnsolvedVDFBuilder
from .VDFSetup import MAX_ITERATIONS

logger = logging.getLogger(__name__)


class VDFFactory(IVDFFactory):
    """Implementation of the VDF factory used by the setup party."""

    def __init__(self, timing_parameter: Integer, bit_size: Optional[int] = None) -> None:
        """Initialize the factory.

        Args:
            timing_parameter (Integer): Delay t of every created instance
            bit_size (int): RSA modulus size; VDF_BIT_SIZE when omitted
        """
        if not 0 <= timing_parameter <= MAX_ITERATIONS:
            raise InvalidIterations(f"Iteration count must be in [0, 2^64), got {timing_parameter}")
        self._t = timing_parameter
        self._bit_size = (
            bit_size
            if bit_size is not None
            else EnvironmentManager.get_int(EnvironmentVariables.VDF_BIT_SIZE)
        )

    def create_instance(self) -> Tuple[UnsolvedVDF, RSA, SolvedVDF]:
        # Create RSA instance
        rsa_instance = RSA(self._bit_size)

        # Generate random challenge x
        x = Random.get_challenge(SEED_BIT_SIZE)

        unsolved = (
            UnsolvedVDFBuilder()
            .set_x(x)
            .set_t(self._t)
            .set_N(rsa_instance.get_N())
            .build()
        )

        # Get output and proof using the trapdoor
        solved = EfficientVDFSolver.solve(rsa_instance, unsolved)
        logger.info("Created %d-bit VDF instance with t=%d", self._bit_size, self._t)

        return unsolved, rsa_instance, solved

    def create_many(self, amount: int) -> List[Tuple[UnsolvedVDF, RSA, SolvedVDF]]:
        if amount <= 0:
            return []
        params = [(self._t, self._bit_size) for _ in range(amount)]

        num_workers = SystemSpecs.get_num_parallel_processes(amount)

        # Create instances in parallel using process pool
        with multiprocessing.Pool(num_workers) as pool:
            return pool.map(VDFFactory._create_instance_parallel, params)

    # Private Methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _create_instance_parallel(
        params: Tuple[Integer, int],
    ) -> Tuple[UnsolvedVDF, RSA, SolvedVDF]:
        """Helper method to create a single instance for multiprocessing.

        Args:
            params (Tuple[Integer, int]): Tuple containing (timing_parameter, bit_size)

        Returns:
            Tuple[UnsolvedVDF, RSA, SolvedVDF]: The instance, its trapdoor and its solution
        """
        t, bit_size = params
        return VDFFactory(t, bit_size).create_instance()
