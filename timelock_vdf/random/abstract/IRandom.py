from abc import ABC, abstractmethod
from ...mpc.types import MPZ, RandomState


class IRandom(ABC):
    """Interface for the randomness consumed by the setup party."""

    @staticmethod
    @abstractmethod
    def get_random(bit_size: int) -> RandomState:
        """Get a gmpy2 random state seeded from the operating system.

        Args:
            bit_size (int): Number of bits for the secure seed.

        Returns:
            RandomState: A random state initialized with a secure seed
        """

    @staticmethod
    @abstractmethod
    def get_challenge(bit_size: int) -> MPZ:
        """Draw a fresh VDF challenge x.

        Args:
            bit_size (int): Number of random bits in x

        Returns:
            MPZ: A random integer in [0, 2^bit_size)
        """
