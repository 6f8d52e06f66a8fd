from abc import ABC, abstractmethod
from typing import Sequence
from ...mpc.types import MPZ


class IPrimes(ABC):
    """Abstract base class defining the interface for prime number generation."""

    @staticmethod
    @abstractmethod
    def get_prime(bit_size: int) -> MPZ:
        """Get a random prime of exactly bit_size bits.

        Args:
            bit_size (int): Number of bits for the prime number.

        Returns:
            MPZ: A random prime number
        """

    @staticmethod
    @abstractmethod
    def hash_prime(seed: Sequence[bytes], rounds: int) -> MPZ:
        """Deterministically derive a prime from seed material.

        Args:
            seed (Sequence[bytes]): Byte strings hashed in order
            rounds (int): Primality test rounds

        Returns:
            MPZ: The first probable prime produced by the counter walk
        """

    @staticmethod
    @abstractmethod
    def create_discriminant(seed: bytes, length: int) -> MPZ:
        """Derive a negative prime discriminant of the given bit length from a seed.

        Args:
            seed (bytes): Challenge bytes
            length (int): Bit length of |D|

        Returns:
            MPZ: D < 0 with D = 1 mod 8 and -D probably prime
        """
