from abc import ABC, abstractmethod
from typing import Tuple
from ..types import MPZ, RandomState


class IMPC(ABC):
    """Interface for the multi-precision operations the VDF engine relies on."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Convert a Python integer to an mpz."""

    @staticmethod
    @abstractmethod
    def random_state(seed: int) -> RandomState:
        """Create a random state from a seed."""

    @staticmethod
    @abstractmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        """Draw a uniformly random integer in [0, 2^bit_count)."""

    @staticmethod
    @abstractmethod
    def next_prime(value: MPZ) -> MPZ:
        """Find the smallest probable prime greater than value."""

    @staticmethod
    @abstractmethod
    def is_prime(value: MPZ, rounds: int) -> bool:
        """Probabilistic primality test.

        Args:
            value (MPZ): Candidate
            rounds (int): Number of Miller-Rabin rounds; the error
                probability is at most 4^-rounds

        Returns:
            bool: True if value is probably prime
        """

    @staticmethod
    @abstractmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        """Compute (base ** exp) % mod."""

    @staticmethod
    @abstractmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        """Compute base ** exp without reduction."""

    @staticmethod
    @abstractmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        """Compute value % modulus."""

    @staticmethod
    @abstractmethod
    def mulmod(a: MPZ, b: MPZ, modulus: MPZ) -> MPZ:
        """Compute (a * b) % modulus."""

    @staticmethod
    @abstractmethod
    def divmod(value: MPZ, divisor: MPZ) -> Tuple[MPZ, MPZ]:
        """Exact floor division.

        Returns:
            Tuple[MPZ, MPZ]: Quotient and non-negative remainder
        """

    @staticmethod
    @abstractmethod
    def gcd(a: MPZ, b: MPZ) -> MPZ:
        """Greatest common divisor."""

    @staticmethod
    @abstractmethod
    def gcdext(a: MPZ, b: MPZ) -> Tuple[MPZ, MPZ, MPZ]:
        """Extended Euclid.

        Returns:
            Tuple[MPZ, MPZ, MPZ]: (g, s, t) with g = s * a + t * b
        """

    @staticmethod
    @abstractmethod
    def invert(value: MPZ, modulus: MPZ) -> MPZ:
        """Modular inverse of value; raises ZeroDivisionError if none exists."""

    @staticmethod
    @abstractmethod
    def to_bytes(value: MPZ, length: int, signed: bool = False) -> bytes:
        """Fixed-width big-endian encoding; raises OverflowError if value does not fit."""

    @staticmethod
    @abstractmethod
    def from_bytes(data: bytes, signed: bool = False) -> MPZ:
        """Decode a big-endian byte string."""
