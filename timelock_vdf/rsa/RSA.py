import logging
from typing import Optional

from ..mpc import MPC
from ..mpc.types import MPZ
from .abstract.IRSA import IRSA
from ..primes import Primes

logger = logging.getLogger(__name__)


class RSA(IRSA):
    """RSA modulus together with its factorization (the VDF trapdoor).

    Only the setup party holds an instance of this class. Public objects carry
    N alone; an RSA instance is never embedded in them.
    """

    def __init__(self, bit_size: int) -> None:
        """Initialize RSA by generating two random prime numbers.

        Args:
            bit_size (int): Number of bits for RSA modulus.
                          Each prime will be bit_size/2 bits.
        """
        if bit_size < 16:
            raise ValueError(f"RSA modulus must have at least 16 bits, got {bit_size}")
        prime_size = bit_size // 2
        p = Primes.get_prime(prime_size)
        q = Primes.get_prime(prime_size)
        while q == p:
            q = Primes.get_prime(prime_size)
        self._set_factors(p, q)
        logger.debug("Generated %d-bit RSA modulus", self._N.bit_length())

    @classmethod
    def from_factors(cls, p: MPZ, q: MPZ) -> "RSA":
        """Rebuild the trapdoor from known factors.

        Args:
            p (MPZ): First prime factor
            q (MPZ): Second prime factor

        Returns:
            RSA: The trapdoor for N = p * q
        """
        if p < 2 or q < 2:
            raise ValueError("RSA factors must be greater than 1")
        rsa = cls.__new__(cls)
        rsa._set_factors(MPC.mpz(p), MPC.mpz(q))
        return rsa

    def get_p(self) -> MPZ:
        return self._require(self._p)

    def get_q(self) -> MPZ:
        return self._require(self._q)

    def get_N(self) -> MPZ:
        return self._N

    def get_phi(self) -> MPZ:
        return self._require(self._phi)

    def wipe(self) -> None:
        self._p = None
        self._q = None
        self._phi = None

    def is_wiped(self) -> bool:
        return self._phi is None

    def __repr__(self) -> str:
        # Never print the factors
        return f"<RSA(bits={self._N.bit_length()}, wiped={self.is_wiped()})>"

    # Private methods
    # --------------

    def _set_factors(self, p: MPZ, q: MPZ) -> None:
        self._p: Optional[MPZ] = p
        self._q: Optional[MPZ] = q
        self._N = self._calculate_N()
        self._phi: Optional[MPZ] = self._calculate_phi()

    def _require(self, value: Optional[MPZ]) -> MPZ:
        if value is None:
            raise ValueError("RSA trapdoor has been wiped")
        return value

    def _calculate_N(self) -> MPZ:
        """Calculate the RSA modulus N = p * q."""
        return MPC.mpz(self._p * self._q)

    def _calculate_phi(self) -> MPZ:
        """Calculate Euler's totient φ(N) = (p-1)(q-1)."""
        return MPC.mpz((self._p - 1) * (self._q - 1))
