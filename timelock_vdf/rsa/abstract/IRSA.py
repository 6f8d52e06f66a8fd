from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IRSA(ABC):
    """Interface of the RSA trapdoor held by the setup party."""

    @abstractmethod
    def get_p(self) -> MPZ:
        """Get the first prime factor p.

        Returns:
            MPZ: The prime number p
        """

    @abstractmethod
    def get_q(self) -> MPZ:
        """Get the second prime factor q.

        Returns:
            MPZ: The prime number q
        """

    @abstractmethod
    def get_N(self) -> MPZ:
        """Get the public modulus N = p * q.

        Returns:
            MPZ: The modulus N
        """

    @abstractmethod
    def get_phi(self) -> MPZ:
        """Get Euler's totient φ(N) = (p-1)(q-1).

        Returns:
            MPZ: The value of Euler's totient function
        """

    @abstractmethod
    def wipe(self) -> None:
        """Drop the secret factors; only N remains usable afterwards."""

    @abstractmethod
    def is_wiped(self) -> bool:
        """Whether the secret factors have been dropped."""
