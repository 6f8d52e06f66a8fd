from ..mpc import MPC
from ..mpc.types import MPZ, Integer
from ..errors import InvalidIterations

MAX_ITERATIONS = (1 << 64) - 1


class VDFSetup:
    """Public VDF parameters: the delay t and the RSA modulus N.

    The factorization of N is never part of the setup; the party that knows it
    keeps a separate RSA instance.
    """

    __slots__ = ("_t", "_N")

    def __init__(self, t: Integer, N: Integer) -> None:
        """Initialize a VDF setup.

        Args:
            t (Integer): Number of sequential squarings
            N (Integer): The RSA modulus
        """
        if not 0 <= t <= MAX_ITERATIONS:
            raise InvalidIterations(f"Iteration count must be in [0, 2^64), got {t}")
        if N < 3:
            raise ValueError("Modulus must be greater than 2")
        self._t = MPC.mpz(t)
        self._N = MPC.mpz(N)

    def get_t(self) -> MPZ:
        return self._t

    def get_N(self) -> MPZ:
        return self._N

    def __eq__(self, other: object) -> bool:
        return isinstance(other, VDFSetup) and self._t == other._t and self._N == other._N

    def __hash__(self) -> int:
        return hash((int(self._t), int(self._N)))

    def __repr__(self) -> str:
        return f"VDFSetup(t={self._t}, N={hex(self._N)})"
