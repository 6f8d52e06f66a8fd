from ..group.RSAGroupElement import int_byte_length
from ..mpc import MPC
from ..mpc.types import MPZ, Integer
from .UnsolvedVDF import UnsolvedVDF


class SolvedVDF:
    """An instance together with its output y and Wesolowski proof pi."""

    __slots__ = ("_instance", "_y", "_pi")

    def __init__(self, instance: UnsolvedVDF, y: Integer, pi: Integer) -> None:
        self._instance = instance
        self._y = MPC.mpz(y)
        self._pi = MPC.mpz(pi)

    def get_instance(self) -> UnsolvedVDF:
        return self._instance

    def get_y(self) -> MPZ:
        return self._y

    def get_pi(self) -> MPZ:
        return self._pi

    def y_bytes(self) -> bytes:
        """y as big-endian bytes of the modulus width, the input of derive_key."""
        return MPC.to_bytes(self._y, int_byte_length(self._instance.get_N()))

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, SolvedVDF)
            and self._instance == other._instance
            and self._y == other._y
            and self._pi == other._pi
        )

    def __hash__(self) -> int:
        return hash((self._instance, int(self._y), int(self._pi)))

    def __repr__(self) -> str:
        return f"SolvedVDF(instance={self._instance!r}, y={hex(self._y)}, pi={hex(self._pi)})"
