from ..group import RSAGroupElement
from ..group.RSAGroupElement import int_byte_length
from ..mpc import MPC
from ..mpc.types import MPZ, Integer
from .VDFSetup import VDFSetup


class UnsolvedVDF:
    """A VDF instance: the challenge x under a public setup."""

    __slots__ = ("_x", "_setup")

    def __init__(self, x: Integer, setup: VDFSetup) -> None:
        """Initialize an unsolved VDF instance.

        Args:
            x (Integer): The challenge
            setup (VDFSetup): Public parameters
        """
        if x < 0:
            raise ValueError("Challenge must be non-negative")
        self._x = MPC.mpz(x)
        self._setup = setup

    def get_x(self) -> MPZ:
        return self._x

    def get_setup(self) -> VDFSetup:
        return self._setup

    def get_t(self) -> MPZ:
        return self._setup.get_t()

    def get_N(self) -> MPZ:
        return self._setup.get_N()

    def get_generator(self) -> RSAGroupElement:
        """g = H_G(N, x)."""
        x_bytes = MPC.to_bytes(self._x, int_byte_length(self._x))
        return RSAGroupElement.from_seed(x_bytes, self.get_N())

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, UnsolvedVDF)
            and self._x == other._x
            and self._setup == other._setup
        )

    def __hash__(self) -> int:
        return hash((int(self._x), self._setup))

    def __repr__(self) -> str:
        return f"UnsolvedVDF(x={hex(self._x)}, setup={self._setup!r})"
