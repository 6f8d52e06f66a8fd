from typing import Optional, Self

from ..mpc.types import Integer
from .UnsolvedVDF import UnsolvedVDF
from .VDFSetup import VDFSetup
from .abstract.IUnsolvedVDFBuilder import IUnsolvedVDFBuilder


class UnsolvedVDFBuilder(IUnsolvedVDFBuilder):
    """Implementation of the unsolved VDF builder."""

    def __init__(self) -> None:
        self._x: Optional[Integer] = None
        self._t: Optional[Integer] = None
        self._N: Optional[Integer] = None

    def set_x(self, x: Integer) -> Self:
        self._x = x
        return self

    def set_t(self, t: Integer) -> Self:
        self._t = t
        return self

    def set_N(self, N: Integer) -> Self:
        self._N = N
        return self

    def set_setup(self, setup: VDFSetup) -> Self:
        self._t = setup.get_t()
        self._N = setup.get_N()
        return self

    def build(self) -> UnsolvedVDF:
        if self._x is None or self._t is None or self._N is None:
            raise ValueError("All parameters (x, t, N) must be set before building")
        return UnsolvedVDF(self._x, VDFSetup(self._t, self._N))
