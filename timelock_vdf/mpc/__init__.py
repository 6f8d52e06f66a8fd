"""Multi-precision computing module."""

from .MPC import MPC
from .abstract.IMPC import IMPC
from .types import MPZ, RandomState, Integer

__all__ = ["MPC", "IMPC", "MPZ", "RandomState", "Integer"]
