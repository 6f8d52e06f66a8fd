"""Random number generation module."""

from .Random import Random
from .abstract.IRandom import IRandom

__all__ = ["Random", "IRandom"]
