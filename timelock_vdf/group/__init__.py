"""Groups of unknown order: RSA modulus groups and imaginary quadratic class groups."""

from .abstract.IGroupElement import IGroupElement
from .RSAGroupElement import RSAGroupElement
from .ClassGroupElement import ClassGroupElement
from .GroupType import GroupType

__all__ = ["IGroupElement", "RSAGroupElement", "ClassGroupElement", "GroupType"]
