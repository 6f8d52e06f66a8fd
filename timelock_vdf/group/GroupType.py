from enum import Enum
from typing import Any, Type

from .abstract.IGroupElement import IGroupElement
from .ClassGroupElement import ClassGroupElement
from .RSAGroupElement import RSAGroupElement


class GroupType(Enum):
    """Group backend used by a VDF instance.

    The group parameter is the modulus N for RSA and the discriminant bit
    length (for from_seed) or the discriminant (for deserialize) for class
    groups.
    """
    RSA = "rsa"
    CLASS_GROUP = "class_group"

    @property
    def element_class(self) -> Type[IGroupElement]:
        if self is GroupType.RSA:
            return RSAGroupElement
        return ClassGroupElement

    def from_seed(self, seed: bytes, param: Any) -> IGroupElement:
        return self.element_class.from_seed(seed, param)

    def deserialize(self, data: bytes, param: Any) -> IGroupElement:
        return self.element_class.deserialize(data, param)
