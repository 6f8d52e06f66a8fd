from abc import ABC, abstractmethod
from typing import Self

from ...mpc.types import Integer
from ..UnsolvedVDF import UnsolvedVDF


class IUnsolvedVDFBuilder(ABC):
    """Abstract base class defining the interface for an unsolved VDF builder."""

    @abstractmethod
    def set_x(self, x: Integer) -> Self:
        """Set the challenge x.

        Args:
            x (Integer): The challenge

        Returns:
            IUnsolvedVDFBuilder: The builder instance for chaining
        """

    @abstractmethod
    def set_t(self, t: Integer) -> Self:
        """Set the delay t.

        Args:
            t (Integer): Number of sequential squarings

        Returns:
            IUnsolvedVDFBuilder: The builder instance for chaining
        """

    @abstractmethod
    def set_N(self, N: Integer) -> Self:
        """Set the modulus N.

        Args:
            N (Integer): The modulus

        Returns:
            IUnsolvedVDFBuilder: The builder instance for chaining
        """

    @abstractmethod
    def build(self) -> UnsolvedVDF:
        """Build the unsolved VDF.

        Returns:
            UnsolvedVDF: The constructed instance
        """
