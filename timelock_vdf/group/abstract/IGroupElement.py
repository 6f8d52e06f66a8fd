from abc import ABC, abstractmethod
from threading import Event
from typing import Any, Optional, Self

from ...errors import EvaluationInterrupted
from ...mpc.types import Integer
from ...protocol_constants import INTERRUPT_CHECK_INTERVAL


class IGroupElement(ABC):
    """Element of a group of unknown order usable for the VDF.

    Elements are immutable and always held in canonical form, so equality is
    structural. Every operation returns a new element.
    """

    @abstractmethod
    def multiply(self, other: Self) -> Self:
        """Group operation.

        Args:
            other: Element of the same group

        Returns:
            The canonical product
        """

    @abstractmethod
    def square(self) -> Self:
        """Multiply the element by itself."""

    @abstractmethod
    def identity(self) -> Self:
        """Neutral element of this element's group."""

    @abstractmethod
    def serialize(self) -> bytes:
        """Fixed-width encoding; the width depends only on the group parameter."""

    @classmethod
    @abstractmethod
    def from_seed(cls, seed: bytes, param: Any) -> Self:
        """Derive an element deterministically from seed bytes.

        Args:
            seed (bytes): Challenge bytes
            param: Group parameter (modulus for RSA, bit length for class groups)
        """

    @classmethod
    @abstractmethod
    def deserialize(cls, data: bytes, param: Any) -> Self:
        """Inverse of serialize.

        Raises:
            DeserializationError: Wrong length or not a canonical element
        """

    def __mul__(self, other: Self) -> Self:
        return self.multiply(other)

    def repeated_square(self, n: Integer, stop_event: Optional[Event] = None) -> Self:
        """Square n times in sequence.

        Args:
            n: Number of squarings
            stop_event: Checked every INTERRUPT_CHECK_INTERVAL squarings

        Raises:
            EvaluationInterrupted: stop_event was set
        """
        x = self
        for i in range(int(n)):
            if stop_event is not None and i % INTERRUPT_CHECK_INTERVAL == 0 and stop_event.is_set():
                raise EvaluationInterrupted(i, int(n))
            x = x.square()
        return x

    def pow(self, exponent: Integer) -> Self:
        """Left-to-right square and multiply."""
        if exponent < 0:
            raise ValueError("Negative exponents are not supported")
        result = self.identity()
        for bit in bin(int(exponent))[2:]:
            result = result.square()
            if bit == "1":
                result = result.multiply(self)
        return result
