import hashlib
from threading import Event
from typing import Optional

from ..errors import DeserializationError, EvaluationInterrupted
from ..mpc import MPC
from ..mpc.types import MPZ, Integer
from ..protocol_constants import HASH_TO_GROUP_TAG, INTERRUPT_CHECK_INTERVAL
from .abstract.IGroupElement import IGroupElement


def int_byte_length(value: Integer) -> int:
    return max((int(value).bit_length() + 7) // 8, 1)


class RSAGroupElement(IGroupElement):
    """Integer modulo an RSA modulus N, held in [0, N)."""

    __slots__ = ("_value", "_N")

    def __init__(self, value: Integer, N: Integer) -> None:
        if N < 2:
            raise ValueError("Modulus must be greater than 1")
        if not 0 <= value < N:
            raise ValueError("Element is not reduced modulo N")
        self._value = MPC.mpz(value)
        self._N = MPC.mpz(N)

    @property
    def value(self) -> MPZ:
        return self._value

    @property
    def modulus(self) -> MPZ:
        return self._N

    def multiply(self, other: "RSAGroupElement") -> "RSAGroupElement":
        self._check_same_group(other)
        return RSAGroupElement(MPC.mulmod(self._value, other._value, self._N), self._N)

    def square(self) -> "RSAGroupElement":
        return RSAGroupElement(MPC.mulmod(self._value, self._value, self._N), self._N)

    def repeated_square(self, n: Integer, stop_event: Optional[Event] = None) -> "RSAGroupElement":
        # Inlined loop: this is the sequential hot path of the RSA VDF
        x = self._value
        N = self._N
        n = int(n)
        done = 0
        while done < n:
            if stop_event is not None and stop_event.is_set():
                raise EvaluationInterrupted(done, n)
            for _ in range(min(INTERRUPT_CHECK_INTERVAL, n - done)):
                x = x * x % N
            done += min(INTERRUPT_CHECK_INTERVAL, n - done)
        return RSAGroupElement(x, N)

    def pow(self, exponent: Integer) -> "RSAGroupElement":
        if exponent < 0:
            raise ValueError("Negative exponents are not supported")
        return RSAGroupElement(MPC.powmod(self._value, exponent, self._N), self._N)

    def identity(self) -> "RSAGroupElement":
        return RSAGroupElement(1, self._N)

    def serialize(self) -> bytes:
        return MPC.to_bytes(self._value, int_byte_length(self._N))

    @classmethod
    def from_seed(cls, seed: bytes, param: Integer) -> "RSAGroupElement":
        """Hash seed bytes into the group: H_G(N, x).

        SHA-256 blocks of "H_G" || N || seed || counter are concatenated to
        128 bits more than N and reduced mod N. A candidate that is not a
        unit of Z/NZ (or is 0 or 1) is skipped.

        Args:
            seed (bytes): Challenge bytes
            param (Integer): The modulus N

        Returns:
            RSAGroupElement: g = H_G(N, x)
        """
        N = MPC.mpz(param)
        n_bytes = MPC.to_bytes(N, int_byte_length(N))
        wanted = (N.bit_length() + 128 + 7) // 8
        counter = 0
        while True:
            blob = bytearray()
            while len(blob) < wanted:
                blob.extend(
                    hashlib.sha256(
                        HASH_TO_GROUP_TAG + n_bytes + seed + counter.to_bytes(8, "big")
                    ).digest()
                )
                counter += 1
            g = MPC.from_bytes(bytes(blob[:wanted])) % N
            if g > 1 and MPC.gcd(g, N) == 1:
                return cls(g, N)

    @classmethod
    def deserialize(cls, data: bytes, param: Integer) -> "RSAGroupElement":
        N = MPC.mpz(param)
        if len(data) != int_byte_length(N):
            raise DeserializationError(
                f"Expected {int_byte_length(N)} bytes, got {len(data)}"
            )
        value = MPC.from_bytes(data)
        if value >= N:
            raise DeserializationError("Encoded value is not reduced modulo N")
        return cls(value, N)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, RSAGroupElement)
            and self._N == other._N
            and self._value == other._value
        )

    def __hash__(self) -> int:
        return hash((int(self._value), int(self._N)))

    def __repr__(self) -> str:
        return f"RSAGroupElement({hex(self._value)})"

    def _check_same_group(self, other: "RSAGroupElement") -> None:
        if self._N != other._N:
            raise ValueError("Elements belong to different RSA groups")
