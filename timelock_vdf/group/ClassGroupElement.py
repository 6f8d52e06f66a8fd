"""Reduced binary quadratic forms of negative discriminant."""

from typing import Tuple

from ..errors import DeserializationError
from ..mpc import MPC
from ..mpc.types import MPZ, Integer
from ..primes.Discriminant import create_discriminant
from .abstract.IGroupElement import IGroupElement


def solve_mod(a: Integer, b: Integer, m: Integer) -> Tuple[MPZ, MPZ]:
    """Solve a*x = b (mod m).

    Returns:
        (s, t) such that every solution is x = s + k*t for an integer k

    Raises:
        ValueError: There is no solution
    """
    g, d, _ = MPC.gcdext(a, m)
    q, r = MPC.divmod(b, g)
    if r != 0:
        raise ValueError(f"No solution to {a} * x = {b} mod {m}")
    return MPC.mod(q * d, m), m // g


def int_size(int_size_bits: int) -> int:
    """Byte width of each of a and b in the serialized form."""
    return (int_size_bits + 16) >> 4


class ClassGroupElement(IGroupElement):
    """Form (a, b, c) with b^2 - 4ac = D < 0, always held reduced."""

    __slots__ = ("_a", "_b", "_c", "_d")

    def __init__(self, a: Integer, b: Integer, c: Integer) -> None:
        self._a, self._b, self._c = MPC.mpz(a), MPC.mpz(b), MPC.mpz(c)
        self._d = self._b * self._b - 4 * self._a * self._c
        if self._d >= 0:
            raise ValueError("Discriminant of a class group form must be negative")

    @classmethod
    def from_ab_discriminant(cls, a: Integer, b: Integer, discriminant: Integer) -> "ClassGroupElement":
        if discriminant >= 0:
            raise ValueError("Positive discriminant")
        if a <= 0:
            raise ValueError("a must be positive")
        c, r = MPC.divmod(b * b - discriminant, 4 * a)
        if r != 0:
            raise ValueError("No form with these a, b for this discriminant")
        return cls(a, b, c).reduced()

    @classmethod
    def identity_for_discriminant(cls, discriminant: Integer) -> "ClassGroupElement":
        return cls.from_ab_discriminant(1, 1, discriminant)

    @classmethod
    def generator_for_discriminant(cls, discriminant: Integer) -> "ClassGroupElement":
        """The form (2, 1, c); it exists because D = 1 mod 8."""
        return cls.from_ab_discriminant(2, 1, discriminant)

    @property
    def a(self) -> MPZ:
        return self._a

    @property
    def b(self) -> MPZ:
        return self._b

    @property
    def c(self) -> MPZ:
        return self._c

    def discriminant(self) -> MPZ:
        return self._d

    def as_tuple(self) -> Tuple[MPZ, MPZ, MPZ]:
        return self._a, self._b, self._c

    def normalized(self) -> "ClassGroupElement":
        a, b, c = self.as_tuple()
        if -a < b <= a:
            return self
        r = (a - b) // (2 * a)
        b, c = b + 2 * r * a, a * r * r + b * r + c
        return ClassGroupElement(a, b, c)

    def reduced(self) -> "ClassGroupElement":
        a, b, c = self.normalized().as_tuple()
        while a > c or (a == c and b < 0):
            s = (c + b) // (c + c)
            a, b, c = c, -b + 2 * s * c, c * s * s - b * s + a
        return ClassGroupElement(a, b, c).normalized()

    def is_reduced(self) -> bool:
        a, b, c = self.as_tuple()
        return -a < b <= a <= c and not (a == c and b < 0)

    def identity(self) -> "ClassGroupElement":
        return ClassGroupElement.identity_for_discriminant(self._d)

    def inverse(self) -> "ClassGroupElement":
        return ClassGroupElement(self._a, -self._b, self._c).reduced()

    def multiply(self, other: "ClassGroupElement") -> "ClassGroupElement":
        """
        Form composition, Algorithm 2 of "A Survey of IQ Cryptography".
        """
        if self._d != other._d:
            raise ValueError("Forms have different discriminants")
        a1, b1, c1 = self.as_tuple()
        a2, b2, _ = other.as_tuple()
        g = (b2 + b1) // 2
        h = (b2 - b1) // 2
        w = MPC.gcd(MPC.gcd(a1, a2), g)

        s = a1 // w
        t = a2 // w
        u = g // w

        # (t*u) k = h*u + s*c1 (mod s*t)
        k_temp, constant_factor = solve_mod(t * u, h * u + s * c1, s * t)
        n, _ = solve_mod(t * constant_factor, h - t * k_temp, s)
        k = k_temp + constant_factor * n
        l = (t * k - h) // s
        m = (t * u * k - h * u - c1 * s) // (s * t)

        a3 = s * t
        b3 = w * u - (k * t + l * s)
        c3 = k * l - w * m
        return ClassGroupElement(a3, b3, c3).reduced()

    def square(self) -> "ClassGroupElement":
        a, b, c = self.as_tuple()
        if MPC.gcd(a, b) != 1:
            return self.multiply(self)
        # b * mu = c (mod a)
        mu, _ = solve_mod(b, c, a)
        A = a * a
        B = b - 2 * a * mu
        C = mu * mu - (b * mu - c) // a
        return ClassGroupElement(A, B, C).reduced()

    def serialize(self) -> bytes:
        size = int_size(self._d.bit_length())
        return MPC.to_bytes(self._a, size, signed=True) + MPC.to_bytes(self._b, size, signed=True)

    @classmethod
    def from_seed(cls, seed: bytes, param: int) -> "ClassGroupElement":
        """Generator of the class group whose discriminant is derived from seed.

        Args:
            seed (bytes): Challenge bytes
            param (int): Discriminant bit length
        """
        return cls.generator_for_discriminant(create_discriminant(seed, param))

    @classmethod
    def deserialize(cls, data: bytes, param: Integer) -> "ClassGroupElement":
        """Decode a form of discriminant `param`.

        Raises:
            DeserializationError: Wrong length, a <= 0, c not integral or form not reduced
        """
        discriminant = MPC.mpz(param)
        size = int_size(discriminant.bit_length())
        if len(data) != 2 * size:
            raise DeserializationError(f"Expected {2 * size} bytes, got {len(data)}")
        a = MPC.from_bytes(data[:size], signed=True)
        b = MPC.from_bytes(data[size:], signed=True)
        if a <= 0:
            raise DeserializationError("Form has a non-positive leading coefficient")
        c, r = MPC.divmod(b * b - discriminant, 4 * a)
        if r != 0:
            raise DeserializationError("Form does not belong to the discriminant")
        form = cls(a, b, c)
        if not form.is_reduced():
            raise DeserializationError("Form is not reduced")
        return form

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ClassGroupElement) and self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(tuple(int(v) for v in self.as_tuple()))

    def __repr__(self) -> str:
        return f"ClassGroupElement({self._a}, {self._b}, {self._c})"
