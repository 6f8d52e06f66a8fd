from typing import Tuple

import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ, RandomState


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def random_state(seed: int) -> RandomState:
        return gmpy2.random_state(seed)

    @staticmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        return gmpy2.mpz_urandomb(state, bit_count)

    @staticmethod
    def next_prime(value: MPZ) -> MPZ:
        return gmpy2.next_prime(value)

    @staticmethod
    def is_prime(value: MPZ, rounds: int) -> bool:
        return gmpy2.is_prime(value, rounds)

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        return base**exp

    @staticmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        return value % modulus  # gmpy2 supports % operator for mpz values

    @staticmethod
    def mulmod(a: MPZ, b: MPZ, modulus: MPZ) -> MPZ:
        return gmpy2.f_mod(a * b, modulus)

    @staticmethod
    def divmod(value: MPZ, divisor: MPZ) -> Tuple[MPZ, MPZ]:
        return gmpy2.f_divmod(value, divisor)

    @staticmethod
    def gcd(a: MPZ, b: MPZ) -> MPZ:
        return gmpy2.gcd(a, b)

    @staticmethod
    def gcdext(a: MPZ, b: MPZ) -> Tuple[MPZ, MPZ, MPZ]:
        return gmpy2.gcdext(a, b)

    @staticmethod
    def invert(value: MPZ, modulus: MPZ) -> MPZ:
        return gmpy2.invert(value, modulus)

    @staticmethod
    def to_bytes(value: MPZ, length: int, signed: bool = False) -> bytes:
        return int(value).to_bytes(length, "big", signed=signed)

    @staticmethod
    def from_bytes(data: bytes, signed: bool = False) -> MPZ:
        return gmpy2.mpz(int.from_bytes(data, "big", signed=signed))
