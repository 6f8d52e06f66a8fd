from typing import Sequence

from ..mpc import MPC
from ..mpc.types import MPZ
from ..random import Random
from .abstract.IPrimes import IPrimes
from .Discriminant import create_discriminant
from .HashPrime import hash_prime


class Primes(IPrimes):
    """Random and hash-derived primes."""

    @staticmethod
    def get_prime(bit_size: int) -> MPZ:
        rand = Random.get_random(bit_size)

        # Top bit set so that p * q has the full modulus size
        random_num = MPC.mpz_urandomb(rand, bit_size - 1) | (MPC.mpz(1) << (bit_size - 1))

        return MPC.next_prime(random_num)

    @staticmethod
    def hash_prime(seed: Sequence[bytes], rounds: int) -> MPZ:
        return hash_prime(seed, rounds)

    @staticmethod
    def create_discriminant(seed: bytes, length: int) -> MPZ:
        return create_discriminant(seed, length)
