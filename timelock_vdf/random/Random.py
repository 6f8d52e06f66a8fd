import secrets
from ..mpc import MPC
from ..mpc.types import MPZ, RandomState
from .abstract.IRandom import IRandom


class Random(IRandom):
    """Secure random numbers for primes and challenges."""

    @staticmethod
    def get_random(bit_size: int) -> RandomState:
        secure_seed = secrets.randbits(max(bit_size, 64))
        return MPC.random_state(secure_seed)

    @staticmethod
    def get_challenge(bit_size: int) -> MPZ:
        # The state is seeded per call; challenges never share a state
        rand = Random.get_random(bit_size)
        return MPC.mpz_urandomb(rand, bit_size)
