"""Hash-to-prime: the Fiat-Shamir challenge of the Wesolowski proof."""

import hashlib
from typing import Sequence

from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import HASH_PRIME_BYTES, HASH_PRIME_TAG


def hash_prime(seed: Sequence[bytes], rounds: int) -> MPZ:
    """Creates a random prime based on the seed.

    Every candidate is SHA-256("prime" || j || seed[0] || seed[1] || ...),
    truncated to its first 16 bytes and read big-endian, with j a 64-bit
    big-endian counter starting at zero. The first candidate that passes the
    primality test is returned, so prover and verifier must agree on the
    exact seed bytes, their order and the number of rounds.

    Args:
        seed (Sequence[bytes]): Byte strings hashed in order
        rounds (int): Primality test rounds

    Returns:
        MPZ: A probable prime below 2^128
    """
    j = 0
    while True:
        hasher = hashlib.sha256()
        hasher.update(HASH_PRIME_TAG)
        hasher.update(j.to_bytes(8, "big"))
        for part in seed:
            hasher.update(part)
        candidate = MPC.from_bytes(hasher.digest()[:HASH_PRIME_BYTES])
        if MPC.is_prime(candidate, rounds):
            return candidate
        j += 1
