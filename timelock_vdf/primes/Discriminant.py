"""Deterministic class group discriminants derived from a challenge."""

import hashlib
from functools import lru_cache
from typing import List, Tuple

from ..mpc import MPC
from ..mpc.types import MPZ

# M has many small prime factors, so primes of the form n + M*i are spread evenly
# over the residue classes
M = 8 * 3 * 5 * 7 * 11 * 13
RESIDUES = [x for x in range(7, M, 8) if all(x % y != 0 for y in (3, 5, 7, 11, 13))]
SIEVE_SIZE = 1 << 16
MIN_LENGTH = 32


@lru_cache(maxsize=1)
def _sieve_info() -> Tuple[Tuple[int, int], ...]:
    """(p, M^-1 mod p) for every prime 13 < p < 2^16."""
    info: List[Tuple[int, int]] = []
    p = MPC.next_prime(MPC.mpz(13))
    while p < SIEVE_SIZE:
        info.append((int(p), int(MPC.invert(MPC.mpz(M), p))))
        p = MPC.next_prime(p)
    return tuple(info)


def entropy_from_seed(seed: bytes, byte_count: int) -> bytes:
    """Expand seed to byte_count bytes: SHA-256(seed || u16 counter) blocks."""
    if byte_count > 32 * ((1 << 16) - 1):
        raise ValueError(f"Cannot expand a seed to {byte_count} bytes")
    blob = bytearray()
    extra = 0
    while len(blob) < byte_count:
        blob.extend(hashlib.sha256(seed + extra.to_bytes(2, "big")).digest())
        extra += 1
    return bytes(blob[:byte_count])


def create_discriminant(seed: bytes, length: int, rounds: int = 2) -> MPZ:
    """
    Return a discriminant of the given length using the given seed.

    The result is -p for a probable prime p of `length` bits with p = 7 mod 8,
    so D = 1 mod 8 and the form (2, 1, (1 - D) / 8) exists.

    Args:
        seed (bytes): Challenge bytes
        length (int): Bit length of the discriminant
        rounds (int): Primality test rounds

    Returns:
        MPZ: The negative discriminant
    """
    if length < MIN_LENGTH:
        raise ValueError(f"Discriminant length must be at least {MIN_LENGTH} bits, got {length}")

    extra = length & 7
    random_bytes = entropy_from_seed(seed, ((length + 7) >> 3) + 2)
    n = MPC.from_bytes(random_bytes[:-2]) >> ((8 - extra) & 7)
    numerator = int.from_bytes(random_bytes[-2:], "big")
    n |= MPC.mpz(1) << (length - 1)
    n = n - n % M + RESIDUES[numerator % len(RESIDUES)]

    # Smallest prime >= n of the form n + M*i
    while True:
        sieve = bytearray(SIEVE_SIZE)
        for p, q in _sieve_info():
            start = int((-n * q) % p)
            sieve[start::p] = b"\x01" * len(range(start, SIEVE_SIZE, p))
        for i, composite in enumerate(sieve):
            if composite:
                continue
            candidate = n + M * i
            if MPC.is_prime(candidate, rounds):
                return -candidate
        n += M * SIEVE_SIZE
