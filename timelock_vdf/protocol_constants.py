# protocol_constants.py

from .mpc import MPC


SEED_BIT_SIZE = 256  # Size of the random challenge x
TWO = MPC.mpz(2)

HASH_PRIME_TAG = b"prime"  # Domain separator of the hash-to-prime challenge
HASH_PRIME_BYTES = 16  # Digest prefix used as the prime candidate
HASH_TO_GROUP_TAG = b"H_G"
KEY_DERIVATION_TAG = b"timelock-vdf key"

PIETRZAK_MIN_ITERATIONS = 66

INTERRUPT_CHECK_INTERVAL = 1024  # Squarings between stop-event checks
