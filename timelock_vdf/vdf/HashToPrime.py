from typing import Optional

from ..group import RSAGroupElement
from ..group.RSAGroupElement import int_byte_length
from ..mpc import MPC
from ..mpc.types import MPZ
from ..primes import hash_prime
from ..utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .VDFSetup import VDFSetup


def challenge_prime(
    setup: VDFSetup, g: RSAGroupElement, y: RSAGroupElement, rounds: Optional[int] = None
) -> MPZ:
    """
    The Fiat-Shamir prime l binding a proof to (t, N, g, y).

    t is hashed as 8 bytes, N, g and y with the byte width of N, all big-endian.

    Args:
        setup (VDFSetup): Public parameters
        g (RSAGroupElement): The generator H_G(N, x)
        y (RSAGroupElement): The claimed output
        rounds (int): Primality test rounds; PRIME_TEST_ROUNDS when omitted

    Returns:
        MPZ: The prime l
    """
    if rounds is None:
        rounds = EnvironmentManager.get_int(EnvironmentVariables.PRIME_TEST_ROUNDS)
    width = int_byte_length(setup.get_N())
    return hash_prime(
        [
            MPC.to_bytes(setup.get_t(), 8),
            MPC.to_bytes(setup.get_N(), width),
            g.serialize(),
            y.serialize(),
        ],
        rounds,
    )
