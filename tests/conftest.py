import pytest

from timelock_vdf.mpc import MPC
from timelock_vdf.rsa import RSA
from timelock_vdf.vdf import UnsolvedVDFBuilder

# Mersenne primes, so moduli in tests are fixed
P61 = MPC.mpz(2**61 - 1)
P89 = MPC.mpz(2**89 - 1)
P107 = MPC.mpz(2**107 - 1)
P127 = MPC.mpz(2**127 - 1)

CHALLENGE = bytes.fromhex("aa1234")
DISCRIMINANT_BITS = 256  # Small discriminants keep class group tests quick


@pytest.fixture
def rsa():
    """Trapdoor for N = (2^127 - 1)(2^107 - 1)."""
    return RSA.from_factors(P127, P107)


@pytest.fixture
def unsolved(rsa):
    """The instance x = 0xaa1234, t = 1024 under the fixed modulus."""
    return UnsolvedVDFBuilder().set_x(MPC.mpz(0xAA1234)).set_t(1024).set_N(rsa.get_N()).build()
