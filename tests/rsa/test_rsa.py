from unittest.mock import patch

import pytest

from timelock_vdf.mpc import MPC
from timelock_vdf.primes import Primes
from timelock_vdf.rsa import RSA

P = MPC.mpz(2**61 - 1)
Q = MPC.mpz(2**89 - 1)


def test_generated_modulus_has_distinct_prime_factors():
    rsa = RSA(128)
    assert rsa.get_p() != rsa.get_q()
    assert rsa.get_N() == rsa.get_p() * rsa.get_q()
    assert rsa.get_phi() == (rsa.get_p() - 1) * (rsa.get_q() - 1)
    assert MPC.is_prime(rsa.get_p(), 25)
    assert MPC.is_prime(rsa.get_q(), 25)


def test_equal_primes_are_redrawn():
    with patch.object(Primes, "get_prime", side_effect=[P, P, Q]) as mock_prime:
        rsa = RSA(128)
    assert mock_prime.call_count == 3
    assert rsa.get_N() == P * Q


def test_from_factors():
    rsa = RSA.from_factors(P, Q)
    assert rsa.get_N() == P * Q
    assert rsa.get_phi() == (P - 1) * (Q - 1)
    with pytest.raises(ValueError):
        RSA.from_factors(1, Q)


def test_bit_size_lower_bound():
    with pytest.raises(ValueError):
        RSA(8)


def test_wipe_drops_factors_but_keeps_modulus():
    rsa = RSA.from_factors(P, Q)
    rsa.wipe()
    assert rsa.is_wiped()
    assert rsa.get_N() == P * Q
    for getter in (rsa.get_p, rsa.get_q, rsa.get_phi):
        with pytest.raises(ValueError):
            getter()


def test_repr_does_not_leak_factors():
    rsa = RSA.from_factors(P, Q)
    text = repr(rsa)
    assert str(P) not in text and hex(P)[2:] not in text
    assert str(Q) not in text and hex(Q)[2:] not in text
