from timelock_vdf.mpc import MPC
from timelock_vdf.primes import Primes, hash_prime


def test_hash_prime_is_deterministic():
    seed = [b"\xaa\x12\x34", b"\x00\x01"]
    assert hash_prime(seed, 2) == hash_prime(seed, 2)


def test_hash_prime_is_128_bit_probable_prime():
    p = hash_prime([b"challenge"], 25)
    assert 0 < p < 2**128
    assert MPC.is_prime(p, 50)


def test_hash_prime_depends_on_seed():
    assert hash_prime([b"a"], 2) != hash_prime([b"b"], 2)
    assert hash_prime([b"x", b"y"], 2) != hash_prime([b"y", b"x"], 2)


def test_primes_facade_delegates():
    assert Primes.hash_prime([b"seed"], 2) == hash_prime([b"seed"], 2)


def test_get_prime_has_requested_size():
    p = Primes.get_prime(64)
    assert p.bit_length() >= 64
    assert MPC.is_prime(p, 25)
