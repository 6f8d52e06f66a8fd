import pytest

from timelock_vdf.classgroup import WesolowskiVDF
from timelock_vdf.errors import DeserializationError, InvalidIterations, VerificationFailed
from timelock_vdf.group import ClassGroupElement
from timelock_vdf.group.ClassGroupElement import int_size
from timelock_vdf.primes import hash_prime
from timelock_vdf.vdf import LongDivisionProver

CHALLENGE = bytes.fromhex("aa1234")
BITS = 256
ELEMENT_LEN = 2 * int_size(BITS)


@pytest.fixture(scope="module")
def vdf():
    return WesolowskiVDF(BITS)


@pytest.fixture(scope="module")
def blob(vdf):
    return vdf.solve(CHALLENGE, 1024)


def test_round_trip(vdf, blob):
    assert len(blob) == 2 * ELEMENT_LEN
    vdf.verify(CHALLENGE, 1024, blob)
    assert vdf.is_valid(CHALLENGE, 1024, blob)


def test_output_matches_sequential_squaring(vdf, blob):
    x = vdf.generator(CHALLENGE)
    assert blob[:ELEMENT_LEN] == vdf.calculate_y(CHALLENGE, 1024)
    assert ClassGroupElement.deserialize(blob[:ELEMENT_LEN], x.discriminant()) == x.repeated_square(1024)


def test_optimized_proof_matches_long_division(vdf, blob):
    x = vdf.generator(CHALLENGE)
    y = x.repeated_square(1024)
    B = hash_prime([x.serialize(), y.serialize()], 2)
    pi, _ = LongDivisionProver.prove(x, 1024, B)
    assert blob[ELEMENT_LEN:] == pi.serialize()


def test_wrong_iterations_rejected(vdf, blob):
    with pytest.raises(VerificationFailed):
        vdf.verify(CHALLENGE, 1023, blob)


def test_wrong_challenge_rejected(vdf, blob):
    assert not vdf.is_valid(bytes.fromhex("aa1235"), 1024, blob)


def test_tampered_blob_rejected(vdf, blob):
    for index in (0, ELEMENT_LEN - 1, ELEMENT_LEN, len(blob) - 1):
        tampered = bytearray(blob)
        tampered[index] ^= 0x01
        with pytest.raises((VerificationFailed, DeserializationError)):
            vdf.verify(CHALLENGE, 1024, bytes(tampered))


def test_blob_length_rejected(vdf, blob):
    for bad in (blob[:-1], blob + b"\x00", b"", blob[:ELEMENT_LEN]):
        with pytest.raises(DeserializationError):
            vdf.verify(CHALLENGE, 1024, bad)


def test_swapped_output_and_proof_rejected(vdf, blob):
    swapped = blob[ELEMENT_LEN:] + blob[:ELEMENT_LEN]
    assert not vdf.is_valid(CHALLENGE, 1024, swapped)


def test_zero_iterations_proof_is_identity(vdf):
    blob = vdf.solve(CHALLENGE, 0)
    x = vdf.generator(CHALLENGE)
    assert blob == x.serialize() + x.identity().serialize()
    vdf.verify(CHALLENGE, 0, blob)


def test_negative_iterations_rejected(vdf):
    with pytest.raises(InvalidIterations):
        vdf.solve(CHALLENGE, -1)
    with pytest.raises(InvalidIterations):
        vdf.verify(CHALLENGE, -1, b"")
