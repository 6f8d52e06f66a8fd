import pytest

from timelock_vdf.classgroup import PietrzakVDF, ProofType, VDFParams, WesolowskiVDF
from timelock_vdf.classgroup.PietrzakVDF import halving_rounds
from timelock_vdf.errors import DeserializationError, InvalidIterations, VerificationFailed
from timelock_vdf.group.ClassGroupElement import int_size

CHALLENGE = bytes.fromhex("aa1234")
BITS = 256
ELEMENT_LEN = 2 * int_size(BITS)


@pytest.fixture(scope="module")
def vdf():
    return PietrzakVDF(BITS)


def test_halving_rounds():
    assert halving_rounds(1) == 0
    assert halving_rounds(2) == 1
    assert halving_rounds(66) == 7
    assert halving_rounds(1024) == 10


@pytest.mark.parametrize("t", [66, 100, 1024])
def test_round_trip(vdf, t):
    blob = vdf.solve(CHALLENGE, t)
    assert len(blob) == ELEMENT_LEN * (halving_rounds(t) + 1)
    vdf.verify(CHALLENGE, t, blob)
    x = vdf.generator(CHALLENGE)
    assert blob[:ELEMENT_LEN] == x.repeated_square(t).serialize()


@pytest.mark.parametrize("t", [0, 1, 64, 65, 67, 101])
def test_iteration_rule(vdf, t):
    with pytest.raises(InvalidIterations):
        vdf.check_difficulty(t)
    with pytest.raises(InvalidIterations):
        vdf.solve(CHALLENGE, t)
    with pytest.raises(InvalidIterations):
        vdf.verify(CHALLENGE, t, b"")


def test_tampered_proof_rejected(vdf):
    blob = vdf.solve(CHALLENGE, 66)
    tampered = bytearray(blob)
    tampered[ELEMENT_LEN + 3] ^= 0x10
    with pytest.raises((VerificationFailed, DeserializationError)):
        vdf.verify(CHALLENGE, 66, bytes(tampered))
    assert not vdf.is_valid(CHALLENGE, 68, blob)


def test_blob_length_must_match_round_count(vdf):
    blob = vdf.solve(CHALLENGE, 66)
    with pytest.raises(DeserializationError):
        vdf.verify(CHALLENGE, 66, blob[:-ELEMENT_LEN])
    with pytest.raises(DeserializationError):
        vdf.verify(CHALLENGE, 66, blob + blob[-ELEMENT_LEN:])


def test_params_select_proof_family():
    assert isinstance(VDFParams(ProofType.PIETRZAK, BITS).new(), PietrzakVDF)
    assert isinstance(VDFParams(ProofType.WESOLOWSKI, BITS).new(), WesolowskiVDF)
    assert VDFParams(ProofType.PIETRZAK, BITS) == VDFParams(ProofType("pietrzak"), BITS)
    assert VDFParams(ProofType.PIETRZAK, BITS) != VDFParams(ProofType.WESOLOWSKI, BITS)


def test_wesolowski_accepts_any_non_negative_difficulty():
    WesolowskiVDF(BITS).check_difficulty(65)
