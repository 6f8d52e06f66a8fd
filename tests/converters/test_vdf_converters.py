import json

import pytest

from timelock_vdf.converters import RSAConverter, VDFConverter, VDFRecordConverter
from timelock_vdf.database.entity import RSAEntity, VDFEntity
from timelock_vdf.vdf import EfficientVDFSolver, UnsolvedVDFBuilder, VDFVerifier


@pytest.fixture
def solved(rsa, unsolved):
    return EfficientVDFSolver.solve(rsa, unsolved)


def test_convert_solved_vdf_to_entity(solved, unsolved):
    entity = VDFConverter.to_entity(solved, rsa_id="rsa-id")
    assert isinstance(entity, VDFEntity)
    assert entity.x == "aa1234"
    assert entity.t == "1024"
    assert entity.N == hex(unsolved.get_N())[2:]
    assert entity.y == hex(solved.get_y())[2:]
    assert entity.pi == hex(solved.get_pi())[2:]
    assert entity.rsa_id == "rsa-id"


def test_vdf_entity_round_trip(solved):
    assert VDFConverter.from_entity(VDFConverter.to_entity(solved)) == solved


def test_rsa_entity_round_trip(rsa):
    entity = RSAConverter.to_entity(rsa)
    assert isinstance(entity, RSAEntity)
    assert entity.N == hex(rsa.get_N())[2:]
    assert entity.phi == hex(rsa.get_phi())[2:]
    assert RSAConverter.from_entity(entity).get_N() == rsa.get_N()


def test_rsa_entity_with_wrong_modulus(rsa):
    entity = RSAConverter.to_entity(rsa)
    entity.N = "8f"
    with pytest.raises(ValueError):
        RSAConverter.from_entity(entity)


def test_record_fields(solved, unsolved, rsa):
    record = VDFRecordConverter.to_record(unsolved, solved, rsa)
    assert record["x"] == "aa1234"
    assert record["t"] == "400"
    assert set(record) == {"x", "t", "n", "y", "pi", "p", "q"}
    assert set(VDFRecordConverter.to_record(unsolved)) == {"x", "t", "n"}


def test_record_round_trip(solved, unsolved, rsa):
    parsed_unsolved, parsed_solved, parsed_rsa = VDFRecordConverter.from_json(
        VDFRecordConverter.to_json(unsolved, solved, rsa)
    )
    assert parsed_unsolved == unsolved
    assert parsed_solved == solved
    assert parsed_rsa.get_phi() == rsa.get_phi()
    VDFVerifier.verify(parsed_solved, parsed_unsolved)


def test_record_accepts_prefixed_hex(unsolved):
    record = {"x": "0xaa1234", "t": "0x400", "n": hex(unsolved.get_N())}
    parsed, solved, rsa = VDFRecordConverter.from_record(record)
    assert parsed == unsolved
    assert solved is None and rsa is None


def test_record_rejects_missing_fields():
    with pytest.raises(ValueError, match="missing fields: t, n"):
        VDFRecordConverter.from_record({"x": "01"})


def test_record_rejects_malformed_values(unsolved):
    with pytest.raises(ValueError):
        VDFRecordConverter.from_record({"x": 5, "t": "10", "n": "8f"})
    with pytest.raises(ValueError):
        VDFRecordConverter.from_json("not json")
    with pytest.raises(ValueError):
        VDFRecordConverter.from_json(json.dumps(["x", "t", "n"]))


def test_record_rejects_foreign_factors(unsolved):
    record = VDFRecordConverter.to_record(unsolved)
    record.update(p="b", q="d")
    with pytest.raises(ValueError):
        VDFRecordConverter.from_record(record)


def test_record_rejects_solution_of_other_instance(solved, rsa):
    other = UnsolvedVDFBuilder().set_x(1).set_t(1024).set_N(rsa.get_N()).build()
    with pytest.raises(ValueError):
        VDFRecordConverter.to_record(other, solved)
