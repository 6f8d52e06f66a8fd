import importlib
import threading
from unittest.mock import patch

import pytest

from timelock_vdf.errors import (
    EvaluationInterrupted,
    InstanceMismatch,
    InvalidIterations,
    OutOfRange,
    VerificationFailed,
)
from timelock_vdf.mpc import MPC
from timelock_vdf.rsa import RSA
from timelock_vdf.vdf import (
    EfficientVDFSolver,
    LongDivisionProver,
    SequentialVDFSolver,
    SolvedVDF,
    UnsolvedVDF,
    UnsolvedVDFBuilder,
    VDFSetup,
    VDFVerifier,
    challenge_prime,
)


@pytest.fixture
def solved(unsolved):
    return SequentialVDFSolver.solve(unsolved)


def test_output_is_generator_to_two_to_the_t(unsolved, solved):
    g = unsolved.get_generator()
    assert solved.get_y() == g.pow(MPC.mpz(2) ** 1024).value
    assert solved.get_instance() == unsolved


def test_round_trip(unsolved, solved):
    VDFVerifier.verify(solved, unsolved)
    assert VDFVerifier.is_valid(solved, unsolved)


def test_trapdoor_equivalence(rsa, unsolved, solved):
    efficient = EfficientVDFSolver.solve(rsa, unsolved)
    assert efficient == solved
    assert EfficientVDFSolver.solve_y(rsa, unsolved).value == solved.get_y()


def test_proof_is_quotient_power(unsolved, solved):
    g = unsolved.get_generator()
    l = challenge_prime(unsolved.get_setup(), g, g.repeated_square(1024))
    assert solved.get_pi() == g.pow(MPC.mpz(2) ** 1024 // l).value


def test_long_division_remainder():
    g = UnsolvedVDF(7, VDFSetup(10, 2**61 - 1)).get_generator()
    pi, r = LongDivisionProver.prove(g, 300, 1009)
    assert r == pow(2, 300, 1009)
    assert pi == g.pow(2**300 // 1009)


def test_tampered_output_is_rejected(unsolved, solved):
    N = unsolved.get_N()
    tampered = SolvedVDF(unsolved, (solved.get_y() + 1) % N, solved.get_pi())
    with pytest.raises(VerificationFailed):
        VDFVerifier.verify(tampered, unsolved)
    assert not VDFVerifier.is_valid(tampered, unsolved)


def test_tampered_proof_is_rejected(unsolved, solved):
    N = unsolved.get_N()
    tampered = SolvedVDF(unsolved, solved.get_y(), (solved.get_pi() + 1) % N)
    with pytest.raises(VerificationFailed):
        VDFVerifier.verify(tampered, unsolved)


def test_out_of_range_values_are_rejected(unsolved, solved):
    N = unsolved.get_N()
    for y, pi in [
        (solved.get_y() + N, solved.get_pi()),
        (solved.get_y(), solved.get_pi() + N),
        (solved.get_y(), -1),
    ]:
        with pytest.raises(OutOfRange):
            VDFVerifier.verify(SolvedVDF(unsolved, y, pi), unsolved)


def test_zero_output_and_proof_are_rejected(unsolved):
    # 0^l * g^r == 0 for every l and r
    forged = SolvedVDF(unsolved, 0, 0)
    with pytest.raises(OutOfRange):
        VDFVerifier.verify(forged, unsolved)
    assert not VDFVerifier.is_valid(forged, unsolved)


def test_non_unit_values_are_rejected(rsa, unsolved, solved):
    for y, pi in [
        (rsa.get_p(), solved.get_pi()),
        (solved.get_y(), rsa.get_q()),
        (solved.get_y(), 0),
    ]:
        with pytest.raises(OutOfRange):
            VDFVerifier.verify(SolvedVDF(unsolved, y, pi), unsolved)


def test_cross_instance_proof_is_rejected(rsa, unsolved, solved):
    other = UnsolvedVDFBuilder().set_x(0xAA1235).set_setup(unsolved.get_setup()).build()
    with pytest.raises(InstanceMismatch):
        VDFVerifier.verify(solved, other)
    longer = UnsolvedVDFBuilder().set_x(0xAA1234).set_t(1025).set_N(rsa.get_N()).build()
    assert not VDFVerifier.is_valid(solved, longer)


def test_zero_iterations(rsa):
    unsolved = UnsolvedVDFBuilder().set_x(42).set_t(0).set_N(rsa.get_N()).build()
    solved = SequentialVDFSolver.solve(unsolved)
    assert solved.get_pi() == 1
    assert solved.get_y() == unsolved.get_generator().value
    assert EfficientVDFSolver.solve(rsa, unsolved) == solved
    VDFVerifier.verify(solved, unsolved)


def test_same_instance_gives_same_output(unsolved, solved):
    again = UnsolvedVDFBuilder().set_x(0xAA1234).set_setup(unsolved.get_setup()).build()
    assert SequentialVDFSolver.solve(again) == solved


def test_trapdoor_falls_back_to_long_division(rsa, unsolved):
    # 3 divides 2^126 - 1, so it is not invertible mod phi
    solver_module = importlib.import_module("timelock_vdf.vdf.EfficientVDFSolver")
    with patch.object(solver_module, "challenge_prime", return_value=MPC.mpz(3)), \
         patch.object(LongDivisionProver, "prove", wraps=LongDivisionProver.prove) as prove:
        solved = EfficientVDFSolver.solve(rsa, unsolved)
    prove.assert_called_once()
    assert solved.get_pi() == unsolved.get_generator().pow(MPC.mpz(2) ** 1024 // 3).value


def test_trapdoor_must_match_modulus(unsolved):
    other = RSA.from_factors(2**61 - 1, 2**89 - 1)
    with pytest.raises(ValueError):
        EfficientVDFSolver.solve(other, unsolved)


def test_wiped_trapdoor_cannot_solve(rsa, unsolved):
    rsa.wipe()
    with pytest.raises(ValueError):
        EfficientVDFSolver.solve(rsa, unsolved)


def test_stop_event_interrupts_solver(unsolved):
    stop = threading.Event()
    stop.set()
    with pytest.raises(EvaluationInterrupted):
        SequentialVDFSolver.solve(unsolved, stop)


def test_builder_requires_all_fields():
    with pytest.raises(ValueError):
        UnsolvedVDFBuilder().set_x(1).set_t(10).build()


def test_setup_rejects_illegal_iterations():
    with pytest.raises(InvalidIterations):
        VDFSetup(-1, 2**61 - 1)
    with pytest.raises(InvalidIterations):
        VDFSetup(2**64, 2**61 - 1)


def test_y_bytes_have_modulus_width(unsolved, solved):
    assert len(solved.y_bytes()) == (unsolved.get_N().bit_length() + 7) // 8
    assert MPC.from_bytes(solved.y_bytes()) == solved.get_y()


def test_solve_many_preserves_order(rsa):
    instances = [
        UnsolvedVDFBuilder().set_x(x).set_t(64).set_N(rsa.get_N()).build() for x in (1, 2, 3)
    ]
    results = SequentialVDFSolver.solve_many(instances)
    assert [r.get_instance() for r in results] == instances
    assert results == EfficientVDFSolver.solve_many([(rsa, u) for u in instances])
    assert SequentialVDFSolver.solve_many([]) == []


@pytest.fixture(scope="module")
def full_size():
    rsa = RSA(2048)
    unsolved = UnsolvedVDFBuilder().set_x(0xAA1234).set_t(1024).set_N(rsa.get_N()).build()
    return rsa, unsolved, SequentialVDFSolver.solve(unsolved)


def test_full_size_modulus_round_trip(full_size):
    rsa, unsolved, solved = full_size
    # Two 1024-bit factors with their top bits set
    assert unsolved.get_N().bit_length() in (2047, 2048)
    VDFVerifier.verify(solved, unsolved)
    assert EfficientVDFSolver.solve(rsa, unsolved) == solved


def test_full_size_modulus_rejects_every_corrupted_proof_byte(full_size):
    _, unsolved, solved = full_size
    width = (unsolved.get_N().bit_length() + 7) // 8
    pi_bytes = MPC.to_bytes(solved.get_pi(), width)
    for i in range(width):
        corrupted = bytearray(pi_bytes)
        corrupted[i] ^= 0xFF
        tampered = SolvedVDF(unsolved, solved.get_y(), MPC.from_bytes(bytes(corrupted)))
        assert not VDFVerifier.is_valid(tampered, unsolved), f"byte {i}"
