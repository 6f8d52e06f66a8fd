import hashlib

from timelock_vdf import derive_key
from timelock_vdf.vdf import EfficientVDFSolver, SequentialVDFSolver


def test_derive_key_is_tagged_sha256():
    y = bytes.fromhex("00ff10")
    assert derive_key(y) == hashlib.sha256(b"timelock-vdf key" + y).digest()


def test_derive_key_is_deterministic_and_32_bytes():
    assert derive_key(b"\x01" * 30) == derive_key(b"\x01" * 30)
    assert len(derive_key(b"")) == 32
    assert derive_key(b"\x01") != derive_key(b"\x02")


def test_solver_and_trapdoor_holder_derive_the_same_key(rsa, unsolved):
    solved = SequentialVDFSolver.solve(unsolved)
    created = EfficientVDFSolver.solve(rsa, unsolved)
    assert derive_key(solved.y_bytes()) == derive_key(created.y_bytes())
