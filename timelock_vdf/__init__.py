"""Verifiable delay functions over RSA groups and imaginary quadratic class groups."""

from .errors import (
    VDFError,
    InvalidProof,
    InstanceMismatch,
    OutOfRange,
    VerificationFailed,
    InvalidIterations,
    DeserializationError,
    EvaluationInterrupted,
)
from .kdf import derive_key

__version__ = "0.1.0"

__all__ = [
    "VDFError",
    "InvalidProof",
    "InstanceMismatch",
    "OutOfRange",
    "VerificationFailed",
    "InvalidIterations",
    "DeserializationError",
    "EvaluationInterrupted",
    "derive_key",
]
