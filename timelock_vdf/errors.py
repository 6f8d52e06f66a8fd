"""Exceptions raised by the VDF engine."""


class VDFError(Exception):
    """Base class for all VDF errors."""


class InvalidProof(VDFError):
    """A solved instance or proof blob was rejected by a verifier."""


class InstanceMismatch(InvalidProof):
    """The proof was produced for a different instance than the one being verified."""


class OutOfRange(InvalidProof):
    """y or pi is not a canonical element of the group."""


class VerificationFailed(InvalidProof):
    """pi^l * g^r != y."""


class InvalidIterations(VDFError):
    """The iteration count is not legal for the requested proof type."""


class DeserializationError(VDFError):
    """Bytes do not decode to a valid group element, or have the wrong length."""


class EvaluationInterrupted(VDFError):
    """A squaring loop was stopped through its stop event."""

    def __init__(self, completed: int, requested: int):
        super().__init__(f"Interrupted after {completed} of {requested} squarings")
        self.completed = completed
        self.requested = requested
