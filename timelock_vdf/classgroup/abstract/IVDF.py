from abc import ABC, abstractmethod
from threading import Event
from typing import Optional

from ...errors import DeserializationError, InvalidProof


class IVDF(ABC):
    """A VDF over the class group derived from a challenge.

    Instances only hold the discriminant size, so they are cheap to create and
    safe to share between threads.
    """

    @abstractmethod
    def check_difficulty(self, difficulty: int) -> None:
        """Raise InvalidIterations if the VDF cannot run for `difficulty` iterations."""

    @abstractmethod
    def solve(self, challenge: bytes, difficulty: int, stop_event: Optional[Event] = None) -> bytes:
        """Evaluate the VDF and return the proof blob.

        Args:
            challenge (bytes): Seed of the discriminant
            difficulty (int): Number of squarings
            stop_event (Event): Optional interrupt

        Returns:
            bytes: The output y followed by the proof

        Raises:
            InvalidIterations: difficulty is not legal for this proof type
        """

    @abstractmethod
    def verify(self, challenge: bytes, difficulty: int, alleged_solution: bytes) -> None:
        """Check a proof blob.

        Raises:
            InvalidIterations: difficulty is not legal for this proof type
            DeserializationError: The blob does not decode
            VerificationFailed: The proof is wrong
        """

    def is_valid(self, challenge: bytes, difficulty: int, alleged_solution: bytes) -> bool:
        try:
            self.verify(challenge, difficulty, alleged_solution)
        except (InvalidProof, DeserializationError):
            return False
        return True
