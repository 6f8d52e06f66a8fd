"""Pietrzak VDF: recursive halving of the claim y = x^(2^T)."""

import hashlib
import logging
from threading import Event
from typing import List, Optional, Tuple

from ..errors import DeserializationError, InvalidIterations, VerificationFailed
from ..group import ClassGroupElement
from ..group.ClassGroupElement import int_size
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import PIETRZAK_MIN_ITERATIONS
from .abstract.IVDF import IVDF

logger = logging.getLogger(__name__)

CHALLENGE_BYTES = 16


def halving_rounds(difficulty: int) -> int:
    """Number of midpoints in a proof for `difficulty` squarings."""
    rounds = 0
    T = difficulty
    while T > 1:
        if T % 2:
            T += 1
        T //= 2
        rounds += 1
    return rounds


def round_challenge(x: ClassGroupElement, y: ClassGroupElement, mu: ClassGroupElement) -> MPZ:
    digest = hashlib.sha256(x.serialize() + y.serialize() + mu.serialize()).digest()
    return MPC.from_bytes(digest[:CHALLENGE_BYTES])


def _halve(
    x: ClassGroupElement, y: ClassGroupElement, mu: ClassGroupElement, T: int
) -> Tuple[ClassGroupElement, ClassGroupElement, int]:
    # Claim y = x^(2^T) with T even and mu = x^(2^(T/2)) becomes y' = x'^(2^(T/2))
    r = round_challenge(x, y, mu)
    return x.pow(r) * mu, mu.pow(r) * y, T // 2


class PietrzakVDF(IVDF):
    """Pietrzak proofs with a discriminant of `int_size_bits` bits."""

    def __init__(self, int_size_bits: int) -> None:
        self.int_size_bits = int_size_bits

    def check_difficulty(self, difficulty: int) -> None:
        if difficulty < PIETRZAK_MIN_ITERATIONS or difficulty % 2:
            raise InvalidIterations(
                f"Pietrzak difficulty must be even and at least {PIETRZAK_MIN_ITERATIONS}, "
                f"got {difficulty}"
            )

    def generator(self, challenge: bytes) -> ClassGroupElement:
        return ClassGroupElement.from_seed(challenge, self.int_size_bits)

    def solve(self, challenge: bytes, difficulty: int, stop_event: Optional[Event] = None) -> bytes:
        self.check_difficulty(difficulty)
        x = self.generator(challenge)
        y = x.repeated_square(difficulty, stop_event)
        logger.debug("Pietrzak solve: t=%d, %d rounds", difficulty, halving_rounds(difficulty))

        blob = y.serialize()
        T = difficulty
        while T > 1:
            if T % 2:
                y = y.square()
                T += 1
            mu = x.repeated_square(T // 2, stop_event)
            blob += mu.serialize()
            x, y, T = _halve(x, y, mu, T)
        return blob

    def verify(self, challenge: bytes, difficulty: int, alleged_solution: bytes) -> None:
        self.check_difficulty(difficulty)
        x = self.generator(challenge)
        y, proof = self._split(alleged_solution, x.discriminant(), halving_rounds(difficulty))

        T = difficulty
        for mu in proof:
            if T % 2:
                y = y.square()
                T += 1
            x, y, T = _halve(x, y, mu, T)
        if y != x.square():
            raise VerificationFailed("Pietrzak proof does not match the output")

    @staticmethod
    def _split(
        blob: bytes, discriminant: MPZ, rounds: int
    ) -> Tuple[ClassGroupElement, List[ClassGroupElement]]:
        element_len = 2 * int_size(discriminant.bit_length())
        if len(blob) != element_len * (rounds + 1):
            raise DeserializationError(
                f"Pietrzak proof must be {element_len * (rounds + 1)} bytes, got {len(blob)}"
            )
        elements = [
            ClassGroupElement.deserialize(blob[i:i + element_len], discriminant)
            for i in range(0, len(blob), element_len)
        ]
        return elements[0], elements[1:]
