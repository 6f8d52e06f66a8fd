"""Wesolowski VDF over the class group of a challenge-derived discriminant."""

import logging
from threading import Event
from typing import Optional

from ..errors import DeserializationError, InvalidIterations, VerificationFailed
from ..group import ClassGroupElement
from ..group.ClassGroupElement import int_size
from ..mpc import MPC
from ..mpc.types import MPZ
from ..primes import hash_prime
from ..proof_of_time import (
    approximate_parameters,
    checkpoint_powers,
    eval_optimized,
    iterate_squarings,
)
from ..protocol_constants import TWO
from ..utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .abstract.IVDF import IVDF

logger = logging.getLogger(__name__)

# Checkpoint counts are handled as floats by the parameter selector
MAX_DIFFICULTY = (1 << 53) - 1


class WesolowskiVDF(IVDF):
    """Wesolowski proofs with a discriminant of `int_size_bits` bits."""

    def __init__(self, int_size_bits: int) -> None:
        self.int_size_bits = int_size_bits

    def check_difficulty(self, difficulty: int) -> None:
        if not 0 <= difficulty <= MAX_DIFFICULTY:
            raise InvalidIterations(
                f"Wesolowski difficulty must be in [0, 2^53), got {difficulty}"
            )

    def generator(self, challenge: bytes) -> ClassGroupElement:
        return ClassGroupElement.from_seed(challenge, self.int_size_bits)

    def calculate_y(self, challenge: bytes, difficulty: int, stop_event: Optional[Event] = None) -> bytes:
        """Serialized x^(2^difficulty), without a proof."""
        self.check_difficulty(difficulty)
        return self.generator(challenge).repeated_square(difficulty, stop_event).serialize()

    def solve(self, challenge: bytes, difficulty: int, stop_event: Optional[Event] = None) -> bytes:
        self.check_difficulty(difficulty)
        x = self.generator(challenge)
        l, k, _ = approximate_parameters(difficulty)
        logger.debug("Wesolowski solve: t=%d, l=%d, k=%d", difficulty, l, k)

        checkpoints = iterate_squarings(x, checkpoint_powers(difficulty, k, l), stop_event)
        y = checkpoints[difficulty]
        B = self._challenge_prime(x, y)
        proof = eval_optimized(x.identity(), B, difficulty, k, l, checkpoints)
        return y.serialize() + proof.serialize()

    def verify(self, challenge: bytes, difficulty: int, alleged_solution: bytes) -> None:
        self.check_difficulty(difficulty)
        x = self.generator(challenge)
        discriminant = x.discriminant()
        element_len = 2 * int_size(discriminant.bit_length())
        if len(alleged_solution) != 2 * element_len:
            raise DeserializationError(
                f"Wesolowski proof must be {2 * element_len} bytes, got {len(alleged_solution)}"
            )
        y = ClassGroupElement.deserialize(alleged_solution[:element_len], discriminant)
        proof = ClassGroupElement.deserialize(alleged_solution[element_len:], discriminant)
        self.verify_proof(x, y, proof, difficulty)

    def verify_proof(
        self, x: ClassGroupElement, y: ClassGroupElement, proof: ClassGroupElement, difficulty: int
    ) -> None:
        """Accept iff proof^B * x^r == y, B the challenge prime and r = 2^t mod B."""
        B = self._challenge_prime(x, y)
        r = MPC.powmod(TWO, difficulty, B)
        if proof.pow(B) * x.pow(r) != y:
            raise VerificationFailed("Wesolowski proof does not match the output")

    def _challenge_prime(self, x: ClassGroupElement, y: ClassGroupElement) -> MPZ:
        rounds = EnvironmentManager.get_int(EnvironmentVariables.HASH_PRIME_ROUNDS)
        return hash_prime([x.serialize(), y.serialize()], rounds)
