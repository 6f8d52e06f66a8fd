from enum import Enum

from .abstract.IVDF import IVDF
from .PietrzakVDF import PietrzakVDF
from .WesolowskiVDF import WesolowskiVDF


class ProofType(Enum):
    """Proof family of a class group VDF."""
    WESOLOWSKI = "wesolowski"
    PIETRZAK = "pietrzak"


class VDFParams:
    """Proof type and discriminant size; `new` builds the matching VDF."""

    __slots__ = ("proof_type", "int_size_bits")

    def __init__(self, proof_type: ProofType, int_size_bits: int) -> None:
        self.proof_type = proof_type
        self.int_size_bits = int_size_bits

    def new(self) -> IVDF:
        if self.proof_type is ProofType.PIETRZAK:
            return PietrzakVDF(self.int_size_bits)
        return WesolowskiVDF(self.int_size_bits)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, VDFParams)
            and self.proof_type is other.proof_type
            and self.int_size_bits == other.int_size_bits
        )

    def __hash__(self) -> int:
        return hash((self.proof_type, self.int_size_bits))

    def __repr__(self) -> str:
        return f"VDFParams({self.proof_type.value}, {self.int_size_bits})"
