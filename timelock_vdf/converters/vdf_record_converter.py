"""Hex JSON records exchanged between the setup party and solvers."""

import json
from typing import Any, Dict, Optional, Tuple

from ..mpc import MPC
from ..mpc.types import MPZ
from ..rsa.RSA import RSA
from ..vdf.SolvedVDF import SolvedVDF
from ..vdf.UnsolvedVDF import UnsolvedVDF
from ..vdf.UnsolvedVDFBuilder import UnsolvedVDFBuilder

REQUIRED_FIELDS = ("x", "t", "n")


def _to_hex(value: MPZ) -> str:
    return format(int(value), "x")


def _from_hex(record: Dict[str, Any], field: str) -> MPZ:
    value = record[field]
    if not isinstance(value, str):
        raise ValueError(f"Field {field!r} must be a hex string")
    return MPC.mpz(int(value, 16))


class VDFRecordConverter:
    """
    Converter between VDF objects and records with the hex fields x, t, n and,
    when present, y, pi (solution) and p, q (trapdoor).

    Every number, t included, is lowercase hex without a 0x prefix; parsing
    accepts either.
    """

    @staticmethod
    def to_record(
        unsolved: UnsolvedVDF, solved: Optional[SolvedVDF] = None, rsa: Optional[RSA] = None
    ) -> Dict[str, str]:
        record = {
            "x": _to_hex(unsolved.get_x()),
            "t": _to_hex(unsolved.get_t()),
            "n": _to_hex(unsolved.get_N()),
        }
        if solved is not None:
            if solved.get_instance() != unsolved:
                raise ValueError("Solved VDF does not belong to this instance")
            record["y"] = _to_hex(solved.get_y())
            record["pi"] = _to_hex(solved.get_pi())
        if rsa is not None:
            record["p"] = _to_hex(rsa.get_p())
            record["q"] = _to_hex(rsa.get_q())
        return record

    @staticmethod
    def from_record(
        record: Dict[str, Any],
    ) -> Tuple[UnsolvedVDF, Optional[SolvedVDF], Optional[RSA]]:
        """Parse a record.

        Args:
            record (dict): Decoded JSON object

        Returns:
            Tuple: The instance, the solution if y and pi are present, and the
            trapdoor if p and q are present

        Raises:
            ValueError: A required field is missing or malformed, or p * q != n
        """
        missing = [field for field in REQUIRED_FIELDS if field not in record]
        if missing:
            raise ValueError(f"Record is missing fields: {', '.join(missing)}")

        unsolved = (
            UnsolvedVDFBuilder()
            .set_x(_from_hex(record, "x"))
            .set_t(_from_hex(record, "t"))
            .set_N(_from_hex(record, "n"))
            .build()
        )

        solved = None
        if "y" in record and "pi" in record:
            solved = SolvedVDF(unsolved, _from_hex(record, "y"), _from_hex(record, "pi"))

        rsa = None
        if "p" in record and "q" in record:
            rsa = RSA.from_factors(_from_hex(record, "p"), _from_hex(record, "q"))
            if rsa.get_N() != unsolved.get_N():
                raise ValueError("Trapdoor factors do not match the modulus")

        return unsolved, solved, rsa

    @staticmethod
    def to_json(
        unsolved: UnsolvedVDF, solved: Optional[SolvedVDF] = None, rsa: Optional[RSA] = None
    ) -> str:
        return json.dumps(VDFRecordConverter.to_record(unsolved, solved, rsa))

    @staticmethod
    def from_json(data: str) -> Tuple[UnsolvedVDF, Optional[SolvedVDF], Optional[RSA]]:
        try:
            record = json.loads(data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Record is not valid JSON: {e}") from e
        if not isinstance(record, dict):
            raise ValueError("Record must be a JSON object")
        return VDFRecordConverter.from_record(record)
