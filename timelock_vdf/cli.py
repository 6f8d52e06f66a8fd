"""Command line front end: create, solve and verify VDF instances."""

import argparse
import json
import logging
import sys
import time
from typing import List, Optional

from .classgroup import ProofType, VDFParams
from .converters import VDFRecordConverter
from .database.database import initialize_db
from .database.DatabaseService import DatabaseService
from .errors import DeserializationError, InvalidIterations, InvalidProof
from .mpc import MPC
from .utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .utils.LoggingConfig import configure_logging
from .vdf import SequentialVDFSolver, VDFFactory, VDFVerifier

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def _read_record(value: str) -> str:
    """A record argument is inline JSON, or '-' to read it from stdin."""
    return sys.stdin.read() if value == "-" else value


def _parse_hex(value: str) -> bytes:
    try:
        return bytes.fromhex(value[2:] if value.startswith("0x") else value)
    except ValueError as e:
        raise ValueError(f"Not a hex string: {value!r}") from e


def cmd_create(args: argparse.Namespace) -> int:
    factory = VDFFactory(MPC.mpz(args.t), args.bits)
    start_time = time.time()
    if args.count == 1:
        created = [factory.create_instance()]
    else:
        created = factory.create_many(args.count)
    logger.info("Created %d instances in %.2f seconds", len(created), time.time() - start_time)

    if args.save:
        initialize_db()
        DatabaseService.save_created(created)
        logger.info("Saved %d instances to the database", len(created))

    for unsolved, rsa, solved in created:
        print(VDFRecordConverter.to_json(unsolved, solved, rsa))
    return EXIT_OK


def cmd_solve(args: argparse.Namespace) -> int:
    unsolved, _, _ = VDFRecordConverter.from_json(_read_record(args.record))
    logger.info("Solving VDF with t=%d, this may take a while", unsolved.get_t())
    start_time = time.time()
    solved = SequentialVDFSolver.solve(unsolved)
    logger.info("Solved in %.2f seconds", time.time() - start_time)
    print(VDFRecordConverter.to_json(unsolved, solved))
    return EXIT_OK


def cmd_verify(args: argparse.Namespace) -> int:
    unsolved, solved, _ = VDFRecordConverter.from_json(_read_record(args.record))
    if solved is None:
        raise ValueError("Record has no y and pi to verify")
    try:
        VDFVerifier.verify(solved, unsolved)
    except InvalidProof as e:
        print(json.dumps({"valid": False, "reason": str(e)}))
        return EXIT_INVALID
    print(json.dumps({"valid": True}))
    return EXIT_OK


def cmd_prove(args: argparse.Namespace) -> int:
    vdf = VDFParams(ProofType(args.proof_type), args.length).new()
    blob = vdf.solve(_parse_hex(args.challenge), args.t)
    print(blob.hex())
    return EXIT_OK


def cmd_check(args: argparse.Namespace) -> int:
    vdf = VDFParams(ProofType(args.proof_type), args.length).new()
    try:
        vdf.verify(_parse_hex(args.challenge), args.t, _parse_hex(args.proof))
    except (InvalidProof, DeserializationError) as e:
        print(json.dumps({"valid": False, "reason": str(e)}))
        return EXIT_INVALID
    print(json.dumps({"valid": True}))
    return EXIT_OK


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="timelock-vdf",
        description="Verifiable delay functions over RSA and class groups.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log verbosely to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create RSA instances with the trapdoor")
    create.add_argument("t", type=int, help="The delay t (number of squarings)")
    create.add_argument(
        "--bits",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.VDF_BIT_SIZE),
        help="RSA modulus size in bits (default: VDF_BIT_SIZE or 2048)",
    )
    create.add_argument("--count", type=int, default=1, help="Number of instances to create")
    create.add_argument("--save", action="store_true", help="Store instances and trapdoors in DATABASE_URL")
    create.set_defaults(func=cmd_create)

    solve = subparsers.add_parser("solve", help="Solve a record {x, t, n} without the trapdoor")
    solve.add_argument("record", help="JSON record, or - to read stdin")
    solve.set_defaults(func=cmd_solve)

    verify = subparsers.add_parser("verify", help="Verify a solved record")
    verify.add_argument("record", help="JSON record, or - to read stdin")
    verify.set_defaults(func=cmd_verify)

    for name, help_text, func in (
        ("prove", "Solve a class group VDF and print the proof blob", cmd_prove),
        ("check", "Verify a class group proof blob", cmd_check),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("challenge", help="Challenge bytes (hex string)")
        sub.add_argument("t", type=int, help="Number of iterations")
        if name == "check":
            sub.add_argument("proof", help="Proof blob (hex string)")
        sub.add_argument(
            "-l",
            "--length",
            type=int,
            default=EnvironmentManager.get_int(EnvironmentVariables.VDF_BIT_SIZE),
            help="Length in bits of the discriminant (default: 2048)",
        )
        sub.add_argument(
            "-p",
            "--proof-type",
            choices=[proof_type.value for proof_type in ProofType],
            default=ProofType.WESOLOWSKI.value,
            help="Proof family (default: wesolowski)",
        )
        sub.set_defaults(func=func)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    try:
        return args.func(args)
    except InvalidIterations as e:
        print(f"Invalid number of iterations: {e}", file=sys.stderr)
        return EXIT_USAGE
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
