import logging

from ..errors import InstanceMismatch, InvalidProof, OutOfRange, VerificationFailed
from ..group import RSAGroupElement
from ..mpc import MPC
from ..protocol_constants import TWO
from .abstract.IVDFVerifier import IVDFVerifier
from .HashToPrime import challenge_prime
from .SolvedVDF import SolvedVDF
from .UnsolvedVDF import UnsolvedVDF

logger = logging.getLogger(__name__)


class VDFVerifier(IVDFVerifier):
    """Wesolowski verification: pi^l * g^r == y with r = 2^t mod l."""

    @staticmethod
    def verify(solved: SolvedVDF, unsolved: UnsolvedVDF) -> None:
        """Check a solved instance against the instance the caller expects.

        Args:
            solved (SolvedVDF): Output and proof to check
            unsolved (UnsolvedVDF): The instance the caller asked for

        Raises:
            InstanceMismatch: The proof belongs to a different instance
            OutOfRange: y or pi is not a unit in [0, N)
            VerificationFailed: The proof equation does not hold
        """
        if solved.get_instance() != unsolved:
            raise InstanceMismatch("Solved VDF does not belong to this instance")

        N = unsolved.get_N()
        y_value, pi_value = solved.get_y(), solved.get_pi()
        if not (0 <= y_value < N and 0 <= pi_value < N):
            raise OutOfRange("y and pi must be reduced modulo N")
        if MPC.gcd(y_value, N) != 1 or MPC.gcd(pi_value, N) != 1:
            raise OutOfRange("y and pi must be units modulo N")

        g = unsolved.get_generator()
        y = RSAGroupElement(y_value, N)
        pi = RSAGroupElement(pi_value, N)
        l = challenge_prime(unsolved.get_setup(), g, y)
        r = MPC.powmod(TWO, unsolved.get_t(), l)

        if pi.pow(l) * g.pow(r) != y:
            raise VerificationFailed("pi^l * g^r != y")
        logger.debug("VDF proof verified for t=%d", unsolved.get_t())

    @staticmethod
    def is_valid(solved: SolvedVDF, unsolved: UnsolvedVDF) -> bool:
        try:
            VDFVerifier.verify(solved, unsolved)
        except InvalidProof as e:
            logger.debug("Rejected VDF proof: %s", e)
            return False
        return True
