import logging
from threading import Event
from typing import Optional, Tuple

from ..errors import EvaluationInterrupted
from ..group.abstract.IGroupElement import IGroupElement
from ..mpc import MPC
from ..mpc.types import MPZ, Integer
from ..protocol_constants import INTERRUPT_CHECK_INTERVAL

logger = logging.getLogger(__name__)


class LongDivisionProver:
    """Wesolowski proof pi = g^floor(2^t / l) by on-the-fly long division."""

    @staticmethod
    def prove(
        g: IGroupElement, t: Integer, l: Integer, stop_event: Optional[Event] = None
    ) -> Tuple[IGroupElement, MPZ]:
        """Compute the proof with t squarings and no trapdoor.

        Each step doubles the running remainder r; the quotient bit b is
        folded into pi by squaring pi and multiplying by g^b.

        Args:
            g (IGroupElement): The generator
            t (Integer): Number of squarings
            l (Integer): The challenge prime
            stop_event (Event): Checked every INTERRUPT_CHECK_INTERVAL steps

        Returns:
            Tuple[IGroupElement, MPZ]: pi and the final remainder r = 2^t mod l
        """
        logger.debug("Long division proof for t=%d", t)
        l = MPC.mpz(l)
        pi = g.identity()
        r = MPC.mpz(1)
        for i in range(int(t)):
            if stop_event is not None and i % INTERRUPT_CHECK_INTERVAL == 0 and stop_event.is_set():
                raise EvaluationInterrupted(i, int(t))
            b, r = MPC.divmod(2 * r, l)
            pi = pi.square()
            # r < l, so b is 0 or 1
            if b:
                pi = pi * g
        return pi, MPC.mod(r, l)
