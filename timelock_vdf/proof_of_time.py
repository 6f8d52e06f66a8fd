"""Sequential squaring with checkpoints and the optimized Wesolowski prover."""

import logging
import math
from bisect import bisect_left
from threading import Event
from typing import Iterable, Iterator, List, Optional, Tuple

from .group.abstract.IGroupElement import IGroupElement
from .mpc import MPC
from .mpc.types import Integer
from .utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables

logger = logging.getLogger(__name__)


class Checkpoints:
    """Ordered arena of (squaring count, x^(2^count)) pairs.

    Counts are strictly increasing; lookups are by count.
    """

    def __init__(self) -> None:
        self._counts: List[int] = []
        self._elements: List[IGroupElement] = []

    def append(self, count: int, element: IGroupElement) -> None:
        if self._counts and count <= self._counts[-1]:
            raise ValueError(f"Checkpoint {count} is not after {self._counts[-1]}")
        self._counts.append(count)
        self._elements.append(element)

    def __getitem__(self, count: int) -> IGroupElement:
        index = bisect_left(self._counts, count)
        if index == len(self._counts) or self._counts[index] != count:
            raise KeyError(count)
        return self._elements[index]

    def __contains__(self, count: object) -> bool:
        try:
            self[count]  # type: ignore[index]
        except (KeyError, TypeError):
            return False
        return True

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[int]:
        return iter(self._counts)

    def items(self) -> Iterator[Tuple[int, IGroupElement]]:
        return zip(self._counts, self._elements)


def iterate_squarings(
    x: IGroupElement, powers: Iterable[int], stop_event: Optional[Event] = None
) -> Checkpoints:
    """
    Square x once up to the largest requested count, keeping x^(2^p) for every p in powers.

    Args:
        x: Starting element
        powers: Squaring counts to keep, in any order, duplicates allowed
        stop_event: Forwarded to repeated_square

    Returns:
        Checkpoints: One entry per distinct count
    """
    checkpoints = Checkpoints()
    previous = 0
    for current in sorted(set(powers)):
        if current < 0:
            raise ValueError("Squaring counts must be non-negative")
        x = x.repeated_square(current - previous, stop_event)
        checkpoints.append(current, x)
        previous = current
    return checkpoints


def approximate_parameters(t: Integer, memory: Optional[int] = None) -> Tuple[int, int, int]:
    """
    Create L and k parameters from papers, based on how many iterations need to be
    performed, and how much memory should be used.

    Args:
        t: Number of squarings
        memory: Memory budget; SQUARING_MEMORY when omitted

    Returns:
        (l, k, w): checkpoint stride factor, block width and window size
    """
    if memory is None:
        memory = EnvironmentManager.get_int(EnvironmentVariables.SQUARING_MEMORY)
    t = float(t)
    log_memory = math.log2(memory)
    log_t = math.log2(t) if t > 0 else -math.inf
    l = math.ceil(2 ** (log_memory - 20)) if log_t > log_memory else 1

    intermediate = t * math.log(2) / (2 * l)
    if t < 1 or intermediate <= 1:
        k = 1
    else:
        estimate = math.log(intermediate) - math.log(math.log(intermediate)) + 0.25
        # Half rounds up
        k = max(math.floor(estimate + 0.5), 1)

    w = max(math.floor(t / (t / k + l * 2 ** (k + 1)) - 2), 0)
    return l, k, w


def checkpoint_powers(t: int, k: int, l: int) -> List[int]:
    """Squaring counts eval_optimized reads: multiples of k*l, plus t itself."""
    stride = k * l
    return [i * stride for i in range(0, t // stride + 2)] + [t]


def get_block(i: int, k: int, T: int, B: Integer) -> int:
    """The i-th k-bit digit of floor(2^T / B)."""
    return int((MPC.pow(MPC.mpz(2), k) * MPC.powmod(2, T - k * (i + 1), B)) // B)


def eval_optimized(
    identity: IGroupElement, B: Integer, T: int, k: int, l: int, checkpoints: Checkpoints
) -> IGroupElement:
    """
    Compute x^floor(2^T / B) from the checkpoints at multiples of k*l.

    The digits of floor(2^T / B) are grouped by their position mod l; each group
    is combined with 2^k buckets and the k-bit digit split as k1 high and k0 low
    bits, so only O(2^k) group operations are spent per j.
    """
    k1 = k // 2
    k0 = k - k1
    x = identity
    for j in range(l - 1, -1, -1):
        x = x.pow(2 ** k)
        ys = [identity] * (2 ** k)
        for i in range(0, math.ceil(T / (k * l))):
            if T - k * (i * l + j + 1) < 0:
                continue
            b = get_block(i * l + j, k, T, B)
            ys[b] = ys[b] * checkpoints[i * k * l]
        for b1 in range(0, 2 ** k1):
            z = identity
            for b0 in range(0, 2 ** k0):
                z = z * ys[b1 * 2 ** k0 + b0]
            x = x * z.pow(b1 * 2 ** k0)
        for b0 in range(0, 2 ** k0):
            z = identity
            for b1 in range(0, 2 ** k1):
                z = z * ys[b1 * 2 ** k0 + b0]
            x = x * z.pow(b0)
    return x
