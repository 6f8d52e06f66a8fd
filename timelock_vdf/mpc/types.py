"""Type definitions for multi-precision arithmetic."""

from typing import NewType, Union
from gmpy2 import mpz as _mpz, random_state as _random_state

# gmpy2 integers and random states
MPZ = NewType("MPZ", _mpz)
RandomState = NewType("RandomState", _random_state)

# Anything accepted where an exponent or iteration count is expected
Integer = Union[MPZ, int]
