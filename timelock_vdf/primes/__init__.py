"""Prime number generation module."""

from .Primes import Primes
from .HashPrime import hash_prime
from .Discriminant import create_discriminant
from .abstract.IPrimes import IPrimes

__all__ = ["Primes", "IPrimes", "hash_prime", "create_discriminant"]
