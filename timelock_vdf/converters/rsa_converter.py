"""Converter for RSA objects."""

from ..database.entity.RSAEntity import RSAEntity
from ..mpc import MPC
from ..rsa.RSA import RSA


class RSAConverter:
    """Converter for storing RSA parameters in the database."""

    @staticmethod
    def to_entity(rsa: RSA) -> RSAEntity:
        """Convert an RSA instance to an RSAEntity.

        Args:
            rsa (RSA): The RSA instance to convert; it must not have been wiped

        Returns:
            RSAEntity: The database entity
        """
        return RSAEntity(
            hex(rsa.get_p())[2:],
            hex(rsa.get_q())[2:],
            hex(rsa.get_N())[2:],
            hex(rsa.get_phi())[2:],
        )

    @staticmethod
    def from_entity(entity: RSAEntity) -> RSA:
        """Rebuild the trapdoor from its stored factors."""
        rsa = RSA.from_factors(MPC.mpz(int(entity.p, 16)), MPC.mpz(int(entity.q, 16)))
        if rsa.get_N() != int(entity.N, 16):
            raise ValueError(f"Stored modulus does not match the factors of RSA entity {entity.id}")
        return rsa
