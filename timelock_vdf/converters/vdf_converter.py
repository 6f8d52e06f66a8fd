"""Converter for solved VDF instances."""

from typing import Optional

from ..database.entity.VDFEntity import VDFEntity
from ..mpc import MPC
from ..vdf.SolvedVDF import SolvedVDF
from ..vdf.UnsolvedVDF import UnsolvedVDF
from ..vdf.VDFSetup import VDFSetup


class VDFConverter:
    """Converter between SolvedVDF and VDFEntity."""

    @staticmethod
    def to_entity(solved: SolvedVDF, rsa_id: Optional[str] = None) -> VDFEntity:
        """Convert a SolvedVDF to a VDFEntity.

        Args:
            solved (SolvedVDF): The solved instance to convert
            rsa_id (str): ID of the associated RSA entity, if any

        Returns:
            VDFEntity: The database entity
        """
        instance = solved.get_instance()
        return VDFEntity(
            x_hex=hex(instance.get_x())[2:],  # remove 0x
            t=str(instance.get_t()),
            N_hex=hex(instance.get_N())[2:],
            y_hex=hex(solved.get_y())[2:],
            pi_hex=hex(solved.get_pi())[2:],
            rsa_id=rsa_id,
        )

    @staticmethod
    def from_entity(entity: VDFEntity) -> SolvedVDF:
        setup = VDFSetup(MPC.mpz(int(entity.t)), MPC.mpz(int(entity.N, 16)))
        instance = UnsolvedVDF(MPC.mpz(int(entity.x, 16)), setup)
        return SolvedVDF(instance, MPC.mpz(int(entity.y, 16)), MPC.mpz(int(entity.pi, 16)))
