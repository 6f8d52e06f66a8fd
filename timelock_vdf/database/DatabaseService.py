from typing import List, Optional, Tuple

from ..converters.rsa_converter import RSAConverter
from ..converters.vdf_converter import VDFConverter
from ..rsa.RSA import RSA
from .database import save_instance
from .mixins.saveable import Saveable
from ..vdf.SolvedVDF import SolvedVDF


class DatabaseService:
    """Service class for database operations."""

    @staticmethod
    def save_many(instances: List[Saveable]) -> None:
        """
        Save multiple instances to the database.

        Args:
            instances: List of Saveable instances to save
        """
        for instance in instances:
            instance.save()

    @staticmethod
    def save_solved(solved: SolvedVDF, rsa: Optional[RSA] = None) -> str:
        """
        Store a solved instance, and its trapdoor if given.

        Args:
            solved (SolvedVDF): The solved instance
            rsa (RSA): The trapdoor; it must not have been wiped

        Returns:
            str: ID of the stored VDF entity
        """
        rsa_id = None
        if rsa is not None:
            rsa_entity = RSAConverter.to_entity(rsa)
            save_instance(rsa_entity)
            rsa_id = rsa_entity.id
        vdf_entity = VDFConverter.to_entity(solved, rsa_id)
        save_instance(vdf_entity)
        return vdf_entity.id

    @staticmethod
    def save_created(created: List[Tuple[object, RSA, SolvedVDF]]) -> List[str]:
        """Store the (instance, trapdoor, solution) tuples returned by VDFFactory."""
        return [DatabaseService.save_solved(solved, rsa) for _, rsa, solved in created]
