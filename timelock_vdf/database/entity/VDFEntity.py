import uuid
from typing import Optional

from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from ..mixins.saveable import Saveable
from ..database import get_orm_base

# Define the Base class for ORM models
Base = get_orm_base()


class VDFEntity(Base, Saveable):
    """Database entity for storing solved VDF instances."""

    __tablename__ = "vdf_instances"

    id = Column(
        String, primary_key=True, default=lambda: str(uuid.uuid4())
    )  # Unique generated string ID
    x = Column(String, nullable=False)  # Store hex string of challenge x
    t = Column(String, nullable=False)  # Store base 10 string of delay t
    N = Column(String, nullable=False)  # Store hex string of modulus N
    y = Column(String, nullable=False)  # Store hex string of output y
    pi = Column(String, nullable=False)  # Store hex string of proof pi
    rsa_id = Column(
        String, ForeignKey("rsa_keys.id"), nullable=True, unique=True
    )  # One-to-one reference to the trapdoor, empty for instances solved without it
    rsa = relationship(
        "RSAEntity", back_populates="vdf"
    )  # One-to-one relationship to RSA entity

    def __repr__(self):
        return f"<VDF(id={self.id}, x={self.x}, t={self.t}, N={self.N})>"

    def __init__(
        self, x_hex: str, t: str, N_hex: str, y_hex: str, pi_hex: str, rsa_id: Optional[str] = None
    ):
        """Initialize a VDF entity.

        Args:
            x_hex (str): Hex string of challenge x
            t (str): Base 10 string of delay t
            N_hex (str): Hex string of modulus N
            y_hex (str): Hex string of output y
            pi_hex (str): Hex string of proof pi
            rsa_id (str): ID of the associated RSA entity, if any
        """
        self.id = str(uuid.uuid4())
        self.x = x_hex
        self.t = t
        self.N = N_hex
        self.y = y_hex
        self.pi = pi_hex
        self.rsa_id = rsa_id
