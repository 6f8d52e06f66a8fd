import uuid
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from ..mixins.saveable import Saveable
from ..database import get_orm_base

# Define the Base class for ORM models
Base = get_orm_base()


class RSAEntity(Base, Saveable):
    """Database entity for storing the RSA trapdoor of a VDF instance."""

    __tablename__ = "rsa_keys"

    id = Column(String, primary_key=True)  # Unique generated string ID
    p = Column(String, nullable=False)  # Store hex string of prime p
    q = Column(String, nullable=False)  # Store hex string of prime q
    N = Column(String, nullable=False)  # Store hex string of modulus N
    phi = Column(String, nullable=False)  # Store hex string of Euler's totient
    vdf = relationship(
        "VDFEntity", back_populates="rsa", uselist=False
    )  # One-to-one back reference to the VDF instance

    def __repr__(self):
        return f"<RSA(id={self.id}, N={self.N})>"

    def __init__(self, p_hex: str, q_hex: str, N_hex: str, phi_hex: str):
        """Initialize an RSA entity.

        Args:
            p_hex (str): Hex string of prime p
            q_hex (str): Hex string of prime q
            N_hex (str): Hex string of modulus N
            phi_hex (str): Hex string of Euler's totient
        """
        self.id = str(uuid.uuid4())  # Generate ID on creation
        self.p = p_hex
        self.q = q_hex
        self.N = N_hex
        self.phi = phi_hex
