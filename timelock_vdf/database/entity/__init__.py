"""Database entity models."""

from .VDFEntity import VDFEntity
from .RSAEntity import RSAEntity

__all__ = ["VDFEntity", "RSAEntity"]
