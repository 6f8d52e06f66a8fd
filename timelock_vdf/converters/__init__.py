"""Converters for database entities and exchange records."""

from .vdf_converter import VDFConverter
from .rsa_converter import RSAConverter
from .vdf_record_converter import VDFRecordConverter

__all__ = ["VDFConverter", "RSAConverter", "VDFRecordConverter"]
