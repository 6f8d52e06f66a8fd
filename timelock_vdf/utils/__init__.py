"""Utility modules for the VDF engine."""

from .SystemSpecs import SystemSpecs
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .LoggingConfig import configure_logging

__all__ = ["SystemSpecs", "EnvironmentManager", "EnvironmentVariables", "configure_logging"]
