"""Logging setup shared by the command line entry points."""

import logging

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure the root logger from LOG_LEVEL (stderr only, stdout carries results)."""
    level_name = EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper()
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
