"""Environment-driven configuration for the VDF engine."""

import logging
import os
from enum import Enum
from typing import Any, cast

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class EnvVarType(Enum):
    """Types of environment variables."""
    INT = "int"
    STRING = "str"


class EnvironmentVariables(Enum):
    """
    Known environment variables.

    Each enum value is a tuple of (env_var_name, default_value, type).
    """
    VDF_BIT_SIZE = ("VDF_BIT_SIZE", 2048, EnvVarType.INT)
    PRIME_TEST_ROUNDS = ("PRIME_TEST_ROUNDS", 25, EnvVarType.INT)
    HASH_PRIME_ROUNDS = ("HASH_PRIME_ROUNDS", 2, EnvVarType.INT)
    SQUARING_MEMORY = ("SQUARING_MEMORY", 10_000_000, EnvVarType.INT)
    PARALLELISM_DIVISOR = ("PARALLELISM_DIVISOR", 2, EnvVarType.INT)
    DATABASE_URL = ("DATABASE_URL", "sqlite:///timelock_vdf.db", EnvVarType.STRING)
    LOG_LEVEL = ("LOG_LEVEL", "INFO", EnvVarType.STRING)

    def __init__(self, env_name: str, default_value: Any, var_type: EnvVarType):
        self.env_name = env_name
        self.default_value = default_value
        self.var_type = var_type


class EnvironmentManager:
    """Static utility class for environment variable lookup."""

    @staticmethod
    def get_value(env_var: EnvironmentVariables, override_default: Any = None) -> Any:
        """
        Get a value from an environment variable with type conversion.

        Values are read on every call; nothing is cached, so a component picks
        up its configuration when it is constructed.

        Args:
            env_var: The environment variable to retrieve
            override_default: Optional value to override the default defined in the enum

        Returns:
            The value of the environment variable or the default with appropriate type
        """
        default = override_default if override_default is not None else env_var.default_value

        value = os.environ.get(env_var.env_name)
        if value is None:
            return default

        if env_var.var_type == EnvVarType.INT:
            try:
                return int(value.replace("_", ""))
            except ValueError:
                logger.warning(
                    "Ignoring non-integer %s=%r, using %r", env_var.env_name, value, default
                )
                return default
        else:
            return value

    @staticmethod
    def get_int(env_var: EnvironmentVariables, default=None) -> int:
        return cast(int, EnvironmentManager.get_value(env_var, default))

    @staticmethod
    def get_string(env_var: EnvironmentVariables, default=None) -> str:
        return cast(str, EnvironmentManager.get_value(env_var, default))
