"""
Settings manager for gpg-keytag.

Resolves settings with priority:
1. CLI arguments (highest priority)
2. Environment variables (GPG_KEYTAG_*)
3. Constants (default values)

The codec itself takes no configuration; these settings only shape the CLI
(log verbosity, trailing-data policy).

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import logging
import os
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import DEFAULT_LOG_LEVEL, DEFAULT_STRICT, ENV_PREFIX
from .exceptions import SettingsError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def normalize_log_level(value: str) -> str:
    """Return the upper-case level name, or raise ValueError."""
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}, got: {value}")
    return level


class KeytagSettings(BaseModel):
    """Validated gpg-keytag settings."""

    model_config = {"extra": "forbid"}  # Reject unknown fields

    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL, description="Logging level for CLI output"
    )
    strict: bool = Field(
        default=DEFAULT_STRICT,
        description="Reject key files with bytes after the top-level tree",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        return normalize_log_level(v)


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {value!r}")


class SettingsManager:
    """
    Settings resolver with priority: CLI > ENV > Constants.

    Each instance reads the environment mapping it is given once, at
    construction.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """
        Initialize settings manager.

        Args:
            environ: Environment mapping to read (defaults to os.environ)
        """
        self._environ = os.environ if environ is None else environ
        self._env_overrides: Dict[str, Any] = {}
        self._cli_overrides: Dict[str, Any] = {}
        self._load_from_env()

    def _load_from_env(self) -> None:
        """Load settings from environment variables."""
        env_mappings: Dict[str, tuple[str, Callable[[str], Any]]] = {
            "log_level": (f"{ENV_PREFIX}LOG_LEVEL", normalize_log_level),
            "strict": (f"{ENV_PREFIX}STRICT", _parse_bool),
        }

        for setting_name, (env_var, converter) in env_mappings.items():
            env_value = self._environ.get(env_var)
            if env_value is None:
                continue
            try:
                value = converter(env_value)
            except ValueError as e:
                logger.warning(f"Failed to parse {env_var}={env_value}: {e}")
                continue
            self._env_overrides[setting_name] = value
            logger.debug(f"Loaded {setting_name} from environment: {value}")

    def set_cli_overrides(self, overrides: Dict[str, Any]) -> None:
        """
        Set CLI argument overrides (highest priority).

        None values mean "not given on the command line" and are skipped.
        """
        self._cli_overrides.update({k: v for k, v in overrides.items() if v is not None})
        logger.debug(f"CLI overrides set: {list(self._cli_overrides.keys())}")

    def resolve(self) -> KeytagSettings:
        """
        Build validated settings from all sources.

        Raises:
            SettingsError: If a CLI override is invalid
        """
        values: Dict[str, Any] = {}
        values.update(self._env_overrides)
        values.update(self._cli_overrides)
        try:
            return KeytagSettings(**values)
        except ValidationError as e:
            first = e.errors()[0]
            field = str(first["loc"][0]) if first.get("loc") else None
            raise SettingsError(f"Invalid settings: {first['msg']}", field=field) from e
