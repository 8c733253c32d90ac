"""
Configuration for fpbook.

Settings are read from the environment (optionally seeded from a ``.env``
file), validated with pydantic and exposed through a module-level ``settings``
instance. The library itself is pure; configuration only affects logging,
the default random seed and how much of a long structure ``repr`` shows.
"""

import logging
import os
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fpbook.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "FPBOOK_"

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_bool_env(key: str, default: bool = False) -> bool:
    """Parse boolean environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def parse_env_var(key: str, default: str | None = None) -> str | None:
    """Parse environment variable with optional default."""
    return os.environ.get(key, default)


class Settings(BaseModel):
    """Validated library settings."""

    model_config = ConfigDict(frozen=True)

    log_level: LogLevelName = Field(
        default="WARNING",
        description="Level applied to the fpbook logger by setup_logging",
    )
    log_to_console: bool = Field(
        default=False,
        description="Attach a console handler in setup_logging",
    )
    rng_seed: int = Field(
        default=42,
        description="Seed used by default_rng()",
    )
    repr_limit: int = Field(
        default=20,
        ge=1,
        le=10_000,
        description="Maximum number of elements shown by List/Stream repr",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> dict[str, Any]:
        """Collect raw setting values from environment variables."""
        raw: dict[str, Any] = {}
        for name in ("log_level", "rng_seed", "repr_limit"):
            value = parse_env_var(f"{prefix}{name.upper()}")
            if value is not None:
                raw[name] = value
        if f"{prefix}LOG_TO_CONSOLE" in os.environ:
            raw["log_to_console"] = parse_bool_env(f"{prefix}LOG_TO_CONSOLE")
        return raw


def create_settings(
    env_file: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Create a settings instance from ``.env``, the environment and overrides."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    values = Settings.from_env()
    values.update(overrides or {})

    try:
        created = Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid fpbook settings: {e.error_count()} error(s)",
            context={
                "fields": ", ".join(
                    ".".join(str(part) for part in err["loc"]) for err in e.errors()
                )
            },
        ) from e

    logger.debug("Loaded settings: %s", created.model_dump())
    return created


settings = create_settings()


def get_settings() -> Settings:
    """Return the active settings."""
    return settings


def set_settings(new_settings: Settings) -> Settings:
    """Replace the active settings and return the previous ones."""
    global settings
    previous = settings
    settings = new_settings
    return previous
