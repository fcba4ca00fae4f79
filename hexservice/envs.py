"""Service configuration read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv


class ConfigError(Exception):
    """Raised when the environment does not hold a usable configuration."""


@dataclass(frozen=True)
class EnvConfig:
    """Settings the service needs to start."""

    port: int
    service_name: str
    project_id: str
    mongo_uri: str
    mongo_db: str

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EnvConfig:
        """Build the configuration from a mapping of environment variables."""
        environ = os.environ if environ is None else environ
        raw_port = environ.get("PORT", "8080")
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigError(f"PORT must be a number, got {raw_port!r}") from None
        if not 0 <= port <= 65535:
            raise ConfigError(f"PORT must be between 0 and 65535, got {port}")

        def required(name: str) -> str:
            if name not in environ:
                raise ConfigError(f"{name} is required")
            return environ[name]

        return cls(
            port=port,
            project_id=required("PROJECT_ID"),
            service_name=required("SERVICE_NAME"),
            mongo_uri=required("MONGO_URL"),
            mongo_db=required("MONGO_DB"),
        )


@lru_cache(maxsize=None)
def get() -> EnvConfig:
    """Return the process-wide configuration, loading a .env file once."""
    load_dotenv(find_dotenv(usecwd=True))
    return EnvConfig.from_env(os.environ)