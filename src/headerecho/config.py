"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=3000, log_level="info")

    Only ``log_level`` is read from the environment (see ``from_env``).
    """

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Logging
    log_level: str = "trace"
    logger_name: str = "headerecho"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> "AppConfig":
        """Build a config from ``LOG_LEVEL``, falling back to the defaults.

        An empty or unset ``LOG_LEVEL`` keeps the default level.
        """
        env = os.environ if environ is None else environ
        level = env.get(LOG_LEVEL_ENV, "").strip()
        if level:
            overrides.setdefault("log_level", level)
        return cls(**overrides)  # type: ignore[arg-type]
