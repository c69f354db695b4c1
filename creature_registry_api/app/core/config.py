"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with a local SQLite file and console logging.  Tests and
embedding applications may construct their own ``Settings`` instance
and pass it to ``create_app`` instead of relying on the module-level
``settings`` object.
"""

import os
from dataclasses import dataclass
from typing import Optional


STORAGE_BACKENDS = {"sqlite", "memory"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Creature Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``core.db``; the special value
    # ``:memory:`` keeps everything in a private in-process database.
    database_url: str = os.getenv("DATABASE_URL", "creatures.db")

    # Which repository implementation backs the service: ``sqlite`` for
    # the durable store, ``memory`` for a throwaway dict-backed store.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "sqlite").lower()

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))

    def __post_init__(self) -> None:
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unsupported STORAGE_BACKEND {self.storage_backend!r}; "
                f"expected one of {sorted(STORAGE_BACKENDS)}"
            )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
