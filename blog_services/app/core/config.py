"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so both
services start with no configuration at all: posts on port 4000 and
comments on port 4001.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Blog Services"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    posts_host: str = field(default_factory=lambda: os.getenv("POSTS_HOST", "0.0.0.0"))
    posts_port: int = field(default_factory=lambda: int(os.getenv("POSTS_PORT", "4000")))
    comments_host: str = field(default_factory=lambda: os.getenv("COMMENTS_HOST", "0.0.0.0"))
    comments_port: int = field(default_factory=lambda: int(os.getenv("COMMENTS_PORT", "4001")))

    # Number of random bytes behind each generated identifier.  Identifiers
    # are rendered as hex, so the default of 4 bytes gives 8 characters.
    id_bytes: int = field(default_factory=lambda: int(os.getenv("ID_BYTES", "4")))

    # When enabled, creating a post without ``title`` or a comment without
    # ``content`` is rejected with HTTP 400 instead of storing a record with
    # the field missing.
    strict_payloads: bool = field(default_factory=lambda: _env_bool("STRICT_PAYLOADS"))

    def __post_init__(self) -> None:
        if self.id_bytes < 1:
            raise ValueError("ID_BYTES must be a positive integer")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Tests build their own
# ``Settings`` instances and hand them to the app factories.
settings = Settings()
