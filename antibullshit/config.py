"""
Anti-Bullshit Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

FRAMEWORK_NAMES = ("empirical", "responsible", "harmonic", "pluralistic")
FALLBACK_FRAMEWORK = "pluralistic"


def resolve_default_framework(value: str | None) -> str:
    """Return value if it names a known framework, else the pluralistic fallback."""
    if value in FRAMEWORK_NAMES:
        return value
    return FALLBACK_FRAMEWORK


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Server identity ---
    SERVER_NAME: str = "anti-bullshit-mcp-server"
    SERVER_VERSION: str = "0.1.0"

    # --- Validation ---
    VALIDATION_FRAMEWORK: str = resolve_default_framework(
        os.getenv("VALIDATION_FRAMEWORK")
    )

    # --- HTTP server ---
    HOST: str = os.getenv("ANTIBULLSHIT_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("ANTIBULLSHIT_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("ANTIBULLSHIT_CORS_ORIGINS", "*")


settings = Settings()
