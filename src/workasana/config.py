"""Application settings loaded from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_CORS_ORIGINS = (
    "https://playground-054-frontend.vercel.app",
    "http://localhost:5173",
    "http://localhost:5174",
    "http://localhost:5175",
)


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup and read-only after.

    Attributes:
        access_token_secret: Signing secret for access tokens.
        refresh_token_secret: Signing secret for refresh tokens; must differ
            from the access secret.
        record_store: ``"mongo"`` or ``"memory"``.
        mongodb_uri: MongoDB connection URI.
        mongodb_database: Database name.
        cors_origins: Frontend origins allowed to send credentials.
        host: Interface to bind.
        port: Port to bind.
        log_level: Root log level name.
        log_format: ``"console"`` or ``"json"``.
    """

    access_token_secret: str = "dev-access-secret-change-in-production"
    refresh_token_secret: str = "dev-refresh-secret-change-in-production"
    record_store: str = "mongo"
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "workasana"
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    log_format: str = "console"

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.access_token_secret == self.refresh_token_secret:
            raise ValueError("JWT_SECRET and REFRESH_TOKEN_SECRET must differ")
        if self.record_store not in ("mongo", "memory"):
            raise ValueError(f"Unsupported RECORD_STORE: {self.record_store}")

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        defaults = cls()
        return cls(
            access_token_secret=os.getenv("JWT_SECRET", defaults.access_token_secret),
            refresh_token_secret=os.getenv(
                "REFRESH_TOKEN_SECRET", defaults.refresh_token_secret
            ),
            record_store=os.getenv("RECORD_STORE", defaults.record_store).lower(),
            mongodb_uri=os.getenv("MONGODB_URI", defaults.mongodb_uri),
            mongodb_database=os.getenv("MONGODB_DATABASE", defaults.mongodb_database),
            cors_origins=_env_list("CORS_ORIGINS", defaults.cors_origins),
            host=os.getenv("HOST", defaults.host),
            port=int(os.getenv("PORT", str(defaults.port))),
            log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
            log_format=os.getenv("LOG_FORMAT", defaults.log_format).lower(),
        )
