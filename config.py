"""Configuration management with environment variable support."""

import os
import secrets
import sys
from dataclasses import dataclass, field

from loguru import logger

from blackjack.rules import TableRules


def _parse_cors_origins() -> list[str]:
    """Parse CORS_ORIGINS environment variable."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:8000")
    return [o.strip() for o in origins.split(",") if o.strip()]


@dataclass(frozen=True)
class CORSConfig:
    """CORS configuration."""

    allowed_origins: list[str] = field(default_factory=_parse_cors_origins)
    allow_credentials: bool = True
    allow_methods: list[str] = field(default_factory=lambda: ["*"])
    allow_headers: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class RateLimitConfig:
    """Rate limiting configuration."""

    enabled: bool = field(
        default_factory=lambda: os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    )
    requests_per_minute: int = field(
        default_factory=lambda: int(os.getenv("RATE_LIMIT_RPM", "60"))
    )


@dataclass(frozen=True)
class SecurityConfig:
    """Security configuration."""

    secret_key: str = field(
        default_factory=lambda: os.getenv("SECRET_KEY", secrets.token_urlsafe(32))
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Log output configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())


@dataclass(frozen=True)
class TableConfig:
    """Default table configuration."""

    min_players: int = 1
    max_players: int = 7
    min_name_length: int = 2
    max_name_length: int = 10
    dealer_name: str = field(default_factory=lambda: os.getenv("DEALER_NAME", "딜러"))
    hit_token: str = field(default_factory=lambda: os.getenv("HIT_TOKEN", "y"))
    stand_token: str = field(default_factory=lambda: os.getenv("STAND_TOKEN", "n"))

    def to_rules(self) -> TableRules:
        """Build the engine's rule set from this configuration."""
        return TableRules(
            min_players=self.min_players,
            max_players=self.max_players,
            min_name_length=self.min_name_length,
            max_name_length=self.max_name_length,
            dealer_name=self.dealer_name,
            hit_token=self.hit_token,
            stand_token=self.stand_token,
        )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    session_ttl: int = 3600  # Session timeout in seconds

    table: TableConfig = field(default_factory=TableConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    cors: CORSConfig = field(default_factory=CORSConfig)
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with a stderr sink at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=(level or config.logging.level).upper())


# Global configuration instance
config = AppConfig()
