"""
=============================================================================
MIDDLEWARE CONFIGURATION
=============================================================================

Centralized settings for the request-pipeline middleware.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    1. Defaults      MiddlewareConfig()
    2. Code          MiddlewareConfig(max_requests=10, window_duration=1.0)
    3. Environment   MiddlewareConfig.from_env()

    ┌─────────────────────────────────────────────────────────────────┐
    │ HTTPCATALOG_ALLOWED_ORIGINS   "example.com,api.example.com"    │
    │ HTTPCATALOG_MAX_REQUESTS      "100"                            │
    │ HTTPCATALOG_WINDOW_SECONDS    "60"                             │
    │ HTTPCATALOG_CLEANUP_INTERVAL  "60"                             │
    │ HTTPCATALOG_LOG_LEVEL         "INFO"                           │
    └─────────────────────────────────────────────────────────────────┘

Values are validated once, up front, by validate().

=============================================================================
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class MiddlewareConfig:
    """
    Settings shared by the unified (CORS + rate limit) middleware.

    Usage:
        config = MiddlewareConfig(allowed_origins=["example.com"], max_requests=2)
        config.validate()
        middleware = UnifiedMiddleware.from_config(config)
    """

    # ─────────────────────────────────────────────────────────────────────
    # CROSS-ORIGIN POLICY
    # ─────────────────────────────────────────────────────────────────────
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    """
    Origins allowed to call the service. The literal "*" allows any.
    """

    # ─────────────────────────────────────────────────────────────────────
    # RATE LIMITING
    # ─────────────────────────────────────────────────────────────────────
    max_requests: int = 100
    """
    Requests a single client may make per window.
    """

    window_duration: float = 60.0
    """
    Length of a rate-limit window in seconds.
    """

    cleanup_interval: float = 60.0
    """
    Seconds between sweeps that drop expired client windows.
    """

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "MiddlewareConfig":
        """
        Create configuration from HTTPCATALOG_* environment variables.

        Unset variables keep their defaults.
        """
        origins = os.getenv("HTTPCATALOG_ALLOWED_ORIGINS", "*")
        return cls(
            allowed_origins=[o.strip() for o in origins.split(",") if o.strip()],
            max_requests=int(os.getenv("HTTPCATALOG_MAX_REQUESTS", "100")),
            window_duration=float(os.getenv("HTTPCATALOG_WINDOW_SECONDS", "60")),
            cleanup_interval=float(os.getenv("HTTPCATALOG_CLEANUP_INTERVAL", "60")),
            log_level=os.getenv("HTTPCATALOG_LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: On the first invalid setting
        """
        if not self.allowed_origins:
            raise ValueError("allowed_origins must not be empty (use ['*'] to allow any)")

        if self.max_requests < 1:
            raise ValueError(f"max_requests must be >= 1, got {self.max_requests}")

        if self.window_duration <= 0:
            raise ValueError(f"window_duration must be > 0, got {self.window_duration}")

        if self.cleanup_interval <= 0:
            raise ValueError(f"cleanup_interval must be > 0, got {self.cleanup_interval}")

        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. Must be one of {', '.join(LOG_LEVELS)}"
            )


def configure_logging(level: str = "INFO") -> None:
    """
    Attach a basic stderr handler for applications that have none.

    The library itself never configures logging; call this from an entry
    point if you want the access log on the console.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
