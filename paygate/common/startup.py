"""Startup-time helpers for safe config logging."""

from typing import Any

from paygate.common.config import GatewaySettings
from paygate.common.logging import logger

SECRET_MARKERS = ("key", "secret", "password", "token")


def redacted_settings(settings: GatewaySettings) -> dict[str, Any]:
    """Effective settings with secret-like fields masked.

    Values come from the loaded settings object, so keys read from `.env`
    show up the same as ones read from the process environment.
    """

    view: dict[str, Any] = {}
    for name, value in settings.model_dump().items():
        if value is None:
            view[name] = "<unset>"
        elif any(marker in name for marker in SECRET_MARKERS):
            view[name] = "<redacted>"
        else:
            view[name] = value
    return view


def log_startup_config(settings: GatewaySettings) -> None:
    """Log the effective gateway config for quick troubleshooting."""

    logger.info("startup_config=%s", redacted_settings(settings))


def warn_missing_credentials(settings: GatewaySettings) -> bool:
    """Warn (never fail) when the provider credential is absent.

    Returns True when a warning was emitted.
    """

    if settings.stripe_secret_key:
        return False
    logger.warning("STRIPE_SECRET_KEY is not set; payment intent creation will fail")
    return True
