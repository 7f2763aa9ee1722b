"""Startup-time summary of the effective configuration.

Reads the loaded settings rather than raw environment variables, so values
coming from `.env` or the dotted `stripe.secret.key` name are reported too.
Secrets are never logged; only whether the built-in fallback is in use.
"""

from driverpay.common.config import DEFAULT_STRIPE_SECRET_KEY, CommonSettings
from driverpay.common.logging import logger


def stripe_key_source(config: CommonSettings) -> str:
    """`default` when the built-in test key is active, `configured` otherwise."""

    if config.stripe_secret_key == DEFAULT_STRIPE_SECRET_KEY:
        return "default"
    return "configured"


def startup_summary(config: CommonSettings) -> dict[str, object]:
    return {
        "service": config.service_name,
        "log_level": config.log_level,
        "api_prefix": config.api_prefix,
        "cors_allow_origins": config.cors_allow_origins,
        "stripe_key_source": stripe_key_source(config),
        "stripe_key_mode": "live" if config.stripe_secret_key.startswith(("sk_live_", "rk_live_")) else "test",
        "stripe_api_version": config.stripe_api_version or "<sdk default>",
        "tracing_enabled": config.tracing_enabled,
    }


def log_startup_config(config: CommonSettings) -> None:
    """Log the effective config for quick troubleshooting."""

    summary = startup_summary(config)
    if summary["stripe_key_source"] == "default":
        logger.warning("stripe.secret.key is unset; using the built-in test key")
    logger.info("startup_config=%s", summary)
