"""Central environment-driven settings for the facade process.

Loaded once at startup. Values come from environment variables or a `.env`
file (see `.env.example`).
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Stripe test-mode key used only when no key is configured.
DEFAULT_STRIPE_SECRET_KEY = (
    "sk_test_51RTPNgFawibChNbgnxmPjWiWOZJXvNDlG0LtWoGQbHsRwK8LHGL4A6O3AJ8NfkCqr06qiD2bjTEbFXxbVVGewwS1005HwHJ4RS"
)


class CommonSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "stripe-facade"
    log_level: str = "INFO"
    stripe_secret_key: str = Field(
        default=DEFAULT_STRIPE_SECRET_KEY,
        validation_alias=AliasChoices("stripe.secret.key", "stripe_secret_key"),
    )
    stripe_api_version: str | None = None
    api_prefix: str = "/api/stripe"
    cors_allow_origins: list[str] = ["*"]
    tracing_enabled: bool = True
    otel_exporter_otlp_endpoint: str = "http://otel-collector:4318/v1/traces"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = CommonSettings()
