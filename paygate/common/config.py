"""Environment-driven settings for the payment intent gateway.

Loaded once at process start and handed to the app factory (see
`.env.example`). Nothing here is read lazily from the environment afterwards.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewaySettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "payment-intent-gateway"
    log_level: str = "INFO"
    stripe_secret_key: str | None = None
    stripe_api_version: str = "2024-06-20"
    default_currency: str = "usd"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_allow_origins: list[str] = ["*"]
    tracing_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://otel-collector:4318/v1/traces"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
