"""Configuration settings for the OpenF1 client."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client-wide settings.

    Values are read from the environment (``OPENF1_`` prefix) and ``.env``.
    Instances are immutable; build a new one to change configuration.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENF1_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # API
    base_url: str = "https://api.openf1.org/v1"
    timeout: float = 15.0  # Seconds, applies to connect and read
    user_agent: str = "openf1-telemetry-client/0.1"

    # Non-2xx bodies are handed to the decoder unless this is set
    raise_for_status: bool = False

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = False
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logs_path: str = "logs"


# Global settings instance
settings = Settings()
