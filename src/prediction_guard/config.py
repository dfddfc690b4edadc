"""Client configuration using Pydantic settings."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from prediction_guard.errors import ConfigurationError


class Settings(BaseSettings):
    """Prediction Guard connection settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Prediction Guard API
    api_key: str = Field(
        ..., alias="PREDICTIONGUARD_API_KEY",
        description="API key sent with every request in the x-api-key header.",
    )
    url: str = Field(
        ..., alias="PREDICTIONGUARD_URL",
        description="Base URL of the Prediction Guard API (e.g. https://api.predictionguard.com).",
    )

    # Transport timeouts
    connect_timeout: float = Field(
        30.0, alias="PREDICTIONGUARD_CONNECT_TIMEOUT",
        description="Seconds allowed to establish a connection.",
    )
    read_timeout: float = Field(
        30.0, alias="PREDICTIONGUARD_READ_TIMEOUT",
        description="Seconds allowed between two reads of the response body.",
    )
    request_timeout: float = Field(
        45.0, alias="PREDICTIONGUARD_REQUEST_TIMEOUT",
        description="Overall ceiling in seconds for a non-streaming call. Streams are not bounded by it.",
    )

    # Logging
    log_level: str = Field(
        "INFO", alias="LOG_LEVEL",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, or CRITICAL.",
    )
    log_file: str = Field(
        "", alias="LOG_FILE",
        description="Path to log file for file-based logging with rotation. Empty = console only.",
    )
    log_file_max_bytes: int = Field(
        10_485_760, alias="LOG_FILE_MAX_BYTES",
        description="Max size in bytes per log file before rotation. Default: 10 MB.",
    )
    log_file_backup_count: int = Field(
        5, alias="LOG_FILE_BACKUP_COUNT",
        description="Number of rotated backup log files to keep.",
    )

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def load_settings(**overrides) -> Settings:
    """Load settings from the environment (and .env), applying explicit overrides.

    Raises:
        ConfigurationError: if the API key or URL is missing or invalid.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"invalid Prediction Guard configuration: {', '.join(missing)}"
        ) from e
