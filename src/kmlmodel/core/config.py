"""
Configuration settings for kmlmodel.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from kmlmodel.core.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Package settings with environment variable support.

    Attributes:
        environment: Deployment environment, drives the default log level
        log_level: Explicit log level name (DEBUG, INFO, ...)
        json_logs: Whether file logs are written as JSON
        omit_missing_altitude: Write coordinates without altitude as lon,lat
            instead of lon,lat,NaN
        strict_coordinate_count: Reject coordinate tuples with more than
            three fields instead of ignoring the extra fields
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="KMLMODEL_",
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    # Logging
    log_level: Optional[str] = None
    json_logs: bool = False

    # Coordinate text
    omit_missing_altitude: bool = False
    strict_coordinate_count: bool = True

    @property
    def effective_log_level(self) -> str:
        """Get the log level, falling back on the environment default."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.environment == "development" else "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings once per process.

    Returns:
        Cached Settings instance

    Raises:
        ConfigurationError: If an environment variable holds an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid kmlmodel setting: {first.get('msg')}",
            config_key=key or None,
            details={"errors": e.errors(include_url=False)},
        ) from e
