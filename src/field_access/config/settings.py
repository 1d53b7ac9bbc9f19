"""
Settings for the field-access engine.

Values are read from the environment (prefix ``FIELD_ACCESS_``) or an
optional ``.env`` file, so services embedding the engine can tune violation
collection and schema strictness without code changes.
"""
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FieldAccessSettings(BaseSettings):
    """Environment-backed settings for field-access."""

    model_config = SettingsConfigDict(
        env_prefix="FIELD_ACCESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Update validation
    collect_all_violations: bool = Field(default=True)
    strict_schema: bool = Field(default=False)

    # Logging Configuration
    log_verbosity: str = Field(default="NORMAL")
    log_format: str = Field(default="simple")


@lru_cache()
def get_settings() -> FieldAccessSettings:
    """Get cached settings instance."""
    return FieldAccessSettings()


class ControllerConfig(BaseModel):
    """Per-controller behaviour switches.

    Attributes:
        collect_all_violations: Accumulate every violating path before
            rejecting an update (True) or reject on the first one (False).
        strict_schema: Reject permission tables that are not isomorphic to
            the data they guard instead of treating gaps as "no permission".
    """

    model_config = {"frozen": True}

    collect_all_violations: bool = True
    strict_schema: bool = False

    @classmethod
    def from_settings(cls, settings: FieldAccessSettings = None) -> "ControllerConfig":
        """Build a config from environment settings."""
        settings = settings or get_settings()
        return cls(
            collect_all_violations=settings.collect_all_violations,
            strict_schema=settings.strict_schema,
        )
