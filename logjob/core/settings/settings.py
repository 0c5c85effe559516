from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_JOB_DELAY_MS = 3000

_LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


class AppSettings(BaseSettings):
    PRODUCTION: bool = False

    LOG_CONFIG_OVERRIDE: Path | None = None
    """ path to custom logging configuration file"""

    LOG_LEVEL: str = "info"
    """ corresponds to standard Python Log levels """

    # ===============================================
    # Log Job Config

    LOG_JOB_DELAY_MS: int = DEFAULT_LOG_JOB_DELAY_MS
    """Milliseconds between the end of one log job run and the start of the next"""

    # ===============================================
    # Testing Config

    TESTING: bool = False

    model_config = SettingsConfigDict(arbitrary_types_allowed=True, extra="allow")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.lower() not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {v!r}")

        return v.lower()

    @field_validator("LOG_JOB_DELAY_MS")
    @classmethod
    def validate_delay(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"LOG_JOB_DELAY_MS must be positive, got {v}")

        return v


def app_settings_constructor(
    production: bool,
    env_file: Path,
    env_encoding="utf-8",
) -> AppSettings:
    """
    app_settings_constructor is a factory function that returns an AppSettings object.
    AppSettings should not be instantiated directly, but rather
    through this factory function
    """

    return AppSettings(
        _env_file=env_file,  # type: ignore
        _env_file_encoding=env_encoding,  # type: ignore
        **{"PRODUCTION": production},
    )
