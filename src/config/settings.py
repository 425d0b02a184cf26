"""CastMedia Configuration Settings."""

from __future__ import annotations

import os
from enum import StrEnum
from functools import cached_property, lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from src.exceptions import LogDirectoryError
from src.utils.logging import _get_logger

__all__ = [
    "BaseStrEnum",
    "CastMediaConfig",
    "LogLevel",
    "StreamTypeCase",
    "get_config",
]

_log = _get_logger(__name__)


def find_yaml_config_file() -> Path:
    """Find the YAML configuration file in the data path.

    Returns:
        Path: The path to an existing YAML configuration file or the default location.
    """
    data_path = Path(os.getenv("CM_DATA_PATH", "./data")).resolve()

    for ext in ("yaml", "yml"):
        yaml_file = data_path / f"config.{ext}"
        if yaml_file.exists():
            _log.debug(f"Using YAML config file: {yaml_file}")
            return yaml_file
    return data_path / "config.yaml"


class BaseStrEnum(StrEnum):
    """Base class for string enumerations looked up case-insensitively."""

    @classmethod
    def _missing_(cls, value: object) -> BaseStrEnum | None:
        """Handle case-insensitive lookup for enum values.

        Args:
            value: The value to look up in the enumeration

        Returns:
            BaseStrEnum | None: The matching enum member if found, None otherwise
        """
        if not isinstance(value, str):
            return None
        folded = value.casefold()
        for member in cls:
            if member.value.casefold() == folded:
                return member
        return None

    def __repr__(self) -> str:
        """Return the string value of the enum member."""
        return self.value

    def __str__(self) -> str:
        """Return the string representation of the enum member."""
        return repr(self)


class LogLevel(BaseStrEnum):
    """Enumeration of available logging levels.

    Note: SUCCESS is a custom level used by this application.
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class StreamTypeCase(BaseStrEnum):
    """Letter case used for `streamType` tokens in outbound payloads.

    Receivers disagree on the case of stream type tokens: some expect
    `BUFFERED`, others `buffered`.
    """

    UPPER = "upper"
    LOWER = "lower"

    def apply(self, token: str) -> str:
        """Return the token in this letter case."""
        return token.upper() if self is StreamTypeCase.UPPER else token.lower()


class CastMediaConfig(BaseSettings):
    """Application configuration for CastMedia.

    Configuration is sourced from a YAML file in the data path, optionally
    combined with parameters passed directly to the model.
    """

    log_level: LogLevel = Field(
        default=LogLevel.INFO, description="Logging level for the application"
    )
    log_dir: Path | None = Field(
        default=None,
        description="Directory for rotating log files; console only when unset",
    )
    stream_type_case: StreamTypeCase = Field(
        default=StreamTypeCase.UPPER,
        description="Letter case of streamType tokens in outbound payloads",
    )

    @cached_property
    def data_path(self) -> Path:
        """Get the data path for CastMedia.

        Returns:
            Path: The data path resolved from the environment or default location.
        """
        return Path(os.getenv("CM_DATA_PATH", "./data")).resolve()

    @model_validator(mode="after")
    def validate_log_dir(self) -> CastMediaConfig:
        """Resolve a relative log directory against the data path.

        Raises:
            LogDirectoryError: If the log directory exists but is not a directory.
        """
        if self.log_dir is None:
            return self

        if not self.log_dir.is_absolute():
            self.log_dir = self.data_path / self.log_dir

        if self.log_dir.exists() and not self.log_dir.is_dir():
            raise LogDirectoryError(
                f"log_dir must be a directory, got file: {self.log_dir}"
            )
        return self

    def __str__(self) -> str:
        """Creates a human-readable representation of the configuration."""
        return (
            f"CastMedia Config: LOG_LEVEL: {self.log_level}, "
            f"LOG_DIR: {self.log_dir}, STREAM_TYPE_CASE: {self.stream_type_case}"
        )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of configuration sources."""
        return (
            init_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=find_yaml_config_file()),
        )

    model_config = SettingsConfigDict(extra="ignore")


@lru_cache(maxsize=1)
def get_config() -> CastMediaConfig:
    """Get the singleton instance of CastMediaConfig.

    Returns:
        CastMediaConfig: The singleton configuration instance.
    """
    return CastMediaConfig()
