"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with SUBVIEW_ prefix
3. .env file named by SUBVIEW_ENV_FILE (if present)

Example:
  SUBVIEW_VERBOSE=true          # emit staleness warnings unless a class opts out
  SUBVIEW_PREVIEW_LENGTH=120    # longer slice previews in warnings
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import subview.constants as constants


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only an explicit SUBVIEW_ENV_FILE is honored; a library must not pick
    up whatever .env happens to sit in the caller's working directory.
    """
    if env_file := _os.environ.get(f"{constants.ENV_PREFIX}ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    subview configuration settings.

    All settings can be overridden via environment variables with the
    SUBVIEW_ prefix.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    verbose: bool | None = _pydantic.Field(
        default=None,
        description="Process-wide staleness verbosity; None leaves it unset (off).",
    )

    preview_length: int = _pydantic.Field(
        default=constants.DEFAULT_PREVIEW_LENGTH,
        ge=8,
        description="Maximum characters of slice preview in staleness warnings.",
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the process-wide settings.

    Lazily created from the environment on first use.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None
