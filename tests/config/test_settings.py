"""Tests for configuration settings."""

import os as _os
import pathlib as _pathlib
import unittest.mock as _mock

import pydantic as _pydantic
import pytest as _pytest

import subview.config as config
import subview.config.settings as settings_module
import subview.constants as constants
import tests.conftest as conftest


class TestSettingsDefaults:
    """Test Settings default values when environment is clean."""

    def test_default_verbose_is_unset(self) -> None:
        """verbose is None (unset) by default."""
        with _mock.patch.dict(_os.environ, conftest.clean_env_dict(), clear=True):
            settings = config.Settings.construct_without_dotenv()
            assert settings.verbose is None

    def test_default_preview_length(self) -> None:
        """preview_length defaults to 64."""
        with _mock.patch.dict(_os.environ, conftest.clean_env_dict(), clear=True):
            settings = config.Settings.construct_without_dotenv()
            assert settings.preview_length == constants.DEFAULT_PREVIEW_LENGTH == 64


class TestSettingsEnvironmentOverride:
    """Test that environment variables properly override defaults."""

    @_pytest.mark.parametrize(("raw", "expected"), [("true", True), ("0", False)])
    def test_env_var_overrides_verbose(self, raw: str, expected: bool) -> None:
        """SUBVIEW_VERBOSE sets verbose."""
        with _mock.patch.dict(_os.environ, {"SUBVIEW_VERBOSE": raw}, clear=False):
            settings = config.Settings.construct_without_dotenv()
            assert settings.verbose is expected

    def test_env_var_overrides_preview_length(self) -> None:
        """SUBVIEW_PREVIEW_LENGTH sets preview_length."""
        with _mock.patch.dict(_os.environ, {"SUBVIEW_PREVIEW_LENGTH": "120"}, clear=False):
            settings = config.Settings.construct_without_dotenv()
            assert settings.preview_length == 120

    def test_constructor_beats_environment(self) -> None:
        """Explicit arguments take precedence over the environment."""
        with _mock.patch.dict(_os.environ, {"SUBVIEW_VERBOSE": "true"}, clear=False):
            settings = config.Settings.construct_without_dotenv(verbose=False)
            assert settings.verbose is False

    def test_unrelated_variables_ignored(self) -> None:
        """Unknown SUBVIEW_ variables do not fail validation."""
        with _mock.patch.dict(_os.environ, {"SUBVIEW_UNKNOWN": "x"}, clear=False):
            config.Settings.construct_without_dotenv()


class TestSettingsValidation:
    """Test validation of setting values."""

    def test_preview_length_minimum(self) -> None:
        """preview_length below 8 is refused."""
        with _pytest.raises(_pydantic.ValidationError):
            config.Settings.construct_without_dotenv(preview_length=3)

    def test_invalid_verbose(self) -> None:
        """Non-boolean strings are refused."""
        with _mock.patch.dict(_os.environ, {"SUBVIEW_VERBOSE": "sometimes"}, clear=False):
            with _pytest.raises(_pydantic.ValidationError):
                config.Settings.construct_without_dotenv()


class TestEnvFile:
    """Test loading from the file named by SUBVIEW_ENV_FILE."""

    def test_env_file_loaded(self, tmp_path: _pathlib.Path) -> None:
        """Values in the named file are read."""
        env_file = tmp_path / "subview.env"
        env_file.write_text("SUBVIEW_PREVIEW_LENGTH=32\n")

        settings = config.Settings(_env_file=env_file)  # type: ignore[call-arg]

        assert settings.preview_length == 32

    def test_missing_env_file_ignored(self, tmp_path: _pathlib.Path) -> None:
        """A SUBVIEW_ENV_FILE that does not exist is not used."""
        with _mock.patch.dict(
            _os.environ, {"SUBVIEW_ENV_FILE": str(tmp_path / "absent.env")}, clear=False
        ):
            assert settings_module._get_env_file() is None

    def test_existing_env_file_selected(self, tmp_path: _pathlib.Path) -> None:
        """An existing SUBVIEW_ENV_FILE is selected."""
        env_file = tmp_path / "subview.env"
        env_file.touch()
        with _mock.patch.dict(_os.environ, {"SUBVIEW_ENV_FILE": str(env_file)}, clear=False):
            assert settings_module._get_env_file() == str(env_file)


class TestGetSettings:
    """Test the process-wide settings cache."""

    def test_cached(self) -> None:
        """get_settings() returns the same object until reset."""
        assert config.get_settings() is config.get_settings()

    def test_reset_rereads_environment(self) -> None:
        """reset_settings() picks up environment changes."""
        assert config.get_settings().preview_length == 64

        with _mock.patch.dict(_os.environ, {"SUBVIEW_PREVIEW_LENGTH": "16"}, clear=False):
            config.reset_settings()
            assert config.get_settings().preview_length == 16
