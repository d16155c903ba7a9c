"""
Shared pytest fixtures for subview tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import typing as _typing
import unittest.mock as _mock

import pytest as _pytest

import subview.config as config
import subview.core.verbosity as verbosity
import tests.sources as sources

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "SUBVIEW_VERBOSE",
    "SUBVIEW_PREVIEW_LENGTH",
    "SUBVIEW_ENV_FILE",
]


@_pytest.fixture(autouse=True)
def reset_process_state() -> _typing.Iterator[None]:
    """
    Isolate every test from process-wide settings and verbosity flags.

    Both are cached lazily, so a test that sets SubList verbosity or
    SUBVIEW_PREVIEW_LENGTH must not leak into the next test.
    """
    with _mock.patch.dict(_os.environ, clean_env_dict(), clear=True):
        config.reset_settings()
        verbosity.reset_default_registry()
        yield
    config.reset_settings()
    verbosity.reset_default_registry()


def clean_env_dict() -> dict[str, str]:
    """Return environment dict with subview keys removed."""
    return {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}


@_pytest.fixture
def numbers() -> list[int]:
    """The canonical five-element source used across view tests."""
    return [2, 4, 6, 8, 10]


@_pytest.fixture
def verbose() -> None:
    """Enable staleness diagnostics process-wide."""
    verbosity.get_default_registry().set_default(True)


@_pytest.fixture
def counter() -> sources.Counter:
    """A Counter source starting at 1."""
    return sources.Counter(1)
