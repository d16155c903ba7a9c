"""
Configuration module for subview.

Uses pydantic-settings for environment variable loading.
"""

from subview.config.settings import Settings, get_settings, reset_settings

__all__ = ["Settings", "get_settings", "reset_settings"]
