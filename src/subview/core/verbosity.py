"""
Verbosity registry for staleness diagnostics.

Each specialization has its own tri-state flag, keyed by specialization
name. Flags are never inherited: setting "SubView" has no effect on
"SubList". An UNSET flag falls back to the process-wide default, and an
UNSET default means diagnostics are off.
"""

from __future__ import annotations

import subview.config as config
import subview.core.types as types


class VerbosityRegistry:
    """
    Per-specialization verbosity flags plus one process-wide fallback.

    Example:
        >>> registry = VerbosityRegistry()
        >>> registry.resolve("SubList")
        False
        >>> registry.set_default(True)
        >>> registry.set("SubList", False)
        >>> registry.resolve("SubList"), registry.resolve("SubView")
        (False, True)
    """

    def __init__(
        self,
        default: types.Verbosity | bool | None = types.Verbosity.UNSET,
    ) -> None:
        self._flags: dict[str, types.Verbosity] = {}
        self._default = types.Verbosity.from_flag(default)

    def get(self, name: str) -> types.Verbosity:
        """Flag of one specialization (UNSET if never set)."""
        return self._flags.get(name, types.Verbosity.UNSET)

    def set(self, name: str, value: types.Verbosity | bool | None) -> None:
        """
        Set the flag of one specialization.

        Args:
            name: Specialization name.
            value: Verbosity member, or True/False/None.
        """
        verbosity = types.Verbosity.from_flag(value)
        if verbosity.is_set:
            self._flags[name] = verbosity
        else:
            self._flags.pop(name, None)

    def get_default(self) -> types.Verbosity:
        """The process-wide fallback flag."""
        return self._default

    def set_default(self, value: types.Verbosity | bool | None) -> None:
        """Set the process-wide fallback flag."""
        self._default = types.Verbosity.from_flag(value)

    def resolve(self, name: str) -> bool:
        """Whether diagnostics are enabled for a specialization."""
        verbosity = self.get(name)
        if not verbosity.is_set:
            verbosity = self._default
        return verbosity is types.Verbosity.ENABLED

    def reset(self) -> None:
        """Clear every per-specialization flag and the fallback."""
        self._flags.clear()
        self._default = types.Verbosity.UNSET

    def __contains__(self, name: str) -> bool:
        return name in self._flags

    def __len__(self) -> int:
        return len(self._flags)


# Global default registry
_default_registry: VerbosityRegistry | None = None


def get_default_registry() -> VerbosityRegistry:
    """
    Get the process-wide verbosity registry.

    Lazily initialized; the fallback flag is seeded from Settings.verbose.
    """
    global _default_registry
    if _default_registry is None:
        _default_registry = VerbosityRegistry(config.get_settings().verbose)
    return _default_registry


def reset_default_registry() -> None:
    """Drop the process-wide registry; the next access rebuilds it from settings."""
    global _default_registry
    _default_registry = None
