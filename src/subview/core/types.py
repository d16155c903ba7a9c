"""
Enumerations shared across the view core.

- Verbosity: tri-state flag governing staleness diagnostics
- ConstructionErrorKind: closed set of reasons a view cannot be built
"""

from __future__ import annotations

import enum as _enum


class Verbosity(_enum.Enum):
    """
    Tri-state verbosity flag.

    UNSET defers to the next level of lookup (specialization → process-wide).
    An UNSET process-wide flag means diagnostics are disabled.
    """

    UNSET = "unset"
    """No explicit setting; defer to the fallback."""

    ENABLED = "enabled"
    """Always emit staleness diagnostics."""

    DISABLED = "disabled"
    """Never emit staleness diagnostics."""

    @classmethod
    def from_flag(cls, value: Verbosity | bool | None) -> Verbosity:
        """
        Coerce a flag-like value into a Verbosity.

        None maps to UNSET, True to ENABLED, False to DISABLED.
        Verbosity members are returned unchanged.

        Raises:
            TypeError: If value is none of the accepted forms.
        """
        if isinstance(value, Verbosity):
            return value
        if value is None:
            return cls.UNSET
        if isinstance(value, bool):
            return cls.ENABLED if value else cls.DISABLED
        raise TypeError(
            f"verbosity must be a Verbosity, bool or None, not {type(value).__name__}"
        )

    @property
    def is_set(self) -> bool:
        """Whether this flag decides on its own (not UNSET)."""
        return self is not Verbosity.UNSET


class ConstructionErrorKind(_enum.Enum):
    """Why a source/bounds pair was refused at construction."""

    NO_EXTRACTION_CAPABILITY = "no_extraction_capability"
    """The source cannot be subscripted at all."""

    WRONG_ARITY = "wrong_arity"
    """The source is subscriptable but refuses a [start:stop] range."""

    INVALID_BOUNDS_TYPE = "invalid_bounds_type"
    """The source refuses the given (offset, length) values."""

    WRONG_SOURCE_TYPE = "wrong_source_type"
    """The specialization's projection does not accept this source."""

    @property
    def template(self) -> str:
        """Fixed message template for this kind."""
        return _TEMPLATES[self]


_TEMPLATES: dict[ConstructionErrorKind, str] = {
    ConstructionErrorKind.NO_EXTRACTION_CAPABILITY: "source does not support subscription",
    ConstructionErrorKind.WRONG_ARITY: "source does not accept a [start:stop] range",
    ConstructionErrorKind.INVALID_BOUNDS_TYPE: "wrong type for (offset, length)=({offset!r}, {length!r})",
    ConstructionErrorKind.WRONG_SOURCE_TYPE: "wrong source type {source_type} for {specialization}",
}
