"""
Shared constants for subview.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

# Staleness diagnostics
DEFAULT_PREVIEW_LENGTH = 64
"""Default maximum length of the slice preview in a staleness warning."""

PREVIEW_ELLIPSIS = "..."
"""Marker appended to a truncated slice preview."""

ENV_PREFIX = "SUBVIEW_"
"""Prefix of environment variables read by Settings."""

# Destructive-operation guard
DEFAULT_DESTRUCTIVE_SUFFIX = "_"
"""Trailing marker for in-place methods (e.g. ``add_`` mutates, ``add`` copies)."""

IN_PLACE_OPERATORS: tuple[tuple[str, str], ...] = (
    ("__iadd__", "+="),
    ("__isub__", "-="),
    ("__imul__", "*="),
    ("__imatmul__", "@="),
    ("__itruediv__", "/="),
    ("__ifloordiv__", "//="),
    ("__imod__", "%="),
    ("__ipow__", "**="),
    ("__ilshift__", "<<="),
    ("__irshift__", ">>="),
    ("__iand__", "&="),
    ("__ixor__", "^="),
    ("__ior__", "|="),
)
"""In-place operator dunders paired with their augmented-assignment symbols."""

BASE_DESTRUCTIVE_NAMES: frozenset[str] = frozenset(
    (
        # assignment-index
        "__setitem__",
        "__delitem__",
        "[]=",
        # attribute assignment
        "__setattr__",
        "__delattr__",
        # append / clear / concat / insert / replace
        "<<",
        "append",
        "clear",
        "concat",
        "extend",
        "insert",
        "prepend",
        "replace",
    )
    + tuple(name for pair in IN_PLACE_OPERATORS for name in pair)
)
"""Operation names every specialization treats as destructive."""
