"""
Best-effort detection of destructive changes to a view's source.

A view captures digest(source) when created. Every access that reads the
source recomputes the digest and, if it differs and verbosity is enabled
for the view's specialization, logs a warning. The check never raises and
never changes the result of the access that triggered it. The cached digest
is never updated, so a source restored to its original content stops
warning, and a source that keeps flipping warns on every access.
"""

from __future__ import annotations

import hashlib as _hashlib
import logging as _logging
import typing as _typing

import subview.config as config
import subview.constants as constants
import subview.core.construction as construction
import subview.core.verbosity as verbosity

if _typing.TYPE_CHECKING:
    import subview.core.view as _view

_logger = _logging.getLogger(__name__)


def digest(source: _typing.Any) -> int | str:
    """
    Content fingerprint of a source.

    Hashable sources use hash(); unhashable ones (list, bytearray, ...)
    use a blake2b digest of their repr.
    """
    try:
        return hash(source)
    except TypeError:
        return _hashlib.blake2b(
            repr(source).encode("utf-8", "backslashreplace"), digest_size=16
        ).hexdigest()


def truncate(text: str, limit: int) -> str:
    """Cap text at limit characters, ending with an ellipsis when cut."""
    if len(text) <= limit:
        return text
    return text[: limit - len(constants.PREVIEW_ELLIPSIS)] + constants.PREVIEW_ELLIPSIS


def preview(view: _view.SubView) -> str:
    """Truncated repr of the view's current slice, for diagnostics."""
    limit = config.get_settings().preview_length
    try:
        text = repr(construction.extract(view._source, view.offset, view.length))
    except Exception as e:
        # A shrunken or broken source must not turn a warning into an error
        return f"<unavailable: {type(e).__name__}>"
    return truncate(text, limit)


def is_stale(view: _view.SubView) -> bool:
    """Whether the source's digest differs from the one captured at creation."""
    return digest(view._source) != view.digest


def check_stale(view: _view.SubView) -> None:
    """Log a warning if the view's source changed and diagnostics are enabled."""
    name = view.SPECIALIZATION.name
    if not verbosity.get_default_registry().resolve(name):
        return
    if not is_stale(view):
        return
    _logger.warning(
        "source has destructively changed: %s[%r, %r]%s",
        name,
        view.offset,
        view.length,
        preview(view),
    )
