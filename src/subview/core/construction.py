"""
Ranged extraction and construction-time validation.

A view stores (offset, length) verbatim. Reading the source turns that pair
into a single slice key, given the source's current size (n=5 here):

    offset=1,   length=2   ->  source[1:3]
    offset=-3,  length=2   ->  source[-3:-1]
    offset=-2,  length=2   ->  source[-2:]
    offset=-10, length=12  ->  source[-10:2]

A negative offset that lies inside the source and reaches its end gets an
open stop. One that lies before the start of the source keeps the plain
stop, which then counts from the front like any other slice stop.

classify() checks a (source, offset, length) triple once, up front, and
returns the first failure as a ConstructionError value instead of raising.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import subview.core.errors as errors
import subview.core.specialization as specialization
import subview.core.types as types

_logger = _logging.getLogger(__name__)

# Exceptions a source raises for a key form it does not understand
_RANGE_REFUSED = (TypeError, KeyError)

# Exceptions a source raises for bound values it does not understand
_BOUNDS_REFUSED = (TypeError, ValueError)


def range_key(offset: _typing.Any, length: _typing.Any, size: int | None = None) -> slice:
    """
    Build the slice key for a (offset, length) pair.

    Args:
        offset: Start position.
        length: Number of items.
        size: Current len(source), or None for sources without a length.

    Raises:
        TypeError: If offset and length cannot be added or compared.
    """
    stop = offset + length
    if offset < 0 <= stop and (size is None or -offset <= size):
        stop = None
    return slice(offset, stop)


def extract(source: _typing.Any, offset: _typing.Any, length: _typing.Any) -> _typing.Any:
    """Read the current range from source."""
    size = len(source) if hasattr(type(source), "__len__") else None
    return source[range_key(offset, length, size)]


def classify(
    spec: specialization.Specialization,
    source: _typing.Any,
    offset: _typing.Any,
    length: _typing.Any,
) -> errors.ConstructionError | None:
    """
    Check that a view over source[offset, length] can be built.

    Checks run in order and the first failure wins:
    1. source is subscriptable
    2. source accepts a [start:stop] range
    3. source accepts these particular bounds
    4. the specialization's projection accepts source

    Returns:
        None if the view can be built, otherwise the error describing why not.
    """
    kind = _classify_extraction(source, offset, length)
    if kind is types.ConstructionErrorKind.INVALID_BOUNDS_TYPE:
        return errors.ConstructionError.from_kind(kind, offset=offset, length=length)
    if kind is not None:
        return errors.ConstructionError.from_kind(kind)

    if not spec.accepts(source):
        return errors.ConstructionError.from_kind(
            types.ConstructionErrorKind.WRONG_SOURCE_TYPE,
            source_type=type(source).__name__,
            specialization=spec.name,
        )
    return None


def _classify_extraction(
    source: _typing.Any,
    offset: _typing.Any,
    length: _typing.Any,
) -> types.ConstructionErrorKind | None:
    if getattr(type(source), "__getitem__", None) is None:
        return types.ConstructionErrorKind.NO_EXTRACTION_CAPABILITY

    try:
        source[0:0]
    except _RANGE_REFUSED as e:
        _logger.debug("Range probe refused by %s: %s", type(source).__name__, e)
        return types.ConstructionErrorKind.WRONG_ARITY

    try:
        extract(source, offset, length)
    except _BOUNDS_REFUSED as e:
        _logger.debug("Bounds (%r, %r) refused: %s", offset, length, e)
        return types.ConstructionErrorKind.INVALID_BOUNDS_TYPE
    return None
