"""
Bounded views over mutable containers.

A SubView stands for source[offset, length] without copying it. Reads go
to the live source every time, so the view always reflects the current
contents of that range. Destructive operations are rejected.

Example:
    >>> numbers = [2, 4, 6, 8, 10]
    >>> view = SubList(numbers, -3, 2)
    >>> view == [6, 8]
    True
    >>> view + [9]
    [6, 8, 9]
    >>> view.invoke("push", 5)  # OperationRejected
    >>> numbers.append(12)      # next read logs a staleness warning (if enabled)
    >>> view.bounds
    (-3, 2)

Identity-like operations (==, <, hash, str, format, isinstance) are always
answered by the current projection, never by the view object itself:
isinstance(view, list) is True while type(view) is SubList. This is a
deliberate contract; a view compares and converts as the value it stands
for.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import subview.core.construction as construction
import subview.core.forwarding as forwarding
import subview.core.specialization as specialization
import subview.core.staleness as staleness
import subview.core.types as types
import subview.core.verbosity as verbosity
import subview.utils.frozen as frozen

_logger = _logging.getLogger(__name__)


class SubView:
    """
    Read-only view of source[offset, length].

    Subclasses set SPECIALIZATION to choose the projection and the extra
    destructive names; nothing else needs overriding.

    Attributes:
        attr: Arbitrary user payload, freely mutable, ignored by the view.

    Note:
        The view holds a reference to source and never copies it. It does
        no locking; callers must not mutate source concurrently with view
        access. Staleness detection is a diagnostic, not a guarantee.
    """

    SPECIALIZATION: _typing.ClassVar[specialization.Specialization] = specialization.BASE

    __slots__ = ("_source", "_offset", "_length", "_digest", "attr")

    def __init__(
        self,
        source: _typing.Any,
        offset: _typing.Any,
        length: _typing.Any,
        *,
        attr: _typing.Any = None,
    ) -> None:
        """
        Create a view over source[offset, length].

        Args:
            source: Container to view. Not copied.
            offset: Start position, in the source's own indexing convention.
            length: Number of items.
            attr: User payload.

        Raises:
            ConstructionError: If the source or bounds are unsuitable.
        """
        error = construction.classify(self.SPECIALIZATION, source, offset, length)
        if error is not None:
            _logger.debug("Cannot create %s: %s", type(self).__name__, error)
            raise error

        self._source = source
        self._offset = offset
        self._length = length
        self._digest = staleness.digest(source)
        self.attr = attr

    # =========================================================================
    # Direct interface
    # =========================================================================

    @property
    def offset(self) -> _typing.Any:
        """Start position as given at creation."""
        return self._offset

    @property
    def length(self) -> _typing.Any:
        """Length as given at creation."""
        return self._length

    @property
    def bounds(self) -> tuple[_typing.Any, _typing.Any]:
        """(offset, length) as given at creation."""
        return (self._offset, self._length)

    @property
    def size(self) -> _typing.Any:
        """Length of the viewed range (the requested length, not len(self))."""
        return self._length

    @property
    def digest(self) -> int | str:
        """Source digest captured at creation."""
        return self._digest

    @property
    def source(self) -> _typing.Any:
        """Frozen copy of the whole current source."""
        staleness.check_stale(self)
        return frozen.frozen_copy(self._source)

    def snapshot(self) -> _typing.Any:
        """Frozen copy of the current projected slice."""
        return frozen.frozen_copy(self._project())

    def invoke(self, op_name: str, *args: _typing.Any, **kwargs: _typing.Any) -> _typing.Any:
        """Apply a named operation to the current projection. See forwarding.invoke."""
        return forwarding.invoke(self, op_name, *args, **kwargs)

    def supports(self, op_name: str) -> bool:
        """Whether invoke(op_name) reaches a real, non-destructive operation."""
        return forwarding.supports(self, op_name)

    @classmethod
    def get_verbosity(cls) -> types.Verbosity:
        """Staleness verbosity flag of this class's specialization."""
        return verbosity.get_default_registry().get(cls.SPECIALIZATION.name)

    @classmethod
    def set_verbosity(cls, value: types.Verbosity | bool | None) -> None:
        """Set the staleness verbosity flag of this class's specialization only."""
        verbosity.get_default_registry().set(cls.SPECIALIZATION.name, value)

    def _extract(self) -> _typing.Any:
        return construction.extract(self._source, self._offset, self._length)

    def _project(self) -> _typing.Any:
        """Staleness check, then the freshly extracted and projected slice."""
        staleness.check_stale(self)
        return self.SPECIALIZATION.project(self._extract())

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{self._offset!r}, {self._length!r}]{self._project()!r}"

    # =========================================================================
    # Identity-like operations: always answered by the projection
    # =========================================================================

    @property  # type: ignore[misc]
    def __class__(self) -> type:
        """Type of the projection, so isinstance() tests the projected value."""
        return type(self._project())

    def __eq__(self, other: object) -> bool:
        return self.invoke("==", other)

    def __ne__(self, other: object) -> bool:
        return self.invoke("!=", other)

    def __lt__(self, other: _typing.Any) -> bool:
        return self.invoke("<", other)

    def __le__(self, other: _typing.Any) -> bool:
        return self.invoke("<=", other)

    def __gt__(self, other: _typing.Any) -> bool:
        return self.invoke(">", other)

    def __ge__(self, other: _typing.Any) -> bool:
        return self.invoke(">=", other)

    def __hash__(self) -> int:
        return self.invoke("hash")

    def __str__(self) -> str:
        return self.invoke("str")

    def __format__(self, format_spec: str) -> str:
        return self.invoke("format", format_spec)

    # =========================================================================
    # Container protocol
    # =========================================================================

    def __len__(self) -> int:
        return self.invoke("len")

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        return self.invoke("iter")

    def __reversed__(self) -> _typing.Iterator[_typing.Any]:
        return self.invoke("reversed")

    def __getitem__(self, key: _typing.Any) -> _typing.Any:
        return self.invoke("[]", key)

    def __contains__(self, item: object) -> bool:
        return self.invoke("in", item)

    def __bool__(self) -> bool:
        return self.invoke("bool")

    def __add__(self, other: _typing.Any) -> _typing.Any:
        return self.invoke("+", other)

    def __radd__(self, other: _typing.Any) -> _typing.Any:
        return self.invoke("r+", other)

    def __mul__(self, count: _typing.Any) -> _typing.Any:
        return self.invoke("*", count)

    def __rmul__(self, count: _typing.Any) -> _typing.Any:
        return self.invoke("*", count)


class SubList(SubView):
    """Read-only view of a range of a list-like source, projected to list."""

    SPECIALIZATION = specialization.SEQUENCE

    __slots__ = ()


class SubBytes(SubView):
    """Read-only view of a range of a bytearray (or bytes), projected to bytes."""

    SPECIALIZATION = specialization.BYTES

    __slots__ = ()


# Sequence patterns in match statements test the type's flags, not __class__
_abc.Sequence.register(SubList)
