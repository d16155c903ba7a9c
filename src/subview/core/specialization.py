"""
Specializations: per-container configuration for views.

A specialization supplies two things:
- a projection identifier, naming how an extracted range is converted into
  the value the view impersonates (e.g. "list" for SubList)
- extra destructive operation names, layered on the common base set

Projections are looked up by identifier in a module-level registry.
"""

from __future__ import annotations

import collections.abc as _abc
import dataclasses as _dataclasses
import typing as _typing

import subview.constants as constants


@_dataclasses.dataclass(frozen=True, slots=True)
class Projection:
    """
    A named conversion from an extracted range to a canonical value.

    Attributes:
        name: Identifier referenced by Specialization.projection.
        accepts: Whether a source exposes this projection.
        apply: Converts an extracted range into the projected value.
    """

    name: str
    accepts: _typing.Callable[[_typing.Any], bool]
    apply: _typing.Callable[[_typing.Any], _typing.Any]


def _is_list_like(source: _typing.Any) -> bool:
    # str/bytes are sequences of characters, not containers
    return isinstance(source, _abc.Sequence) and not isinstance(
        source, (str, bytes, bytearray, memoryview)
    )


def _is_bytes_like(source: _typing.Any) -> bool:
    return isinstance(source, (bytes, bytearray, memoryview))


_projections: dict[str, Projection] = {}


def register_projection(projection: Projection) -> None:
    """
    Register a projection under its name.

    Raises:
        ValueError: If a projection with the same name is already registered
    """
    if projection.name in _projections:
        raise ValueError(f"Projection '{projection.name}' is already registered")
    _projections[projection.name] = projection


def unregister_projection(name: str) -> Projection:
    """
    Remove and return a registered projection.

    Raises:
        KeyError: If projection is not found
    """
    projection = get_projection(name)
    del _projections[name]
    return projection


def get_projection(name: str) -> Projection:
    """
    Get a projection by name.

    Raises:
        KeyError: If projection is not found
    """
    projection = _projections.get(name)
    if projection is None:
        available = ", ".join(sorted(_projections))
        raise KeyError(f"Projection '{name}' not found. Available: {available}")
    return projection


def list_projections() -> list[str]:
    """Sorted names of all registered projections."""
    return sorted(_projections)


register_projection(Projection("itself", lambda source: True, lambda value: value))
register_projection(Projection("list", _is_list_like, list))
register_projection(Projection("bytes", _is_bytes_like, bytes))


@_dataclasses.dataclass(frozen=True, slots=True)
class Specialization:
    """
    Configuration for one kind of view.

    Attributes:
        name: Identifier used in diagnostics and as the verbosity key.
        projection: Name of a registered Projection.
        destructive_names: Full set of names the guard rejects (base included).
        destructive_suffix: Trailing marker of in-place method names;
            empty string disables the suffix rule.

    Example:
        >>> SEQUENCE = BASE.extend("SubList", projection="list",
        ...                        destructive_names=("pop", "sort"))
        >>> "append" in SEQUENCE.destructive_names  # inherited from BASE
        True
    """

    name: str
    projection: str = "itself"
    destructive_names: frozenset[str] = constants.BASE_DESTRUCTIVE_NAMES
    destructive_suffix: str = constants.DEFAULT_DESTRUCTIVE_SUFFIX

    def extend(
        self,
        name: str,
        *,
        projection: str | None = None,
        destructive_names: _typing.Iterable[str] = (),
    ) -> Specialization:
        """
        Derive a specialization that appends destructive names to this one.

        Args:
            name: Name of the new specialization.
            projection: Projection identifier; defaults to this one's.
            destructive_names: Names added on top of this one's set.
        """
        return _dataclasses.replace(
            self,
            name=name,
            projection=self.projection if projection is None else projection,
            destructive_names=self.destructive_names | frozenset(destructive_names),
        )

    def get_projection(self) -> Projection:
        """Resolve the projection identifier."""
        return get_projection(self.projection)

    def accepts(self, source: _typing.Any) -> bool:
        """Whether the source exposes this specialization's projection."""
        return self.get_projection().accepts(source)

    def project(self, extracted: _typing.Any) -> _typing.Any:
        """Convert an extracted range into the impersonated value."""
        return self.get_projection().apply(extracted)


BASE = Specialization("SubView")
"""Identity projection over any sliceable source."""

SEQUENCE = BASE.extend(
    "SubList",
    projection="list",
    destructive_names=("pop", "push", "remove", "reverse", "sort"),
)
"""List-like sources projected to list."""

BYTES = BASE.extend(
    "SubBytes",
    projection="bytes",
    destructive_names=("pop", "remove", "reverse"),
)
"""Binary sources projected to immutable bytes."""
