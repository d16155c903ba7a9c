"""
Frozen (read-only) renderings of source containers.

Views hand out snapshots of their source. A snapshot is a copy, so later
source changes do not show through it, and it is read-only, so the caller
cannot mutate through it. Nested containers are frozen on access.

FrozenMapping wraps dicts, FrozenSequence wraps lists, and frozen_copy()
picks the right rendering for a value.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import typing as _typing


class FrozenMapping(_abc.Mapping[_typing.Any, _typing.Any]):
    """
    Read-only view of a dict.

    Nested containers (dicts and lists) are frozen on access, so the
    entire structure is effectively immutable through this view.

    Example:
        >>> frozen = FrozenMapping({"a": [1, 2, 3]})
        >>> frozen["a"][0]
        1
        >>> frozen["a"][0] = 99  # TypeError: immutable
    """

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Mapping[_typing.Any, _typing.Any]) -> None:
        self._data = dict(data) if not isinstance(data, dict) else data

    def __getitem__(self, key: _typing.Any) -> _typing.Any:
        """Get a value, freezing nested containers."""
        return freeze(self._data[key])

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Mapping with same content."""
        if isinstance(other, _abc.Mapping):
            return dict(self) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        """FrozenMapping is not hashable (values may be mutable)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


class FrozenSequence(_abc.Sequence[_typing.Any]):
    """
    Read-only view of a list.

    Nested containers (dicts and lists) are frozen on access, so the
    entire structure is effectively immutable through this view.

    Example:
        >>> frozen = FrozenSequence([{"a": 1}, {"b": 2}])
        >>> frozen[0]["a"]
        1
        >>> frozen[0]["a"] = 99  # TypeError: immutable
    """

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Iterable[_typing.Any]) -> None:
        self._data = list(data) if not isinstance(data, list) else data

    @_typing.overload
    def __getitem__(self, index: int) -> _typing.Any: ...

    @_typing.overload
    def __getitem__(self, index: slice) -> FrozenSequence: ...

    def __getitem__(self, index: int | slice) -> _typing.Any:
        """Get an item or slice, freezing nested containers."""
        value = self._data[index]
        if isinstance(index, slice):
            return FrozenSequence(value)
        return freeze(value)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenSequence({self._data!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Sequence with same content (except strings)."""
        if isinstance(other, (str, bytes, bytearray)):
            return NotImplemented
        if isinstance(other, _abc.Sequence):
            return list(self) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        """FrozenSequence is not hashable (values may be mutable)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


def freeze(value: _typing.Any) -> _typing.Any:
    """
    Wrap mutable containers in frozen views, without copying.

    - dict/Mapping → FrozenMapping
    - list/Sequence → FrozenSequence (except str/bytes/tuple)
    - bytearray → bytes
    - Already frozen and other types returned as-is
    """
    if isinstance(value, (FrozenMapping, FrozenSequence)):
        return value
    if isinstance(value, bytearray):
        return bytes(value)
    if isinstance(value, _abc.Mapping):
        return FrozenMapping(value)
    # Tuple is already immutable, str/bytes are not containers
    if isinstance(value, _abc.Sequence) and not isinstance(value, (str, bytes, tuple)):
        return FrozenSequence(value)
    return value


def frozen_copy(value: _typing.Any) -> _typing.Any:
    """
    Shallow-copy a value and freeze the copy.

    Containers come back as FrozenMapping/FrozenSequence over a private
    copy, bytearray as bytes. Other objects come back as copy.copy(value);
    they cannot be frozen, but mutating the copy leaves the original alone.

    Example:
        >>> source = [1, 2]
        >>> snap = frozen_copy(source)
        >>> source.append(3)
        >>> snap
        FrozenSequence([1, 2])
    """
    if isinstance(value, (FrozenMapping, FrozenSequence, str, bytes, tuple)):
        return value
    if isinstance(value, bytearray):
        return bytes(value)
    if isinstance(value, memoryview):
        return value.tobytes()
    if isinstance(value, _abc.Mapping):
        return FrozenMapping(dict(value))
    if isinstance(value, _abc.Sequence):
        return FrozenSequence(list(value))
    return _copy.copy(value)
