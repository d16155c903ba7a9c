"""
Functional interface to views.

Thin wrappers over SubView and the verbosity registry for callers that
prefer functions to methods:

    view = create(source, -3, 2, view_class=SubList)
    invoke(view, "+", [9])
    bounds(view)
"""

from __future__ import annotations

import typing as _typing

import subview.core.forwarding as forwarding
import subview.core.types as types
import subview.core.verbosity as verbosity
import subview.core.view as view_module

_V = _typing.TypeVar("_V", bound=view_module.SubView)

SpecializationKey = _typing.Union[type[view_module.SubView], str]


def create(
    source: _typing.Any,
    offset: _typing.Any,
    length: _typing.Any,
    attr: _typing.Any = None,
    *,
    view_class: type[_V] = view_module.SubView,  # type: ignore[assignment]
) -> _V:
    """
    Create a view over source[offset, length].

    Raises:
        ConstructionError: If the source or bounds are unsuitable.
    """
    return view_class(source, offset, length, attr=attr)


def invoke(
    view: view_module.SubView,
    op_name: str,
    *args: _typing.Any,
    **kwargs: _typing.Any,
) -> _typing.Any:
    """Apply a named operation to the view's current projection."""
    return forwarding.invoke(view, op_name, *args, **kwargs)


def supports(view: view_module.SubView, op_name: str) -> bool:
    """Whether the view would forward op_name."""
    return forwarding.supports(view, op_name)


def snapshot(view: view_module.SubView) -> _typing.Any:
    """Immutable copy of the view's current slice."""
    return view.snapshot()


def bounds(view: view_module.SubView) -> tuple[_typing.Any, _typing.Any]:
    """(offset, length) the view was created with."""
    return view.bounds


def size(view: view_module.SubView) -> _typing.Any:
    """Length the view was created with."""
    return view.size


def attr(view: view_module.SubView) -> _typing.Any:
    """The view's user payload."""
    return view.attr


def set_attr(view: view_module.SubView, value: _typing.Any) -> None:
    """Replace the view's user payload."""
    view.attr = value


def _specialization_name(key: SpecializationKey) -> str:
    if isinstance(key, str):
        return key
    return key.SPECIALIZATION.name


def get_verbosity(key: SpecializationKey) -> types.Verbosity:
    """Verbosity flag of a specialization, given its view class or name."""
    return verbosity.get_default_registry().get(_specialization_name(key))


def set_verbosity(key: SpecializationKey, value: types.Verbosity | bool | None) -> None:
    """Set the verbosity flag of one specialization, given its view class or name."""
    verbosity.get_default_registry().set(_specialization_name(key), value)


def get_global_verbosity() -> types.Verbosity:
    """Process-wide fallback verbosity flag."""
    return verbosity.get_default_registry().get_default()


def set_global_verbosity(value: types.Verbosity | bool | None) -> None:
    """Set the process-wide fallback verbosity flag."""
    verbosity.get_default_registry().set_default(value)
