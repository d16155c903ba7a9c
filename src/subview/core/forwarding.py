"""
Forwarding of operations from a view to its current projection.

Every operation a view supports beyond its own small interface goes through
invoke(). invoke() rejects destructive names, runs the staleness check,
re-reads the slice from the source, projects it, and applies the operation
to the projected value.

Operation names are either:
- a key of OPERATORS (a symbol like "+" or a builtin like "len"), applied
  with the matching operator function ("r+" is the reflected "+", and "=~"
  only applies to str or bytes projections), or
- any other attribute name, looked up on the projected value.

Errors raised by the projected value propagate unchanged.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import logging as _logging
import operator as _operator
import re as _re
import typing as _typing

import subview.core.errors as errors
import subview.core.guard as guard

if _typing.TYPE_CHECKING:
    import subview.core.view as _view

_logger = _logging.getLogger(__name__)


@_dataclasses.dataclass(frozen=True, slots=True)
class Operator:
    """
    An operation applied by function rather than by attribute lookup.

    Attributes:
        function: Called as function(projected, *args, **kwargs).
        dunder: Method the projected value needs for supports() to report
            True; None means every value supports it.
    """

    function: _typing.Callable[..., _typing.Any]
    dunder: str | None = None


def _compare(value: _typing.Any, other: _typing.Any) -> int:
    """Three-way comparison: -1, 0 or 1."""
    return (value > other) - (value < other)


def _reflected_add(value: _typing.Any, other: _typing.Any) -> _typing.Any:
    """other + value, for a view on the right of +."""
    return other + value


def _contains(value: _typing.Any, item: _typing.Any) -> bool:
    return item in value


def _search(value: _typing.Any, pattern: _typing.Any) -> _re.Match[_typing.Any] | None:
    """
    re.search over a str or bytes projection.

    Other projections (list, arbitrary objects) get the TypeError re raises.
    """
    return _re.search(pattern, value)


def _instance_of(value: _typing.Any, cls: type) -> bool:
    return type(value) is cls


OPERATORS: dict[str, Operator] = {
    # comparison
    "==": Operator(_operator.eq, "__eq__"),
    "!=": Operator(_operator.ne, "__ne__"),
    "<": Operator(_operator.lt, "__lt__"),
    "<=": Operator(_operator.le, "__le__"),
    ">": Operator(_operator.gt, "__gt__"),
    ">=": Operator(_operator.ge, "__ge__"),
    "<=>": Operator(_compare, "__lt__"),
    # arithmetic
    "+": Operator(_operator.add, "__add__"),
    "r+": Operator(_reflected_add, "__add__"),
    "*": Operator(_operator.mul, "__mul__"),
    # container protocol
    "[]": Operator(_operator.getitem, "__getitem__"),
    "in": Operator(_contains, "__contains__"),
    "len": Operator(len, "__len__"),
    "iter": Operator(iter, "__iter__"),
    "reversed": Operator(reversed, "__reversed__"),
    "bool": Operator(bool),
    # identity-like
    "hash": Operator(hash, "__hash__"),
    "str": Operator(str),
    "repr": Operator(repr),
    "format": Operator(format),
    "is_a": Operator(isinstance),
    "instance_of": Operator(_instance_of),
    "=~": Operator(_search),
}
"""Operation names applied through a function instead of getattr()."""


def invoke(
    view: _view.SubView,
    op_name: str,
    *args: _typing.Any,
    **kwargs: _typing.Any,
) -> _typing.Any:
    """
    Apply a named operation to the view's current projection.

    Args:
        view: The view to operate on.
        op_name: Operator key or attribute name.
        *args: Positional arguments for the operation.
        **kwargs: Keyword arguments for the operation.

    Returns:
        Whatever the operation returns on the projected value. A
        non-callable attribute requested without arguments is returned as is.

    Raises:
        OperationRejected: If op_name is destructive for the view.
    """
    _reject_destructive(view, op_name)
    projected = view._project()

    operator = OPERATORS.get(op_name)
    if operator is not None:
        return operator.function(projected, *args, **kwargs)

    value = getattr(projected, op_name)
    if not callable(value) and not args and not kwargs:
        return value
    return value(*args, **kwargs)


def supports(view: _view.SubView, op_name: str) -> bool:
    """
    Whether invoke(view, op_name, ...) would reach a real operation.

    Destructive names are never supported. Other names report what the
    current projection reports.
    """
    if guard.is_destructive(view.SPECIALIZATION, op_name):
        return False
    projected = view._project()

    operator = OPERATORS.get(op_name)
    if operator is not None:
        if operator.dunder is None:
            return True
        return getattr(projected, operator.dunder, None) is not None
    return hasattr(projected, op_name)


def _reject_destructive(view: _view.SubView, op_name: str) -> None:
    if guard.is_destructive(view.SPECIALIZATION, op_name):
        view_name = type(view).__name__
        _logger.debug("Rejected destructive operation %r on %s", op_name, view_name)
        raise errors.OperationRejected(op_name, view_name)
