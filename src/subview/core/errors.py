"""
Exceptions raised by views.

ConstructionError is a TypeError (the source/bounds pair has the wrong
shape), OperationRejected is an AttributeError (the view refuses to expose
the operation).
"""

from __future__ import annotations

import typing as _typing

import subview.core.types as types


class ConstructionError(TypeError):
    """
    Raised when a view cannot be created over a source.

    Attributes:
        kind: Which check failed.
    """

    def __init__(self, kind: types.ConstructionErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    @classmethod
    def from_kind(
        cls,
        kind: types.ConstructionErrorKind,
        **details: _typing.Any,
    ) -> ConstructionError:
        """Build an error whose message fills in the kind's template."""
        return cls(kind, kind.template.format(**details))


class OperationRejected(AttributeError):
    """
    Raised when a destructive operation is requested through a view.

    The rejection depends only on the operation name, never on whether the
    projected value would support it.

    Attributes:
        op_name: The rejected operation name.
    """

    def __init__(self, op_name: str, view_name: str) -> None:
        super().__init__(
            f"destructive operation {op_name!r} is not allowed on {view_name}"
        )
        self.op_name = op_name
