"""
Classification of destructive operation names.

An operation is destructive when its name carries the in-place suffix
(``add_``, ``fill_``) or appears in the specialization's destructive set.
Dunder names never match the suffix rule (``__len__`` ends in "_" too).
"""

from __future__ import annotations

import subview.core.specialization as specialization


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def is_destructive(spec: specialization.Specialization, op_name: str) -> bool:
    """
    Whether op_name would mutate its receiver.

    Args:
        spec: Specialization supplying the suffix and the name set.
        op_name: Method name or operator symbol.
    """
    if op_name in spec.destructive_names:
        return True
    suffix = spec.destructive_suffix
    return bool(suffix) and op_name.endswith(suffix) and not _is_dunder(op_name)
