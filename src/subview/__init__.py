"""
subview - bounded, read-only views over mutable containers.

A view stands for source[offset, length] without copying it, behaves like
that slice for every non-mutating operation, rejects mutating ones, and
warns when the source has been destructively changed behind its back.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("subview")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from subview.api import (  # noqa: E402
    attr,
    bounds,
    create,
    get_global_verbosity,
    get_verbosity,
    invoke,
    set_attr,
    set_global_verbosity,
    set_verbosity,
    size,
    snapshot,
    supports,
)
from subview.config import Settings  # noqa: E402
from subview.core import (  # noqa: E402
    ConstructionError,
    ConstructionErrorKind,
    OperationRejected,
    Projection,
    Specialization,
    SubBytes,
    SubList,
    SubView,
    Verbosity,
    register_projection,
)

__all__ = [
    "__version__",
    "__version_info__",
    "ConstructionError",
    "ConstructionErrorKind",
    "OperationRejected",
    "Projection",
    "Settings",
    "Specialization",
    "SubBytes",
    "SubList",
    "SubView",
    "Verbosity",
    "attr",
    "bounds",
    "create",
    "get_global_verbosity",
    "get_verbosity",
    "invoke",
    "register_projection",
    "set_attr",
    "set_global_verbosity",
    "set_verbosity",
    "size",
    "snapshot",
    "supports",
]
