"""
View core: construction, guarding, forwarding and staleness detection.
"""

from subview.core.errors import ConstructionError, OperationRejected
from subview.core.specialization import (
    BASE,
    BYTES,
    SEQUENCE,
    Projection,
    Specialization,
    get_projection,
    register_projection,
)
from subview.core.types import ConstructionErrorKind, Verbosity
from subview.core.verbosity import VerbosityRegistry, get_default_registry
from subview.core.view import SubBytes, SubList, SubView

__all__ = [
    "BASE",
    "BYTES",
    "SEQUENCE",
    "ConstructionError",
    "ConstructionErrorKind",
    "OperationRejected",
    "Projection",
    "Specialization",
    "SubBytes",
    "SubList",
    "SubView",
    "Verbosity",
    "VerbosityRegistry",
    "get_default_registry",
    "get_projection",
    "register_projection",
]
