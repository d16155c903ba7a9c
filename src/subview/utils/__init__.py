"""
Utility classes and functions for subview.

General-purpose helpers that don't belong to the view core.
"""

from subview.utils.frozen import FrozenMapping, FrozenSequence, freeze, frozen_copy

__all__ = ["FrozenMapping", "FrozenSequence", "freeze", "frozen_copy"]
