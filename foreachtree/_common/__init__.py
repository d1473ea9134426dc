"""Shared definitions used by both ``config`` and ``core``.

This internal package must never import from ``foreachtree.config`` or
``foreachtree.core``.
"""

from .strategy import TraversalStrategy, TraversalConfigError

__all__ = [
    "TraversalStrategy",
    "TraversalConfigError",
]
