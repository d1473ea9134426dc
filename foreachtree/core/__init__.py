"""Core abstractions for foreachtree.

This module contains the children accessors, the per-visit metadata record
and the traversal strategies.
"""

from .adapter import (
    ChildrenAdapter,
    KeyedChildrenAdapter,
    AttributeChildrenAdapter,
    is_children_sequence,
)
from .meta import TraversalMeta
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)

__all__ = [
    "ChildrenAdapter",
    "KeyedChildrenAdapter",
    "AttributeChildrenAdapter",
    "is_children_sequence",
    "TraversalMeta",
    "TreeTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
]
