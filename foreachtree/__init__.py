"""foreachtree - Generic Tree/Forest Traversal.

Walks any nested-record tree (or list of trees) and calls you back once per
node with its depth and ancestor chain.

    from foreachtree import traverse

    traverse(tree, lambda node, meta: print(node["id"], meta.depth),
             strategy="breadth", children_key="kids")

Strategies: "pre" (default), "post", "breadth".
"""

__version__ = "0.1.0"

from .core import (
    ChildrenAdapter,
    KeyedChildrenAdapter,
    AttributeChildrenAdapter,
    TraversalMeta,
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .config import (
    TraversalOptions,
    TraversalStrategy,
    TraversalConfigError,
    DEFAULT_CHILDREN_KEY,
)
from .api import traverse, iter_tree, is_forest, foreach

__all__ = [
    "__version__",
    # Core
    "ChildrenAdapter",
    "KeyedChildrenAdapter",
    "AttributeChildrenAdapter",
    "TraversalMeta",
    "TreeTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    # Config
    "TraversalOptions",
    "TraversalStrategy",
    "TraversalConfigError",
    "DEFAULT_CHILDREN_KEY",
    # API
    "traverse",
    "iter_tree",
    "is_forest",
    "foreach",
]
