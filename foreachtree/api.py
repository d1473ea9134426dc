"""High-level API for foreachtree.

This module provides the functional entry points: ``traverse`` invokes a
callback for every node, ``iter_tree`` yields the same visits lazily.
Both accept a single tree or a forest (list/tuple of trees).
"""

import logging
from typing import Any, Callable, Iterator, Tuple

from .config import TraversalOptions
from .core.meta import TraversalMeta
from .core.traverser import TreeTraverser, create_traverser

logger = logging.getLogger(__name__)

TraversalCallback = Callable[[Any, TraversalMeta], Any]


def is_forest(value: Any) -> bool:
    """Check whether the input is a forest (an ordered sequence of trees)."""
    return isinstance(value, (list, tuple))


def traverse(
    tree: Any,
    callback: TraversalCallback,
    options: Any = None,
    **kwargs
) -> None:
    """Visit every node of a tree or forest, calling ``callback`` for each.

    Options are resolved before the first visit, so a bad strategy or
    children key fails without touching any node. Exceptions raised by the
    callback propagate immediately and abort the rest of the traversal.

    Args:
        tree: A node, or a list/tuple of nodes (forest)
        callback: Called as ``callback(node, meta)``; return value ignored
        options: None, TraversalOptions, or a mapping of option values
        **kwargs: children_key, strategy or adapter overrides

    Raises:
        TraversalConfigError: If the options are invalid

    Example:
        >>> tree = {"id": 1, "children": [{"id": 2}, {"id": 3}]}
        >>> traverse(tree, lambda node, meta: print(node["id"], meta.depth))
        1 0
        2 1
        3 1
    """
    for node, meta in iter_tree(tree, options, **kwargs):
        callback(node, meta)


def iter_tree(
    tree: Any,
    options: Any = None,
    **kwargs
) -> Iterator[Tuple[Any, TraversalMeta]]:
    """Traverse a tree or forest lazily.

    Validation happens at call time, not on the first ``next()``.
    Stopping iteration early stops the traversal.

    Args:
        tree: A node, or a list/tuple of nodes (forest)
        options: None, TraversalOptions, or a mapping of option values
        **kwargs: children_key, strategy or adapter overrides

    Returns:
        Iterator of (node, meta) pairs in traversal order

    Raises:
        TraversalConfigError: If the options are invalid
    """
    resolved = TraversalOptions.resolve(options, **kwargs)
    traverser = create_traverser(resolved.strategy, resolved.children_adapter())
    logger.debug(
        "Traversing %s with %r",
        "forest" if is_forest(tree) else "tree",
        traverser,
    )
    return _walk_all(tree, traverser)


def _walk_all(tree: Any, traverser: TreeTraverser) -> Iterator[Tuple[Any, TraversalMeta]]:
    if not is_forest(tree):
        yield from traverser.walk(tree, TraversalMeta.root())
        return

    # Each tree gets a fresh seed; ancestor chains never cross trees
    for index, root in enumerate(tree):
        logger.debug("Forest tree %d of %d", index + 1, len(tree))
        yield from traverser.walk(root, TraversalMeta.root())


# Short alias
foreach = traverse
