"""Tree traversal strategies for foreachtree.

Traversers implement the different orders for walking through a tree.
They work through a ChildrenAdapter, so the same walker handles dict trees,
custom children keys and object trees alike.

Every walker is a generator of ``(node, meta)`` pairs. The caller handles
each pair before asking for the next one, which means a callback has fully
run before the walker reads any further children.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, List, Optional, Tuple, Union

from .adapter import ChildrenAdapter
from .meta import TraversalMeta
from .._common.strategy import TraversalStrategy


Visit = Tuple[Any, TraversalMeta]


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Subclasses decide the visit order. None of them detect cycles: the
    caller guarantees a finite, acyclic tree.
    """

    strategy: TraversalStrategy

    def __init__(self, adapter: ChildrenAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: ChildrenAdapter for reading each node's children
        """
        self.adapter = adapter

    @abstractmethod
    def walk(self, root: Any, meta: Optional[TraversalMeta] = None) -> Iterator[Visit]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node
            meta: Metadata for the root (defaults to depth 0, no parents)

        Yields:
            Tuples of (node, meta) in this traverser's order
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(adapter={self.adapter!r})"


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, children left to right. Uses an
    explicit stack, so tree height is not limited by the recursion limit.
    """

    strategy = TraversalStrategy.PRE

    def walk(self, root: Any, meta: Optional[TraversalMeta] = None) -> Iterator[Visit]:
        stack: List[Visit] = [(root, meta or TraversalMeta.root())]

        while stack:
            node, node_meta = stack.pop()
            yield (node, node_meta)

            # Children are read only after the node has been handled.
            # Pushed in reverse so the first child is popped first.
            children = tuple(self.adapter.get_children(node))
            for child in reversed(children):
                stack.append((child, node_meta.descend(node)))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent, at every level: a node is yielded only
    after its whole subtree has been yielded. Good for aggregation or
    bottom-up processing.
    """

    strategy = TraversalStrategy.POST

    def walk(self, root: Any, meta: Optional[TraversalMeta] = None) -> Iterator[Visit]:
        # Each frame holds the node, its meta and an iterator over the
        # children still to be expanded.
        root_meta = meta or TraversalMeta.root()
        stack: List[Tuple[Any, TraversalMeta, Iterator[Any]]] = [
            (root, root_meta, iter(self.adapter.get_children(root)))
        ]

        while stack:
            node, node_meta, pending = stack[-1]
            child = next(pending, _EXHAUSTED)
            if child is _EXHAUSTED:
                stack.pop()
                yield (node, node_meta)
                continue

            child_meta = node_meta.descend(node)
            stack.append((child, child_meta, iter(self.adapter.get_children(child))))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    Within a level, order follows parent order then child order.
    """

    strategy = TraversalStrategy.BREADTH

    def walk(self, root: Any, meta: Optional[TraversalMeta] = None) -> Iterator[Visit]:
        queue: Deque[Visit] = deque([(root, meta or TraversalMeta.root())])

        while queue:
            node, node_meta = queue.popleft()

            # Enqueue children before the node is handled
            for child in self.adapter.get_children(node):
                queue.append((child, node_meta.descend(node)))

            yield (node, node_meta)


_EXHAUSTED = object()


def create_traverser(strategy: Union[TraversalStrategy, str],
                     adapter: ChildrenAdapter) -> TreeTraverser:
    """Create a traverser instance for a strategy.

    Args:
        strategy: TraversalStrategy member or its token (pre, post, breadth)
        adapter: ChildrenAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        TraversalConfigError: If strategy is not recognized
    """
    strategy = TraversalStrategy.parse(strategy)

    if strategy is TraversalStrategy.PRE:
        return PreOrderTraverser(adapter)
    if strategy is TraversalStrategy.POST:
        return PostOrderTraverser(adapter)
    if strategy is TraversalStrategy.BREADTH:
        return BreadthFirstTraverser(adapter)
    raise AssertionError(f"Unhandled traversal strategy: {strategy}")
