"""Children accessors for foreachtree.

Nodes are plain caller-owned records, so the walkers never look inside them
directly. A ChildrenAdapter knows HOW to find a node's children, which keeps
the "does this node have a child sequence" decision in one place instead of
duck-typing it at every step.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Iterable, Sequence


def is_children_sequence(value: Any) -> bool:
    """Check whether a field value counts as a child sequence.

    Only lists and tuples qualify. Strings, mappings, generators and
    everything else are treated as "no children".
    """
    return isinstance(value, (list, tuple))


class ChildrenAdapter(ABC):
    """Abstract accessor for the children of a node.

    Adapters only read. They never add, remove or reorder children.
    """

    @abstractmethod
    def get_children(self, node: Any) -> Iterable[Any]:
        """Get the ordered children of a node.

        Any iterable is accepted, including a generator; each walker reads
        it exactly once.

        Args:
            node: The parent node

        Returns:
            The node's children, or an empty tuple when the node has no
            valid children
        """
        pass

    def has_children(self, node: Any) -> bool:
        """Check if the node has at least one child."""
        for _ in self.get_children(node):
            return True
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class KeyedChildrenAdapter(ChildrenAdapter):
    """Reads children from a mapping node under a configurable key.

    Example:
        >>> adapter = KeyedChildrenAdapter("kids")
        >>> adapter.get_children({"id": 1, "kids": [{"id": 2}]})
        [{'id': 2}]
    """

    def __init__(self, children_key: str = "children"):
        self.children_key = children_key

    def get_children(self, node: Any) -> Sequence[Any]:
        if not isinstance(node, Mapping):
            return ()
        children = node.get(self.children_key)
        if is_children_sequence(children):
            return children
        return ()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(children_key={self.children_key!r})"


class AttributeChildrenAdapter(ChildrenAdapter):
    """Reads children from an attribute of an object node.

    Useful for dataclass or class-based trees where children are stored as
    ``node.children`` rather than ``node["children"]``.
    """

    def __init__(self, attribute: str = "children"):
        self.attribute = attribute

    def get_children(self, node: Any) -> Sequence[Any]:
        children = getattr(node, self.attribute, None)
        if is_children_sequence(children):
            return children
        return ()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(attribute={self.attribute!r})"
