"""Per-visit traversal metadata."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class TraversalMeta:
    """Position of a visited node within its tree.

    A new instance is built for every step. ``parents`` is an immutable
    tuple, so sibling branches never share a mutable ancestor chain.

    Attributes:
        depth: 0 for a root, +1 per descent
        parents: Ancestors from the (forest-local) root down to the
            immediate parent, excluding the node itself
    """

    depth: int = 0
    parents: Tuple[Any, ...] = ()

    @classmethod
    def root(cls) -> "TraversalMeta":
        """Seed metadata for a top-level tree."""
        return cls(depth=0, parents=())

    def descend(self, node: Any) -> "TraversalMeta":
        """Metadata for a child of ``node``, where ``node`` carries this meta."""
        return TraversalMeta(depth=self.depth + 1, parents=self.parents + (node,))

    @property
    def parent(self) -> Optional[Any]:
        """Immediate parent, or None for a root."""
        return self.parents[-1] if self.parents else None

    @property
    def is_root(self) -> bool:
        return self.depth == 0
