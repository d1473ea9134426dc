"""Traversal strategy selector and configuration error."""

from enum import Enum
from typing import Union


class TraversalConfigError(ValueError):
    """Raised when traversal options are invalid."""
    pass


class TraversalStrategy(Enum):
    """Order in which nodes are visited.

    Exactly three members; dispatch over them is exhaustive.
    """
    PRE = "pre"           # Parent before children
    POST = "post"         # Children before parent
    BREADTH = "breadth"   # Level by level

    @classmethod
    def parse(cls, value: Union["TraversalStrategy", str]) -> "TraversalStrategy":
        """Convert a strategy token to an enum member.

        Args:
            value: A TraversalStrategy member or its string token
                ("pre", "post", "breadth"), case-insensitive

        Returns:
            The matching TraversalStrategy

        Raises:
            TraversalConfigError: If the value is not a recognized strategy
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            token = value.strip().lower()
            for member in cls:
                if member.value == token:
                    return member
        raise TraversalConfigError(
            f"Unknown traversal strategy: {value!r}. "
            f"Choose from: {', '.join(m.value for m in cls)}"
        )
