"""Configuration system for foreachtree.

This module defines how callers specify a traversal: which field holds a
node's children and which order nodes are visited in. Options are resolved
once per top-level call and stay immutable for its duration.
"""

from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional

from ._common.strategy import TraversalStrategy, TraversalConfigError
from .core.adapter import ChildrenAdapter, KeyedChildrenAdapter


DEFAULT_CHILDREN_KEY = "children"


# Accepted spellings for mapping-style options
_OPTION_ALIASES = {
    "children_key": "children_key",
    "childrenKey": "children_key",
    "strategy": "strategy",
    "adapter": "adapter",
}


@dataclass(frozen=True)
class TraversalOptions:
    """Resolved options for one traversal.

    Attributes:
        children_key: Field name holding a node's child sequence
        strategy: Visit order
        adapter: Custom children accessor; overrides children_key when set
    """

    children_key: str = DEFAULT_CHILDREN_KEY
    strategy: TraversalStrategy = TraversalStrategy.PRE
    adapter: Optional[ChildrenAdapter] = None

    @classmethod
    def resolve(cls, options: Any = None, **overrides) -> "TraversalOptions":
        """Build validated options from whatever the caller passed.

        Args:
            options: None, a TraversalOptions instance, or a mapping with
                children_key (or childrenKey), strategy and adapter keys
            **overrides: Same keys as the mapping form; win over ``options``

        Returns:
            Immutable, validated TraversalOptions

        Raises:
            TraversalConfigError: If any option is unknown or invalid
        """
        if options is None:
            values = {}
        elif isinstance(options, TraversalOptions):
            values = {f.name: getattr(options, f.name) for f in fields(options)}
        elif isinstance(options, Mapping):
            values = _normalize_keys(options)
        else:
            raise TraversalConfigError(
                f"options must be a mapping or TraversalOptions, got {type(options).__name__}"
            )
        values.update(_normalize_keys(overrides))

        if "strategy" in values:
            values["strategy"] = TraversalStrategy.parse(values["strategy"])

        resolved = cls(**values)
        errors = resolved.validate()
        if errors:
            raise TraversalConfigError(f"Invalid options: {'; '.join(errors)}")
        return resolved

    def validate(self) -> List[str]:
        """Validate options for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.children_key, str):
            errors.append("children_key must be a string")

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.adapter is not None and not isinstance(self.adapter, ChildrenAdapter):
            errors.append("adapter must be a ChildrenAdapter")

        return errors

    def children_adapter(self) -> ChildrenAdapter:
        """Return the accessor used to read children during this traversal."""
        if self.adapter is not None:
            return self.adapter
        return KeyedChildrenAdapter(self.children_key)


def _normalize_keys(raw: Mapping[str, Any]) -> dict:
    values = {}
    for key, value in raw.items():
        if key not in _OPTION_ALIASES:
            raise TraversalConfigError(
                f"Unknown option: {key!r}. "
                f"Choose from: children_key, strategy, adapter"
            )
        # None means "use the default"
        if value is not None:
            values[_OPTION_ALIASES[key]] = value
    return values
