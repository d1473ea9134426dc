#!/usr/bin/env python3
"""
Basic traversal example for foreachtree.

This example demonstrates:
- The three strategies on the same tree
- Using depth and parents from the metadata
- Walking a forest with a custom children key
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from foreachtree import traverse, iter_tree


MENU = {
    "title": "Home",
    "children": [
        {"title": "Products", "children": [
            {"title": "Laptops"},
            {"title": "Phones"},
        ]},
        {"title": "About"},
    ],
}


def print_outline(node, meta):
    """Indent by depth, show the breadcrumb trail."""
    trail = " > ".join(p["title"] for p in meta.parents)
    suffix = f"   ({trail})" if trail else ""
    print(f"{'  ' * meta.depth}{node['title']}{suffix}")


def main():
    for strategy in ("pre", "post", "breadth"):
        print(f"\n{strategy}:")
        print("-" * 40)
        traverse(MENU, print_outline, strategy=strategy)

    # A forest keyed on "items" instead of "children"
    forest = [
        {"title": "Docs", "items": [{"title": "Guide"}, {"title": "API"}]},
        {"title": "Blog", "items": [{"title": "2026"}]},
    ]
    leaves = [node["title"] for node, meta in iter_tree(forest, childrenKey="items")
              if meta.depth > 0]
    print(f"\nForest leaves: {', '.join(leaves)}")


if __name__ == "__main__":
    main()
