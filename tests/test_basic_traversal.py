"""Basic tests for foreachtree functionality.

This test file demonstrates that the core functionality works correctly
on a small hand-built tree.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from foreachtree import traverse, iter_tree, foreach, TraversalMeta


def create_test_tree():
    """Create the reference tree.

    Structure:
    1
    ├── 2
    │   └── 4
    └── 3
    """
    node4 = {"id": 4}
    node2 = {"id": 2, "children": [node4]}
    node3 = {"id": 3}
    node1 = {"id": 1, "children": [node2, node3]}
    return node1, node2, node3, node4


def visit_ids(tree, **options):
    ids = []
    traverse(tree, lambda node, meta: ids.append(node["id"]), **options)
    return ids


def test_pre_order_is_default():
    """Test default traversal is pre-order."""
    print("\n=== Test: Pre-order (default) ===")
    root, *_ = create_test_tree()

    assert visit_ids(root) == [1, 2, 4, 3]
    assert visit_ids(root, strategy="pre") == [1, 2, 4, 3]
    print("[PASS] Pre-order traversal passed")


def test_breadth_first_order():
    """Test breadth-first visits level by level."""
    print("\n=== Test: Breadth-first ===")
    root, *_ = create_test_tree()

    assert visit_ids(root, strategy="breadth") == [1, 2, 3, 4]
    print("[PASS] Breadth-first traversal passed")


def test_post_order():
    """Test post-order visits every subtree before its root."""
    print("\n=== Test: Post-order ===")
    root, *_ = create_test_tree()

    assert visit_ids(root, strategy="post") == [4, 2, 3, 1]
    print("[PASS] Post-order traversal passed")


def test_metadata_for_deepest_node():
    """Test node 4 reports depth 2 and parents [1, 2] under every strategy."""
    root, node2, _, node4 = create_test_tree()

    for strategy in ("pre", "post", "breadth"):
        seen = {}
        traverse(root, lambda node, meta: seen.__setitem__(node["id"], meta),
                 strategy=strategy)

        meta = seen[4]
        assert meta.depth == 2, strategy
        assert len(meta.parents) == 2
        assert meta.parents[0] is root
        assert meta.parents[1] is node2
        assert meta.parent is node2


def test_root_metadata():
    """Test the root has depth 0 and no parents."""
    root, *_ = create_test_tree()
    metas = []
    traverse(root, lambda node, meta: metas.append((node, meta)))

    first_node, first_meta = metas[0]
    assert first_node is root
    assert first_meta == TraversalMeta(depth=0, parents=())
    assert first_meta.is_root
    assert first_meta.parent is None


def test_callback_return_value_ignored():
    """Test callbacks may return anything without affecting traversal."""
    root, *_ = create_test_tree()
    calls = []

    def callback(node, meta):
        calls.append(node["id"])
        return False

    traverse(root, callback)
    assert calls == [1, 2, 4, 3]


def test_traverse_returns_none():
    root, *_ = create_test_tree()
    assert traverse(root, lambda node, meta: None) is None


def test_foreach_alias():
    """Test the foreach alias behaves like traverse."""
    root, *_ = create_test_tree()
    ids = []
    foreach(root, lambda node, meta: ids.append(node["id"]), {"strategy": "breadth"})
    assert ids == [1, 2, 3, 4]


def test_iter_tree_matches_traverse():
    """Test the iterator form yields the same visits as the callback form."""
    root, *_ = create_test_tree()

    for strategy in ("pre", "post", "breadth"):
        from_callback = []
        traverse(root, lambda node, meta: from_callback.append((node["id"], meta.depth)),
                 strategy=strategy)
        from_iterator = [(node["id"], meta.depth)
                         for node, meta in iter_tree(root, strategy=strategy)]
        assert from_iterator == from_callback


def test_custom_children_key():
    """Test only the configured children key is followed."""
    tree = {
        "id": 1,
        "kids": [{"id": 2, "kids": [{"id": 3}]}],
        "children": [{"id": 99}],
    }

    assert visit_ids(tree, children_key="kids") == [1, 2, 3]
    assert visit_ids(tree, childrenKey="kids") == [1, 2, 3]
    assert visit_ids(tree) == [1, 99]


def test_leaf_only_tree():
    """Test a single node with no children."""
    assert visit_ids({"id": 7}) == [7]
    assert visit_ids({"id": 7, "children": []}, strategy="post") == [7]
