from arbora.node import Node, lowest_common_ancestor


def build(spec, parent=None):
    if spec is None:
        return None
    if isinstance(spec, int):
        return Node(spec, parent=parent)
    value, left, right = spec
    node = Node(value, parent=parent)
    node.left = build(left, node)
    node.right = build(right, node)
    return node


MAIN_TREE = (98, (12, 6, 16), (402, 256, 512))


def test_new_node_has_given_parent_and_no_children():
    parent = Node(98)
    child = Node(12, parent=parent)
    assert child.parent is parent
    assert child.left is None and child.right is None
    assert child.value == 12


def test_insert_left_into_empty_slot():
    root = Node(98)
    node = root.insert_left(12)
    assert root.left is node
    assert node.parent is root
    assert node.left is None


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.parent is root


def test_insert_right_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_right(402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.right.value == 402


def test_is_leaf_and_is_root():
    root = build(MAIN_TREE)
    assert root.is_root() and not root.is_leaf()
    assert root.left.left.is_leaf()
    assert not root.left.left.is_root()


def test_depth_counts_edges_to_root():
    root = Node(0)
    node = root
    for expected in range(1, 6):
        node = node.insert_left(expected)
        assert node.depth() == expected
    assert root.depth() == 0


def test_sibling():
    root = build(MAIN_TREE)
    assert root.left.sibling() is root.right
    assert root.right.sibling() is root.left
    assert root.sibling() is None


def test_sibling_missing():
    root = Node(1)
    child = root.insert_left(2)
    assert child.sibling() is None


def test_uncle():
    root = build(MAIN_TREE)
    assert root.left.left.uncle() is root.right
    assert root.right.right.uncle() is root.left
    assert root.left.uncle() is None
    assert root.uncle() is None


def test_ancestors_from_self_to_root():
    root = build(MAIN_TREE)
    leaf = root.right.left
    chain = list(leaf.ancestors())
    assert chain[0] is leaf
    assert chain[-1] is root
    assert chain[1] is root.right
    assert len(chain) == leaf.depth() + 1


def test_lowest_common_ancestor_of_cousins_is_root():
    root = build(MAIN_TREE)
    assert lowest_common_ancestor(root.left.left, root.right.right) is root


def test_lowest_common_ancestor_of_siblings_is_parent():
    root = build(MAIN_TREE)
    assert lowest_common_ancestor(root.left.left, root.left.right) is root.left


def test_lowest_common_ancestor_of_node_and_descendant():
    root = build(MAIN_TREE)
    assert lowest_common_ancestor(root.right, root.right.left) is root.right
    assert lowest_common_ancestor(root.left, root.left) is root.left


def test_lowest_common_ancestor_missing_node_or_separate_trees():
    root = build(MAIN_TREE)
    other = build(MAIN_TREE)
    assert lowest_common_ancestor(root, None) is None
    assert lowest_common_ancestor(None, root) is None
    assert lowest_common_ancestor(root.left, other.left) is None


def test_nodes_compare_by_identity():
    assert Node(5) != Node(5)
    node = Node(5)
    assert {node, node} == {node}