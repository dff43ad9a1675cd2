import io

from arbora.measure import height
from arbora.node import Node
from arbora.printer import format_tree, print_tree


def _sample_tree() -> Node:
    root = Node(98)
    root.left = Node(12, parent=root)
    root.left.left = Node(6, parent=root.left)
    root.left.right = Node(16, parent=root.left)
    root.right = Node(402, parent=root)
    root.right.left = Node(256, parent=root.right)
    root.right.right = Node(512, parent=root.right)
    return root


def test_worked_example():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert format_tree(_sample_tree()) == expected


def test_empty_tree_renders_nothing():
    assert format_tree(None) == ""


def test_single_node_is_zero_padded():
    assert format_tree(Node(7)) == "(007)\n"


def test_one_line_per_level():
    root = Node(1)
    root.insert_left(2).insert_left(3).insert_right(4)
    lines = format_tree(root).splitlines()
    assert len(lines) == height(root) + 1


def test_every_label_appears_once():
    tree = _sample_tree()
    text = format_tree(tree)
    for value in (98, 12, 6, 16, 402, 256, 512):
        assert text.count(f"({value:03d})") == 1


def test_lines_have_no_trailing_spaces():
    for line in format_tree(_sample_tree()).splitlines():
        assert line == line.rstrip(" ")


def test_print_tree_writes_to_file():
    buffer = io.StringIO()
    print_tree(_sample_tree(), buffer)
    assert buffer.getvalue() == format_tree(_sample_tree())


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(_sample_tree())
    assert capsys.readouterr().out == format_tree(_sample_tree())