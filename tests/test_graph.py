import io

import pytest

from deprank.graph import DAGError, Node, merge_node_sets, new_node_set, read_dag


def _read(text, root=None):
    return read_dag(io.StringIO(text), root)


def test_root_defaults_to_first_source():
    root = _read("a b\na c\nb c\n")
    assert root.name == "a"
    assert [c.name for c in root.children] == ["b", "c"]


def test_nodes_are_shared_between_edges():
    root = _read("a b\na c\nc b\n")
    b_from_a = root.children[0]
    c = root.children[1]
    assert c.children[0] is b_from_a


def test_duplicate_edges_ignored():
    root = _read("a b\na b\n\n  a b  \n")
    assert [c.name for c in root.children] == ["b"]


def test_explicit_root():
    root = _read("a b\nb c\n", "b")
    assert root.name == "b"
    assert [c.name for c in root.children] == ["c"]


def test_missing_root():
    with pytest.raises(DAGError, match="specified root node was not found"):
        _read("a b\n", "zzz")


def test_no_edges():
    with pytest.raises(DAGError, match="no edges were read"):
        _read("\n   \n")


def test_line_without_space():
    with pytest.raises(DAGError, match="got line without space delimiter"):
        _read("a b\nlonely\n")


def test_target_keeps_remaining_text():
    root = _read("a b c\n")
    assert root.children[0].name == "b c"


def test_windows_line_endings():
    root = _read("a b\r\nb c\r\n")
    assert root.children[0].name == "b"
    assert root.children[0].children[0].name == "c"


def test_str_of_tree():
    root = _read("a b\n")
    assert str(root) == 'Node<Name="a">:\n\tNode<Name="b">\n'


def test_str_of_cycle_mentions_recursion():
    root = _read("a b\nb a\n")
    text = str(root)
    assert "... recursion goes to Node<Name=\"a\"> ..." in text
    assert text.startswith('Node<Name="a">:')


def test_nodes_hash_by_identity():
    first, second = Node("x"), Node("x")
    assert first != second
    assert len(new_node_set(first, second)) == 2


def test_new_node_set_contents():
    a, b = Node("a"), Node("b")
    s = new_node_set(a, b, a)
    assert s == {a, b}


def test_merge_node_sets_is_union():
    a, b, c = Node("a"), Node("b"), Node("c")
    left = new_node_set(a, b)
    right = new_node_set(b, c)
    merged = merge_node_sets(left, right)
    assert merged == {a, b, c}
    assert merge_node_sets(right, left) == merged
    assert left == {a, b}