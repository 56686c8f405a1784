import pytest

from huffcode.errors import EmptyAlphabetError
from huffcode.frequency import count_frequencies
from huffcode.tree import (
    Node,
    build_huffman_tree,
    count_nodes,
    is_leaf,
    is_released,
    iter_leaves,
    release_tree,
    tree_height,
)


def _internal_nodes(root):
    stack = [root]
    while stack:
        node = stack.pop()
        if not is_leaf(node):
            yield node
            stack.extend([node.left, node.right])


def test_count_frequencies_counts_every_symbol():
    assert count_frequencies("aabbc") == {"a": 2, "b": 2, "c": 1}


def test_count_frequencies_empty_text():
    assert count_frequencies("") == {}


def test_count_frequencies_keeps_first_occurrence_order():
    assert list(count_frequencies("cabbac")) == ["c", "a", "b"]


def test_build_tree_empty_raises():
    with pytest.raises(EmptyAlphabetError):
        build_huffman_tree({})


def test_build_tree_rejects_non_positive_count():
    with pytest.raises(ValueError):
        build_huffman_tree({"a": 3, "b": 0})


def test_single_symbol_tree_is_a_leaf():
    root = build_huffman_tree({"a": 4})
    assert is_leaf(root)
    assert root.char == "a"
    assert root.freq == 4
    assert tree_height(root) == 0


def test_three_symbols_shape():
    root = build_huffman_tree(count_frequencies("abc"))
    assert count_nodes(root) == (3, 2)
    assert root.freq == 3
    assert tree_height(root) == 2


def test_ties_break_by_insertion_order():
    # a, b (freq 1) merge first; c (freq 1) then pairs with the merged node
    root = build_huffman_tree({"a": 1, "b": 1, "c": 1})
    assert root.left.char == "c"
    assert root.right.left.char == "a"
    assert root.right.right.char == "b"


def test_leaves_left_to_right():
    root = build_huffman_tree({"a": 1, "b": 1, "c": 1})
    assert [n.char for n in iter_leaves(root)] == ["c", "a", "b"]


@pytest.mark.parametrize("text", [
    "aabbc",
    "this is an example of a huffman tree",
    "mississippi river",
    "héllo wörld ✓\nline two\ttab",
])
def test_tree_invariants(text):
    freq = count_frequencies(text)
    root = build_huffman_tree(freq)

    leaves = list(iter_leaves(root))
    assert sorted(n.char for n in leaves) == sorted(freq)
    assert sum(n.freq for n in leaves) == len(text)
    assert root.freq == len(text)

    n_leaves, n_internal = count_nodes(root)
    assert n_leaves == len(freq)
    assert n_internal == n_leaves - 1
    for node in _internal_nodes(root):
        assert node.left is not None and node.right is not None
        assert node.char is None
        assert node.freq == node.left.freq + node.right.freq


def test_skewed_frequencies_give_linear_height():
    freq = {chr(ord("a") + i): 2 ** i for i in range(20)}
    root = build_huffman_tree(freq)
    assert tree_height(root) == 19
    assert count_nodes(root) == (20, 19)


def test_release_tree_unlinks_every_node():
    root = build_huffman_tree(count_frequencies("this is an example"))
    nodes = list(_internal_nodes(root))
    release_tree(root)
    for node in nodes:
        assert node.left is None and node.right is None
    # idempotent, and None is accepted
    release_tree(root)
    release_tree(None)


def test_empty_tree_helpers():
    assert list(iter_leaves(None)) == []
    assert count_nodes(None) == (0, 0)
    assert tree_height(None) == -1


def test_node_repr():
    assert repr(Node("a", 2)) == "Node('a', 2)"
    assert repr(Node(freq=5)) == "Node(freq=5)"


def test_is_released():
    root = build_huffman_tree({"a": 1, "b": 2})
    assert not is_released(root)
    assert not is_released(build_huffman_tree({"a": 3}))
    release_tree(root)
    assert is_released(root)
