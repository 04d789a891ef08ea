"""
Tests for token tree models.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import pytest

from gpg_keytag.keyfile.tree import Leaf, Node, is_leaf, is_node, make_field


class TestLeaf:
    """Tests for Leaf construction and equality."""

    def test_bytes_value(self):
        """Test bytes are stored as-is."""
        assert Leaf(b"abc").value == b"abc"

    def test_str_value_encoded_as_utf8(self):
        """Test str values are UTF-8 encoded."""
        assert Leaf("é").value == b"\xc3\xa9"
        assert Leaf("abc") == Leaf(b"abc")

    def test_bytes_like_values_are_copied(self):
        """Test bytearray/memoryview become owned bytes."""
        raw = bytearray(b"abc")
        leaf = Leaf(raw)
        raw[0] = ord("x")
        assert leaf.value == b"abc"
        assert isinstance(leaf.value, bytes)
        assert Leaf(memoryview(b"xyz")).value == b"xyz"

    def test_empty_leaf(self):
        """Test default leaf is empty."""
        assert Leaf().value == b""
        assert Leaf(b"") == Leaf()

    def test_invalid_value_type(self):
        """Test non bytes-like values are rejected."""
        with pytest.raises(TypeError):
            Leaf(42)

    def test_leaf_is_immutable_and_hashable(self):
        """Test Leaf is frozen and usable in sets."""
        leaf = Leaf(b"a")
        with pytest.raises(AttributeError):
            leaf.value = b"b"
        assert {Leaf(b"a"), Leaf(b"a")} == {leaf}


class TestNode:
    """Tests for Node construction and equality."""

    def test_empty_node(self):
        """Test default node has no children."""
        assert Node().children == []
        assert Node([]) == Node()

    def test_children_list_is_owned(self):
        """Test the node copies the iterable it is given."""
        children = [Leaf(b"a")]
        node = Node(children)
        children.append(Leaf(b"b"))
        assert node.children == [Leaf(b"a")]
        assert Node(iter([Leaf(b"a")])) == node

    def test_structural_equality(self):
        """Test equality compares children recursively and in order."""
        a = Node([Leaf(b"x"), Node([Leaf(b"y")])])
        b = Node([Leaf(b"x"), Node([Leaf(b"y")])])
        assert a == b
        assert a != Node([Node([Leaf(b"y")]), Leaf(b"x")])
        assert a != Node([Leaf(b"x"), Node([Leaf(b"z")])])

    def test_leaf_never_equals_node(self):
        """Test variants are distinct."""
        assert Leaf(b"") != Node([])
        assert Node([Leaf(b"a")]) != Leaf(b"a")

    def test_node_is_not_hashable(self):
        """Test mutable nodes are unhashable."""
        with pytest.raises(TypeError):
            hash(Node([]))


def test_predicates() -> None:
    assert is_leaf(Leaf(b"a"))
    assert not is_leaf(Node([]))
    assert is_node(Node([]))
    assert not is_node(Leaf(b"a"))


def test_make_field() -> None:
    assert make_field("comment", "hi") == Node([Leaf(b"comment"), Leaf(b"hi")])
