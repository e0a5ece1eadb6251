"""
Test cases for JSON tree navigation helpers.
"""

import sys
import unittest
from collections import OrderedDict
from decimal import Decimal
from jsontoolkit.core.nodes import (
    NodeKind, format_location, get_element, get_property, iter_children,
    iter_descendants, kind_of, resolve_path
)


class TestKindOf(unittest.TestCase):
    """Test node classification."""

    def test_json_values(self):
        cases = [
            ({}, NodeKind.OBJECT),
            (OrderedDict(), NodeKind.OBJECT),
            ([], NodeKind.ARRAY),
            ((1, 2), NodeKind.ARRAY),
            ("x", NodeKind.STRING),
            (1, NodeKind.NUMBER),
            (1.5, NodeKind.NUMBER),
            (Decimal("1.1"), NodeKind.NUMBER),
            (True, NodeKind.BOOLEAN),
            (False, NodeKind.BOOLEAN),
            (None, NodeKind.NULL),
        ]
        for node, expected in cases:
            with self.subTest(node=node):
                self.assertEqual(kind_of(node), expected)

    def test_non_json_values(self):
        for node in [b"bytes", object(), 1j]:
            with self.subTest(node=node):
                self.assertEqual(kind_of(node), NodeKind.NULL)


class TestLookups(unittest.TestCase):
    """Test property and element access."""

    def test_get_property(self):
        self.assertEqual(get_property({"a": None}, "a"), (True, None))
        self.assertEqual(get_property({"a": 1}, "b"), (False, None))
        self.assertEqual(get_property([1], "a"), (False, None))
        self.assertEqual(get_property("abc", "a"), (False, None))

    def test_get_element(self):
        self.assertEqual(get_element([10, 20], 1), (True, 20))
        self.assertEqual(get_element([10, 20], 2), (False, None))
        self.assertEqual(get_element({"0": 1}, 0), (False, None))
        self.assertEqual(get_element("ab", 0), (False, None))

    def test_resolve_path(self):
        tree = {"a": {"b": {"c": 3}}}
        self.assertEqual(resolve_path(tree, ("a", "b", "c")), (True, 3))
        self.assertEqual(resolve_path(tree, ("a", "x", "c")), (False, None))
        self.assertEqual(resolve_path(tree, ()), (True, tree))

    def test_returns_references(self):
        inner = {"k": [1]}
        found, value = get_property({"inner": inner}, "inner")
        self.assertTrue(found)
        self.assertIs(value, inner)


class TestTraversal(unittest.TestCase):
    """Test child and descendant enumeration."""

    def test_iter_children_order(self):
        self.assertEqual(
            list(iter_children({"b": 1, "a": 2})), [("b", 1), ("a", 2)]
        )
        self.assertEqual(list(iter_children(["x", "y"])), [(0, "x"), (1, "y")])
        self.assertEqual(list(iter_children(5)), [])

    def test_descendants_pre_order(self):
        tree = {"a": {"b": 1, "c": [2, {"d": 3}]}, "e": 4}
        locations = [location for location, _ in iter_descendants(tree)]
        self.assertEqual(
            locations,
            [
                ("a",), ("a", "b"), ("a", "c"), ("a", "c", 0), ("a", "c", 1),
                ("a", "c", 1, "d"), ("e",),
            ]
        )

    def test_deep_tree_does_not_recurse(self):
        depth = sys.getrecursionlimit() + 500
        tree = leaf = {}
        for _ in range(depth):
            leaf["n"] = {}
            leaf = leaf["n"]
        self.assertEqual(sum(1 for _ in iter_descendants(tree)), depth)

    def test_format_location(self):
        self.assertEqual(format_location(()), "$")
        self.assertEqual(format_location(("a", 0, "it's")), "$['a'][0]['it\\'s']")


if __name__ == '__main__':
    unittest.main()
