"""
Tests for pairing and fair distribution.

Tests cover:
- dist over named fields
- dist_array over positions
- fair_pair / left_first_pair
- Component validation
"""

import pytest

from shrinktree.core.tree import DistributionError, Tree, dist, dist_array, int_tree


def changed_keys(parent: dict, child: dict) -> list:
    return [key for key in parent if parent[key] != child[key]]


class TestDist:
    """Tests for dist."""

    def test_dist_top(self, three_tree, ab_tree):
        """Top maps every field to its tree's top."""
        t = dist({"a": three_tree, "b": ab_tree})
        assert t.top == {"a": 3, "b": "ab"}

    def test_dist_children_count(self, three_tree, ab_tree):
        """m + n children for fields with m and n children."""
        t = dist({"a": three_tree, "b": ab_tree})
        assert len(t.forest()) == 3 + 2

    def test_dist_child_order(self, three_tree, ab_tree):
        """Children are grouped by field in enumeration order."""
        t = dist({"a": three_tree, "b": ab_tree})

        assert [c.top for c in t.forest()] == [
            {"a": 0, "b": "ab"},
            {"a": 1, "b": "ab"},
            {"a": 2, "b": "ab"},
            {"a": 3, "b": "a"},
            {"a": 3, "b": ""},
        ]

    def test_dist_changes_one_field_per_child(self, three_tree, ab_tree):
        """Every child differs from its parent in exactly one field."""
        t = dist({"a": three_tree, "b": ab_tree})

        for child in t.forest():
            assert len(changed_keys(t.top, child.top)) == 1

    def test_dist_one_field_per_child_at_every_level(self):
        """The single-field rule holds all the way down."""
        t = dist({"x": int_tree(4), "y": int_tree(3)})

        def check(node: Tree) -> None:
            for child in node.forest():
                assert len(changed_keys(node.top, child.top)) == 1
                check(child)

        check(t)

    def test_dist_recurses_fairly(self):
        """Grandchildren interleave shrinks of both fields again."""
        t = dist({"x": int_tree(2), "y": int_tree(1)})
        forest = t.forest()

        assert [c.top for c in forest] == [{"x": 0, "y": 1}, {"x": 1, "y": 1}, {"x": 2, "y": 0}]
        assert [c.top for c in forest[1].forest()] == [{"x": 0, "y": 1}, {"x": 1, "y": 0}]

    def test_dist_preserves_key_order(self):
        """Field order follows the mapping's insertion order."""
        t = dist({"b": int_tree(1), "a": int_tree(1)})

        assert list(t.top) == ["b", "a"]
        assert [c.top for c in t.forest()] == [{"b": 0, "a": 1}, {"b": 1, "a": 0}]

    def test_dist_siblings_stay_independent(self):
        """Expanding one child does not disturb earlier siblings."""
        t = dist({"x": int_tree(3), "y": int_tree(2)})
        forest = t.forest()
        expected = [c.force() for c in forest]

        for child in reversed(forest):
            child.forest()

        assert [c.force() for c in forest] == expected

    def test_dist_does_not_mutate_input(self):
        trees = {"x": int_tree(2)}
        t = dist(trees)
        trees["x"] = int_tree(100)

        assert t.top == {"x": 2}
        assert [c.top for c in t.forest()] == [{"x": 0}, {"x": 1}]

    def test_dist_empty(self):
        """No fields: a leaf of the empty mapping."""
        t = dist({})

        assert t.top == {}
        assert t.forest() == []

    def test_dist_staticmethod(self, three_tree):
        """Tree.dist is the same combinator."""
        assert Tree.dist({"a": three_tree}).force() == dist({"a": three_tree}).force()

    def test_dist_rejects_non_tree(self):
        with pytest.raises(DistributionError) as exc_info:
            dist({"a": Tree.of(1), "b": 2})

        assert exc_info.value.key == "b"
        assert isinstance(exc_info.value, TypeError)


class TestDistArray:
    """Tests for dist_array."""

    def test_dist_array_top_is_list(self):
        t = dist_array([int_tree(3), int_tree(2), int_tree(1)])
        assert t.top == [3, 2, 1]

    def test_dist_array_children(self):
        """Each position shrinks on its own, positions in order."""
        t = dist_array([int_tree(3), int_tree(2), int_tree(1)])

        assert [c.top for c in t.forest()] == [
            [0, 2, 1],
            [2, 2, 1],
            [3, 0, 1],
            [3, 1, 1],
            [3, 2, 0],
        ]

    def test_dist_array_length_invariant(self, all_nodes):
        """Every node, at every depth, has the input length."""
        trees = [int_tree(3), int_tree(2), Tree.of(7), int_tree(1)]
        strict = dist_array(trees).force()

        for node in all_nodes(strict):
            assert len(node.top) == len(trees)

    def test_dist_array_empty(self):
        """Empty input: a leaf of the empty list."""
        t = dist_array([])

        assert t.top == []
        assert t.forest() == []

    def test_dist_array_single(self):
        t = dist_array([int_tree(2)])
        assert [c.top for c in t.forest()] == [[0], [1]]

    def test_dist_array_rejects_non_tree(self):
        with pytest.raises(DistributionError) as exc_info:
            dist_array([Tree.of(1), "x"])

        assert exc_info.value.key == 1


class TestPairs:
    """Tests for fair_pair and left_first_pair."""

    def test_fair_pair_scenario(self, three_tree, ab_tree):
        """One child per component shrink, each varying exactly one side."""
        t = three_tree.fair_pair(ab_tree)
        forest = t.forest()

        assert t.top == (3, "ab")
        assert len(forest) == 5
        for child in forest:
            a, b = child.top
            assert (a != 3) != (b != "ab")

    def test_fair_pair_child_order(self, three_tree, ab_tree):
        t = three_tree.fair_pair(ab_tree)

        assert [c.top for c in t.forest()] == [(0, "ab"), (1, "ab"), (2, "ab"), (3, "a"), (3, "")]

    def test_left_first_pair_top(self, three_tree, ab_tree):
        assert three_tree.left_first_pair(ab_tree).top == (3, "ab")

    def test_left_first_pair_shrinks_first_component_first(self, three_tree, ab_tree):
        """Shrinks of the first tree come before any shrink of the second."""
        t = three_tree.left_first_pair(ab_tree)
        tops = [c.top for c in t.forest()]

        assert tops == [(0, "ab"), (1, "ab"), (2, "ab"), (3, "a"), (3, "")]
        assert [c.top for c in t.forest()[0].forest()] == [(0, "a"), (0, "")]

    def test_left_first_pair_with_chained_first_tree(self):
        """A chained first tree lists its outer shrinks before the re-expanded ones."""
        outer = int_tree(2)
        t = outer.chain(lambda n: int_tree(n * 10)).left_first_pair(Tree.of("z"))

        assert t.top == (20, "z")
        assert [c.top for c in t.forest()] == [(0, "z"), (10, "z"), (0, "z"), (10, "z"), (15, "z"), (18, "z"), (19, "z")]

    def test_left_first_pair_stops_shrinking_first_after_second(self):
        """Once the second side has shrunk, the first side is never shrunk again."""
        t = int_tree(2).left_first_pair(int_tree(1))
        second_shrunk = t.forest()[-1]

        assert second_shrunk.top == (2, 0)
        assert second_shrunk.forest() == []

    def test_fair_pair_keeps_shrinking_first_after_second(self):
        """After the second side shrinks, fair_pair still offers shrinks of the first."""
        t = int_tree(2).fair_pair(int_tree(1))
        second_shrunk = t.forest()[-1]

        assert second_shrunk.top == (2, 0)
        assert [c.top for c in second_shrunk.forest()] == [(0, 0), (1, 0)]

    def test_fair_and_left_first_pair_differ_below_root(self):
        """Same root children, different trees overall."""
        fair = int_tree(2).fair_pair(int_tree(1))
        left_first = int_tree(2).left_first_pair(int_tree(1))

        assert [c.top for c in fair.forest()] == [c.top for c in left_first.forest()]
        assert fair.force() != left_first.force()
        assert fair.force().size() > left_first.force().size()
