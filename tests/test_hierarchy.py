"""Tests for parent/child traversal and the cycle guard."""

import pytest

from gantt_mcp.core.hierarchy import (
    build_children_index,
    check_reparent,
    depth_of,
    descendant_ids,
    find_cycle,
    is_ancestor,
    iter_ancestors,
    parent_candidates,
)
from gantt_mcp.errors import InvalidOperation, MalformedTree, NotFound


@pytest.fixture
def forest(task_factory):
    """
    R1
    ├── X
    │   └── Y
    └── Z
    R2
    """
    tasks = [
        task_factory("R1", "2025-02-03", "2025-02-07"),
        task_factory("X", "2025-02-03", "2025-02-05", parent="R1"),
        task_factory("Y", "2025-02-03", "2025-02-04", parent="X"),
        task_factory("Z", "2025-02-06", "2025-02-07", parent="R1"),
        task_factory("R2", "2025-02-10", "2025-02-10"),
    ]
    return {t.id: t for t in tasks}


@pytest.fixture
def looped(task_factory):
    """P and Q name each other as parents, which the store never allows."""
    p = task_factory("P", "2025-02-03", "2025-02-03").model_copy(update={"parent_id": "Q"})
    q = task_factory("Q", "2025-02-03", "2025-02-03", parent="P")
    return {"P": p, "Q": q}


class TestTraversal:
    """Tests for index building and ancestor walks."""

    def test_children_index(self, forest):
        assert build_children_index(forest) == {"R1": ["X", "Z"], "X": ["Y"]}

    def test_ancestors_nearest_first(self, forest):
        assert list(iter_ancestors(forest, "Y")) == ["X", "R1"]
        assert list(iter_ancestors(forest, "R2")) == []

    def test_is_ancestor_is_strict(self, forest):
        assert is_ancestor(forest, "R1", "Y")
        assert is_ancestor(forest, "X", "Y")
        assert not is_ancestor(forest, "Y", "Y")
        assert not is_ancestor(forest, "Z", "Y")
        assert not is_ancestor(forest, "Y", "R1")

    def test_depth(self, forest):
        assert depth_of(forest, "R1") == 0
        assert depth_of(forest, "X") == 1
        assert depth_of(forest, "Y") == 2

    def test_descendants_depth_first(self, forest):
        children = build_children_index(forest)
        assert descendant_ids(children, "R1") == ["X", "Y", "Z"]
        assert descendant_ids(children, "R2") == []

    def test_dangling_parent_ends_the_walk(self, task_factory):
        tasks = {"T": task_factory("T", "2025-02-03", "2025-02-03", parent="gone")}
        assert list(iter_ancestors(tasks, "T")) == ["gone"]
        assert depth_of(tasks, "T") == 1

    def test_loop_is_detected(self, looped):
        with pytest.raises(MalformedTree):
            list(iter_ancestors(looped, "P"))
        assert find_cycle(looped) == "P"

    def test_no_cycle(self, forest):
        assert find_cycle(forest) is None


class TestCheckReparent:
    """Tests for the reparent cycle guard."""

    def test_move_to_other_branch(self, forest):
        check_reparent(forest, "Y", "Z")

    def test_make_root(self, forest):
        check_reparent(forest, "Y", None)

    def test_self_parent_refused(self, forest):
        with pytest.raises(InvalidOperation, match="own parent"):
            check_reparent(forest, "X", "X")

    def test_descendant_parent_refused(self, forest):
        with pytest.raises(InvalidOperation, match="descendants"):
            check_reparent(forest, "R1", "Y")

    def test_unknown_task(self, forest):
        with pytest.raises(NotFound):
            check_reparent(forest, "nope", "R1")

    def test_unknown_parent(self, forest):
        with pytest.raises(NotFound, match="Parent task 'nope'"):
            check_reparent(forest, "Y", "nope")


class TestParentCandidates:
    """Tests for parent_candidates."""

    def test_excludes_self_and_descendants(self, forest):
        ids = [t.id for t in parent_candidates(forest, "X")]
        assert ids == ["R1", "Z", "R2"]

    def test_leaf_can_go_anywhere_else(self, forest):
        ids = [t.id for t in parent_candidates(forest, "Y")]
        assert ids == ["R1", "X", "Z", "R2"]

    def test_unknown_task(self, forest):
        with pytest.raises(NotFound):
            parent_candidates(forest, "nope")
