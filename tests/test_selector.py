"""Tests for deptree.core.selector module."""

from __future__ import annotations

from deptree.core.node import ResolvedNode
from deptree.core.selector import select_and_sort


def _names(nodes: list[ResolvedNode]) -> list[str]:
    return [n.identity for n in nodes]


class TestSelectAndSort:
    """Tests for select_and_sort."""

    def test_sorts_by_identity(self) -> None:
        children = [ResolvedNode("plug"), ResolvedNode("ecto"), ResolvedNode("jason")]
        assert _names(select_and_sort(children)) == ["ecto", "jason", "plug"]

    def test_no_loss_or_duplication(self) -> None:
        children = [ResolvedNode(name) for name in ("d", "b", "a", "c")]
        result = select_and_sort(children, set(), False)
        assert sorted(_names(result)) == sorted(_names(children))
        assert len(result) == len(children)

    def test_excluding_present_identity_removes_only_it(self) -> None:
        children = [ResolvedNode("a"), ResolvedNode("b"), ResolvedNode("c")]
        assert _names(select_and_sort(children, {"b"})) == ["a", "c"]

    def test_excluding_absent_identity_is_noop(self) -> None:
        children = [ResolvedNode("b"), ResolvedNode("a")]
        assert _names(select_and_sort(children, {"zzz"})) == ["a", "b"]

    def test_workspace_only_keeps_members(self) -> None:
        children = [
            ResolvedNode("web", options={"in_umbrella": True}),
            ResolvedNode("plug"),
            ResolvedNode("core", options={"workspace_member": True}),
        ]
        assert _names(select_and_sort(children, (), True)) == ["core", "web"]

    def test_workspace_only_combined_with_exclude(self) -> None:
        children = [
            ResolvedNode("web", options={"in_umbrella": True}),
            ResolvedNode("core", options={"in_umbrella": True}),
        ]
        assert _names(select_and_sort(children, {"core"}, True)) == ["web"]

    def test_deterministic(self) -> None:
        children = [ResolvedNode(name) for name in ("x", "a", "m")]
        assert select_and_sort(children) == select_and_sort(children)

    def test_accepts_generators(self) -> None:
        result = select_and_sort(ResolvedNode(n) for n in ("b", "a"))
        assert _names(result) == ["a", "b"]

    def test_empty(self) -> None:
        assert select_and_sort([]) == []
