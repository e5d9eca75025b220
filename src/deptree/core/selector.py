"""Filter and order the children shown under a tree node."""

from __future__ import annotations

from collections.abc import Collection, Iterable

from deptree.core.node import ResolvedNode


def select_and_sort(
    children: Iterable[ResolvedNode],
    excluded: Collection[str] = (),
    workspace_only: bool = False,
) -> list[ResolvedNode]:
    """
    Return the children to display, sorted by identity.

    Args:
        children: Candidate nodes (a node's declared deps or the top-level set).
        excluded: Identities to leave out.
        workspace_only: If True, keep only workspace members. Whether the
            project has a workspace at all is checked by the caller.
    """
    selected = children
    if workspace_only:
        selected = (n for n in selected if n.workspace_member)
    return sorted(
        (n for n in selected if n.identity not in excluded),
        key=lambda n: n.identity,
    )
