"""Public API: use deptree from Python or from other tools."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from functools import partial
from pathlib import Path

from deptree.core.dot import build_dot_graph, write_dot_graph
from deptree.core.formatters import format_dot, format_tree
from deptree.core.node import ResolvedSet
from deptree.core.printer import print_tree
from deptree.core.tree import Project, build_expander, resolve_roots

DOT_TITLE = "dependency tree"
DOT_FILE = "deps_tree.dot"


def render_tree(
    resolved: ResolvedSet,
    roots: Sequence[str] = (),
    *,
    project: Project = Project(),
    format: str | None = None,
    excluded: Collection[str] = (),
    workspace_only: bool = False,
    ansi: bool = False,
) -> str:
    """
    Render the dependency tree as text.

    Args:
        resolved: Flat resolved dependency set.
        roots: Dependency names to start from; the project app when empty.
        project: Project context (app name, workspace layout).
        format: "pretty" (Unicode) or "plain" (ASCII); platform default if None.
        excluded: Dependency names to hide.
        workspace_only: Only show workspace members (requires project.workspace).
        ansi: Emphasize the override marker with ANSI bold.

    Returns:
        The full tree text, without a trailing newline.
    """
    expand = build_expander(
        resolved,
        formatter=partial(format_tree, ansi=ansi),
        excluded=excluded,
        workspace_only=workspace_only,
        project=project,
    )
    items = resolve_roots(resolved, roots, project)
    return print_tree(items, expand, format)


def render_dot(
    resolved: ResolvedSet,
    roots: Sequence[str] = (),
    *,
    project: Project = Project(),
    excluded: Collection[str] = (),
    workspace_only: bool = False,
    title: str = DOT_TITLE,
) -> str:
    """Render the dependency tree as a DOT digraph string."""
    expand = build_expander(
        resolved,
        formatter=format_dot,
        excluded=excluded,
        workspace_only=workspace_only,
        project=project,
    )
    items = resolve_roots(resolved, roots, project)
    return build_dot_graph(items, expand, title)


def write_dot(
    resolved: ResolvedSet,
    roots: Sequence[str] = (),
    *,
    path: Path | str = DOT_FILE,
    project: Project = Project(),
    excluded: Collection[str] = (),
    workspace_only: bool = False,
    title: str = DOT_TITLE,
) -> Path:
    """Render the DOT graph and write it to ``path`` (overwriting it)."""
    expand = build_expander(
        resolved,
        formatter=format_dot,
        excluded=excluded,
        workspace_only=workspace_only,
        project=project,
    )
    items = resolve_roots(resolved, roots, project)
    return write_dot_graph(path, title, items, expand)
