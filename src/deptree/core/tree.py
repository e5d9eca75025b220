"""Reconstruct the dependency forest from a flat resolved set."""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass
from typing import ClassVar

from deptree.core.errors import ConfigurationError
from deptree.core.formatters import Label, format_tree
from deptree.core.node import ResolvedNode, ResolvedSet
from deptree.core.selector import select_and_sort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Project:
    """The project whose dependencies are shown: its app name and layout."""

    app: str | None = None
    workspace: bool = False


@dataclass(frozen=True)
class RootApp:
    """A root that is not itself a resolved dependency (the project's own app)."""

    name: str
    top_level: ClassVar[bool] = True

    @property
    def identity(self) -> str:
        return self.name

    def label(self, formatter: Formatter) -> Label:
        return self.name, None

    def declared_children(self, resolved: ResolvedSet) -> tuple[ResolvedNode, ...]:
        """The whole forest: every dependency the project requests directly."""
        return resolved.top_level


TreeItem = RootApp | ResolvedNode
Expansion = tuple[Label, list[ResolvedNode]]
Expander = Callable[[TreeItem], Expansion]
Formatter = Callable[[ResolvedNode], Label]


def build_expander(
    resolved: ResolvedSet,
    *,
    formatter: Formatter = format_tree,
    excluded: Collection[str] = (),
    workspace_only: bool = False,
    project: Project = Project(),
) -> Expander:
    """
    Build the function that expands one tree item into its label and children.

    A dependency that is not top-level but also appears at the top level is
    shown without children there, since its subtree is printed under the
    top-level occurrence.

    Raises:
        ConfigurationError: workspace_only was requested outside a workspace.
    """
    if workspace_only and not project.workspace:
        raise ConfigurationError("The workspace-only option can only be used in workspace projects")
    excluded = frozenset(excluded)
    logger.debug(
        "expander over %d deps (%d top-level), excluded=%s, workspace_only=%s",
        len(resolved),
        len(resolved.top_level),
        sorted(excluded),
        workspace_only,
    )

    def expand(item: TreeItem) -> Expansion:
        if not item.top_level and resolved.is_top_level(item.identity):
            children: Sequence[ResolvedNode] = ()
        else:
            children = item.declared_children(resolved)
        return item.label(formatter), select_and_sort(children, excluded, workspace_only)

    return expand


def resolve_roots(
    resolved: ResolvedSet,
    names: Sequence[str],
    project: Project = Project(),
) -> list[TreeItem]:
    """
    Map requested root names to tree items; the project app when none is given.

    Raises:
        ConfigurationError: No names given and the project has no app name.
        NotFoundError: A requested name is not in the resolved set.
    """
    if not names:
        if not project.app:
            raise ConfigurationError("no application given and none found in the project")
        return [RootApp(project.app)]
    return [resolved.get(name) for name in names]
