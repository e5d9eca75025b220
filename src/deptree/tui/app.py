"""Textual TUI for browsing a resolved dependency tree."""

from __future__ import annotations

from collections.abc import Collection
from typing import Any

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Footer, Header, Static, Tree
from textual.widgets.tree import TreeNode

from deptree.core.formatters import Label, OVERRIDE_MARKER, render_requirement
from deptree.core.node import ResolvedNode, ResolvedSet
from deptree.core.tree import Project, TreeItem, build_expander, resolve_roots

# Cap for "expand all" so huge sets stay responsive
MAX_EXPANDED_NODES = 500

COLOR_PKG = "white"
COLOR_ROOT = "bold cyan"
COLOR_OVERRIDE = "bold yellow"


def _node_label(label: Label) -> str:
    """Rich markup for a tree line: name, dim info, highlighted override marker."""
    name, info = label
    if not info:
        return f"[{COLOR_ROOT}]{escape(name)}[/]"
    text = f"[{COLOR_PKG}]{escape(name)}[/]"
    if info.endswith(OVERRIDE_MARKER):
        info = info[: -len(OVERRIDE_MARKER)]
        return f"{text} [dim]{escape(info)}[/][{COLOR_OVERRIDE}]{OVERRIDE_MARKER}[/]"
    return f"{text} [dim]{escape(info)}[/]"


def _details_text(item: TreeItem | None) -> str:
    """Text for the details panel of the highlighted node."""
    if not isinstance(item, ResolvedNode):
        return "[dim]↑/↓[/] move  ·  [dim]Enter[/]/[dim]Space[/] expand  ·  [dim]q[/] quit"
    lines = [f"[bold]{escape(item.identity)}[/]"]
    if item.requirement is not None:
        lines.append(f"Requirement: {escape(render_requirement(item.requirement))}")
    lines.append(f"Source: {escape(item.describe_source())}")
    lines.append(f"Top-level: {'yes' if item.top_level else 'no'}")
    if item.override:
        lines.append(f"[{COLOR_OVERRIDE}]override[/]")
    return "\n".join(lines)


class DepTreeApp(App[None]):
    """Terminal UI to expand a dependency tree one level at a time."""

    TITLE = "deptree"
    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("e", "expand_all", "Expand all"),
        Binding("c", "collapse_all", "Collapse"),
    ]

    DEFAULT_CSS = """
    #details {
        padding: 1 2;
        border: solid $primary;
        height: auto;
        min-height: 6;
    }
    """

    def __init__(
        self,
        resolved: ResolvedSet,
        *,
        project: Project = Project(),
        root: str | None = None,
        excluded: Collection[str] = (),
        workspace_only: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        # Both raise before the UI starts, like the text renderer
        self._expand = build_expander(
            resolved,
            excluded=excluded,
            workspace_only=workspace_only,
            project=project,
        )
        self._root_item = resolve_roots(resolved, [root] if root else [], project)[0]
        self._populated: set[int] = set()

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Container(id="main_container"):
            label, _ = self._expand(self._root_item)
            yield Tree(_node_label(label), data=self._root_item, id="dep_tree")
            yield Static(_details_text(None), id="details", markup=True)
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = "Dependency Tree"
        tree = self.query_one("#dep_tree", Tree)
        self._populate(tree.root)
        tree.root.expand()
        tree.focus()

    def _populate(self, tn: TreeNode) -> int:
        """Add the children of a tree node on first expansion; return how many were added."""
        if tn.id in self._populated:
            return 0
        self._populated.add(tn.id)
        _, children = self._expand(tn.data)
        for child in children:
            label, grandchildren = self._expand(child)
            tn.add(_node_label(label), data=child, allow_expand=bool(grandchildren))
        return len(children)

    def on_tree_node_expanded(self, event: Tree.NodeExpanded) -> None:
        self._populate(event.node)

    def on_tree_node_highlighted(self, event: Tree.NodeHighlighted) -> None:
        self.query_one("#details", Static).update(_details_text(event.node.data))

    def action_expand_all(self) -> None:
        tree = self.query_one("#dep_tree", Tree)
        budget = MAX_EXPANDED_NODES
        pending = [tree.root]
        while pending and budget > 0:
            tn = pending.pop(0)
            budget -= self._populate(tn)
            tn.expand()
            pending.extend(c for c in tn.children if c.allow_expand)
        if pending:
            self.notify(f"Stopped after {MAX_EXPANDED_NODES} nodes", severity="warning", timeout=3)

    def action_collapse_all(self) -> None:
        tree = self.query_one("#dep_tree", Tree)
        tree.root.collapse_all()
        tree.root.expand()
