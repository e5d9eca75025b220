"""Render a lazily expanded forest as a Graphviz DOT digraph.

Usage::

    dot -Tpng deps_tree.dot -o deps_tree.png
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from deptree.core.formatters import Label

logger = logging.getLogger(__name__)


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _quoted(text: str) -> str:
    return f'"{_escape(text)}"'


def build_dot_graph(
    roots: Sequence[Any],
    expand: Callable[[Any], tuple[Label, Sequence[Any]]],
    title: str,
) -> str:
    """
    Render the forest as a DOT string.

    Each distinct name is declared once, labelled by its first occurrence.
    Each distinct (parent, child) pair becomes one edge and is walked once,
    so a dependency shared by two parents gets two edges but one node.
    """
    declared: set[str] = set()
    seen_edges: set[tuple[str, str]] = set()
    lines = [f"digraph {_quoted(title)} {{"]

    def _walk(item: Any, parent: str | None) -> None:
        (name, info), children = expand(item)
        if parent is not None:
            if (parent, name) in seen_edges:
                return
            seen_edges.add((parent, name))
        if name not in declared:
            declared.add(name)
            label = f"{_escape(name)}\\n{_escape(info)}" if info else _escape(name)
            lines.append(f'  {_quoted(name)} [label="{label}"];')
        if parent is not None:
            lines.append(f"  {_quoted(parent)} -> {_quoted(name)};")
        for child in children:
            _walk(child, name)

    for root in roots:
        _walk(root, None)
    lines.append("}")
    logger.debug("dot graph: %d nodes, %d edges", len(declared), len(seen_edges))
    return "\n".join(lines) + "\n"


def write_dot_graph(
    path: Path | str,
    title: str,
    roots: Sequence[Any],
    expand: Callable[[Any], tuple[Label, Sequence[Any]]],
) -> Path:
    """Render the forest and write it to ``path``, replacing any existing file."""
    dot = build_dot_graph(roots, expand, title)
    out = Path(path)
    out.write_text(dot, encoding="utf-8")
    logger.debug("wrote %s", out)
    return out
