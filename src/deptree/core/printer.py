"""Print a lazily expanded forest as an indented text tree."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from typing import Any, NamedTuple

from deptree.core.errors import ConfigurationError
from deptree.core.formatters import Label


class Glyphs(NamedTuple):
    middle: str
    last: str
    bar: str
    blank: str


GLYPHS = {
    "pretty": Glyphs("├── ", "└── ", "│   ", "    "),
    "plain": Glyphs("|-- ", "`-- ", "|   ", "    "),
}


def default_format() -> str:
    """Unicode connectors everywhere except on Windows consoles."""
    return "plain" if os.name == "nt" else "pretty"


def print_tree(
    roots: Sequence[Any],
    expand: Callable[[Any], tuple[Label, Sequence[Any]]],
    format: str | None = None,
) -> str:
    """
    Render every root and its expanded descendants, depth-first.

    Roots start at column 0 without a connector. ``expand`` maps an item to
    ``((name, info), children)``; children are printed in the order given.
    Returns the text without a trailing newline.
    """
    mode = format or default_format()
    glyphs = GLYPHS.get(mode)
    if glyphs is None:
        raise ConfigurationError(f"unknown tree format: {mode} (expected pretty or plain)")

    lines: list[str] = []

    def _walk(item: Any, indent: str, connector: str, child_indent: str) -> None:
        (name, info), children = expand(item)
        suffix = f" {info}" if info else ""
        lines.append(f"{indent}{connector}{name}{suffix}")
        for i, child in enumerate(children):
            is_last = i == len(children) - 1
            _walk(
                child,
                child_indent,
                glyphs.last if is_last else glyphs.middle,
                child_indent + (glyphs.blank if is_last else glyphs.bar),
            )

    for root in roots:
        _walk(root, "", "", "")
    return "\n".join(lines)
