"""Turn a resolved node into the (name, info) pair printed for it."""

from __future__ import annotations

import re

from deptree.core.node import Requirement, ResolvedNode

Label = tuple[str, str | None]

OVERRIDE_MARKER = " *override*"

_BOLD = "\x1b[1m"
_RESET = "\x1b[0m"

_FLAG_LETTERS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def render_requirement(requirement: Requirement) -> str:
    """Plain requirements verbatim, patterns as /source/flags."""
    if isinstance(requirement, re.Pattern):
        flags = "".join(letter for flag, letter in _FLAG_LETTERS if requirement.flags & flag)
        return f"/{requirement.pattern}/{flags}"
    return str(requirement)


def format_tree(node: ResolvedNode, *, ansi: bool = False) -> Label:
    """Label for text output: requirement, source and override marker."""
    override = ""
    if node.override:
        override = f"{_BOLD}{OVERRIDE_MARKER}{_RESET}" if ansi else OVERRIDE_MARKER
    requirement = ""
    if node.requirement is not None:
        requirement = f"{render_requirement(node.requirement)} "
    return node.identity, f"{requirement}({node.describe_source()}){override}"


def format_dot(node: ResolvedNode) -> Label:
    """Label for DOT output: requirement and override marker only."""
    requirement = "" if node.requirement is None else render_requirement(node.requirement)
    override = OVERRIDE_MARKER if node.override else ""
    return node.identity, f"{requirement}{override}"
