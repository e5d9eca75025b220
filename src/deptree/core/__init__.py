"""Core library: resolved-node model, tree reconstruction, text and DOT rendering."""

from deptree.core.dot import build_dot_graph, write_dot_graph
from deptree.core.errors import ConfigurationError, DepTreeError, NotFoundError
from deptree.core.formatters import format_dot, format_tree, render_requirement
from deptree.core.loader import load_resolved, parse_resolved
from deptree.core.node import GitSource, PathSource, RegistrySource, ResolvedNode, ResolvedSet
from deptree.core.printer import default_format, print_tree
from deptree.core.selector import select_and_sort
from deptree.core.tree import Project, RootApp, build_expander, resolve_roots

__all__ = [
    "build_dot_graph",
    "write_dot_graph",
    "ConfigurationError",
    "DepTreeError",
    "NotFoundError",
    "format_dot",
    "format_tree",
    "render_requirement",
    "load_resolved",
    "parse_resolved",
    "GitSource",
    "PathSource",
    "RegistrySource",
    "ResolvedNode",
    "ResolvedSet",
    "default_format",
    "print_tree",
    "select_and_sort",
    "Project",
    "RootApp",
    "build_expander",
    "resolve_roots",
]
