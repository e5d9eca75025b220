"""deptree: render a resolved dependency set as a text tree or DOT graph (library, TUI, CLI)."""

from importlib.metadata import version, PackageNotFoundError

from deptree.api import (
    render_dot,
    render_tree,
    write_dot,
)
from deptree.core import (
    ConfigurationError,
    DepTreeError,
    NotFoundError,
    Project,
    ResolvedNode,
    ResolvedSet,
    load_resolved,
)

__all__ = [
    "render_dot",
    "render_tree",
    "write_dot",
    "ConfigurationError",
    "DepTreeError",
    "NotFoundError",
    "Project",
    "ResolvedNode",
    "ResolvedSet",
    "load_resolved",
    "__version__",
]

try:
    __version__ = version("deptree")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed as package
