"""Command-line interface for deptree: print the dependency tree or write a DOT graph."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from deptree.api import DOT_FILE, render_tree, write_dot
from deptree.core.errors import DepTreeError
from deptree.core.loader import DEFAULT_INPUT, load_resolved

LOG_FORMAT = "[%(levelname)s] %(message)s"

DOT_HINT = """\
Generated "{path}". To generate a PNG:

    dot -Tpng {path} -o {png}

For more options see http://www.graphviz.org/."""


def _use_ansi() -> bool:
    """Emphasize output only on a terminal, and never when NO_COLOR is set."""
    return sys.stdout.isatty() and "NO_COLOR" not in os.environ


def cmd_tree(args: argparse.Namespace) -> int:
    """Show the dependency tree, or write it as a DOT graph."""
    try:
        resolved, project = load_resolved(args.input)
        if args.format == "dot":
            out_path = write_dot(
                resolved,
                args.roots,
                path=args.output,
                project=project,
                excluded=args.exclude or (),
                workspace_only=args.workspace_only,
            )
            print(DOT_HINT.format(path=out_path, png=out_path.with_suffix(".png")))
            return 0
        text = render_tree(
            resolved,
            args.roots,
            project=project,
            format=args.format,
            excluded=args.exclude or (),
            workspace_only=args.workspace_only,
            ansi=_use_ansi(),
        )
    except (DepTreeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(text)
    return 0


def cmd_tui(args: argparse.Namespace) -> int:
    """Launch the interactive TUI."""
    from deptree.tui.app import DepTreeApp

    try:
        resolved, project = load_resolved(args.input)
        app = DepTreeApp(
            resolved,
            project=project,
            root=args.root,
            excluded=args.exclude or (),
            workspace_only=args.workspace_only,
        )
    except DepTreeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    app.run()
    return 0


def _add_selection_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i",
        "--input",
        metavar="PATH",
        type=Path,
        default=Path(DEFAULT_INPUT),
        help=f"Resolved dependency set (JSON) to read (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        metavar="NAME",
        help="Dependency to leave out (can be repeated)",
    )
    parser.add_argument(
        "--workspace-only",
        "--umbrella-only",
        dest="workspace_only",
        action="store_true",
        help="Only include the workspace (umbrella) packages",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the deptree CLI."""
    parser = argparse.ArgumentParser(
        prog="deptree",
        description="Show a resolved dependency set as a tree or a DOT graph.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "--loglevel",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics on stderr (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # deptree tree
    tree_parser = subparsers.add_parser(
        "tree",
        help="Print the dependency tree",
        description=(
            "Print the dependency tree. Without arguments, starts from the "
            "project's own application."
        ),
    )
    tree_parser.add_argument(
        "roots",
        nargs="*",
        metavar="DEP",
        help="Dependencies to start from (default: the project app)",
    )
    tree_parser.add_argument(
        "-f",
        "--format",
        choices=["pretty", "plain", "dot"],
        default=None,
        help="pretty (Unicode), plain (ASCII) or dot (writes a Graphviz file). "
        "Default: plain on Windows, pretty elsewhere",
    )
    tree_parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        default=DOT_FILE,
        help=f"DOT file to write with --format dot, overwritten if present (default: {DOT_FILE})",
    )
    _add_selection_args(tree_parser)
    tree_parser.set_defaults(func=cmd_tree)

    # deptree tui
    tui_parser = subparsers.add_parser(
        "tui",
        help="Browse the dependency tree in a terminal UI",
        description="Start the interactive TUI for expanding the dependency tree.",
    )
    tui_parser.add_argument(
        "root",
        nargs="?",
        help="Optional: start from this dependency instead of the project app",
    )
    _add_selection_args(tui_parser)
    tui_parser.set_defaults(func=cmd_tui)

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.loglevel), format=LOG_FORMAT)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
