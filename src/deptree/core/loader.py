"""Load a resolved dependency set from the resolver's JSON output."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from deptree.core.errors import ConfigurationError
from deptree.core.node import (
    GitSource,
    PathSource,
    RegistrySource,
    Requirement,
    ResolvedNode,
    ResolvedSet,
    Source,
)
from deptree.core.tree import Project

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "deps.lock.json"

_REGEX_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


def _parse_requirement(raw: Any, app: str) -> Requirement:
    if raw is None or isinstance(raw, str):
        return raw
    if isinstance(raw, dict) and isinstance(raw.get("regex"), str):
        letters = raw.get("flags", "")
        if not isinstance(letters, str):
            raise ConfigurationError(f"{app}: regex flags must be a string such as \"im\"")
        flags = 0
        for letter in letters:
            if letter not in _REGEX_FLAGS:
                raise ConfigurationError(f"{app}: unknown regex flag {letter!r}")
            flags |= _REGEX_FLAGS[letter]
        try:
            return re.compile(raw["regex"], flags)
        except re.error as e:
            raise ConfigurationError(f"{app}: invalid requirement regex: {e}") from e
    raise ConfigurationError(f"{app}: requirement must be a string, null or {{\"regex\": ...}}")


def _parse_source(raw: Any, app: str) -> Source:
    if raw is None or raw in ("hex", "registry"):
        return RegistrySource()
    if raw == "git":
        return GitSource()
    if raw == "path":
        return PathSource()
    if isinstance(raw, dict) and raw.get("registry"):
        return RegistrySource(registry=str(raw["registry"]))
    raise ConfigurationError(f"{app}: unknown scm {raw!r} (expected hex, git or path)")


def _flag(raw: dict, key: str, where: str) -> bool:
    value = raw.get(key, False)
    if not isinstance(value, bool):
        raise ConfigurationError(f"{where}: '{key}' must be true or false")
    return value


def _entry_app(entry: Any) -> str:
    if not isinstance(entry, dict) or not isinstance(entry.get("app"), str) or not entry["app"]:
        raise ConfigurationError(f"dependency entry without an app name: {entry!r}")
    return entry["app"]


def parse_resolved(data: Any) -> tuple[ResolvedSet, Project]:
    """
    Build the resolved set and project context from decoded JSON.

    Nested ``deps`` entries describe how a parent declares a child; source
    and options default to those of the flat entry with the same app name.
    """
    if not isinstance(data, dict):
        raise ConfigurationError("resolved set must be a JSON object")
    project_raw = data.get("project") or {}
    if not isinstance(project_raw, dict):
        raise ConfigurationError("'project' must be a JSON object")
    app = project_raw.get("app")
    if app is not None and not isinstance(app, str):
        raise ConfigurationError("'project.app' must be a string")
    project = Project(app=app, workspace=_flag(project_raw, "workspace", "project"))

    entries = data.get("deps", [])
    if not isinstance(entries, list):
        raise ConfigurationError("'deps' must be a list")
    flat: dict[str, dict] = {}
    for entry in entries:
        flat.setdefault(_entry_app(entry), entry)

    def _node(entry: dict, *, nested: bool) -> ResolvedNode:
        app = _entry_app(entry)
        base = flat.get(app, {}) if nested else entry
        opts = entry.get("opts", base.get("opts", {}))
        if not isinstance(opts, dict):
            raise ConfigurationError(f"{app}: 'opts' must be a JSON object")
        children = entry.get("deps", []) if not nested else []
        if not isinstance(children, list):
            raise ConfigurationError(f"{app}: 'deps' must be a list")
        return ResolvedNode(
            identity=app,
            requirement=_parse_requirement(entry.get("requirement"), app),
            source=_parse_source(entry.get("scm", base.get("scm")), app),
            options=opts,
            top_level=_flag(entry, "top_level", app),
            children=tuple(_node(child, nested=True) for child in children),
        )

    resolved = ResolvedSet(_node(entry, nested=False) for entry in entries)
    logger.debug("loaded %d resolved deps for project %s", len(resolved), project.app)
    return resolved, project


def load_resolved(path: Path | str = DEFAULT_INPUT) -> tuple[ResolvedSet, Project]:
    """Read and parse a resolved-set JSON file."""
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"resolved set not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"cannot read resolved set {path}: {e}") from e
    return parse_resolved(data)
