"""Tests for deptree.core.loader module."""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from deptree.core.errors import ConfigurationError
from deptree.core.loader import load_resolved, parse_resolved
from deptree.core.node import GitSource, PathSource, RegistrySource

SAMPLE = {
    "project": {"app": "my_app", "workspace": True},
    "deps": [
        {
            "app": "phoenix",
            "requirement": "~> 1.7",
            "top_level": True,
            "opts": {"in_umbrella": False},
            "deps": [
                {"app": "plug", "requirement": {"regex": "^1\\.1", "flags": "i"}},
                {"app": "shared"},
            ],
        },
        {"app": "plug", "scm": "git", "opts": {"git": "https://github.com/elixir-plug/plug.git", "tag": "v1.14.0"}},
        {"app": "shared", "scm": "path", "top_level": True, "opts": {"path": "../shared", "override": True}},
    ],
}


class TestParseResolved:
    """Tests for parse_resolved."""

    def test_project(self) -> None:
        _, project = parse_resolved(SAMPLE)
        assert project.app == "my_app"
        assert project.workspace is True

    def test_flat_nodes(self) -> None:
        resolved, _ = parse_resolved(SAMPLE)
        assert [n.identity for n in resolved] == ["phoenix", "plug", "shared"]
        phoenix = resolved.get("phoenix")
        assert phoenix.requirement == "~> 1.7"
        assert phoenix.top_level is True
        assert phoenix.source == RegistrySource()
        assert resolved.get("plug").source == GitSource()
        assert resolved.get("shared").source == PathSource()
        assert resolved.get("plug").top_level is False

    def test_nested_children_inherit_source_and_opts(self) -> None:
        resolved, _ = parse_resolved(SAMPLE)
        plug, shared = resolved.get("phoenix").children
        assert plug.identity == "plug"
        assert plug.source == GitSource()
        assert plug.options["tag"] == "v1.14.0"
        assert plug.top_level is False
        assert isinstance(plug.requirement, re.Pattern)
        assert plug.requirement.pattern == "^1\\.1"
        assert plug.requirement.flags & re.IGNORECASE
        assert shared.requirement is None
        assert shared.override is True

    def test_missing_project_defaults(self) -> None:
        resolved, project = parse_resolved({"deps": []})
        assert len(resolved) == 0
        assert project.app is None
        assert project.workspace is False

    @pytest.mark.parametrize(
        "data, message",
        [
            ([], "JSON object"),
            ({"deps": {}}, "'deps' must be a list"),
            ({"deps": [{"requirement": "1.0"}]}, "without an app name"),
            ({"deps": [{"app": "a", "scm": "svn"}]}, "unknown scm"),
            ({"deps": [{"app": "a", "requirement": 1}]}, "requirement must be"),
            ({"deps": [{"app": "a", "requirement": {"regex": "("}}]}, "invalid requirement regex"),
            ({"deps": [{"app": "a", "requirement": {"regex": "a", "flags": "q"}}]}, "unknown regex flag"),
            ({"deps": [{"app": "a", "requirement": {"regex": "a", "flags": None}}]}, "regex flags must be a string"),
            ({"deps": [{"app": "a", "requirement": {"regex": "a", "flags": 1}}]}, "regex flags must be a string"),
            ({"project": {"app": 5}, "deps": []}, "'project.app' must be a string"),
            ({"project": {"workspace": "false"}, "deps": []}, "'workspace' must be true or false"),
            ({"deps": [{"app": "a", "top_level": "yes"}]}, "'top_level' must be true or false"),
            ({"deps": [{"app": "a", "opts": []}]}, "'opts' must be"),
            ({"deps": [{"app": "a"}, {"app": "a"}]}, "duplicate"),
        ],
    )
    def test_malformed(self, data: object, message: str) -> None:
        with pytest.raises(ConfigurationError, match=message):
            parse_resolved(data)


class TestLoadResolved:
    """Tests for load_resolved."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "deps.lock.json"
        path.write_text(json.dumps(SAMPLE))
        resolved, project = load_resolved(path)
        assert "phoenix" in resolved
        assert project.app == "my_app"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_resolved(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="cannot read"):
            load_resolved(path)
