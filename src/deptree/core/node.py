"""Resolved dependency records, their sources, and the flat resolved set."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from deptree.core.errors import ConfigurationError, NotFoundError

Requirement = str | re.Pattern[str] | None


@dataclass(frozen=True)
class RegistrySource:
    """Package fetched from a package registry (Hex by default)."""

    registry: str = "Hex"

    def describe(self, options: Mapping[str, Any]) -> str:
        return f"{self.registry} package"


@dataclass(frozen=True)
class GitSource:
    """Package checked out from a git repository given by options["git"]."""

    def describe(self, options: Mapping[str, Any]) -> str:
        url = _redact_uri(str(options.get("git", "")))
        for key in ("branch", "ref", "tag"):
            rev = options.get(key)
            if rev:
                return f"{url} - {rev}"
        return url


@dataclass(frozen=True)
class PathSource:
    """Package used straight from a local directory given by options["path"]."""

    def describe(self, options: Mapping[str, Any]) -> str:
        return str(options.get("path", ""))


Source = RegistrySource | GitSource | PathSource


def _redact_uri(uri: str) -> str:
    """Hide the password part of credentials embedded in a URL."""
    parts = urlsplit(uri)
    if parts.password is None:
        return uri
    host = parts.netloc.rpartition("@")[2]
    return urlunsplit(parts._replace(netloc=f"{parts.username}:*****@{host}"))


@dataclass(frozen=True)
class ResolvedNode:
    """
    One dependency as produced by the resolver.

    ``children`` holds the dependencies this node declares, as nested nodes
    carrying the requirement and top-level flag of that occurrence. Expansion
    always goes back to the flat set by identity to find grandchildren.
    """

    identity: str
    requirement: Requirement = None
    source: Source = field(default_factory=RegistrySource)
    options: Mapping[str, Any] = field(default_factory=dict)
    top_level: bool = False
    children: tuple[ResolvedNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def override(self) -> bool:
        return bool(self.options.get("override"))

    @property
    def workspace_member(self) -> bool:
        """True for packages developed inside the same workspace (umbrella app)."""
        return bool(self.options.get("workspace_member") or self.options.get("in_umbrella"))

    def describe_source(self) -> str:
        return self.source.describe(self.options)

    def label(self, formatter: Callable[[ResolvedNode], tuple[str, str | None]]) -> tuple[str, str | None]:
        return formatter(self)

    def declared_children(self, resolved: ResolvedSet) -> tuple[ResolvedNode, ...]:
        """Children declared by the flat-set entry with this identity."""
        return resolved.get(self.identity).children


class ResolvedSet:
    """Flat, ordered, read-only collection of resolved nodes keyed by identity."""

    def __init__(self, nodes: Iterable[ResolvedNode]) -> None:
        self._nodes: tuple[ResolvedNode, ...] = tuple(nodes)
        self._by_identity: dict[str, ResolvedNode] = {}
        for node in self._nodes:
            if node.identity in self._by_identity:
                raise ConfigurationError(f"duplicate dependency in resolved set: {node.identity}")
            self._by_identity[node.identity] = node
        self._top_level = tuple(n for n in self._nodes if n.top_level)
        self._top_level_names = frozenset(n.identity for n in self._top_level)

    def __iter__(self) -> Iterator[ResolvedNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, identity: object) -> bool:
        return identity in self._by_identity

    @property
    def top_level(self) -> tuple[ResolvedNode, ...]:
        """Nodes directly requested by the project, in resolver order."""
        return self._top_level

    def is_top_level(self, identity: str) -> bool:
        return identity in self._top_level_names

    def find(self, identity: str) -> ResolvedNode | None:
        return self._by_identity.get(identity)

    def get(self, identity: str) -> ResolvedNode:
        """Like find(), but raise NotFoundError for an unknown identity."""
        node = self._by_identity.get(identity)
        if node is None:
            raise NotFoundError(identity)
        return node
