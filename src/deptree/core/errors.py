"""Errors raised while rendering a dependency tree."""

from __future__ import annotations


class DepTreeError(Exception):
    """Base class for all deptree errors; terminal for one render."""


class NotFoundError(DepTreeError):
    """A requested dependency is not part of the resolved set."""

    def __init__(self, identity: str) -> None:
        super().__init__(f"could not find dependency {identity}")
        self.identity = identity


class ConfigurationError(DepTreeError):
    """Options or input that cannot be rendered (e.g. workspace-only outside a workspace)."""
