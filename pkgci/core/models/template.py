"""
Package template model — the context every plugin view is built against.

View builders only need three things from the enclosing template: the
owner name, the package's language version, and a way to ask whether a
sibling plugin is present. ``PackageContext`` is that narrow surface;
``Template`` is the concrete implementation loaded from template.yml.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, Union

from packaging.version import Version
from pydantic import BaseModel, ConfigDict, Field, field_validator

from pkgci.core.models.plugin import AnyPlugin, Plugin
from pkgci.core.services.versions import DEFAULT_VERSION

PluginQuery = Union[type, Callable[[Plugin], bool]]


class PackageContext(Protocol):
    """Read-only view of a package template, as seen by a plugin."""

    user: str
    version: Version

    def hasplugin(self, query: PluginQuery) -> bool:
        """Whether a plugin of the given class (or matching the predicate) exists."""
        ...


class Template(BaseModel):
    """A package template: owner, language version, and its plugins.

    Plugins are kept in declaration order; at most one of each kind is
    expected (config check reports duplicates).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    user: str = ""
    version: Version = DEFAULT_VERSION
    plugins: list[AnyPlugin] = Field(default_factory=list)

    @field_validator("version", mode="before")
    @classmethod
    def _parse_version(cls, value: Any) -> Version:
        if isinstance(value, Version):
            return value
        # Numbers built in Python rather than loaded from template.yml
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        return Version(value)

    def hasplugin(self, query: PluginQuery) -> bool:
        """Whether any plugin is an instance of ``query`` (or satisfies it)."""
        if isinstance(query, type):
            return any(isinstance(p, query) for p in self.plugins)
        return any(query(p) for p in self.plugins)

    def plugin(self, kind: str) -> Plugin | None:
        """Look up a plugin by its ``kind``."""
        for p in self.plugins:
            if p.kind == kind:
                return p
        return None

    @property
    def plugin_kinds(self) -> list[str]:
        """All plugin kinds, in declaration order."""
        return [p.kind for p in self.plugins]


class PlannedFile(BaseModel):
    """One render request for the template engine.

    Attributes:
        kind:        Plugin kind that produced it.
        source:      Template file to render.
        destination: Output path, relative to the package root.
        view:        Values to substitute into the template.
        reason:      Why this file is part of the plan.
    """

    kind: str
    source: str
    destination: str
    view: dict[str, Any] = Field(default_factory=dict)
    reason: str = ""
