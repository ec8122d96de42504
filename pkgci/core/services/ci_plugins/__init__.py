"""
CI plugins — views, metadata and classification for each provider.

Each provider module exposes ``view(p, ctx, pkg)`` and ``badges(p)``.
This package dispatches on the plugin's model class, so callers never
need to know which provider they hold:

    from pkgci.core.services import ci_plugins

    ci_plugins.view(plugin, template, "Example")
    ci_plugins.destination(plugin)
    ci_plugins.is_ci(plugin)

Plugins without a provider module (Codecov, Coveralls, Documenter) get
the neutral answers: empty view, no badges, not CI.
"""

from __future__ import annotations

from types import ModuleType
from typing import Any

from pkgci.core.models.badge import Badge
from pkgci.core.models.plugin import (
    AppVeyor,
    CirrusCI,
    DroneCI,
    GitLabCI,
    Plugin,
    TravisCI,
)
from pkgci.core.models.template import PackageContext
from pkgci.core.services.ci_plugins import appveyor, cirrus, drone, gitlab, travis

_PROVIDERS: dict[type[Plugin], ModuleType] = {
    TravisCI: travis,
    AppVeyor: appveyor,
    CirrusCI: cirrus,
    GitLabCI: gitlab,
    DroneCI: drone,
}


def _provider(p: Plugin) -> ModuleType | None:
    return _PROVIDERS.get(type(p))


# ── Classification ──────────────────────────────────────────────


def is_ci(p: Plugin) -> bool:
    """Whether a plugin is a CI plugin (its badges are grouped together)."""
    return _provider(p) is not None


def needs_username(p: Plugin) -> bool:
    """Whether a plugin needs the template's user to be set."""
    return _provider(p) is not None


# ── Metadata ────────────────────────────────────────────────────


def source(p: Plugin) -> str | None:
    """Template file to render, or None for plugins that render nothing."""
    if _provider(p) is None:
        return None
    return p.file


def destination(p: Plugin) -> str | None:
    """Output path relative to the package root."""
    if isinstance(p, DroneCI):
        return p.destination
    provider = _provider(p)
    return provider.DESTINATION if provider else None


def badges(p: Plugin) -> list[Badge]:
    provider = _provider(p)
    return provider.badges(p) if provider else []


def gitignore(p: Plugin) -> list[str]:
    """Patterns the plugin wants in the package's ``.gitignore``."""
    if isinstance(p, GitLabCI):
        return gitlab.gitignore(p)
    return []


def view(p: Plugin, ctx: PackageContext, pkg: str) -> dict[str, Any]:
    """Template values for a plugin's output file."""
    provider = _provider(p)
    return provider.view(p, ctx, pkg) if provider else {}


__all__ = [
    "badges",
    "destination",
    "gitignore",
    "is_ci",
    "needs_username",
    "source",
    "view",
]
