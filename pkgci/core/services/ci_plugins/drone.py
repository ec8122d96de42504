"""
Drone CI plugin — Starlark pipeline.

The template is Starlark rather than YAML, so list fields are handed
over already serialized as list-literal bodies (``"1.0", "1.5"``) and
dropped between brackets by the template.
"""

from __future__ import annotations

import logging
from typing import Any

from pkgci.core.models.badge import Badge
from pkgci.core.models.plugin import DroneCI
from pkgci.core.models.template import PackageContext
from pkgci.core.services.versions import collect_versions, quote_list

logger = logging.getLogger(__name__)

BADGE = Badge(
    hover="Build Status",
    image="https://cloud.drone.io/api/badges/{{{USER}}}/{{{PKG}}}.jl/status.svg",
    link="https://cloud.drone.io/{{{USER}}}/{{{PKG}}}.jl",
)


def _arches(p: DroneCI) -> list[str]:
    arches: list[str] = []
    if p.amd64:
        arches.append("amd64")
    if p.arm:
        arches.append("arm")
    if p.arm64:
        arches.append("arm64")
    return arches


def badges(p: DroneCI) -> list[Badge]:
    return [BADGE]


def view(p: DroneCI, ctx: PackageContext, pkg: str) -> dict[str, Any]:
    """Template values for the Starlark pipeline."""
    arches = _arches(p)
    if not arches:
        logger.warning("Drone plugin for %s has no architectures enabled", pkg)

    return {
        "ARCHES": quote_list(arches),
        "PKG": pkg,
        "USER": ctx.user,
        "VERSIONS": quote_list(collect_versions(ctx.version, p.extra_versions)),
    }
