"""
AppVeyor plugin — ``.appveyor.yml``, via AppVeyor.jl.

Unlike Travis there is no job cross-product here: the template runs
every version on every platform in ``PLATFORMS``.
"""

from __future__ import annotations

import logging
from typing import Any

from pkgci.core.models.badge import Badge
from pkgci.core.models.plugin import AppVeyor, Codecov
from pkgci.core.models.template import PackageContext
from pkgci.core.services.versions import allowed_failures, collect_versions

logger = logging.getLogger(__name__)

DESTINATION = ".appveyor.yml"

BADGE = Badge(
    hover="Build Status",
    image="https://ci.appveyor.com/api/projects/status/github/{{{USER}}}/{{{PKG}}}.jl?svg=true",
    link="https://ci.appveyor.com/project/{{{USER}}}/{{{PKG}}}-jl",
)


def badges(p: AppVeyor) -> list[Badge]:
    return [BADGE]


def view(p: AppVeyor, ctx: PackageContext, pkg: str) -> dict[str, Any]:
    """Template values for ``.appveyor.yml``."""
    platforms = ["x64"]
    if p.x86:
        platforms.append("x86")

    versions = collect_versions(ctx.version, p.extra_versions)
    failures = allowed_failures(versions)

    logger.debug("appveyor view for %s: platforms=%s", pkg, platforms)

    return {
        "ALLOW_FAILURES": failures,
        "HAS_ALLOW_FAILURES": bool(failures),
        # AppVeyor.jl only knows how to submit to Codecov
        "HAS_CODECOV": p.coverage and ctx.hasplugin(Codecov),
        "PKG": pkg,
        "PLATFORMS": platforms,
        "USER": ctx.user,
        "VERSIONS": versions,
    }
