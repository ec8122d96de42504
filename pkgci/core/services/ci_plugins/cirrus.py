"""
Cirrus CI plugin — ``.cirrus.yml``, FreeBSD builds via CirrusCI.jl.
"""

from __future__ import annotations

import logging
from typing import Any

from pkgci.core.models.badge import Badge
from pkgci.core.models.plugin import CirrusCI, Codecov, Coveralls, is_coverage
from pkgci.core.models.template import PackageContext
from pkgci.core.services.versions import collect_versions

logger = logging.getLogger(__name__)

DESTINATION = ".cirrus.yml"

BADGE = Badge(
    hover="Build Status",
    image="https://api.cirrus-ci.com/github/{{{USER}}}/{{{PKG}}}.jl.svg",
    link="https://cirrus-ci.com/github/{{{USER}}}/{{{PKG}}}.jl",
)


def badges(p: CirrusCI) -> list[Badge]:
    return [BADGE]


def view(p: CirrusCI, ctx: PackageContext, pkg: str) -> dict[str, Any]:
    versions = collect_versions(ctx.version, p.extra_versions)
    logger.debug("cirrus view for %s: image=%s versions=%s", pkg, p.image, versions)
    return {
        "HAS_CODECOV": ctx.hasplugin(Codecov),
        "HAS_COVERALLS": ctx.hasplugin(Coveralls),
        "HAS_COVERAGE": p.coverage and ctx.hasplugin(is_coverage),
        "IMAGE": p.image,
        "PKG": pkg,
        "USER": ctx.user,
        "VERSIONS": versions,
    }
