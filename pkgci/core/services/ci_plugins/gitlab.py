"""
GitLab CI plugin — ``.gitlab-ci.yml``.

GitLab computes coverage itself from the job log, so coverage depends
only on the plugin's own flag, and it contributes a second badge.
Documentation is deployed to GitLab Pages when a Documenter plugin
targets GitLab.
"""

from __future__ import annotations

import logging
from typing import Any

from pkgci.core.models.badge import Badge
from pkgci.core.models.plugin import GitLabCI, documenter_for
from pkgci.core.models.template import PackageContext
from pkgci.core.services.versions import collect_versions, format_version

logger = logging.getLogger(__name__)

DESTINATION = ".gitlab-ci.yml"

# Coverage artifacts written by `Pkg.test(coverage=true)`
COVERAGE_GITIGNORE: tuple[str, ...] = ("*.jl.cov", "*.jl.*.cov", "*.jl.mem")

BUILD_BADGE = Badge(
    hover="Build Status",
    image="https://gitlab.com/{{{USER}}}/{{{PKG}}}.jl/badges/master/build.svg",
    link="https://gitlab.com/{{{USER}}}/{{{PKG}}}.jl/pipelines",
)
COVERAGE_BADGE = Badge(
    hover="Coverage",
    image="https://gitlab.com/{{{USER}}}/{{{PKG}}}.jl/badges/master/coverage.svg",
    link="https://gitlab.com/{{{USER}}}/{{{PKG}}}.jl/commits/master",
)


def badges(p: GitLabCI) -> list[Badge]:
    if p.coverage:
        return [BUILD_BADGE, COVERAGE_BADGE]
    return [BUILD_BADGE]


def gitignore(p: GitLabCI) -> list[str]:
    return list(COVERAGE_GITIGNORE) if p.coverage else []


def view(p: GitLabCI, ctx: PackageContext, pkg: str) -> dict[str, Any]:
    versions = collect_versions(ctx.version, p.extra_versions)
    logger.debug("gitlab view for %s: versions=%s coverage=%s", pkg, versions, p.coverage)
    return {
        "HAS_COVERAGE": p.coverage,
        "HAS_DOCUMENTER": ctx.hasplugin(documenter_for(GitLabCI)),
        "PKG": pkg,
        "USER": ctx.user,
        "VERSION": format_version(ctx.version),
        "VERSIONS": versions,
    }
