"""
Travis CI plugin — ``.travis.yml``.

The interesting part is the job list. Travis builds every version on
every enabled OS for 64-bit automatically; 32-bit and ARM builds have to
be spelled out as extra jobs:

    x86  → one job per version per OS in {linux, windows}
    arm  → one job per version on linux (ARM is linux-only)
"""

from __future__ import annotations

import logging
from typing import Any

from pkgci.core.models.badge import Badge
from pkgci.core.models.plugin import (
    Codecov,
    Coveralls,
    TravisCI,
    documenter_for,
    is_coverage,
)
from pkgci.core.models.template import PackageContext
from pkgci.core.services.versions import (
    allowed_failures,
    collect_versions,
    format_version,
)

logger = logging.getLogger(__name__)

DESTINATION = ".travis.yml"

BADGE = Badge(
    hover="Build Status",
    image="https://travis-ci.com/{{{USER}}}/{{{PKG}}}.jl.svg?branch=master",
    link="https://travis-ci.com/{{{USER}}}/{{{PKG}}}.jl",
)


def _operating_systems(p: TravisCI) -> list[str]:
    os_list: list[str] = []
    if p.linux:
        os_list.append("linux")
    if p.osx:
        os_list.append("osx")
    if p.windows:
        os_list.append("windows")
    return os_list


def build_jobs(p: TravisCI, versions: list[str]) -> list[dict[str, str]]:
    """Extra matrix entries for 32-bit and ARM builds.

    Args:
        p: Plugin configuration.
        versions: Canonical version set.

    Returns:
        One ``{"JULIA", "OS", "ARCH"}`` mapping per job, x86 jobs first.
    """
    jobs: list[dict[str, str]] = []
    if p.x86:
        for v in versions:
            if p.linux:
                jobs.append({"JULIA": v, "OS": "linux", "ARCH": "x86"})
            if p.windows:
                jobs.append({"JULIA": v, "OS": "windows", "ARCH": "x86"})
    if p.arm:
        for v in versions:
            if p.linux:
                jobs.append({"JULIA": v, "OS": "linux", "ARCH": "arm64"})
    return jobs


def badges(p: TravisCI) -> list[Badge]:
    return [BADGE]


def view(p: TravisCI, ctx: PackageContext, pkg: str) -> dict[str, Any]:
    """Template values for ``.travis.yml``."""
    versions = collect_versions(ctx.version, p.extra_versions)
    failures = allowed_failures(versions)
    jobs = build_jobs(p, versions)
    has_documenter = ctx.hasplugin(documenter_for(TravisCI))

    logger.debug(
        "travis view for %s: %d versions, %d extra jobs", pkg, len(versions), len(jobs)
    )

    return {
        "ALLOW_FAILURES": failures,
        "HAS_ALLOW_FAILURES": bool(failures),
        "HAS_CODECOV": ctx.hasplugin(Codecov),
        "HAS_COVERAGE": p.coverage and ctx.hasplugin(is_coverage),
        "HAS_COVERALLS": ctx.hasplugin(Coveralls),
        "HAS_DOCUMENTER": has_documenter,
        # Documentation deployment needs its own job entry
        "HAS_JOBS": bool(jobs) or has_documenter,
        "OS": _operating_systems(p),
        "PKG": pkg,
        "USER": ctx.user,
        "VERSION": format_version(ctx.version),
        "VERSIONS": versions,
        "JOBS": jobs,
    }
