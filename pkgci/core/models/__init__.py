"""
Domain models — Pydantic types for plugins and package templates.

All models are re-exported here for convenient access:

    from pkgci.core.models import Template, TravisCI, Codecov, Badge
"""

from pkgci.core.models.badge import Badge
from pkgci.core.models.plugin import (
    CI_PLUGINS,
    COVERAGE_PLUGINS,
    PLUGIN_KINDS,
    AnyPlugin,
    AppVeyor,
    CirrusCI,
    Codecov,
    Coveralls,
    Documenter,
    DroneCI,
    GitLabCI,
    Plugin,
    TravisCI,
    documenter_for,
    is_coverage,
)
from pkgci.core.models.template import PackageContext, PlannedFile, Template

__all__ = [
    # badge.py
    "Badge",
    # plugin.py
    "AnyPlugin",
    "AppVeyor",
    "CI_PLUGINS",
    "COVERAGE_PLUGINS",
    "CirrusCI",
    "Codecov",
    "Coveralls",
    "Documenter",
    "DroneCI",
    "GitLabCI",
    "PLUGIN_KINDS",
    "Plugin",
    "TravisCI",
    "documenter_for",
    "is_coverage",
    # template.py
    "PackageContext",
    "PlannedFile",
    "Template",
]
