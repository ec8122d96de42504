"""
Plan use case — what the renderer has to produce for a package.

For each plugin that renders a file, one ``PlannedFile`` carrying the
template source, destination and view. Badges are collected alongside,
CI badges first so the README keeps build status together.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pkgci.core.models.badge import Badge
from pkgci.core.models.template import PlannedFile, Template
from pkgci.core.services import ci_plugins

logger = logging.getLogger(__name__)


@dataclass
class PlanResult:
    """Everything the renderer needs for one package."""

    pkg: str
    files: list[PlannedFile] = field(default_factory=list)
    badges: list[Badge] = field(default_factory=list)
    gitignore: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "pkg": self.pkg,
            "files": [f.model_dump() for f in self.files],
            "badges": [b.model_dump() for b in self.badges],
            "gitignore": self.gitignore,
        }


def collect_badges(template: Template) -> list[Badge]:
    """All plugin badges, CI plugins first, each group in declaration order."""
    ci = [b for p in template.plugins if ci_plugins.is_ci(p) for b in ci_plugins.badges(p)]
    other = [
        b for p in template.plugins if not ci_plugins.is_ci(p) for b in ci_plugins.badges(p)
    ]
    return ci + other


def build_plan(template: Template, pkg: str) -> PlanResult:
    """Build the render plan for a package.

    Args:
        template: Loaded package template.
        pkg: Package name.

    Returns:
        PlanResult with one planned file per rendering plugin.
    """
    result = PlanResult(pkg=pkg)

    for p in template.plugins:
        src = ci_plugins.source(p)
        dest = ci_plugins.destination(p)
        if src is None or dest is None:
            logger.debug("Plugin '%s' renders no file", p.kind)
        else:
            result.files.append(
                PlannedFile(
                    kind=p.kind,
                    source=src,
                    destination=dest,
                    view=ci_plugins.view(p, template, pkg),
                    reason=f"{p.kind} CI configuration",
                )
            )

        for pattern in ci_plugins.gitignore(p):
            if pattern not in result.gitignore:
                result.gitignore.append(pattern)

    result.badges = collect_badges(template)

    logger.info("Planned %d file(s) for %s", len(result.files), pkg)
    return result
