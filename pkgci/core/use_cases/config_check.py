"""
Config check use case — validate template.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pkgci.core.config.loader import ConfigError, find_template_file, load_template
from pkgci.core.data import available_templates
from pkgci.core.models.plugin import (
    AppVeyor,
    CirrusCI,
    DroneCI,
    GitLabCI,
    TravisCI,
    is_coverage,
)
from pkgci.core.models.template import Template
from pkgci.core.services import ci_plugins
from pkgci.core.services.versions import NIGHTLY, format_version

# CI kinds a Documenter plugin can deploy through
_DEPLOY_TARGETS = {"travis": TravisCI, "gitlab": GitLabCI}


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    template: Template | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "user": self.template.user if self.template else None,
            "version": str(self.template.version) if self.template else None,
            "plugins": self.template.plugin_kinds if self.template else [],
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate template configuration and report issues.

    Args:
        config_path: Optional explicit path to template.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_template_file()

    if config_path is None:
        result.errors.append("No template.yml found.")
        return result

    result.config_path = config_path

    try:
        template = load_template(config_path)
        result.template = template
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    kinds = template.plugin_kinds
    dupes = {k for k in kinds if kinds.count(k) > 1}
    if dupes:
        result.errors.append(f"Duplicate plugins: {', '.join(sorted(dupes))}")

    ci = [p for p in template.plugins if ci_plugins.is_ci(p)]
    if not ci:
        result.warnings.append("No CI plugin configured. Nothing will be tested.")

    if not template.user and any(ci_plugins.needs_username(p) for p in template.plugins):
        result.warnings.append("No user set. CI badges and links will be incomplete.")

    # Coverage that has nowhere to go
    for p in ci:
        if isinstance(p, (TravisCI, AppVeyor, CirrusCI)) and p.coverage:
            if not template.hasplugin(is_coverage):
                result.warnings.append(
                    f"'{p.kind}' has coverage enabled but no coverage plugin "
                    "(codecov, coveralls) is configured."
                )

    # Documentation deployed through a CI that isn't there
    for p in template.plugins:
        target = getattr(p, "deploy", None)
        if target and not template.hasplugin(_DEPLOY_TARGETS[target]):
            result.warnings.append(
                f"Documenter deploys through '{target}' but no '{target}' plugin is configured."
            )

    # Template overrides resolve against the config file's directory
    for p in ci:
        source = Path(ci_plugins.source(p))
        if not source.is_absolute():
            source = config_path.parent / source
        if not source.is_file():
            result.warnings.append(
                f"'{p.kind}' template file not found: {source}. "
                f"Built-in templates: {', '.join(available_templates())}"
            )

    # Nightly has no Docker image
    for p in ci:
        if isinstance(p, (GitLabCI, DroneCI)):
            if NIGHTLY in {format_version(v) for v in p.extra_versions}:
                result.warnings.append(f"'{p.kind}' does not support nightly builds.")

    result.valid = len(result.errors) == 0
    return result
