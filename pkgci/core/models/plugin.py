"""
Plugin models — immutable configuration records, one per plugin kind.

Every plugin carries a ``kind`` literal so a template's plugin list can be
loaded from YAML as a discriminated union:

    plugins:
      - kind: travis
        x86: true
      - kind: codecov

The CI kinds are the ones this package builds views for. Codecov,
Coveralls and Documenter are sibling plugins: CI views only ask whether
they are present.
"""

from __future__ import annotations

from typing import Annotated, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pkgci.core.data import default_file
from pkgci.core.services.versions import (
    DEFAULT_CI_VERSIONS,
    DEFAULT_CI_VERSIONS_NO_NIGHTLY,
    VersionSpec,
)


class Plugin(BaseModel):
    """Base for all plugins. Frozen once constructed."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")


class _CIPlugin(Plugin):
    """Fields shared by the CI providers."""

    file: str
    extra_versions: tuple[VersionSpec, ...] = DEFAULT_CI_VERSIONS

    @field_validator("extra_versions", mode="before")
    @classmethod
    def _numbers_to_strings(cls, value):
        # Numbers built in Python rather than loaded from template.yml
        if isinstance(value, (list, tuple)):
            return tuple(
                str(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else v
                for v in value
            )
        return value


# ── CI providers ────────────────────────────────────────────────


class TravisCI(_CIPlugin):
    """Travis CI — ``.travis.yml``.

    Attributes:
        linux/osx/windows: Operating systems to build on.
        x86:      Also run 32-bit builds (Linux and Windows only).
        arm:      Also run ARM64 builds (Linux only).
        coverage: Publish coverage (needs a coverage plugin as well).
    """

    kind: Literal["travis"] = "travis"
    file: str = Field(default_factory=lambda: default_file("travis.yml"))
    linux: bool = True
    osx: bool = True
    windows: bool = True
    x86: bool = False
    arm: bool = False
    coverage: bool = True


class AppVeyor(_CIPlugin):
    """AppVeyor — ``.appveyor.yml``, 64-bit plus optional 32-bit builds."""

    kind: Literal["appveyor"] = "appveyor"
    file: str = Field(default_factory=lambda: default_file("appveyor.yml"))
    x86: bool = False
    coverage: bool = True


class CirrusCI(_CIPlugin):
    """Cirrus CI — ``.cirrus.yml``, FreeBSD builds."""

    kind: Literal["cirrus"] = "cirrus"
    file: str = Field(default_factory=lambda: default_file("cirrus.yml"))
    image: str = "freebsd-12-0-release-amd64"
    coverage: bool = True


class GitLabCI(_CIPlugin):
    """GitLab CI — ``.gitlab-ci.yml``.

    Nightly has no Docker image, so it is left out of the default versions.
    """

    kind: Literal["gitlab"] = "gitlab"
    file: str = Field(default_factory=lambda: default_file("gitlab-ci.yml"))
    coverage: bool = True
    extra_versions: tuple[VersionSpec, ...] = DEFAULT_CI_VERSIONS_NO_NIGHTLY


class DroneCI(_CIPlugin):
    """Drone CI — Starlark pipeline, ``.drone.star`` unless overridden."""

    kind: Literal["drone"] = "drone"
    file: str = Field(default_factory=lambda: default_file("drone.star"))
    destination: str = ".drone.star"
    amd64: bool = True
    arm: bool = False
    arm64: bool = False
    extra_versions: tuple[VersionSpec, ...] = DEFAULT_CI_VERSIONS_NO_NIGHTLY


# ── Sibling plugins ─────────────────────────────────────────────


class Codecov(Plugin):
    """Coverage reporting through Codecov."""

    kind: Literal["codecov"] = "codecov"


class Coveralls(Plugin):
    """Coverage reporting through Coveralls."""

    kind: Literal["coveralls"] = "coveralls"


class Documenter(Plugin):
    """Documentation builds. ``deploy`` names the CI that deploys them."""

    kind: Literal["documenter"] = "documenter"
    deploy: Optional[Literal["travis", "gitlab"]] = None


CI_PLUGINS: tuple[type[Plugin], ...] = (TravisCI, AppVeyor, CirrusCI, GitLabCI, DroneCI)
COVERAGE_PLUGINS: tuple[type[Plugin], ...] = (Codecov, Coveralls)

AnyPlugin = Annotated[
    Union[TravisCI, AppVeyor, CirrusCI, GitLabCI, DroneCI, Codecov, Coveralls, Documenter],
    Field(discriminator="kind"),
]

PLUGIN_KINDS: dict[str, type[Plugin]] = {
    cls.model_fields["kind"].default: cls
    for cls in (*CI_PLUGINS, *COVERAGE_PLUGINS, Documenter)
}


def is_coverage(plugin: Plugin) -> bool:
    """Whether a plugin reports code coverage."""
    return isinstance(plugin, COVERAGE_PLUGINS)


def documenter_for(ci: type[Plugin]) -> Callable[[Plugin], bool]:
    """Predicate matching a Documenter that deploys through ``ci``."""
    target = ci.model_fields["kind"].default

    def _match(plugin: Plugin) -> bool:
        return isinstance(plugin, Documenter) and plugin.deploy == target

    return _match
