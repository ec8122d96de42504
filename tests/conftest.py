"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest
from packaging.version import Version


class FakeContext:
    """Stand-in for a package template: fixed user, version and siblings."""

    def __init__(self, user="someone", version=Version("1.0"), plugins=()):
        self.user = user
        self.version = version
        self.plugins = list(plugins)

    def hasplugin(self, query):
        if isinstance(query, type):
            return any(isinstance(p, query) for p in self.plugins)
        return any(query(p) for p in self.plugins)


@pytest.fixture
def make_ctx():
    """Build a FakeContext with the given sibling plugins."""

    def _make(*plugins, user="someone", version="1.0"):
        return FakeContext(user=user, version=Version(version), plugins=plugins)

    return _make


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def template_yml(tmp_path: Path) -> Path:
    """Create a template.yml with CI and sibling plugins."""
    content = textwrap.dedent("""\
        user: someone
        version: "1.0"
        plugins:
          - kind: travis
            x86: true
            osx: false
            extra_versions: ["1.4", nightly]
          - kind: gitlab
          - kind: codecov
          - kind: documenter
            deploy: travis
    """)
    path = tmp_path / "template.yml"
    path.write_text(content)
    return path
