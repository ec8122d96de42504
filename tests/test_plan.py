"""
Tests for the plan use case — render requests, badges, gitignore.
"""

from pkgci.core.models import (
    AppVeyor,
    Codecov,
    Documenter,
    DroneCI,
    GitLabCI,
    Template,
    TravisCI,
)
from pkgci.core.use_cases.plan import build_plan, collect_badges


def _template(*plugins):
    return Template(user="someone", version="1.0", plugins=list(plugins))


class TestBuildPlan:
    def test_one_file_per_ci_plugin(self):
        r = build_plan(_template(TravisCI(), Codecov(), GitLabCI()), "Example")
        assert [f.kind for f in r.files] == ["travis", "gitlab"]
        assert [f.destination for f in r.files] == [".travis.yml", ".gitlab-ci.yml"]

    def test_source_and_view(self):
        p = TravisCI(x86=True, osx=False, extra_versions=[])
        r = build_plan(_template(p, Documenter(deploy="travis")), "Example")
        f = r.files[0]
        assert f.source == p.file
        assert f.view["PKG"] == "Example"
        assert f.view["HAS_DOCUMENTER"] is True
        assert len(f.view["JOBS"]) == 2

    def test_siblings_see_each_other(self):
        r = build_plan(_template(AppVeyor(), Codecov()), "Example")
        assert r.files[0].view["HAS_CODECOV"] is True

    def test_drone_destination(self):
        r = build_plan(_template(DroneCI(destination=".drone.yml")), "Example")
        assert r.files[0].destination == ".drone.yml"

    def test_gitignore(self):
        r = build_plan(_template(GitLabCI()), "Example")
        assert r.gitignore == ["*.jl.cov", "*.jl.*.cov", "*.jl.mem"]

    def test_no_gitignore(self):
        r = build_plan(_template(GitLabCI(coverage=False), TravisCI()), "Example")
        assert r.gitignore == []

    def test_empty(self):
        r = build_plan(_template(), "Example")
        assert r.files == []
        assert r.badges == []

    def test_to_dict(self):
        d = build_plan(_template(DroneCI()), "Example").to_dict()
        assert d["pkg"] == "Example"
        assert d["files"][0]["view"]["ARCHES"] == '"amd64"'
        assert d["badges"][0]["hover"] == "Build Status"


class TestCollectBadges:
    def test_declaration_order(self):
        badges = collect_badges(_template(GitLabCI(), Codecov(), TravisCI()))
        assert [b.hover for b in badges] == ["Build Status", "Coverage", "Build Status"]
        assert "gitlab.com" in badges[0].image
        assert "travis-ci.com" in badges[2].image

    def test_siblings_contribute_nothing(self):
        assert collect_badges(_template(Codecov(), Documenter())) == []
