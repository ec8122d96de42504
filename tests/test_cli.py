"""
Tests for CLI commands — config check, ci plugins/view/plan/badges.
"""

import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from pkgci.main import cli


class TestCLIGlobal:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "pkgci" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_ci_help(self):
        result = CliRunner().invoke(cli, ["ci", "--help"])
        assert result.exit_code == 0
        for name in ("plugins", "view", "plan", "badges"):
            assert name in result.output


class TestConfigCheck:
    def test_valid(self, template_yml: Path):
        result = CliRunner().invoke(cli, ["--config", str(template_yml), "config", "check"])
        assert result.exit_code == 0
        assert "valid" in result.output
        assert "someone" in result.output

    def test_json(self, template_yml: Path):
        result = CliRunner().invoke(
            cli, ["--config", str(template_yml), "config", "check", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True

    def test_missing(self, tmp_path: Path):
        missing = tmp_path / "template.yml"
        result = CliRunner().invoke(cli, ["--config", str(missing), "config", "check"])
        assert result.exit_code == 1
        assert "errors" in result.output


class TestCiCommands:
    def test_plugins(self, template_yml: Path):
        result = CliRunner().invoke(cli, ["--config", str(template_yml), "ci", "plugins"])
        assert result.exit_code == 0
        assert "travis" in result.output
        assert ".gitlab-ci.yml" in result.output

    def test_plugins_json(self, template_yml: Path):
        result = CliRunner().invoke(
            cli, ["--config", str(template_yml), "ci", "plugins", "--json"]
        )
        assert result.exit_code == 0
        rows = json.loads(result.output)
        assert rows[0] == {
            "kind": "travis",
            "is_ci": True,
            "needs_username": True,
            "destination": ".travis.yml",
        }
        assert rows[2]["is_ci"] is False
        assert rows[2]["destination"] is None

    def test_view_yaml(self, template_yml: Path):
        result = CliRunner().invoke(
            cli, ["--config", str(template_yml), "ci", "view", "Example", "travis"]
        )
        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["PKG"] == "Example"
        assert data["VERSIONS"] == ["1.0", "1.4", "nightly"]
        assert data["HAS_JOBS"] is True
        assert len(data["JOBS"]) == 6

    def test_view_json(self, template_yml: Path):
        result = CliRunner().invoke(
            cli, ["--config", str(template_yml), "ci", "view", "Example", "gitlab", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["HAS_COVERAGE"] is True
        assert data["HAS_DOCUMENTER"] is False

    def test_view_kind_not_configured(self, template_yml: Path):
        result = CliRunner().invoke(
            cli, ["--config", str(template_yml), "ci", "view", "Example", "drone"]
        )
        assert result.exit_code == 1
        assert "No 'drone' plugin" in result.output

    def test_view_unknown_kind(self, template_yml: Path):
        result = CliRunner().invoke(
            cli, ["--config", str(template_yml), "ci", "view", "Example", "jenkins"]
        )
        assert result.exit_code == 1
        assert "Unknown plugin kind 'jenkins'" in result.output
        assert "travis" in result.output

    def test_plan(self, template_yml: Path):
        result = CliRunner().invoke(
            cli, ["--config", str(template_yml), "ci", "plan", "Example"]
        )
        assert result.exit_code == 0
        assert ".travis.yml" in result.output
        assert ".gitlab-ci.yml" in result.output
        assert "*.jl.cov" in result.output

    def test_plan_json(self, template_yml: Path):
        result = CliRunner().invoke(
            cli, ["--config", str(template_yml), "ci", "plan", "Example", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [f["kind"] for f in data["files"]] == ["travis", "gitlab"]

    def test_badges(self, template_yml: Path):
        result = CliRunner().invoke(cli, ["--config", str(template_yml), "ci", "badges"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 3
        assert lines[0].startswith("[![Build Status](https://travis-ci.com/")

    def test_missing_config(self, tmp_path: Path):
        result = CliRunner().invoke(
            cli, ["--config", str(tmp_path / "nope.yml"), "ci", "plugins"]
        )
        assert result.exit_code == 1
        assert "not found" in result.output
