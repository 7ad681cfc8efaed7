"""Tests for the typer CLI."""

import pytest
from typer.testing import CliRunner

from zcommand import __version__
from zcommand.cli import app

runner = CliRunner()


@pytest.fixture
def cli_env(templates_dir, project, home, monkeypatch):
    """Run commands inside ``project`` with ``home`` as the home directory."""
    monkeypatch.setattr("zcommand.templates.source.LOCAL_TEMPLATES_DIR", templates_dir)
    monkeypatch.chdir(project)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return project


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestInit:
    def test_init_single_target(self, cli_env):
        result = runner.invoke(app, ["init", "--target", "copilot"])

        assert result.exit_code == 0, result.output
        assert (cli_env / ".github" / "skills" / "test-skill" / "SKILL.md").exists()
        assert (cli_env / ".github" / "agents" / "test.agent.md").exists()

    def test_init_agents_only(self, cli_env):
        result = runner.invoke(app, ["init", "-t", "cursor", "-a"])

        assert result.exit_code == 0, result.output
        assert (cli_env / ".cursor" / "rules" / "ai-engineer.md").exists()

    def test_init_global(self, cli_env, home):
        result = runner.invoke(app, ["init", "-t", "antigravity", "-g", "-s"])

        assert result.exit_code == 0, result.output
        assert (home / ".gemini" / "antigravity" / "skills" / "complex-skill" / "SKILL.md").exists()
        assert not (cli_env / ".agent").exists()

    def test_unknown_target_exits_nonzero(self, cli_env):
        result = runner.invoke(app, ["init", "--target", "emacs"])

        assert result.exit_code == 1
        assert "Unknown platform" in result.output

    def test_missing_templates_exits_nonzero(self, tmp_path, cli_env, monkeypatch):
        monkeypatch.setattr("zcommand.templates.source.LOCAL_TEMPLATES_DIR", tmp_path / "none")
        monkeypatch.setattr("zcommand.templates.source.TEMPLATES_ZIP", tmp_path / "none.zip")

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "Templates not found" in result.output


class TestList:
    def test_lists_skills_and_agents(self, cli_env):
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0, result.output
        assert "test-skill" in result.output
        assert "ai-engineer" in result.output

    def test_skills_only(self, cli_env):
        result = runner.invoke(app, ["list", "--skills"])

        assert "complex-skill" in result.output
        assert "ai-engineer" not in result.output
