"""Tests for the themekit CLI (theme and config sub-commands)."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from themekit.core.config_loader import THEME_CONFIG_FILE, load_theme_config

runner = CliRunner()


@pytest.fixture()
def app():
    from themekit.cli import app

    return app


@pytest.fixture()
def project(tmp_path):
    return str(tmp_path)


# ── theme validate-pair ──────────────────────────────────────────────


class TestValidatePair:
    def test_excellent_pair_json(self, app):
        result = runner.invoke(app, ["theme", "validate-pair", "#000000", "#FFFFFF", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data == {"isValid": True, "contrast": 90.0, "level": "excellent"}

    def test_poor_pair_exits_nonzero(self, app):
        result = runner.invoke(app, ["theme", "validate-pair", "#FFFFFF", "#FFFFFF"])
        assert result.exit_code == 1
        assert "poor" in result.output

    def test_malformed_colour(self, app):
        result = runner.invoke(app, ["theme", "validate-pair", "red", "#FFFFFF", "--json"])
        assert result.exit_code == 1
        assert json.loads(result.output)["level"] == "invalid"


# ── theme build / audit ──────────────────────────────────────────────


class TestBuildAndAudit:
    def test_build_json(self, app, project):
        result = runner.invoke(
            app, ["theme", "build", "#000000", "#FFFFFF", "-p", project, "--json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["colors"]["primary"]["500"] == "#000000"
        assert data["summary"]["passRate"] == 79
        assert data["css"]["dark---background"] == data["colors"]["primary"]["950"]

    def test_build_dark(self, app, project):
        result = runner.invoke(
            app, ["theme", "build", "#3B82F6", "#10B981", "--dark", "-p", project, "--json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["markers"] == ["dark"]
        assert data["variables"]["--background"] == data["variables"]["--primary-950"]

    def test_build_table(self, app, project):
        result = runner.invoke(app, ["theme", "build", "-p", project])
        assert result.exit_code == 0, result.output
        assert "Palettes" in result.output
        assert "checks pass" in result.output

    def test_audit_passing(self, app, project):
        result = runner.invoke(
            app, ["theme", "audit", "#000000", "#FFFFFF", "-p", project, "--json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert len(data["results"]) == 14
        assert data["summary"]["passRate"] == 79

    def test_audit_failing(self, app, project):
        result = runner.invoke(app, ["theme", "audit", "#FFFFFF", "#FFFFFF", "-p", project])
        assert result.exit_code == 1
        assert "Pass rate: 43%" in result.output

    def test_audit_uses_configured_threshold(self, app, tmp_path):
        (tmp_path / THEME_CONFIG_FILE).write_text("min_pass_rate: 40\n", encoding="utf-8")
        result = runner.invoke(
            app, ["theme", "audit", "#FFFFFF", "#FFFFFF", "-p", str(tmp_path), "--json"]
        )
        assert result.exit_code == 0, result.output

    def test_invalid_config_reported(self, app, tmp_path):
        (tmp_path / THEME_CONFIG_FILE).write_text("min_pass_rate: 500\n", encoding="utf-8")
        result = runner.invoke(app, ["theme", "build", "-p", str(tmp_path)])
        assert result.exit_code == 1


# ── theme css / tokens ───────────────────────────────────────────────


class TestRenderCommands:
    def test_css_stdout(self, app, project):
        result = runner.invoke(app, ["theme", "css", "#3B82F6", "#10B981", "-p", project])
        assert result.exit_code == 0, result.output
        assert ":root {" in result.output
        assert "--primary-500: #3B82F6;" in result.output

    def test_css_to_file(self, app, tmp_path):
        out = tmp_path / "dist" / "theme.css"
        result = runner.invoke(app, ["theme", "css", "-p", str(tmp_path), "--out", str(out)])
        assert result.exit_code == 0, result.output
        assert ".dark {" in out.read_text(encoding="utf-8")

    def test_tokens_stdout(self, app, project):
        result = runner.invoke(app, ["theme", "tokens", "-p", project])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["color"]["primary"]["500"]["$value"] == "#3B82F6"

    def test_tokens_to_file(self, app, tmp_path):
        out = tmp_path / "tokens.json"
        result = runner.invoke(app, ["theme", "tokens", "-p", str(tmp_path), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "dimension" in json.loads(out.read_text(encoding="utf-8"))

    def test_saved_colours_used_when_omitted(self, app, tmp_path):
        (tmp_path / THEME_CONFIG_FILE).write_text(
            "colors:\n  primary: '#000000'\n", encoding="utf-8"
        )
        result = runner.invoke(app, ["theme", "tokens", "-p", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["color"]["primary"]["500"]["$value"] == "#000000"


# ── config init / check ──────────────────────────────────────────────


class TestConfigCommands:
    def test_init_and_check(self, app, tmp_path):
        result = runner.invoke(
            app,
            ["config", "init", "-p", str(tmp_path), "--primary", "#000000", "--secondary", "#FFFFFF"],
        )
        assert result.exit_code == 0, result.output
        config = load_theme_config(tmp_path, use_defaults=False)
        assert config.colors.primary == "#000000"

        result = runner.invoke(app, ["config", "check", "-p", str(tmp_path), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["accepted"] is True
        assert data["passRate"] == 79

    def test_init_refuses_overwrite(self, app, tmp_path):
        runner.invoke(app, ["config", "init", "-p", str(tmp_path)])
        result = runner.invoke(app, ["config", "init", "-p", str(tmp_path)])
        assert result.exit_code == 1
        assert "--force" in result.output

        result = runner.invoke(app, ["config", "init", "-p", str(tmp_path), "--force"])
        assert result.exit_code == 0

    def test_check_rejected_theme(self, app, tmp_path):
        runner.invoke(
            app,
            ["config", "init", "-p", str(tmp_path), "--primary", "#FFFFFF", "--secondary", "#FFFFFF"],
        )
        result = runner.invoke(app, ["config", "check", "-p", str(tmp_path)])
        assert result.exit_code == 1
        assert "rejected" in result.output

    def test_check_without_config(self, app, tmp_path):
        result = runner.invoke(app, ["config", "check", "-p", str(tmp_path)])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestVersion:
    def test_version(self, app):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.startswith("themekit ")
