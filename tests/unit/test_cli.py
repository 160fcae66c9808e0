"""Unit tests for the manifestcheck CLI."""

import json
import textwrap
from pathlib import Path

import pytest
from typer.testing import CliRunner

from manifestcheck import __version__
from manifestcheck.cli import app

runner = CliRunner()


@pytest.fixture
def workspace(tmp_path, complete_manifest):
    """Manifest file, empty rules folder and a non-existent config path."""
    manifest_file = tmp_path / "manifest.json"
    manifest_file.write_text(json.dumps(complete_manifest), encoding="utf-8")
    return {
        "manifest": manifest_file,
        "config": tmp_path / "missing-config.json",
        "root": tmp_path,
    }


@pytest.fixture
def platform_pack(tmp_path, monkeypatch):
    """Importable platform module contributing one error for android."""
    pack_dir = tmp_path / "packs"
    pack_dir.mkdir()
    (pack_dir / "cli_android_pack.py").write_text(textwrap.dedent("""
        from manifestcheck.validation import require_icon_sizes

        def get_validation_rules(platforms):
            if "android" not in platforms:
                return []
            return [require_icon_sizes("Launcher icons are required", "android", "error", ["48x48"])]
    """), encoding="utf-8")
    monkeypatch.syspath_prepend(str(pack_dir))
    return "cli_android_pack"


class TestValidateCommand:
    """Test the validate command."""

    def test_complete_manifest_passes(self, workspace):
        result = runner.invoke(app, [
            "validate", str(workspace["manifest"]), "--config", str(workspace["config"])
        ])

        assert result.exit_code == 0
        assert "Validation Status: PASS" in result.stdout
        assert "No issues found!" in result.stdout

    def test_json_output(self, workspace):
        result = runner.invoke(app, [
            "validate", str(workspace["manifest"]),
            "--config", str(workspace["config"]),
            "--format", "json",
        ])

        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["status"] == "pass"
        assert report["results"] == []

    def test_platform_module_errors_fail(self, workspace, platform_pack):
        result = runner.invoke(app, [
            "validate", str(workspace["manifest"]),
            "--config", str(workspace["config"]),
            "--platform", "android",
            "--platform-module", platform_pack,
            "--format", "json",
        ])

        assert result.exit_code == 1
        report = json.loads(result.stdout)
        assert report["status"] == "fail"
        assert report["results"][0]["data"] == ["48x48"]
        assert report["results"][0]["platform"] == "android"

    def test_markdown_output(self, workspace, platform_pack):
        result = runner.invoke(app, [
            "validate", str(workspace["manifest"]),
            "--config", str(workspace["config"]),
            "-p", "android",
            "-m", platform_pack,
            "--format", "markdown",
        ])

        assert result.exit_code == 1
        assert "# Manifest Validation Report" in result.stdout
        assert "**ERROR** (android) icons" in result.stdout

    def test_fail_on_warnings(self, workspace, complete_manifest):
        complete_manifest["display"] = "kiosk"
        workspace["manifest"].write_text(json.dumps(complete_manifest), encoding="utf-8")

        lenient = runner.invoke(app, [
            "validate", str(workspace["manifest"]), "--config", str(workspace["config"])
        ])
        strict = runner.invoke(app, [
            "validate", str(workspace["manifest"]),
            "--config", str(workspace["config"]),
            "--fail-on-warnings",
        ])

        assert lenient.exit_code == 0
        assert "Validation Status: WARN" in lenient.stdout
        assert strict.exit_code == 1

    def test_custom_rules_dir(self, workspace, write_rule):
        rules_dir = workspace["root"] / "rules"
        write_rule(rules_dir, "always.py", """
            from manifestcheck.models import ValidationResult

            def always(content):
                return ValidationResult(description="always", platform="all", level="error", member="name", code="invalidValue")

            rules = always
        """)

        result = runner.invoke(app, [
            "validate", str(workspace["manifest"]),
            "--config", str(workspace["config"]),
            "--rules-dir", str(rules_dir),
            "--format", "json",
        ])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["results"][0]["description"] == "always"

    def test_missing_manifest(self, workspace):
        result = runner.invoke(app, [
            "validate", str(workspace["root"] / "nope.json"), "--config", str(workspace["config"])
        ])

        assert result.exit_code == 1
        assert "Error:" in result.stdout

    def test_missing_platform_module(self, workspace):
        result = runner.invoke(app, [
            "validate", str(workspace["manifest"]),
            "--config", str(workspace["config"]),
            "-m", "no_such_platform_pack_module",
        ])

        assert result.exit_code == 1
        assert "Error:" in result.stdout

    def test_invalid_format(self, workspace):
        result = runner.invoke(app, [
            "validate", str(workspace["manifest"]), "--format", "xml"
        ])

        assert result.exit_code == 1
        assert "Invalid format" in result.stdout


class TestRulesCommand:
    """Test the rules command."""

    def test_lists_builtin_rules(self, workspace):
        result = runner.invoke(app, ["rules", "--config", str(workspace["config"])])

        assert result.exit_code == 0
        assert "start_url_required" in result.stdout

    def test_platform_folder_adds_rules(self, workspace):
        without_web = runner.invoke(app, ["rules", "--config", str(workspace["config"])])
        with_web = runner.invoke(app, ["rules", "--config", str(workspace["config"]), "-p", "web"])

        assert "require_any_icon_size" not in without_web.stdout
        assert "require_any_icon_size" in with_web.stdout


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"manifestcheck version {__version__}" in result.stdout
