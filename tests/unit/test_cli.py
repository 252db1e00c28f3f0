"""Tests for the stylekit command line."""

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from stylekit import __version__
from stylekit.cli import app
from stylekit.config import THEME_ENV_VAR


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


class TestVersion:
    def test_version(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestThemesCommands:
    def test_list(self, cli_runner):
        result = cli_runner.invoke(app, ["themes", "list"])
        assert result.exit_code == 0
        for name in ("water-wellness", "jupiter", "llasi", "psychedelic"):
            assert name in result.stdout

    def test_show_json(self, cli_runner):
        result = cli_runner.invoke(app, ["themes", "show", "jupiter", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["primary"] == "jupiter-orange-500"
        assert len(data) == 19

    def test_show_yaml(self, cli_runner):
        result = cli_runner.invoke(app, ["themes", "show", "water-wellness", "-f", "yaml"])
        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout)["secondary"] == "water-green-500"

    def test_show_table(self, cli_runner):
        result = cli_runner.invoke(app, ["themes", "show", "llasi"])
        assert result.exit_code == 0
        assert "text_primary" in result.stdout

    def test_show_unknown_theme(self, cli_runner):
        result = cli_runner.invoke(app, ["themes", "show", "no-such-theme"])
        assert result.exit_code == 1

    def test_show_unknown_format(self, cli_runner):
        result = cli_runner.invoke(app, ["themes", "show", "jupiter", "--format", "xml"])
        assert result.exit_code == 2

    def test_validate_good_file(self, cli_runner, tmp_path: Path):
        theme_file = tmp_path / "theme.yaml"
        theme_file.write_text("preset: jupiter\noverrides:\n  primary: rose-600\n")
        result = cli_runner.invoke(app, ["themes", "validate", str(theme_file)])
        assert result.exit_code == 0

    def test_validate_incomplete_file(self, cli_runner, tmp_path: Path):
        theme_file = tmp_path / "theme.json"
        theme_file.write_text(json.dumps({"primary": "rose-600"}))
        result = cli_runner.invoke(app, ["themes", "validate", str(theme_file)])
        assert result.exit_code == 1

    def test_validate_missing_file(self, cli_runner, tmp_path: Path):
        result = cli_runner.invoke(app, ["themes", "validate", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1


class TestClassesCommand:
    def test_default_theme(self, cli_runner):
        result = cli_runner.invoke(app, ["classes", "button"])
        assert result.exit_code == 0
        assert "bg-water-blue-500" in result.stdout.split()

    def test_theme_from_environment(self, cli_runner, monkeypatch):
        monkeypatch.setenv(THEME_ENV_VAR, "jupiter")
        result = cli_runner.invoke(app, ["classes", "button"])
        assert result.exit_code == 0
        assert "bg-jupiter-orange-500" in result.stdout.split()

    def test_explicit_theme_and_axes(self, cli_runner):
        result = cli_runner.invoke(
            app,
            ["classes", "button", "--theme", "jupiter", "--set", "variant=danger", "-s", "size=lg"],
        )
        assert result.exit_code == 0
        classes = result.stdout.split()
        assert "bg-red-500" in classes
        assert "px-6" in classes

    def test_flag_axis(self, cli_runner):
        result = cli_runner.invoke(app, ["classes", "button", "--set", "full-width=yes"])
        assert result.exit_code == 0
        assert "w-full" in result.stdout.split()

    def test_text_element_axis(self, cli_runner):
        result = cli_runner.invoke(
            app, ["classes", "text", "--set", "hierarchy=title", "--set", "element=h3", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert {"text-4xl", "font-bold"} <= set(data["classes"].split())

    def test_json_output(self, cli_runner):
        result = cli_runner.invoke(
            app, ["classes", "card", "--set", "interaction=clickable", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert "cursor-pointer" in data["classes"].split()
        assert list(data["fragments"])[0] == "base"
        assert data["aria"] == {"role": "button", "tabindex": "0"}

    def test_product_kind(self, cli_runner):
        result = cli_runner.invoke(
            app,
            ["classes", "product", "-s", "display=tile", "-s", "availability=sold_out", "--json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        classes = data["classes"].split()
        assert {"product-card", "product-card--tile", "product-card--out-of-stock"} <= set(classes)
        assert data["aria"] == {"aria-disabled": "true"}

    def test_interactive_kind_flags(self, cli_runner):
        result = cli_runner.invoke(
            app,
            ["classes", "interactive", "-s", "hoverable=true", "-s", "intensity=prominent"],
        )
        assert result.exit_code == 0
        classes = result.stdout.split()
        assert {"cursor-pointer", "hover:scale-110", "hover:shadow-lg"} <= set(classes)

    def test_unknown_value_is_ignored(self, cli_runner):
        plain = cli_runner.invoke(app, ["classes", "card"])
        odd = cli_runner.invoke(app, ["classes", "card", "--set", "elevation=stratospheric"])
        assert odd.exit_code == 0
        assert odd.stdout == plain.stdout

    def test_unknown_kind(self, cli_runner):
        result = cli_runner.invoke(app, ["classes", "carousel"])
        assert result.exit_code == 1

    def test_unknown_theme(self, cli_runner):
        result = cli_runner.invoke(app, ["classes", "button", "--theme", "no-such-theme"])
        assert result.exit_code == 1

    def test_unknown_axis(self, cli_runner):
        result = cli_runner.invoke(app, ["classes", "button", "--set", "wobble=high"])
        assert result.exit_code == 2

    def test_malformed_assignment(self, cli_runner):
        result = cli_runner.invoke(app, ["classes", "button", "--set", "variant"])
        assert result.exit_code == 2

    def test_bad_flag_value(self, cli_runner):
        result = cli_runner.invoke(app, ["classes", "button", "--set", "full_width=maybe"])
        assert result.exit_code == 2
