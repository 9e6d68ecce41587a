"""Tests for the atomizer CLI commands."""

import json
from pathlib import Path

from click.testing import CliRunner

from atomizer import __version__
from atomizer.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build" in result.output
        assert "parse" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_to_stdout(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", str(FIXTURES / "atomic.json")])
        assert result.exit_code == 0
        assert result.output.startswith("#atomic .D-b {\n  display: block;\n}\n")
        assert "@media(min-width:767px) {\n  #atomic .D-b--sm {" in result.output

    def test_build_to_file(self, tmp_path: Path) -> None:
        out = tmp_path / "atomic.css"
        runner = CliRunner()
        result = runner.invoke(
            cli, ["build", str(FIXTURES / "atomic.json"), "--output", str(out)]
        )
        assert result.exit_code == 0
        assert out.read_text().endswith("  }\n}\n")

    def test_build_with_require(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "build",
                str(FIXTURES / "atomic.json"),
                "--require",
                str(FIXTURES / "body_margin.py"),
            ],
        )
        assert result.exit_code == 0
        assert result.output.startswith("body {\n  margin: 20px;\n}\n")

    def test_build_missing_settings(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"config": {}}))
        runner = CliRunner()
        result = runner.invoke(cli, ["build", str(bad)])
        assert result.exit_code == 1
        assert "Missing required config info" in result.output

    def test_build_invalid_json(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        runner = CliRunner()
        result = runner.invoke(cli, ["build", str(bad)])
        assert result.exit_code != 0

    def test_build_nonexistent_file(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "/nonexistent/atomic.json"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


class TestParseCommand:
    def test_lists_classes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["parse", str(FIXTURES / "page.html")])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "D-b",
            "D-ib",
            "Pend-foo",
            "D-b--sm",
            "Lh-1.2",
        ]

    def test_counts(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["parse", "--counts", str(FIXTURES / "page.html")])
        assert result.exit_code == 0
        assert "D-ib\t2" in result.output.splitlines()

    def test_counts_across_files(self, tmp_path: Path) -> None:
        other = tmp_path / "other.html"
        other.write_text('<i class="D-ib C-t">')
        runner = CliRunner()
        result = runner.invoke(
            cli, ["parse", "--counts", str(FIXTURES / "page.html"), str(other)]
        )
        lines = result.output.splitlines()
        assert "D-ib\t3" in lines
        assert lines[-1] == "C-t\t1"

    def test_rebuild_config(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "parse",
                str(FIXTURES / "page.html"),
                "--config",
                str(FIXTURES / "atomic.json"),
            ],
        )
        assert result.exit_code == 0
        config = json.loads(result.output)
        assert config["display"] == {"b": {"breakPoints": ["sm"]}, "ib": True}
        assert config["line-height"] == {
            "custom": [{"suffix": "1.2", "values": ["1.2"]}]
        }
        assert config["padding-end"] == {
            "custom": [{"suffix": "foo", "values": ["10px"]}]
        }

    def test_rebuild_strict_passes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "parse",
                "--strict",
                str(FIXTURES / "page.html"),
                "--config",
                str(FIXTURES / "atomic.json"),
            ],
        )
        assert result.exit_code == 0
        assert "padding-end" in json.loads(result.output)

    def test_rebuild_strict_fails(self, tmp_path: Path) -> None:
        page = tmp_path / "page.html"
        page.write_text('<div class="D-b P-foo"></div>')
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "parse",
                "--strict",
                str(page),
                "--config",
                str(FIXTURES / "atomic.json"),
            ],
        )
        assert result.exit_code == 1
        assert "P-foo" in result.output

    def test_requires_files(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["parse"])
        assert result.exit_code != 0
