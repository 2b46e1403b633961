"""Tests for the cssbuild CLI commands."""

from click.testing import CliRunner

from cssbuild import __version__
from cssbuild.cli import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build" in result.output
        assert "categories" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_compound(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_short_kinds(self) -> None:
        result = CliRunner().invoke(cli, ["build", "el=p", "cls=intro", "pe=first-line"])
        assert result.exit_code == 0
        assert result.output.strip() == "p.intro::first-line"

    def test_combinators(self) -> None:
        result = CliRunner().invoke(
            cli,
            [
                "build",
                "element=div", "id=main",
                "+",
                "element=table", "id=data",
                "~",
                "element=tr",
                "descendant",
                "element=td",
            ],
        )
        assert result.exit_code == 0
        assert result.output.rstrip("\n") == "div#main + table#data ~ tr   td"

    def test_order_violation(self) -> None:
        result = CliRunner().invoke(cli, ["build", "class=x", "id=y"])
        assert result.exit_code == 1
        assert "Error: Selector parts should be arranged" in result.output

    def test_duplicate_violation(self) -> None:
        result = CliRunner().invoke(cli, ["build", "id=a", "id=b"])
        assert result.exit_code == 1
        assert "should not occur more then one time" in result.output

    def test_bad_part(self) -> None:
        result = CliRunner().invoke(cli, ["build", "color=red"])
        assert result.exit_code == 2
        assert "KIND=VALUE" in result.output

    def test_leading_combinator(self) -> None:
        result = CliRunner().invoke(cli, ["build", ">", "element=a"])
        assert result.exit_code == 2

    def test_trailing_combinator(self) -> None:
        result = CliRunner().invoke(cli, ["build", "element=a", ">"])
        assert result.exit_code == 2

    def test_requires_parts(self) -> None:
        result = CliRunner().invoke(cli, ["build"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# categories command
# ---------------------------------------------------------------------------


class TestCategoriesCommand:
    def test_lists_in_order(self) -> None:
        result = CliRunner().invoke(cli, ["categories"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 6
        assert lines[0].startswith("1. element")
        assert lines[-1].startswith("6. pseudo-element")
        assert "::VALUE" in lines[-1]
