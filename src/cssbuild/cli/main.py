"""cssbuild CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuild import __version__
from cssbuild.config import CssBuildConfig

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="cssbuild")
@click.option(
    "--log-level",
    type=click.Choice(_LEVELS, case_sensitive=False),
    default=CssBuildConfig.log_level,
    help="Logging verbosity.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """cssbuild - assemble CSS3 selectors with ordering checks."""
    config = CssBuildConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level, format=config.log_format)
    ctx.obj = config


# Import and register subcommands
from cssbuild.cli.build import build, categories  # noqa: E402

cli.add_command(build)
cli.add_command(categories)
