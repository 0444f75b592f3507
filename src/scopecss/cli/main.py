"""scopecss CLI entry point: Click group with subcommands."""

import logging

import click

from scopecss import __version__
from scopecss.config import ScopeConfig


@click.group()
@click.version_option(version=__version__, prog_name="scopecss")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """scopecss - compile nested CSS into scope-qualified rules."""
    config = ScopeConfig.from_env()
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from scopecss.cli.check import check  # noqa: E402
from scopecss.cli.compile import compile_css  # noqa: E402

cli.add_command(compile_css)
cli.add_command(check)
