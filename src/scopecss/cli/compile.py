"""CLI command: scopecss compile -- print the rules generated for a file."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from scopecss.config import ScopeConfig
from scopecss.css import scope
from scopecss.keys import KeyFactory
from scopecss.parser import ParseError


@click.command("compile")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--scope", "scope_key", default=None, help="Scope key (default: generate one)")
def compile_css(source: TextIO, scope_key: str | None) -> None:
    """Parse SOURCE and print one scoped rule per line.

    Use ``-`` to read from stdin.
    """
    if scope_key is None:
        scope_key = KeyFactory.from_config(ScopeConfig.from_env())()

    try:
        rules = scope(source.read(), scope_key)
    except ParseError as exc:
        click.echo(f"Parse error: {exc} ({exc.location})", err=True)
        sys.exit(1)

    click.echo(f"/* scope: .{scope_key} */")
    for rule in rules:
        click.echo(rule)
