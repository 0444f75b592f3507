"""CLI command: scopecss check -- parse a file and report problems."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from scopecss.generator import generate_rules
from scopecss.parser import ParseError, parse_css


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
def check(source: TextIO) -> None:
    """Parse SOURCE without emitting any rules.

    Exits with code 0 if the source parses, or code 1 with the error and its
    location otherwise.
    """
    name = getattr(source, "name", "<stdin>")

    try:
        parsed = parse_css(source.read(), "check")
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        if exc.location:
            click.echo(f"  at {exc.location}", err=True)
        if exc.fragment:
            click.echo(f"  near {exc.fragment!r}", err=True)
        sys.exit(1)

    rules = generate_rules(parsed)
    click.echo(
        f"OK: {name} ({len(rules)} rule(s), {len(parsed.keyframes_identifiers)} keyframes)"
    )
