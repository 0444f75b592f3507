"""Front door: declare a block of scoped CSS and get its class name back."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from scopecss.generator import generate_rules
from scopecss.keys import next_scope_key
from scopecss.parser import parse_css
from scopecss.stylesheet import default_stylesheet

__all__ = ["RuleSink", "css", "scope"]

logger = logging.getLogger(__name__)


class RuleSink(Protocol):
    """Anything that accepts one rule string at a time.

    ``insert_rule`` may raise any exception to reject a rule; ``css()`` logs
    it and moves on to the next rule.
    """

    def insert_rule(self, rule: str, index: int | None = None) -> int: ...


def scope(source: str, scope_key: str) -> list[str]:
    """Parse *source* under *scope_key* and return the generated rules."""
    return generate_rules(parse_css(source, scope_key))


def css(
    source: str,
    *,
    stylesheet: RuleSink | None = None,
    key_factory: Callable[[], str] | None = None,
) -> str:
    """Declare a scoped stylesheet and return the class name that scopes it.

    Each generated rule is inserted into *stylesheet* (the process-wide
    sheet by default). A rule the sheet rejects is logged and skipped; the
    remaining rules are still inserted. Parse errors propagate.
    """
    scope_key = (key_factory or next_scope_key)()
    sheet = stylesheet if stylesheet is not None else default_stylesheet()

    rules = scope(source, scope_key)
    inserted = 0
    for rule in rules:
        try:
            sheet.insert_rule(rule)
        except Exception:
            logger.warning("Stylesheet could not understand the following rule: %s", rule)
            continue
        inserted += 1

    logger.debug("Inserted %d of %d rule(s) for scope %s", inserted, len(rules), scope_key)
    return scope_key
