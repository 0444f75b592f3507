"""In-process stylesheet that accepts generated rules one at a time."""

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from pathlib import Path

from lark import Lark, Tree
from lark.exceptions import LarkError

__all__ = ["RuleRejected", "StyleSheet", "check_rule", "default_stylesheet"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "sheet_grammar.lark"


class RuleRejected(Exception):
    """Raised when a stylesheet cannot understand a rule."""

    def __init__(self, rule: str, reason: str = ""):
        self.rule = rule
        self.reason = reason
        super().__init__(f"Rejected rule {rule!r}" + (f": {reason}" if reason else ""))


@lru_cache(maxsize=1)
def _rule_parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="earley", start="start")


def check_rule(rule: str) -> Tree:
    """Parse a single flat rule, raising :class:`RuleRejected` if it is not one."""
    try:
        return _rule_parser().parse(rule)
    except LarkError as exc:
        raise RuleRejected(rule, str(exc).strip().split("\n", 1)[0]) from exc


class StyleSheet:
    """An ordered list of CSS rule strings.

    Mirrors the ``insertRule``/``deleteRule`` surface of a browser
    ``CSSStyleSheet``: every inserted rule is checked first and rejected
    whole if it does not parse. Mutations are serialized with a lock.
    """

    def __init__(self, title: str | None = None):
        self.title = title
        self._rules: list[str] = []
        self._lock = threading.RLock()

    def insert_rule(self, rule: str, index: int | None = None) -> int:
        """Insert *rule* at *index* (appending by default) and return its index."""
        with self._lock:
            check_rule(rule)
            if index is None:
                index = len(self._rules)
            if not 0 <= index <= len(self._rules):
                raise IndexError(f"Rule index {index} out of range")
            self._rules.insert(index, rule)
        return index

    def delete_rule(self, index: int) -> None:
        with self._lock:
            if not 0 <= index < len(self._rules):
                raise IndexError(f"Rule index {index} out of range")
            del self._rules[index]

    def clear(self) -> None:
        with self._lock:
            self._rules.clear()

    @property
    def css_rules(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._rules)

    @property
    def text(self) -> str:
        return "\n".join(self.css_rules)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rules)

    def __repr__(self) -> str:
        return f"StyleSheet(title={self.title!r}, rules={len(self)})"


_default_sheet: StyleSheet | None = None
_default_lock = threading.Lock()


def default_stylesheet() -> StyleSheet:
    """Return the process-wide stylesheet, creating it on first use."""
    global _default_sheet
    with _default_lock:
        if _default_sheet is None:
            _default_sheet = StyleSheet(title="scopecss")
            logger.debug("Created default stylesheet")
        return _default_sheet
