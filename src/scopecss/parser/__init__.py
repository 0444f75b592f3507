"""Parser for nestable, scoped CSS source."""

from scopecss.parser.errors import (
    DisallowedAtRule,
    InvalidDeclaration,
    ParseError,
    UnbalancedCloseBrace,
    UnclosedBlock,
    UnexpectedAtRuleNesting,
    UnexpectedOpenBrace,
)
from scopecss.parser.scanner import ParseMode, compute_selector, parse_css

__all__ = [
    "parse_css",
    "compute_selector",
    "ParseMode",
    # errors
    "ParseError",
    "UnexpectedOpenBrace",
    "UnbalancedCloseBrace",
    "InvalidDeclaration",
    "DisallowedAtRule",
    "UnexpectedAtRuleNesting",
    "UnclosedBlock",
]
