"""scopecss model layer -- public type re-exports."""

from scopecss.model.rules import (
    ConditionalGroupType,
    Declarations,
    KeyframesIdentifiers,
    ParsedConditionalGroup,
    ParsedCSS,
    ParsedKeyframes,
    ParsedRule,
    ParsedRuleSet,
    RuleKind,
    RuleSet,
)

__all__ = [
    # kinds
    "RuleKind",
    "ConditionalGroupType",
    # rules
    "Declarations",
    "RuleSet",
    "ParsedRuleSet",
    "ParsedKeyframes",
    "ParsedConditionalGroup",
    "ParsedRule",
    # parse result
    "KeyframesIdentifiers",
    "ParsedCSS",
]
