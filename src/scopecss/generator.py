"""Flatten a parsed rule tree into rule strings for ``StyleSheet.insert_rule``."""

from __future__ import annotations

import logging

from scopecss.model.rules import (
    Declarations,
    KeyframesIdentifiers,
    ParsedConditionalGroup,
    ParsedCSS,
    ParsedKeyframes,
    ParsedRule,
    RuleSet,
)

__all__ = ["generate_rules", "scope_declarations"]

logger = logging.getLogger(__name__)


def _scope_animation(value: str, keyframes_identifiers: KeyframesIdentifiers) -> str:
    # several animations can be specified at once
    animations = []
    for animation in value.split(","):
        tokens = animation.split()
        if not tokens:
            animations.append(animation)
            continue
        name, *rest = tokens
        animations.append(" ".join([keyframes_identifiers.get(name, name), *rest]))
    return ",".join(animations)


def scope_declarations(
    declarations: Declarations, keyframes_identifiers: KeyframesIdentifiers
) -> str:
    """Serialize declarations, pointing animations at locally scoped keyframes."""
    parts: list[str] = []
    for prop, value in declarations.items():
        if prop == "animation":
            value = _scope_animation(value, keyframes_identifiers)
        elif prop == "animation-name":
            value = keyframes_identifiers.get(value, value)
        parts.append(f"{prop}:{value};")
    return "".join(parts)


def _rule_set(rule: RuleSet, keyframes_identifiers: KeyframesIdentifiers) -> str:
    return f"{rule.selector}{{{scope_declarations(rule.declarations, keyframes_identifiers)}}}"


def _generate(rules: list[ParsedRule], keyframes_identifiers: KeyframesIdentifiers) -> list[str]:
    output: list[str] = []
    for rule in rules:
        if isinstance(rule, ParsedKeyframes):
            steps = "".join(_rule_set(step, keyframes_identifiers) for step in rule.steps)
            output.append(f"@keyframes {rule.identifier}{{{steps}}}")
        elif isinstance(rule, ParsedConditionalGroup):
            nested = "".join(_generate(rule.rules, keyframes_identifiers))
            output.append(f"{rule.group_type.at_keyword} {rule.query} {{{nested}}}")
        else:
            output.append(_rule_set(rule, keyframes_identifiers))
    return output


def generate_rules(parsed: ParsedCSS) -> list[str]:
    """Transform a parsed stylesheet into rules, one string per top-level rule.

    Rules come out in the same order as ``parsed.rules``; conditional groups
    are serialized recursively into a single rule each.
    """
    rules = _generate(parsed.rules, parsed.keyframes_identifiers)
    logger.debug("Generated %d rule(s)", len(rules))
    return rules
