"""Rule tree model: the parser's output and the generator's input.

Rules are frozen so fields cannot be reassigned, but they hold dicts and
lists, compare by value and are not hashable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

# property name -> value, in declaration order
Declarations = dict[str, str]

# local @keyframes name -> scope-qualified identifier
KeyframesIdentifiers = dict[str, str]


class RuleKind(Enum):
    """Distinguishes the three kinds of parsed rules."""

    RULE_SET = "rule_set"
    KEYFRAMES = "keyframes"
    CONDITIONAL_GROUP = "conditional_group"


class ConditionalGroupType(Enum):
    """The at-rules that open a conditional group.

    The value is the at-keyword without its leading ``@``.
    """

    MEDIA = "media"
    SUPPORTS = "supports"

    @property
    def at_keyword(self) -> str:
        return f"@{self.value}"


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class RuleSet:
    """A selector and the declarations that apply to it."""

    selector: str
    declarations: Declarations = field(default_factory=dict)


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class ParsedRuleSet(RuleSet):
    """A top-level or grouped rule set."""

    @property
    def kind(self) -> RuleKind:
        return RuleKind.RULE_SET


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class ParsedKeyframes:
    """A ``@keyframes`` block.

    Attributes:
        identifier: The scope-qualified animation name (``<scope>-<name>``).
        steps: Keyframe steps in source order; each selector is ``from``,
            ``to`` or a percentage.
    """

    identifier: str
    steps: list[RuleSet] = field(default_factory=list)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.KEYFRAMES


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class ParsedConditionalGroup:
    """A ``@media`` or ``@supports`` block holding its own rules."""

    group_type: ConditionalGroupType
    query: str
    rules: list[ParsedRule] = field(default_factory=list)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.CONDITIONAL_GROUP


ParsedRule = Union[ParsedRuleSet, ParsedKeyframes, ParsedConditionalGroup]


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class ParsedCSS:
    """Everything the parser produces for one source block."""

    rules: list[ParsedRule] = field(default_factory=list)
    keyframes_identifiers: KeyframesIdentifiers = field(default_factory=dict)
