"""Single-pass scanner that turns nestable, scoped CSS into a rule tree.

Supported source:
    color: red;                       /* flat declarations */
    p { span { color: blue; } }       /* nesting at any depth */
    :hover { color: green; }          /* pseudo-classes join without a space */
    @keyframes spin { from { ... } to { ... } }
    @media (max-width: 600px) { ... }
    @supports (display: grid) { @media print { ... } }

Every selector is rooted at ``.<scope_key>`` and every local ``@keyframes``
name is rewritten to ``<scope_key>-<name>``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from scopecss.model.rules import (
    ConditionalGroupType,
    Declarations,
    KeyframesIdentifiers,
    ParsedConditionalGroup,
    ParsedCSS,
    ParsedKeyframes,
    ParsedRule,
    ParsedRuleSet,
    RuleSet,
)
from scopecss.parser.errors import (
    DisallowedAtRule,
    InvalidDeclaration,
    ParseError,
    UnbalancedCloseBrace,
    UnclosedBlock,
    UnexpectedAtRuleNesting,
    UnexpectedOpenBrace,
)

__all__ = ["ParseMode", "compute_selector", "parse_css"]

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \n\r\t")

# Characters which never need to be followed by a space.
NO_SPACE_AFTER = frozenset(["", "{", "}", ";", ":"]) | WHITESPACE

# Characters which never need to be preceded by a space.
NO_SPACE_BEFORE = frozenset(["{", "}", ";", ","])

KEYFRAMES = "@keyframes"


class ParseMode(Enum):
    """What the cursor is currently inside of."""

    ROOT = "root"
    NESTED_RULE_SET = "nested_rule_set"
    KEYFRAMES = "keyframes"
    # Same character handling as ROOT, with a group record on the stack.
    CONDITIONAL_GROUP = "conditional_group"


@dataclass
class _GroupRecord:
    """An open ``@media``/``@supports`` block."""

    group_type: ConditionalGroupType
    query: str
    selector_path: list[str]
    rules: list[ParsedRule] = field(default_factory=list)


def compute_selector(selector_path: list[str]) -> str:
    """Join a selector path into a single descendant selector.

    Entries starting with ``:`` (pseudo-classes and pseudo-elements) attach
    directly to the previous entry.
    """
    selector = selector_path[0]
    for part in selector_path[1:]:
        if part.startswith(":"):
            selector += part
        else:
            selector += " " + part
    return selector


def _group_type_for(rule_start: str) -> ConditionalGroupType | None:
    for group_type in ConditionalGroupType:
        if rule_start.startswith(group_type.at_keyword):
            return group_type
    return None


class _Scanner:
    """Per-call parse state. Never shared between calls."""

    def __init__(self, source: str, scope_key: str):
        self.source = source
        self.scope_key = scope_key
        self.scope_selector = f".{scope_key}"

        self.mode = ParseMode.ROOT
        self.position = 0
        # the character just processed, used to drop extraneous whitespace
        self.prev_char = ""
        self.buffer: list[str] = []

        self.rules: list[ParsedRule] = []
        self.keyframes_identifiers: KeyframesIdentifiers = {}
        self.selector_path: list[str] = [self.scope_selector]
        self.frames: list[Declarations] = [{}]

        self.keyframes_name = ""
        self.step_selector: str | None = None
        self.steps: list[RuleSet] = []

        self.groups: list[_GroupRecord] = []

    # ---- helpers ----

    @property
    def declarations(self) -> Declarations:
        return self.frames[-1]

    @property
    def active_path(self) -> list[str]:
        return self.groups[-1].selector_path if self.groups else self.selector_path

    @property
    def active_rules(self) -> list[ParsedRule]:
        return self.groups[-1].rules if self.groups else self.rules

    @property
    def outer_mode(self) -> ParseMode:
        return ParseMode.CONDITIONAL_GROUP if self.groups else ParseMode.ROOT

    def peek(self) -> str:
        nxt = self.position + 1
        return self.source[nxt] if nxt < len(self.source) else ""

    def take_buffer(self) -> str:
        text = "".join(self.buffer)
        self.buffer = []
        return text

    def error(self, cls: type[ParseError], message: str, fragment: str = "") -> ParseError:
        pos = min(self.position, len(self.source))
        line = self.source.count("\n", 0, pos) + 1
        column = pos - (self.source.rfind("\n", 0, pos) + 1) + 1
        return cls(message, fragment=fragment, position=pos, line=line, column=column)

    # ---- driver ----

    def run(self) -> ParsedCSS:
        while self.position < len(self.source):
            current = self.source[self.position]
            if current == "/":
                self.handle_forward_slash()
            elif current in WHITESPACE:
                self.handle_space()
            elif current == ";":
                self.handle_declaration(self.take_buffer())
                self.position += 1
            elif current == "{":
                self.handle_open_brace()
                self.position += 1
            elif current == "}":
                self.handle_close_brace()
                self.position += 1
            else:
                self.buffer.append(current)
                self.position += 1
            self.prev_char = current

        return self.finish()

    def finish(self) -> ParsedCSS:
        if self.mode is not ParseMode.ROOT:
            raise self.error(UnclosedBlock, "Unclosed block at end of input")

        trailing = self.take_buffer().strip()
        if trailing:
            self.handle_declaration(trailing)

        if self.declarations:
            self.rules.append(ParsedRuleSet(self.scope_selector, self.declarations))

        return ParsedCSS(rules=self.rules, keyframes_identifiers=self.keyframes_identifiers)

    # ---- whitespace & comments ----

    def handle_forward_slash(self) -> None:
        if self.peek() == "*":
            self.skip_comment()
        else:
            # e.g. calc(100vw / 3)
            self.buffer.append("/")
            self.position += 1

    def skip_comment(self) -> None:
        end = self.source.find("*/", self.position + 2)
        # an unterminated comment runs to the end of input
        self.position = len(self.source) if end == -1 else end + 2

    def handle_space(self) -> None:
        redundant = (
            not self.buffer
            or self.buffer[-1] == " "
            or self.prev_char in NO_SPACE_AFTER
            or self.peek() in NO_SPACE_BEFORE
        )
        if not redundant:
            self.buffer.append(" ")
        self.position += 1

    # ---- declarations ----

    def handle_declaration(self, text: str) -> None:
        prop, sep, value = text.partition(":")
        prop = prop.strip()
        value = value.strip()
        if not sep or not prop or not value:
            raise self.error(InvalidDeclaration, f"Invalid declaration: {text}", text)
        # later declarations of the same property win
        self.declarations[prop] = value

    def flush_pending_declaration(self) -> None:
        """Treat text left before a ``}`` as a final, unterminated declaration."""
        pending = self.take_buffer().strip()
        if pending:
            self.handle_declaration(pending)

    # ---- blocks ----

    def handle_open_brace(self) -> None:
        rule_start = self.take_buffer().strip()
        if not rule_start:
            raise self.error(UnexpectedOpenBrace, "Unexpected {", "{")

        if self.mode in (ParseMode.ROOT, ParseMode.CONDITIONAL_GROUP):
            self.open_from_root(rule_start)
        elif rule_start.startswith("@"):
            raise self.error(UnexpectedAtRuleNesting, "Unexpected at-rule", rule_start)
        elif self.mode is ParseMode.NESTED_RULE_SET:
            self.open_rule_set(rule_start)
        elif self.step_selector is not None:
            # keyframe steps do not nest
            raise self.error(UnexpectedOpenBrace, "Unexpected {", rule_start)
        else:
            self.step_selector = rule_start
            self.frames.append({})

    def open_from_root(self, rule_start: str) -> None:
        if rule_start.startswith(KEYFRAMES):
            name = rule_start[len(KEYFRAMES):].strip()
            self.keyframes_name = name
            self.keyframes_identifiers[name] = f"{self.scope_key}-{name}"
            self.mode = ParseMode.KEYFRAMES
            return

        group_type = _group_type_for(rule_start)
        if group_type is not None:
            query = rule_start[len(group_type.at_keyword):].strip()
            self.groups.append(
                _GroupRecord(group_type, query, selector_path=[self.scope_selector])
            )
            self.frames.append({})
            self.mode = ParseMode.CONDITIONAL_GROUP
            return

        if rule_start.startswith("@"):
            raise self.error(
                DisallowedAtRule,
                "The only at-rules allowed are @keyframes, @media, and @supports",
                rule_start,
            )

        self.open_rule_set(rule_start)

    def open_rule_set(self, selector: str) -> None:
        self.active_path.append(selector)
        self.frames.append({})
        self.mode = ParseMode.NESTED_RULE_SET

    def handle_close_brace(self) -> None:
        if self.mode is ParseMode.ROOT:
            raise self.error(UnbalancedCloseBrace, "Unbalanced }", "}")

        self.flush_pending_declaration()

        if self.mode is ParseMode.CONDITIONAL_GROUP:
            self.close_group()
        elif self.mode is ParseMode.NESTED_RULE_SET:
            self.close_rule_set()
        else:
            self.close_keyframes_block()

    def close_rule_set(self) -> None:
        path = self.active_path
        declarations = self.frames.pop()
        if declarations:
            self.active_rules.append(ParsedRuleSet(compute_selector(path), declarations))
        path.pop()
        if len(path) == 1:
            self.mode = self.outer_mode

    def close_keyframes_block(self) -> None:
        if self.step_selector is not None:
            declarations = self.frames.pop()
            # empty steps are dropped
            if declarations:
                self.steps.append(RuleSet(self.step_selector, declarations))
            self.step_selector = None
            return

        # end of the @keyframes itself, kept even when every step was empty
        self.active_rules.append(
            ParsedKeyframes(
                identifier=self.keyframes_identifiers[self.keyframes_name],
                steps=self.steps,
            )
        )
        self.keyframes_name = ""
        self.steps = []
        self.mode = self.outer_mode

    def close_group(self) -> None:
        group = self.groups.pop()
        declarations = self.frames.pop()

        rules = group.rules
        if declarations:
            rules.insert(0, ParsedRuleSet(self.scope_selector, declarations))

        self.active_rules.append(
            ParsedConditionalGroup(group_type=group.group_type, query=group.query, rules=rules)
        )
        self.mode = self.outer_mode


def parse_css(source: str, scope_key: str) -> ParsedCSS:
    """Parse scoped CSS *source* into a rule tree rooted at ``.{scope_key}``.

    Raises a :class:`~scopecss.parser.errors.ParseError` subclass on malformed
    input; no partial result is returned.
    """
    parsed = _Scanner(source, scope_key).run()
    logger.debug(
        "Parsed %d top-level rule(s), %d keyframes for scope %s",
        len(parsed.rules),
        len(parsed.keyframes_identifiers),
        scope_key,
    )
    return parsed
