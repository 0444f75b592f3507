"""Parser error types."""

from __future__ import annotations


class ParseError(Exception):
    """Raised when scoped CSS source cannot be parsed.

    Attributes:
        fragment: The buffered text (or character) that triggered the error.
        position: 0-based offset of the cursor in the source.
        line: 1-based line of the cursor, if known.
        column: 1-based column of the cursor, if known.
    """

    def __init__(
        self,
        message: str,
        fragment: str = "",
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.fragment = fragment
        self.position = position
        self.line = line
        self.column = column
        super().__init__(message)

    @property
    def location(self) -> str:
        if self.line is None:
            return ""
        return f"line {self.line}, column {self.column}"


class UnexpectedOpenBrace(ParseError):
    """A ``{`` with no selector or at-rule in front of it."""


class UnbalancedCloseBrace(ParseError):
    """A ``}`` that does not close any open block."""


class InvalidDeclaration(ParseError):
    """A ``;``-terminated declaration without both a property and a value."""


class DisallowedAtRule(ParseError):
    """An at-rule other than ``@keyframes``, ``@media`` or ``@supports``."""


class UnexpectedAtRuleNesting(ParseError):
    """An at-rule inside a nested rule set or a ``@keyframes`` block."""


class UnclosedBlock(ParseError):
    """Input ended inside a rule set, ``@keyframes`` or conditional group.

    Raised only after the whole source has been read, so ``fragment`` is
    empty and the location points at the end of input.
    """
