"""Tests for the css() front door."""

import logging

import pytest

from scopecss import css, scope
from scopecss.parser import InvalidDeclaration
from scopecss.stylesheet import RuleRejected, StyleSheet


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class RecordingSheet:
    """Sink that records rules and rejects any containing a marker."""

    def __init__(self, reject: str | None = None):
        self.rules: list[str] = []
        self.reject = reject

    def insert_rule(self, rule: str, index: int | None = None) -> int:
        if self.reject is not None and self.reject in rule:
            raise RuleRejected(rule, "rejected by test")
        self.rules.append(rule)
        return len(self.rules) - 1


class KeyframesRefusingSheet(RecordingSheet):
    """Sink that rejects keyframes with its own exception type."""

    def insert_rule(self, rule: str, index: int | None = None) -> int:
        if rule.startswith("@keyframes"):
            raise ValueError("cannot parse rule")
        return super().insert_rule(rule, index)


def _key(name: str):
    return lambda: name


# ---------------------------------------------------------------------------
# scope()
# ---------------------------------------------------------------------------


class TestScope:
    def test_returns_generated_rules(self) -> None:
        assert scope("p { color: red; } margin: 0;", "k") == [
            ".k p{color:red;}",
            ".k{margin:0;}",
        ]


# ---------------------------------------------------------------------------
# css()
# ---------------------------------------------------------------------------


class TestCss:
    def test_returns_scope_class(self) -> None:
        sheet = RecordingSheet()
        assert css("font-size: 1em;", stylesheet=sheet, key_factory=_key("k")) == "k"
        assert sheet.rules == [".k{font-size:1em;}"]

    def test_generates_a_key_by_default(self) -> None:
        sheet = RecordingSheet()
        class_name = css("font-size: 1em;", stylesheet=sheet)
        assert isinstance(class_name, str)
        assert class_name.startswith("_")
        assert sheet.rules == [f".{class_name}{{font-size:1em;}}"]

    def test_distinct_calls_get_distinct_scopes(self) -> None:
        sheet = RecordingSheet()
        first = css("color: red;", stylesheet=sheet)
        second = css("color: red;", stylesheet=sheet)
        assert first != second
        assert len(sheet.rules) == 2

    def test_inserts_in_generated_order(self) -> None:
        sheet = RecordingSheet()
        css(
            "li { color: red; } @keyframes spin { to { opacity: 0; } } animation: spin 1s;",
            stylesheet=sheet,
            key_factory=_key("k"),
        )
        assert sheet.rules == [
            ".k li{color:red;}",
            "@keyframes k-spin{to{opacity:0;}}",
            ".k{animation:k-spin 1s;}",
        ]

    def test_rejected_rule_is_logged_and_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        sheet = RecordingSheet(reject="h1")
        with caplog.at_level(logging.WARNING, logger="scopecss.css"):
            css(
                "li { color: red; } h1 { color: blue; } p { color: green; }",
                stylesheet=sheet,
                key_factory=_key("k"),
            )
        assert sheet.rules == [".k li{color:red;}", ".k p{color:green;}"]
        assert "could not understand the following rule: .k h1{color:blue;}" in caplog.text

    def test_foreign_rejection_does_not_stop_later_rules(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        sheet = KeyframesRefusingSheet()
        with caplog.at_level(logging.WARNING, logger="scopecss.css"):
            css(
                "@keyframes spin { to { opacity: 0; } } p { color: red; } span { color: blue; }",
                stylesheet=sheet,
                key_factory=_key("k"),
            )
        assert sheet.rules == [".k p{color:red;}", ".k span{color:blue;}"]
        assert "could not understand the following rule: @keyframes k-spin" in caplog.text

    def test_real_stylesheet_rejects_unparseable_rule(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        sheet = StyleSheet()
        with caplog.at_level(logging.WARNING, logger="scopecss.css"):
            css("@x: 1; p { color: red; }", stylesheet=sheet, key_factory=_key("k"))
        assert sheet.css_rules == (".k p{color:red;}",)
        assert ".k{@x:1;}" in caplog.text

    def test_parse_error_propagates(self) -> None:
        sheet = RecordingSheet()
        with pytest.raises(InvalidDeclaration):
            css("p { color: red; } font-size 12px;", stylesheet=sheet, key_factory=_key("k"))
        assert sheet.rules == []
