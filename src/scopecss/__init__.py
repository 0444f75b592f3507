"""scopecss - scoped, nestable CSS for Python-rendered pages."""

__version__ = "0.1.0"

from scopecss.config import ScopeConfig  # noqa: E402
from scopecss.css import css, scope  # noqa: E402
from scopecss.generator import generate_rules  # noqa: E402
from scopecss.keys import KeyFactory, next_scope_key  # noqa: E402
from scopecss.model import ParsedCSS  # noqa: E402
from scopecss.parser import ParseError, parse_css  # noqa: E402
from scopecss.stylesheet import RuleRejected, StyleSheet, default_stylesheet  # noqa: E402

__all__ = [
    "__version__",
    "css",
    "scope",
    "parse_css",
    "generate_rules",
    "ParsedCSS",
    "ParseError",
    "KeyFactory",
    "next_scope_key",
    "ScopeConfig",
    "StyleSheet",
    "RuleRejected",
    "default_stylesheet",
]
