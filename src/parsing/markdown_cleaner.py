"""Markdown marker stripping for chat display.

Degrades model output to plain text with a fixed, ordered list of regex
rewrites. This is best-effort: nested or malformed Markdown may survive
partially.
"""

import re
from typing import NamedTuple

# Longest tags first so "jsx" is not consumed as "js" + "x"
FENCE_LANGUAGES = (
    "javascript",
    "typescript",
    "python",
    "json",
    "java",
    "html",
    "yaml",
    "jsx",
    "tsx",
    "cpp",
    "css",
    "xml",
    "sql",
    "js",
    "ts",
    "c",
)


class RewriteRule(NamedTuple):
    """A single text rewrite applied by clean()."""

    name: str
    pattern: re.Pattern[str]
    replacement: str


REWRITE_RULES: tuple[RewriteRule, ...] = (
    RewriteRule(
        "fence_with_language",
        re.compile(r"```(?:" + "|".join(FENCE_LANGUAGES) + r")?", re.IGNORECASE),
        "",
    ),
    RewriteRule("fence", re.compile(r"```"), ""),
    RewriteRule("bold", re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    RewriteRule("italic", re.compile(r"\*(.*?)\*"), r"\1"),
    # Matches anywhere in the text, not only at line starts
    RewriteRule("heading", re.compile(r"#{1,6}\s"), ""),
)


def clean(raw: str) -> str:
    """Strip Markdown formatting markers from model output.

    Rules run in order, each on the output of the previous one.

    Args:
        raw: Text as returned by the model.

    Returns:
        Plain text with surrounding whitespace removed.
    """
    text = raw
    for rule in REWRITE_RULES:
        text = rule.pattern.sub(rule.replacement, text)
    return text.strip()
