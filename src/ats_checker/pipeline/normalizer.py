"""Whitespace cleanup and tokenization shared by every analysis step."""

from __future__ import annotations

import re

_TRAILING_SPACE = re.compile(r"[ \t]+\n")
_BLANK_LINES = re.compile(r"\n{3,}")
# Outer whitespace includes a byte-order mark left over from extraction
_OUTER_SPACE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")
_DASHES = re.compile(r"[–—]")
_NON_TOKEN = re.compile(r"[^a-z0-9+#.\- ]+")


def normalize(text: str) -> str:
    """Drop trailing spaces on each line and keep at most one blank line."""
    text = _TRAILING_SPACE.sub("\n", text)
    text = _BLANK_LINES.sub("\n\n", text)
    return _OUTER_SPACE.sub("", text)


def tokenize(text: str) -> list[str]:
    """Lowercase word tokens in reading order (duplicates kept)."""
    text = _DASHES.sub("-", text.lower())
    text = _NON_TOKEN.sub(" ", text)
    return [t for t in text.split() if t]
