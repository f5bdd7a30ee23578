"""Transcript text normalization for keyword matching."""

from typing import Optional
import re

# Anything that is not a letter, digit or whitespace separates tokens.
# Underscore is a word character for \w, so it is listed explicitly.
_SEPARATORS = re.compile(r"[^\w\s]|_")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """
    Convert raw text into a canonical, space-separated token stream.

    Lowercases, turns punctuation into token separators and collapses
    whitespace, so "DIAGRAM!", "Diagram," and "diagram" all become "diagram"
    and "hands-on" becomes "hands on". None or empty input yields "".
    """
    if not text:
        return ""

    lowered = text.lower()
    separated = _SEPARATORS.sub(" ", lowered)
    return _WHITESPACE.sub(" ", separated).strip()
