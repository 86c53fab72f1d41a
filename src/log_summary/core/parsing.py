"""Line-level parsing: severity classification and message extraction.

Both functions are total: any string, including an empty one, yields a result.
"""

from __future__ import annotations

import re

from .models import Level

# ASCII whitespace only; str.split()/str.strip() would also treat Unicode
# separators (\x1c-\x1f, \x85, \xa0, ...) as whitespace.
_ASCII_WS = " \t\n\r\x0b\x0c"
_TOKEN_RE = re.compile(r"[^ \t\n\r\x0b\x0c]+")

_MESSAGE_MARKER = " - "

# Whole-token vocabulary (upper-cased) -> normalized level.
_LEVEL_TOKENS: dict[str, Level] = {
    "TRACE": Level.TRACE,
    "DEBUG": Level.DEBUG,
    "INFO": Level.INFO,
    "WARN": Level.WARN,
    "WARNING": Level.WARN,
    "ERROR": Level.ERROR,
    "FATAL": Level.FATAL,
}


def trim(text: str) -> str:
    """Strip leading/trailing ASCII whitespace, keeping inner whitespace as is."""
    return text.strip(_ASCII_WS)


def classify(line: str) -> Level:
    """Return the level of the first token that names one, else UNKNOWN.

    Matching is whole-token and ASCII case-insensitive, so "error" matches
    but "INFORMATION" or "[ERROR]" do not.
    """
    for m in _TOKEN_RE.finditer(line):
        token = m.group(0)
        if not token.isascii():
            continue
        level = _LEVEL_TOKENS.get(token.upper())
        if level is not None:
            return level
    return Level.UNKNOWN


def extract_message(line: str) -> str:
    """Return the trimmed text after the first " - ", or the trimmed line."""
    _, sep, rest = line.partition(_MESSAGE_MARKER)
    if sep:
        return trim(rest)
    return trim(line)
