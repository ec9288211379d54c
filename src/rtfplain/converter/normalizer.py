"""Whitespace cleanup for interpreted RTF text."""

import re

_CRLF = re.compile(r"\r\n?")
_TRAILING_SPACE = re.compile(r"[ \t]+\n")
_LEADING_SPACE = re.compile(r"\n[ \t]+")
_BLANK_LINES = re.compile(r"\n{4,}")
_TAB_RUNS = re.compile(r"\t{3,}")
_SPACE_RUNS = re.compile(r" {3,}")


def normalize(text: str) -> str:
    """
    Collapse table and section artifacts into readable plain text.

    Horizontal whitespace around newlines is stripped before blank lines
    are collapsed, so normalize(normalize(s)) == normalize(s).

    Args:
        text: Output of interpret().

    Returns:
        Cleaned text with LF line endings and no leading/trailing whitespace.
    """
    text = _CRLF.sub("\n", text)
    text = _TRAILING_SPACE.sub("\n", text)
    text = _LEADING_SPACE.sub("\n", text)
    # At most two blank lines
    text = _BLANK_LINES.sub("\n\n\n", text)
    # Empty table cells
    text = _TAB_RUNS.sub("\t\t", text)
    text = _SPACE_RUNS.sub("  ", text)
    return text.strip()
