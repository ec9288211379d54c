"""Regex-only RTF text recovery.

Used when the structured pipeline faults. It keeps no group stack, so
destination content can leak through, but it always terminates and
never raises.
"""

import re

from .tables import UNICODE_BIAS, resolve_byte, resolve_surrogates

# Innermost-group removal passes; deeper nesting leaks inner text
FALLBACK_BRACE_PASSES = 3

_HEADER = re.compile(r"^\{\\rtf\d*[^}]*")
_UNICODE = re.compile(r"\\u(-?\d{1,10})\??")
_HEX = re.compile(r"\\'([0-9a-fA-F]{2})")
_NEWLINE_WORDS = re.compile(r"\\(?:par|line|row)\b")
_TAB_WORDS = re.compile(r"\\(?:tab|cell)\b")
_CONTROL_WORD = re.compile(r"\\[a-zA-Z]+-?\d*\s?")
_CONTROL_SYMBOL = re.compile(r"\\([^a-zA-Z0-9\s])")
_INNER_GROUP = re.compile(r"\{[^{}]*\}")
_BRACES = re.compile(r"[{}]")
_WHITESPACE = re.compile(r"\s+")

_SYMBOLS = {
    "~": " ",
    "-": "‑",
    "_": "‑",
    "\\": "\\",
}


def _decode_unicode(match: re.Match) -> str:
    code_point = int(match.group(1))
    if code_point < 0:
        code_point += UNICODE_BIAS
    if 0 <= code_point <= 0x10FFFF:
        return chr(code_point)
    return ""


def _decode_hex(match: re.Match) -> str:
    return resolve_byte(int(match.group(1), 16))


def _decode_symbol(match: re.Match) -> str:
    return _SYMBOLS.get(match.group(1), "")


def fallback_extract(raw: str) -> str:
    """
    Best-effort text recovery by direct pattern substitution.

    Args:
        raw: RTF document that the structured pipeline could not handle.

    Returns:
        Single-line text with whitespace collapsed. May contain stray
        formatting fragments.
    """
    text = _HEADER.sub("", raw.lstrip())
    text = resolve_surrogates(_UNICODE.sub(_decode_unicode, text))
    text = _HEX.sub(_decode_hex, text)
    text = _NEWLINE_WORDS.sub("\n", text)
    text = _TAB_WORDS.sub("\t", text)
    text = _CONTROL_WORD.sub("", text)
    text = _CONTROL_SYMBOL.sub(_decode_symbol, text)

    for _ in range(FALLBACK_BRACE_PASSES):
        text = _INNER_GROUP.sub("", text)

    text = _BRACES.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()
