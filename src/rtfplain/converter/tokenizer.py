"""RTF tokenizer.

Index-based scanner that turns raw RTF into a flat token list. Malformed
escapes are dropped and truncated input simply ends the token stream;
tokenize() never raises.
"""

import re
import string
from typing import Optional

from .tables import UNICODE_BIAS, resolve_byte
from .tokens import GROUP_END, GROUP_START, Control, Hex, Text, Token, Unicode

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)

_TEXT_RUN = re.compile(r"[^{}\\\r\n]+")
_CONTROL_NAME = re.compile(r"[A-Za-z]+")
_SIGNED_NUMBER = re.compile(r"-?(\d*)")

# Longer digit runs are not meaningful RTF parameters
_MAX_PARAMETER_DIGITS = 10
_MAX_CODE_POINT = 0x10FFFF


def _read_number(raw: str, pos: int) -> tuple[Optional[int], int]:
    """
    Read an optional sign and digits starting at pos.

    Returns:
        (value, new_pos). value is None when there are no digits or the
        run is too long to be a real parameter.
    """
    match = _SIGNED_NUMBER.match(raw, pos)
    digits = match.group(1)
    end = match.end()

    if not digits or len(digits) > _MAX_PARAMETER_DIGITS:
        return None, end

    value = int(digits)
    if raw[pos] == "-":
        value = -value
    return value, end


def _starts_number(raw: str, pos: int) -> bool:
    return pos < len(raw) and (raw[pos] in _DIGITS or raw[pos] == "-")


def tokenize(raw: str) -> list[Token]:
    """
    Scan raw RTF into tokens.

    Args:
        raw: Complete RTF document.

    Returns:
        Tokens in document order.
    """
    tokens: list[Token] = []
    length = len(raw)
    i = 0

    while i < length:
        char = raw[i]

        if char == "{":
            tokens.append(GROUP_START)
            i += 1

        elif char == "}":
            tokens.append(GROUP_END)
            i += 1

        elif char == "\\":
            i += 1
            if i >= length:
                break
            i = _scan_escape(raw, i, tokens)

        elif char == "\r" or char == "\n":
            # Source line breaks are formatting, only \par and \line count
            i += 1

        else:
            match = _TEXT_RUN.match(raw, i)
            tokens.append(Text(match.group()))
            i = match.end()

    return tokens


def _scan_escape(raw: str, i: int, tokens: list[Token]) -> int:
    """
    Scan whatever follows a backslash at position i.

    Appends zero or one token and returns the next scan position.
    """
    length = len(raw)
    nxt = raw[i]

    # \uN unicode escape
    if nxt == "u" and _starts_number(raw, i + 1):
        value, i = _read_number(raw, i + 1)
        # One fallback character follows for readers without unicode support
        if i < length and raw[i] == "?":
            i += 1
        if value is not None:
            code_point = value + UNICODE_BIAS if value < 0 else value
            if 0 <= code_point <= _MAX_CODE_POINT:
                tokens.append(Unicode(chr(code_point), code_point))
        return i

    # \'XX hex escape
    if nxt == "'":
        pair = raw[i + 1 : i + 3]
        if len(pair) == 2 and pair[0] in _HEX_DIGITS and pair[1] in _HEX_DIGITS:
            byte_code = int(pair, 16)
            tokens.append(Hex(resolve_byte(byte_code), byte_code))
        return i + 1 + len(pair)

    # Escaped literal
    if nxt in "\\{}":
        tokens.append(Text(nxt))
        return i + 1

    # Backslash-newline means \par
    if nxt == "\r" or nxt == "\n":
        i += 1
        if nxt == "\r" and i < length and raw[i] == "\n":
            i += 1
        tokens.append(Control("par"))
        return i

    # Control word, optional parameter, optional space delimiter
    if nxt in _LETTERS:
        match = _CONTROL_NAME.match(raw, i)
        name = match.group()
        i = match.end()

        parameter = None
        if _starts_number(raw, i):
            parameter, i = _read_number(raw, i)

        if i < length and raw[i] == " ":
            i += 1

        tokens.append(Control(name, parameter))
        return i

    # Control symbol (\~ \- \_ \* ...)
    tokens.append(Control(nxt))
    return i + 1
