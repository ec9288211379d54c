"""Token types produced by the RTF tokenizer."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TokenType(Enum):
    """Kinds of RTF token."""

    GROUP_START = "group_start"
    GROUP_END = "group_end"
    CONTROL = "control"
    TEXT = "text"
    HEX = "hex"
    UNICODE = "unicode"


@dataclass(frozen=True)
class GroupStart:
    """Opening brace."""

    type = TokenType.GROUP_START


@dataclass(frozen=True)
class GroupEnd:
    """Closing brace."""

    type = TokenType.GROUP_END


@dataclass(frozen=True)
class Control:
    """A control word or control symbol, e.g. \\par or \\fs24."""

    name: str
    parameter: Optional[int] = None
    type = TokenType.CONTROL


@dataclass(frozen=True)
class Text:
    """A run of literal characters."""

    value: str
    type = TokenType.TEXT


@dataclass(frozen=True)
class Hex:
    """A \\'XX escape, already resolved through the codepage."""

    value: str
    byte_code: int
    type = TokenType.HEX


@dataclass(frozen=True)
class Unicode:
    """A \\uN escape, already resolved to a character."""

    value: str
    code_point: int
    type = TokenType.UNICODE


Token = Union[GroupStart, GroupEnd, Control, Text, Hex, Unicode]

# Shared instances; the delimiter tokens carry no payload
GROUP_START = GroupStart()
GROUP_END = GroupEnd()


def describe(token: Token) -> str:
    """Short human-readable payload of a token, for diagnostics."""
    if isinstance(token, Control):
        if token.parameter is None:
            return f"\\{token.name}"
        return f"\\{token.name}{token.parameter}"
    if isinstance(token, Hex):
        return f"{token.value!r} (0x{token.byte_code:02x})"
    if isinstance(token, Unicode):
        return f"{token.value!r} (U+{token.code_point:04X})"
    if isinstance(token, Text):
        return repr(token.value)
    return "{" if token.type == TokenType.GROUP_START else "}"
