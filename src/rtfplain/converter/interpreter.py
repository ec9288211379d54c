"""Group and destination aware interpretation of RTF tokens."""

from dataclasses import dataclass
from typing import Iterable, Optional

from .tables import CONTROL_WORD_OUTPUT, SKIP_DESTINATIONS, resolve_surrogates
from .tokens import Hex, Text, Token, TokenType, Unicode


@dataclass
class GroupState:
    """One entry of the group stack."""

    skip: bool = False
    destination: Optional[str] = None


def interpret(tokens: Iterable[Token]) -> str:
    """
    Turn a token stream into text.

    Walks the tokens once, keeping an explicit group stack and a skip
    depth. Groups opened by a destination control word (font table,
    header, picture, any \\* destination, ...) are suppressed along with
    everything nested inside them.

    Args:
        tokens: Output of tokenize().

    Returns:
        Unnormalized text in document order. Surrogate pairs from \\uN
        escapes are joined; unpaired halves become U+FFFD.
    """
    output: list[str] = []
    group_stack: list[GroupState] = []
    skip_depth = 0
    is_destination = False

    for token in tokens:
        kind = token.type

        if kind == TokenType.GROUP_START:
            group_stack.append(GroupState(skip=skip_depth > 0))
            if skip_depth > 0:
                skip_depth += 1
            is_destination = False

        elif kind == TokenType.GROUP_END:
            if skip_depth > 0:
                skip_depth -= 1
            if group_stack:
                group_stack.pop()
            is_destination = False

        elif skip_depth > 0:
            continue

        elif kind == TokenType.CONTROL:
            name = token.name

            if name == "*":
                is_destination = True

            # Destination membership wins over the output table
            elif is_destination or name in SKIP_DESTINATIONS:
                if group_stack:
                    group_stack[-1].skip = True
                    group_stack[-1].destination = name
                    skip_depth = 1
                is_destination = False

            else:
                is_destination = False
                literal = CONTROL_WORD_OUTPUT.get(name)
                if literal:
                    output.append(literal)

        elif isinstance(token, (Text, Hex, Unicode)):
            output.append(token.value)

    return resolve_surrogates("".join(output))
