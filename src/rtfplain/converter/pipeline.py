"""RTF to plain text conversion entry point."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .fallback import fallback_extract
from .interpreter import interpret
from .normalizer import normalize
from .tables import RTF_SIGNATURE
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

# Whitespace and byte order marks ahead of the RTF signature
_LEADING_JUNK = re.compile(r"^[\s\ufeff]+")


class Strategy(Enum):
    """Which path produced the converted text."""

    PASSTHROUGH = "passthrough"  # not RTF, returned unchanged
    STRUCTURED = "structured"  # tokenize -> interpret -> normalize
    FALLBACK = "fallback"  # regex recovery after a structured fault


@dataclass
class ConversionResult:
    """Text produced by a conversion and how it was obtained."""

    text: str
    strategy: Strategy
    error: Optional[str] = None  # structured fault that forced the fallback

    @property
    def used_fallback(self) -> bool:
        return self.strategy == Strategy.FALLBACK


def is_rtf(document: str) -> bool:
    """Check for the RTF signature after trimming whitespace and any BOM."""
    return _LEADING_JUNK.sub("", document).startswith(RTF_SIGNATURE)


def _coerce(document) -> str:
    if document is None:
        return ""
    try:
        return str(document)
    except Exception as e:
        logger.warning(f"Cannot convert {type(document).__name__} to text: {e}")
        return ""


def _attempt_structured(document: str) -> ConversionResult:
    """
    Run tokenize -> interpret -> normalize.

    A fault in any stage is returned as a FALLBACK result carrying the
    error description and no text; the caller decides what to do next.
    """
    try:
        text = normalize(interpret(tokenize(document)))
    except Exception as e:
        return ConversionResult(
            text="",
            strategy=Strategy.FALLBACK,
            error=f"{type(e).__name__}: {e}",
        )
    return ConversionResult(text=text, strategy=Strategy.STRUCTURED)


def convert_with_details(document: str) -> ConversionResult:
    """
    Convert a document and report which strategy was used.

    Args:
        document: Raw document content. Anything that is not RTF is
            returned unchanged.

    Returns:
        ConversionResult. Never raises.
    """
    if not isinstance(document, str):
        document = _coerce(document)

    if not is_rtf(document):
        return ConversionResult(text=document, strategy=Strategy.PASSTHROUGH)

    document = _LEADING_JUNK.sub("", document)
    result = _attempt_structured(document)
    if result.strategy == Strategy.STRUCTURED:
        return result

    logger.warning(f"RTF parsing failed, using fallback extraction: {result.error}")
    return ConversionResult(
        text=fallback_extract(document),
        strategy=Strategy.FALLBACK,
        error=result.error,
    )


def convert(document: str) -> str:
    """
    Extract plain text from an RTF document.

    Non-RTF input is returned as-is. Malformed RTF degrades to lower
    fidelity text instead of raising.

    Usage:
        text = convert(r"{\\rtf1 Hello\\par World}")
        # "Hello\\nWorld"
    """
    return convert_with_details(document).text
