"""rtfplain converter - RTF to plain text."""

from .pipeline import ConversionResult, Strategy, convert, convert_with_details, is_rtf
from .tokenizer import tokenize
from .interpreter import interpret
from .normalizer import normalize
from .fallback import fallback_extract

__all__ = [
    "convert",
    "convert_with_details",
    "is_rtf",
    "ConversionResult",
    "Strategy",
    "tokenize",
    "interpret",
    "normalize",
    "fallback_extract",
]
