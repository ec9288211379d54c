"""File-level text extractors."""

from .base import Extractor, ExtractionError, read_text
from .registry import ExtractorRegistry
from .rtf import RtfExtractor
from .text import TextExtractor

__all__ = [
    "Extractor",
    "ExtractionError",
    "ExtractorRegistry",
    "RtfExtractor",
    "TextExtractor",
    "read_text",
]
