"""Plain text file extraction."""

from pathlib import Path

from .base import Extractor, read_text
from ..converter.pipeline import ConversionResult, convert_with_details


class TextExtractor(Extractor):
    """
    Extract text from plain text files.

    Content still goes through the converter: letters exported as RTF
    but saved with a .txt name are common, and real plain text passes
    through unchanged.
    """

    @property
    def extensions(self) -> list[str]:
        return [".txt", ".text", ".md"]

    def extract_with_details(self, path: Path) -> ConversionResult:
        return convert_with_details(read_text(path))
