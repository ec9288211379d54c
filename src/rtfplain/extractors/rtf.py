"""Rich Text Format (.rtf) extraction."""

from pathlib import Path

from .base import Extractor, read_text
from ..converter.pipeline import ConversionResult, convert_with_details


class RtfExtractor(Extractor):
    """Extract text from RTF files."""

    @property
    def extensions(self) -> list[str]:
        return [".rtf"]

    def extract_with_details(self, path: Path) -> ConversionResult:
        """Strip RTF formatting and return plain text."""
        return convert_with_details(read_text(path))
