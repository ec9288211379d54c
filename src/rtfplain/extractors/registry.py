"""Registry of all text extractors."""

from pathlib import Path
from typing import Optional

from .base import Extractor, ExtractionError
from .text import TextExtractor
from .rtf import RtfExtractor
from ..converter.pipeline import ConversionResult


class ExtractorRegistry:
    """
    Registry of all text extractors.

    Routes files to the appropriate extractor based on extension.

    Usage:
        registry = ExtractorRegistry()

        # Check if we can handle a file
        if registry.can_extract(Path("letter.rtf")):
            text = registry.extract(Path("letter.rtf"))

        # List supported extensions
        print(registry.supported_extensions)
    """

    def __init__(self):
        self.extractors: list[Extractor] = [
            RtfExtractor(),
            TextExtractor(),
        ]

    def get_extractor(self, path: Path) -> Optional[Extractor]:
        """Find extractor for file type."""
        for extractor in self.extractors:
            if extractor.can_handle(path):
                return extractor
        return None

    def can_extract(self, path: Path) -> bool:
        """Check if we can extract text from this file."""
        return self.get_extractor(path) is not None

    def extract_with_details(self, path: Path) -> ConversionResult:
        """
        Extract text from file.

        Args:
            path: Path to file.

        Returns:
            ConversionResult for the file content.

        Raises:
            ExtractionError: If no extractor found or the file is unreadable.
        """
        extractor = self.get_extractor(path)
        if not extractor:
            raise ExtractionError(f"No extractor for {path.suffix}")
        return extractor.extract_with_details(path)

    def extract(self, path: Path) -> str:
        """Extract text from file. Raises ExtractionError like extract_with_details()."""
        return self.extract_with_details(path).text

    @property
    def supported_extensions(self) -> list[str]:
        """All supported file extensions."""
        extensions = []
        for extractor in self.extractors:
            extensions.extend(extractor.extensions)
        return sorted(set(extensions))
