"""Base extractor interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..converter.pipeline import ConversionResult

# Tried in order; utf-8-sig also reads BOM-less UTF-8, latin-1 never fails
ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")


class ExtractionError(Exception):
    """Failed to extract text from file."""

    pass


def read_text(path: Path) -> str:
    """
    Read a file as text with encoding fallback.

    RTF is 7-bit by design, but hand-edited letters often carry raw
    8-bit characters from whatever editor last touched them.

    Raises:
        ExtractionError: If the file cannot be read.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ExtractionError(f"Failed to read {path}: {e}")

    for encoding in ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue

    # Unreachable with latin-1 in the chain
    raise ExtractionError(f"Cannot decode {path}")


class Extractor(ABC):
    """Base class for text extractors."""

    @property
    @abstractmethod
    def extensions(self) -> list[str]:
        """File extensions this extractor handles (lowercase, with dot)."""
        pass

    @abstractmethod
    def extract_with_details(self, path: Path) -> ConversionResult:
        """
        Extract text from file.

        Args:
            path: Path to file to extract.

        Returns:
            ConversionResult with the text and the strategy that produced it.

        Raises:
            ExtractionError: If the file cannot be read.
        """
        pass

    def extract(self, path: Path) -> str:
        """Extract text from file, discarding conversion details."""
        return self.extract_with_details(path).text

    def can_handle(self, path: Path) -> bool:
        """Check if this extractor can handle the file."""
        return path.suffix.lower() in self.extensions
