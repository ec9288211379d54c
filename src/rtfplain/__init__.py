"""rtfplain - Plain text from RTF clinical correspondence."""

__version__ = "0.1.0"

from rtfplain.converter import (
    ConversionResult,
    Strategy,
    convert,
    convert_with_details,
    fallback_extract,
    interpret,
    is_rtf,
    normalize,
    tokenize,
)
from rtfplain.extractors import ExtractionError, ExtractorRegistry
from rtfplain.batch import BatchConverter, BatchResult, DocumentResult
from rtfplain.config import Config

__all__ = [
    # Converter
    "convert",
    "convert_with_details",
    "is_rtf",
    "ConversionResult",
    "Strategy",
    # Pipeline stages
    "tokenize",
    "interpret",
    "normalize",
    "fallback_extract",
    # Files
    "ExtractionError",
    "ExtractorRegistry",
    # Batch
    "BatchConverter",
    "BatchResult",
    "DocumentResult",
    # Config
    "Config",
]
