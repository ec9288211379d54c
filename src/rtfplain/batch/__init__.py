"""Batch conversion of files and folders."""

from .converter import BatchConverter, DEFAULT_EXCLUDE_PATTERNS, EMPTY_TEXT_ERROR
from .results import BatchResult, DocumentResult

__all__ = [
    "BatchConverter",
    "BatchResult",
    "DocumentResult",
    "DEFAULT_EXCLUDE_PATTERNS",
    "EMPTY_TEXT_ERROR",
]
