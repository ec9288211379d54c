"""Batch conversion of letter folders."""

from pathlib import Path
from datetime import datetime
from typing import Iterator, Optional, Callable
import logging
import os

from .results import BatchResult, DocumentResult
from ..extractors.registry import ExtractorRegistry
from ..extractors.base import ExtractionError

logger = logging.getLogger(__name__)


# Default directories to skip
DEFAULT_EXCLUDE_PATTERNS = [
    ".git",
    "__pycache__",
    "venv",
    ".venv",
    ".tox",
    ".pytest_cache",
    "~$",  # Word lock files
]

# Converted text shorter than this is treated as a failed extraction
DEFAULT_MIN_TEXT_LENGTH = 10

EMPTY_TEXT_ERROR = "Could not extract text from document"


class BatchConverter:
    """
    Converts every supported document under a path.

    Walks directories, reads each file, converts it to plain text and
    records per-document results. A failure on one document never stops
    the batch.

    Usage:
        converter = BatchConverter()
        result = converter.convert("./letters")

        for doc in result.documents:
            if doc.ok:
                print(f"{doc.path}: {doc.char_count} chars")

    With progress callback:
        def on_progress(current, total, filename):
            print(f"{current}/{total}: {filename}")

        result = converter.convert("./letters", on_progress=on_progress)

    Streaming results:
        for doc in converter.convert_iter("./letters"):
            store(doc)
    """

    def __init__(
        self,
        exclude_patterns: Optional[list[str]] = None,
        max_file_size_mb: int = 100,
        min_text_length: int = DEFAULT_MIN_TEXT_LENGTH,
    ):
        """
        Initialize batch converter.

        Args:
            exclude_patterns: Directory/file patterns to skip.
            max_file_size_mb: Maximum file size to convert (default 100MB).
            min_text_length: Minimum stripped text length for a usable result.
        """
        self.extractor_registry = ExtractorRegistry()
        self.max_file_size = max_file_size_mb * 1024 * 1024
        self.min_text_length = min_text_length
        self.exclude_patterns = (
            exclude_patterns if exclude_patterns is not None else DEFAULT_EXCLUDE_PATTERNS
        )

    def convert(
        self,
        path: str,
        on_progress: Optional[Callable[[int, int, str], None]] = None,
        on_file: Optional[Callable[[DocumentResult], None]] = None,
    ) -> BatchResult:
        """
        Convert a directory or a single file.

        Args:
            path: Directory or file path to convert.
            on_progress: Callback(current, total, filename) for progress.
            on_file: Callback(DocumentResult) after each document completes.

        Returns:
            BatchResult with every document.
        """
        path_obj = Path(path).resolve()
        result = BatchResult(source_path=str(path_obj))

        # Collect files first to know total count
        files = list(self._iter_files(path_obj))
        total = len(files)

        for i, file_path in enumerate(files):
            if on_progress:
                on_progress(i + 1, total, str(file_path))

            doc = self.convert_file(file_path)
            result.add_document(doc)

            if on_file:
                on_file(doc)

        result.complete()
        logger.info(
            f"Batch {result.batch_id}: {result.documents_converted}/{total} converted, "
            f"{result.documents_with_fallback} via fallback"
        )
        return result

    def convert_file(self, path: Path) -> DocumentResult:
        """
        Convert a single file.

        Args:
            path: Path to the file.

        Returns:
            DocumentResult with text, or with an error.
        """
        start_time = datetime.now()

        # Get file metadata
        try:
            stat = path.stat()
            size = stat.st_size
            modified = datetime.fromtimestamp(stat.st_mtime)
        except OSError as e:
            return DocumentResult(
                path=path,
                size_bytes=0,
                modified=datetime.now(),
                error=f"Cannot access file: {e}",
            )

        # Check size limit
        if size > self.max_file_size:
            return DocumentResult(
                path=path,
                size_bytes=size,
                modified=modified,
                error=f"File too large ({size / 1024 / 1024:.1f} MB > {self.max_file_size / 1024 / 1024:.0f} MB limit)",
            )

        if not self.extractor_registry.can_extract(path):
            return DocumentResult(
                path=path,
                size_bytes=size,
                modified=modified,
                error=f"Unsupported file type: {path.suffix or '(no extension)'}",
            )

        try:
            conversion = self.extractor_registry.extract_with_details(path)
        except ExtractionError as e:
            logger.debug(f"Extraction failed for {path}: {e}")
            return DocumentResult(
                path=path,
                size_bytes=size,
                modified=modified,
                error=str(e),
            )

        if conversion.used_fallback:
            logger.warning(f"Fallback extraction used for {path}")

        convert_time = int((datetime.now() - start_time).total_seconds() * 1000)

        # Near-empty output means nothing useful came out of the document
        if len(conversion.text.strip()) < self.min_text_length:
            return DocumentResult(
                path=path,
                size_bytes=size,
                modified=modified,
                text=conversion.text,
                strategy=conversion.strategy,
                error=EMPTY_TEXT_ERROR,
                convert_time_ms=convert_time,
            )

        return DocumentResult(
            path=path,
            size_bytes=size,
            modified=modified,
            text=conversion.text,
            strategy=conversion.strategy,
            convert_time_ms=convert_time,
        )

    def convert_iter(self, path: str) -> Iterator[DocumentResult]:
        """
        Yield document results as they're converted.

        Args:
            path: Directory or file path to convert.

        Yields:
            DocumentResult for each document.
        """
        path_obj = Path(path).resolve()
        for file_path in self._iter_files(path_obj):
            yield self.convert_file(file_path)

    def write_outputs(
        self,
        result: BatchResult,
        output_dir: Path,
        suffix: str = ".txt",
    ) -> list[Path]:
        """
        Write each successfully converted document as a text file.

        Directory structure below the batch source is mirrored under
        output_dir. Documents whose output names would clash (letter.rtf
        and letter.txt), or whose output would land on a source file, keep
        their original suffix instead (letter.rtf.txt). A document that
        still cannot be given a safe name is skipped with a warning.

        Returns:
            Paths written.
        """
        source = Path(result.source_path)
        base = source.parent if source.is_file() else source
        output_dir = Path(output_dir)

        planned = []
        for doc in result.documents:
            if not doc.ok:
                continue

            try:
                relative = doc.path.relative_to(base)
            except ValueError:
                relative = Path(doc.path.name)

            planned.append((doc, relative, (output_dir / relative).with_suffix(suffix)))

        default_counts: dict[Path, int] = {}
        for _, _, target in planned:
            default_counts[target] = default_counts.get(target, 0) + 1

        # Never write over anything this batch read
        protected = {doc.path.resolve() for doc in result.documents}
        claimed: set[Path] = set()
        written = []

        for doc, relative, target in planned:
            if default_counts[target] > 1 or target.resolve() in protected:
                target = output_dir / relative.parent / (relative.name + suffix)

            if target in claimed or target.resolve() in protected:
                logger.warning(f"Skipping output for {doc.path}: {target} is already in use")
                continue

            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(doc.text, encoding="utf-8")
            claimed.add(target)
            written.append(target)

        logger.debug(f"Wrote {len(written)} files to {output_dir}")
        return written

    def _iter_files(self, path: Path) -> Iterator[Path]:
        """
        Iterate over all convertible files in a directory.

        Skips excluded patterns and unsupported file types.
        """
        # Handle single file
        if path.is_file():
            yield path
            return

        # Handle directory
        if not path.is_dir():
            return

        for root, dirs, files in os.walk(path):
            # Filter out excluded directories (modifies dirs in-place)
            dirs[:] = sorted(d for d in dirs if not self._should_exclude(d))

            for filename in sorted(files):
                # Skip excluded files
                if self._should_exclude(filename):
                    continue

                file_path = Path(root) / filename

                # Only yield files we can extract
                if self.extractor_registry.can_extract(file_path):
                    yield file_path

    def _should_exclude(self, name: str) -> bool:
        """Check if a file/directory should be excluded."""
        for pattern in self.exclude_patterns:
            if pattern.startswith("*"):
                # Glob-style suffix match
                if name.endswith(pattern[1:]):
                    return True
            elif pattern in name:
                return True
        return False

    @property
    def supported_extensions(self) -> list[str]:
        """List of file extensions this converter can process."""
        return self.extractor_registry.supported_extensions
