"""Data models for batch conversion results."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional
import uuid

from ..converter.pipeline import Strategy


@dataclass
class DocumentResult:
    """Result for a single converted document."""

    path: Path
    size_bytes: int
    modified: datetime
    text: str = ""
    strategy: Optional[Strategy] = None
    error: Optional[str] = None  # If reading/conversion failed
    convert_time_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def used_fallback(self) -> bool:
        return self.strategy == Strategy.FALLBACK

    @property
    def char_count(self) -> int:
        return len(self.text)

    @property
    def preview(self) -> str:
        """First line of text, shortened for display."""
        first_line = self.text.strip().split("\n", 1)[0] if self.text else ""
        if len(first_line) > 60:
            return first_line[:57] + "..."
        return first_line


@dataclass
class BatchResult:
    """Complete results from a batch conversion."""

    batch_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None
    source_path: str = ""

    documents: list[DocumentResult] = field(default_factory=list)

    @property
    def total_documents(self) -> int:
        return len(self.documents)

    @property
    def documents_converted(self) -> int:
        return sum(1 for d in self.documents if d.ok)

    @property
    def documents_errored(self) -> int:
        return sum(1 for d in self.documents if not d.ok)

    @property
    def documents_with_fallback(self) -> int:
        return sum(1 for d in self.documents if d.used_fallback)

    @property
    def total_chars(self) -> int:
        return sum(d.char_count for d in self.documents if d.ok)

    def add_document(self, result: DocumentResult):
        self.documents.append(result)

    def complete(self):
        self.completed_at = datetime.now()

    def to_dict(self, include_text: bool = True) -> dict:
        """Serialize for JSON export."""
        return {
            "batch_id": self.batch_id,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "source_path": self.source_path,
            "summary": {
                "total_documents": self.total_documents,
                "documents_converted": self.documents_converted,
                "documents_errored": self.documents_errored,
                "documents_with_fallback": self.documents_with_fallback,
                "total_chars": self.total_chars,
            },
            "documents": [
                {
                    "path": str(d.path),
                    "size_bytes": d.size_bytes,
                    "modified": d.modified.isoformat(),
                    "strategy": d.strategy.value if d.strategy else None,
                    "error": d.error,
                    "convert_time_ms": d.convert_time_ms,
                    "chars": d.char_count,
                    **({"text": d.text} if include_text else {}),
                }
                for d in self.documents
            ],
        }
