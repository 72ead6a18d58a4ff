"""Read selected files and turn them into documents.

Reads are independent, so ``load_documents`` fans them out over a thread
pool; ``Executor.map`` hands results back in input order no matter which
read finishes first.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from vuecheck.discovery.classifier import SourceClassifier
from vuecheck.documents.models import INITIAL_VERSION, Document, FileRecord
from vuecheck.logging import get_logger

logger = get_logger("documents")


class FileReadError(Exception):
    """Raised when a selected file cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


def extension_tag(path: str) -> str:
    """Return the extension of *path* without the leading dot."""
    return Path(path).suffix.lstrip(".")


def read_file(path: str) -> FileRecord:
    """Read *path* exactly as stored (no newline translation)."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            raw_text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, str(exc)) from exc
    return FileRecord(absolute_path=path, extension_tag=extension_tag(path), raw_text=raw_text)


def to_document(record: FileRecord) -> Document:
    return Document(
        uri=f"file://{record.absolute_path}",
        language_id=record.extension_tag,
        version=INITIAL_VERSION,
        text=record.raw_text,
    )


def _is_eligible(record: FileRecord, classifier: Optional[SourceClassifier]) -> bool:
    if classifier is None:
        return True
    eligible = classifier.is_eligible(record.extension_tag, record.raw_text)
    if not eligible:
        logger.debug("Skipping %s (script is not strict dialect)", record.absolute_path)
    return eligible


def load_documents(
    paths: Sequence[str],
    *,
    classifier: Optional[SourceClassifier] = None,
    max_workers: Optional[int] = None,
) -> List[Document]:
    """Read every path concurrently and return documents in input order.

    The first read failure propagates as :class:`FileReadError`.
    """
    if not paths:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        records = list(pool.map(read_file, paths))
    documents = [to_document(r) for r in records if _is_eligible(r, classifier)]
    logger.debug("Loaded %d of %d file(s)", len(documents), len(paths))
    return documents


def iter_documents(
    paths: Sequence[str],
    *,
    classifier: Optional[SourceClassifier] = None,
) -> Iterator[Document]:
    """Yield documents one at a time, reading each file only when requested."""
    for path in paths:
        record = read_file(path)
        if _is_eligible(record, classifier):
            yield to_document(record)
