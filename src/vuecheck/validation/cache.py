"""Memoizing per-document cache shared by the diagnostic producers."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, Generic, TypeVar

from vuecheck.documents.models import Document

T = TypeVar("T")


class CacheDisposedError(Exception):
    """Raised when a cache is used after ``dispose()``."""


@dataclass
class _Entry(Generic[T]):
    version: int
    language_id: str
    accessed_at: float
    value: T


class LanguageModelCache(Generic[T]):
    """Cache a value derived from a document, keyed by URI.

    An entry is reused while the document's version and language match.
    Entries not read for *cleanup_interval_s* are dropped on access; above
    *max_entries* the least recently used entry is evicted.
    """

    def __init__(
        self,
        max_entries: int,
        cleanup_interval_s: float,
        compute: Callable[[Document], T],
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_entries = max_entries
        self._cleanup_interval_s = cleanup_interval_s
        self._compute = compute
        self._clock = clock
        self._entries: Dict[str, _Entry[T]] = {}
        self._disposed = False

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def get(self, document: Document) -> T:
        """Return the cached value for *document*, computing it when stale."""
        if self._disposed:
            raise CacheDisposedError("cache used after dispose()")
        now = self._clock()
        self._expire(now)

        entry = self._entries.get(document.uri)
        if (
            entry is not None
            and entry.version == document.version
            and entry.language_id == document.language_id
        ):
            entry.accessed_at = now
            return entry.value

        value = self._compute(document)
        self._entries[document.uri] = _Entry(
            version=document.version,
            language_id=document.language_id,
            accessed_at=now,
            value=value,
        )
        self._evict_overflow()
        return value

    def remove(self, document: Document) -> None:
        self._entries.pop(document.uri, None)

    def dispose(self) -> None:
        """Drop every entry. Later calls are no-ops."""
        if self._disposed:
            return
        self._entries.clear()
        self._disposed = True

    def _expire(self, now: float) -> None:
        if self._cleanup_interval_s <= 0:
            return
        cutoff = now - self._cleanup_interval_s
        stale = [uri for uri, e in self._entries.items() if e.accessed_at < cutoff]
        for uri in stale:
            del self._entries[uri]

    def _evict_overflow(self) -> None:
        while len(self._entries) > self._max_entries:
            oldest = min(
                self._entries, key=lambda uri: self._entries[uri].accessed_at
            )
            del self._entries[oldest]
