"""Data models for files, documents, and diagnostics."""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Tuple

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

INITIAL_VERSION = 0


def compute_line_offsets(text: str) -> Tuple[int, ...]:
    """Return the character offset at which every line of *text* starts."""
    return (0, *(m.end() for m in _LINE_BREAK_RE.finditer(text)))


@dataclass(frozen=True, slots=True)
class Position:
    line: int
    character: int


@dataclass(frozen=True, slots=True)
class Range:
    start: Position
    end: Position


@dataclass(frozen=True)
class Diagnostic:
    """A defect reported by a diagnostic producer."""

    range: Range
    message: str


@dataclass(frozen=True)
class FileRecord:
    """Raw contents of one selected file."""

    absolute_path: str
    extension_tag: str
    raw_text: str


@dataclass(frozen=True)
class Document:
    """In-memory text document handed to the diagnostic producers.

    ``text`` is never normalised: producers compute line/character offsets
    against it, so it must match the file on disk exactly.
    """

    uri: str
    language_id: str
    version: int
    text: str
    _line_offsets: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_line_offsets", compute_line_offsets(self.text))

    @property
    def line_count(self) -> int:
        return len(self._line_offsets)

    def line_text(self, line: int) -> str:
        """Return the text of *line* with its terminator stripped."""
        if line < 0 or line >= self.line_count:
            return ""
        start = self._line_offsets[line]
        end = self._line_offsets[line + 1] if line + 1 < self.line_count else len(self.text)
        return _LINE_BREAK_RE.sub("", self.text[start:end], count=1)

    def position_at(self, offset: int) -> Position:
        """Convert a text offset into a line/character position (clamped)."""
        offset = min(max(offset, 0), len(self.text))
        line = bisect_right(self._line_offsets, offset) - 1
        return Position(line=line, character=offset - self._line_offsets[line])

    def offset_at(self, position: Position) -> int:
        """Convert a line/character position into a text offset (clamped)."""
        if position.line >= self.line_count:
            return len(self.text)
        if position.line < 0:
            return 0
        start = self._line_offsets[position.line]
        return min(start + max(position.character, 0), len(self.text))
