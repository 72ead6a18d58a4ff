"""Rich terminal reporter — one block per diagnostic with source context."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text

from vuecheck.documents.models import Diagnostic, Document, Range

_ERROR_STYLE = "bold red"
_MESSAGE_STYLE = "bold"
_CONTEXT_STYLE = "dim"
_CURSOR_STYLE = "bold red"


def context_window(start: int, end: int, total: int, padding: int = 0) -> range:
    """Line numbers around ``[start, end]``, clamped to ``[0, total)``."""
    first = max(start - padding, 0)
    last = min(max(end, start) + padding, total - 1)
    return range(first, last + 1)


def _gutter(number: int, width: int, is_error: bool) -> str:
    marker = ">" if is_error else " "
    return f"{marker} {number:>{width}} | "


def format_line(number: int, code: str, is_error: bool, width: int = 0) -> str:
    """Render one source line with a line-number gutter."""
    return _gutter(number, width, is_error) + code


def format_cursor(diagnostic_range: Range, code: str, width: int = 0) -> str:
    """Render a ``^`` marker under the span of *diagnostic_range* on its start line.

    A range running past the start line is underlined to the end of that line.
    """
    start = diagnostic_range.start.character
    if diagnostic_range.end.line == diagnostic_range.start.line:
        stop = diagnostic_range.end.character
    else:
        stop = len(code)
    span = max(stop - start, 1)
    return " " * len(_gutter(0, width, False)) + " " * start + "^" * span


class TerminalReporter:
    """Write diagnostics, notices, and the run summary to a Rich console."""

    def __init__(self, console: Optional[Console] = None, *, context_lines: int = 2) -> None:
        self.console = console or Console(stderr=True)
        self.context_lines = context_lines

    def report(self, document: Document, diagnostic: Diagnostic) -> None:
        rng = diagnostic.range
        lines = context_window(
            rng.start.line, rng.end.line, document.line_count, self.context_lines
        )
        width = len(str(lines[-1])) if lines else 1

        self._print(Text(f"Error in {document.uri}", style=_ERROR_STYLE))
        self._print(
            Text(f"{rng.start.line}:{rng.start.character} {diagnostic.message}", style=_MESSAGE_STYLE)
        )
        for number in lines:
            code = document.line_text(number)
            is_error = number == rng.start.line
            style = "" if is_error else _CONTEXT_STYLE
            self._print(Text(format_line(number, code, is_error, width), style=style))
            if is_error:
                self._print(Text(format_cursor(rng, code, width), style=_CURSOR_STYLE))

    def notice(self, message: str) -> None:
        self._print(Text(message, style=_MESSAGE_STYLE))

    def summary(self, total_errors: int, total_files: int) -> None:
        self._print(Text(f"Found: {total_errors} errors in {total_files} file(s)", style=_MESSAGE_STYLE))

    def _print(self, text: Text) -> None:
        self.console.print(text, soft_wrap=True, highlight=False)
