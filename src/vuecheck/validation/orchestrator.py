"""Per-document validation loop with the fail-fast policy.

Documents are validated one after another in discovery order. Only
producer construction and producer calls are guarded: a failure there is
logged and ends the loop with ``failed=True``. Anything raised by the
document iterator itself (an unreadable file) propagates to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Protocol

from vuecheck.documents.models import Diagnostic, Document
from vuecheck.logging import get_logger
from vuecheck.validation.producers import ProducerPair, has_validation

logger = get_logger("validation")

EARLY_STOP_NOTICE = "Please run command locally to see the full list"


class DiagnosticSink(Protocol):
    def report(self, document: Document, diagnostic: Diagnostic) -> None:
        ...

    def notice(self, message: str) -> None:
        ...


class ProgressTicker(Protocol):
    def tick(self) -> None:
        ...


@dataclass(frozen=True)
class RunAccumulator:
    has_error: bool = False
    total_error_count: int = 0
    documents_processed: int = 0
    stopped: bool = False
    failed: bool = False  # a producer raised; the loop ended early


def fold_diagnostics(acc: RunAccumulator, error_count: int, *, fail_fast: bool) -> RunAccumulator:
    """Account for one processed document that produced *error_count* diagnostics."""
    has_error = acc.has_error or error_count > 0
    return replace(
        acc,
        has_error=has_error,
        total_error_count=acc.total_error_count + error_count,
        documents_processed=acc.documents_processed + 1,
        stopped=fail_fast and has_error,
    )


def collect_diagnostics(
    document: Document,
    producers: ProducerPair,
    *,
    template_only: bool,
) -> List[Diagnostic]:
    """Template diagnostics first, then script diagnostics when applicable."""
    results = list(producers.template.validate(document))
    script = producers.script
    if not template_only and script is not None and has_validation(script):
        results.extend(script.validate(document))
    return results


def validate_documents(
    documents: Iterable[Document],
    build_producers: Callable[[], ProducerPair],
    *,
    template_only: bool,
    fail_fast: bool,
    reporter: DiagnosticSink,
    progress: ProgressTicker,
) -> RunAccumulator:
    """Validate *documents* in order and return the final accumulator."""
    acc = RunAccumulator()
    try:
        producers = build_producers()
    except Exception as exc:
        _log_failure("Could not set up diagnostic producers", exc)
        return replace(acc, has_error=True, failed=True)

    for document in documents:
        try:
            diagnostics = collect_diagnostics(document, producers, template_only=template_only)
        except Exception as exc:
            _log_failure(f"Validation failed for {document.uri}", exc)
            return replace(acc, has_error=True, failed=True)

        for diagnostic in diagnostics:
            reporter.report(document, diagnostic)
        acc = fold_diagnostics(acc, len(diagnostics), fail_fast=fail_fast)
        progress.tick()

        if acc.stopped:
            reporter.notice(EARLY_STOP_NOTICE)
            break

    return acc


def _log_failure(message: str, exc: Exception) -> None:
    logger.error("%s: %s", message, exc)
    logger.debug("Traceback for the failure above", exc_info=exc)
