"""Run one check end to end and compute its outcome.

``run_check`` never exits the process; the CLI maps ``RunOutcome.exit_code``
to the process status.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from rich.console import Console

from vuecheck.config.schema import CacheConfig, RunOptions, VueCheckConfig
from vuecheck.discovery.classifier import RegexScriptClassifier, SourceClassifier
from vuecheck.discovery.selector import select_files
from vuecheck.documents.loader import iter_documents, load_documents
from vuecheck.documents.models import Document
from vuecheck.documents.regions import DocumentRegions, extract_regions
from vuecheck.logging import get_logger
from vuecheck.output.progress import make_progress
from vuecheck.output.terminal import TerminalReporter
from vuecheck.validation.cache import LanguageModelCache
from vuecheck.validation.orchestrator import validate_documents
from vuecheck.validation.producers import ProducerContext, load_producers

logger = get_logger("runner")


@dataclass(frozen=True)
class RunOutcome:
    """Result of a run; ``exit_code`` is the only signal automation needs."""

    has_error: bool
    total_error_count: int
    documents_processed: int
    documents_total: int  # upper bound (candidate paths) when documents are loaded lazily
    stopped: bool = False
    failed: bool = False

    @property
    def exit_code(self) -> int:
        return 1 if self.has_error else 0


@contextmanager
def language_caches(
    cache_config: CacheConfig,
) -> Iterator[Tuple[LanguageModelCache[DocumentRegions], LanguageModelCache[Document]]]:
    """Hold the region caches for one run and dispose both on every exit path."""
    document_regions: LanguageModelCache[DocumentRegions] = LanguageModelCache(
        cache_config.max_entries, cache_config.cleanup_interval_s, extract_regions
    )
    script_regions: LanguageModelCache[Document] = LanguageModelCache(
        cache_config.max_entries,
        cache_config.cleanup_interval_s,
        lambda document: document_regions.get(document).single_type_document("script"),
    )
    try:
        yield document_regions, script_regions
    finally:
        document_regions.dispose()
        script_regions.dispose()


def run_check(
    options: RunOptions,
    config: Optional[VueCheckConfig] = None,
    *,
    console: Optional[Console] = None,
    reporter: Optional[TerminalReporter] = None,
    classifier: Optional[SourceClassifier] = None,
) -> RunOutcome:
    """Select, load, and validate the documents described by *options*.

    Raises:
        ExclusionConfigError: the exclusion entries form an invalid pattern.
        FileReadError: a selected file cannot be read.
    """
    config = config or VueCheckConfig()
    console = console or Console(stderr=True)
    reporter = reporter or TerminalReporter(console, context_lines=config.output.context_lines)

    paths = select_files(options)
    if not options.strict_only:
        classifier = None
    elif classifier is None:
        classifier = RegexScriptClassifier()

    documents: Iterable[Document]
    progress_total: Optional[int]
    if options.fail_fast:
        # Lazy: nothing after the first failing document is read.
        documents = iter_documents(paths, classifier=classifier)
        documents_total = len(paths)
        # The classifier may still drop files, so the bar total is unknown.
        progress_total = None if classifier is not None else documents_total
    else:
        loaded = load_documents(paths, classifier=classifier)
        documents = loaded
        documents_total = len(loaded)
        progress_total = documents_total

    with language_caches(config.cache) as (document_regions, script_regions):
        context = ProducerContext(
            workspace=options.workspace_root,
            document_regions=document_regions,
            script_regions=script_regions,
        )
        with make_progress(progress_total, console, enabled=config.output.show_progress) as progress:
            acc = validate_documents(
                documents,
                lambda: load_producers(config.producers, context),
                template_only=options.template_only,
                fail_fast=options.fail_fast,
                reporter=reporter,
                progress=progress,
            )

    if not options.fail_fast:
        reporter.summary(acc.total_error_count, documents_total)

    logger.debug(
        "Processed %d document(s): %d error(s), stopped=%s, failed=%s",
        acc.documents_processed,
        acc.total_error_count,
        acc.stopped,
        acc.failed,
    )
    return RunOutcome(
        has_error=acc.has_error,
        total_error_count=acc.total_error_count,
        documents_processed=acc.documents_processed,
        documents_total=documents_total,
        stopped=acc.stopped,
        failed=acc.failed,
    )
