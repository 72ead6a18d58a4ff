"""Validation — producer contracts, caches, and the orchestration loop."""

from vuecheck.validation.cache import CacheDisposedError, LanguageModelCache
from vuecheck.validation.orchestrator import (
    EARLY_STOP_NOTICE,
    RunAccumulator,
    collect_diagnostics,
    fold_diagnostics,
    validate_documents,
)
from vuecheck.validation.producers import (
    DiagnosticProducer,
    ProducerContext,
    ProducerPair,
    ProducerSetupError,
    has_validation,
    load_producers,
    resolve_factory,
)

__all__ = [
    "CacheDisposedError",
    "DiagnosticProducer",
    "EARLY_STOP_NOTICE",
    "LanguageModelCache",
    "ProducerContext",
    "ProducerPair",
    "ProducerSetupError",
    "RunAccumulator",
    "collect_diagnostics",
    "fold_diagnostics",
    "has_validation",
    "load_producers",
    "resolve_factory",
    "validate_documents",
]
