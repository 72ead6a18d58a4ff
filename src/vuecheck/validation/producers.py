"""Diagnostic producer contracts and loading from dotted import paths.

Producers are external engines (interpolation evaluation for templates,
type checking for scripts). A factory is named as ``package.module:attr``
and called with a :class:`ProducerContext`.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Protocol, Sequence

from vuecheck.config.schema import ProducersConfig
from vuecheck.documents.models import Diagnostic, Document
from vuecheck.documents.regions import DocumentRegions
from vuecheck.validation.cache import LanguageModelCache


class ProducerSetupError(Exception):
    """Raised when a diagnostic producer cannot be constructed."""


class DiagnosticProducer(Protocol):
    def validate(self, document: Document) -> Sequence[Diagnostic]:
        ...


@dataclass(frozen=True)
class ProducerContext:
    """Shared services handed to every producer factory."""

    workspace: Path
    document_regions: LanguageModelCache[DocumentRegions]
    script_regions: LanguageModelCache[Document]


ProducerFactory = Callable[[ProducerContext], DiagnosticProducer]


@dataclass(frozen=True)
class ProducerPair:
    template: DiagnosticProducer
    script: Optional[DiagnosticProducer] = None


def has_validation(producer: Any) -> bool:
    """Return True if *producer* exposes a callable ``validate``."""
    return producer is not None and callable(getattr(producer, "validate", None))


def resolve_factory(dotted_path: str) -> ProducerFactory:
    """Import the factory named by ``package.module:attr``."""
    module_name, sep, attr = dotted_path.partition(":")
    if not sep or not module_name or not attr:
        raise ProducerSetupError(
            f"Invalid producer path {dotted_path!r}: expected 'package.module:factory'"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ProducerSetupError(f"Cannot import producer module {module_name!r}: {exc}") from exc

    target: Any = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ProducerSetupError(f"{module_name!r} has no attribute {attr!r}") from exc
    if not callable(target):
        raise ProducerSetupError(f"Producer factory {dotted_path!r} is not callable")
    return target


def load_producers(config: ProducersConfig, context: ProducerContext) -> ProducerPair:
    """Build the template producer (required) and the script producer (optional)."""
    if not config.template:
        raise ProducerSetupError(
            "No template producer configured; set [producers] template "
            "or pass --template-producer"
        )
    template = resolve_factory(config.template)(context)
    if not has_validation(template):
        raise ProducerSetupError(f"Template producer from {config.template!r} cannot validate")

    script = resolve_factory(config.script)(context) if config.script else None
    return ProducerPair(template=template, script=script)
