"""Documents — models, file loading, and region extraction."""

from vuecheck.documents.loader import (
    FileReadError,
    iter_documents,
    load_documents,
    read_file,
    to_document,
)
from vuecheck.documents.models import Diagnostic, Document, FileRecord, Position, Range
from vuecheck.documents.regions import DocumentRegions, EmbeddedRegion, extract_regions

__all__ = [
    "Diagnostic",
    "Document",
    "DocumentRegions",
    "EmbeddedRegion",
    "FileReadError",
    "FileRecord",
    "Position",
    "Range",
    "extract_regions",
    "iter_documents",
    "load_documents",
    "read_file",
    "to_document",
]
