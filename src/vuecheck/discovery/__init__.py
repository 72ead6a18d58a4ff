"""Discovery — file selection and strict-dialect classification."""

from vuecheck.discovery.classifier import RegexScriptClassifier, SourceClassifier
from vuecheck.discovery.selector import (
    ExclusionConfigError,
    apply_exclusions,
    build_exclusion_pattern,
    scan_source_root,
    select_files,
)

__all__ = [
    "ExclusionConfigError",
    "RegexScriptClassifier",
    "SourceClassifier",
    "apply_exclusions",
    "build_exclusion_pattern",
    "scan_source_root",
    "select_files",
]
