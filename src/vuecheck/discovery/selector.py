"""Resolve the files a run checks: explicit list or directory scan, minus exclusions."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import List, Sequence

from vuecheck.config.schema import RunOptions
from vuecheck.logging import get_logger

logger = get_logger("discovery")


class ExclusionConfigError(Exception):
    """Raised when the exclusion entries do not form a valid pattern."""


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def scan_source_root(root: Path, extensions: Sequence[str]) -> List[str]:
    """Return absolute paths under *root* whose extension is in *extensions*.

    Hidden files and directories are skipped. The result is sorted so the
    discovery order is stable across runs.
    """
    root = Path(os.path.abspath(root))
    found: set[str] = set()
    for ext in extensions:
        for path in root.rglob(f"*.{ext}"):
            if path.is_file() and not _is_hidden(path, root):
                found.add(str(path))
    return sorted(found)


def build_exclusion_pattern(exclude_dirs: Sequence[str]) -> re.Pattern[str]:
    """Compile one prefix alternation for every exclusion entry.

    Entries are resolved to absolute paths and joined as-is (not escaped).
    Matching is textual, so ``src/foo`` also excludes ``src/foobar``.
    """
    alternatives = "|".join(os.path.abspath(d) for d in exclude_dirs)
    try:
        return re.compile(f"^(?:{alternatives}).*$")
    except re.error as exc:
        raise ExclusionConfigError(
            f"Invalid exclusion pattern from {list(exclude_dirs)}: {exc}"
        ) from exc


def apply_exclusions(candidates: Sequence[str], exclude_dirs: Sequence[str]) -> List[str]:
    if not exclude_dirs:
        return list(candidates)
    pattern = build_exclusion_pattern(exclude_dirs)
    return [c for c in candidates if pattern.match(c) is None]


def select_files(options: RunOptions) -> List[str]:
    """Return the ordered candidate paths for *options*.

    A non-empty explicit file list is returned verbatim: no scan, no
    exclusion, no existence check.
    """
    if options.explicit_files:
        logger.debug("Using %d explicit file(s)", len(options.explicit_files))
        return list(options.explicit_files)

    root = options.source_root or options.workspace_root
    candidates = scan_source_root(root, options.extensions)
    selected = apply_exclusions(candidates, options.exclude_dirs)
    logger.debug(
        "Discovered %d file(s), %d after exclusions", len(candidates), len(selected)
    )
    return selected
