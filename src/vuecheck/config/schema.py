"""Configuration schema — dataclasses for every config section and the run options."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

COMPONENT_EXT = "vue"
STRICT_EXT = "ts"
STRICT_VARIANT_EXT = "tsx"


def eligible_extensions(strict_only: bool) -> Tuple[str, ...]:
    """Return the file extensions a run scans for."""
    if strict_only:
        return (STRICT_EXT, STRICT_VARIANT_EXT, COMPONENT_EXT)
    return (COMPONENT_EXT,)


@dataclass
class CheckConfig:
    src_dir: Optional[str] = None  # relative paths resolve against the workspace
    only_template: bool = False
    only_typescript: bool = False
    exclude_dirs: List[str] = field(default_factory=list)
    fail_exit: bool = False


@dataclass
class ProducersConfig:
    template: Optional[str] = None  # "package.module:factory"
    script: Optional[str] = None


@dataclass
class CacheConfig:
    max_entries: int = 10
    cleanup_interval_s: int = 60


@dataclass
class OutputConfig:
    context_lines: int = 2
    show_progress: bool = True


@dataclass
class VueCheckConfig:
    check: CheckConfig = field(default_factory=CheckConfig)
    producers: ProducersConfig = field(default_factory=ProducersConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


@dataclass(frozen=True)
class RunOptions:
    """Immutable inputs of one check run.

    ``extensions`` is derived from ``strict_only`` when left empty, so every
    run carries its own extension set instead of sharing module state.
    """

    workspace_root: Path
    source_root: Optional[Path] = None  # defaults to workspace_root
    strict_only: bool = False
    template_only: bool = False
    exclude_dirs: Tuple[str, ...] = ()
    fail_fast: bool = False
    explicit_files: Tuple[str, ...] = ()
    extensions: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.source_root is None:
            object.__setattr__(self, "source_root", self.workspace_root)
        if not self.extensions:
            object.__setattr__(self, "extensions", eligible_extensions(self.strict_only))
        object.__setattr__(self, "exclude_dirs", tuple(self.exclude_dirs))
        object.__setattr__(self, "explicit_files", tuple(self.explicit_files))
