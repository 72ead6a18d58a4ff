"""Load and merge configuration from .vuecheck.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from vuecheck.config.schema import (
    CacheConfig,
    CheckConfig,
    OutputConfig,
    ProducersConfig,
    VueCheckConfig,
)

CONFIG_FILENAME = ".vuecheck.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(workspace: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = workspace / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: VueCheckConfig) -> None:
    """Apply VUECHECK_* environment variable overrides."""
    if os.environ.get("VUECHECK_FAIL_EXIT", "").lower() in ("1", "true", "yes"):
        cfg.check.fail_exit = True
    if val := os.environ.get("VUECHECK_EXCLUDE_DIRS"):
        cfg.check.exclude_dirs.extend(p.strip() for p in val.split(os.pathsep) if p.strip())
    if val := os.environ.get("VUECHECK_TEMPLATE_PRODUCER"):
        cfg.producers.template = val
    if val := os.environ.get("VUECHECK_SCRIPT_PRODUCER"):
        cfg.producers.script = val
    if os.environ.get("CI", "").lower() in ("true", "1", "yes"):
        cfg.output.show_progress = False


def load_config(
    workspace: Path,
    config_override: Optional[str] = None,
) -> VueCheckConfig:
    """Load, validate, and return a VueCheckConfig."""
    config_path = find_config_file(workspace, config_override)

    if config_path is None:
        cfg = VueCheckConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = VueCheckConfig(
            check=_build_section(raw, CheckConfig, "check"),
            producers=_build_section(raw, ProducersConfig, "producers"),
            cache=_build_section(raw, CacheConfig, "cache"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        if isinstance(cfg.check.exclude_dirs, str):
            cfg.check.exclude_dirs = [cfg.check.exclude_dirs]

    _merge_env_overrides(cfg)
    return cfg
