"""Configuration loading, schema, and defaults."""

from vuecheck.config.loader import ConfigError, load_config
from vuecheck.config.schema import RunOptions, VueCheckConfig, eligible_extensions

__all__ = [
    "ConfigError",
    "RunOptions",
    "VueCheckConfig",
    "eligible_extensions",
    "load_config",
]
