"""vuecheck — batch template and script diagnostics for single-file components."""

__version__ = "0.3.0"
