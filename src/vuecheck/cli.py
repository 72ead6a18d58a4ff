"""vuecheck CLI — Typer application with check, exclude-args, and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from vuecheck import __version__

app = typer.Typer(
    name="vuecheck",
    help="Type-check templates and scripts of single-file components in CI.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


# ── check ─────────────────────────────────────────────────────────────────────


@app.command()
def check(
    files: Optional[List[str]] = typer.Argument(None, help="Check only these files (skips the directory scan)"),
    workspace: Path = typer.Option(
        ..., "--workspace", "-w", exists=True, file_okay=False, help="Project root used to resolve types",
    ),
    src_dir: Optional[Path] = typer.Option(None, "--src-dir", "--srcDir", help="Directory to scan (default: workspace)"),
    only_template: bool = typer.Option(False, "--only-template", "--onlyTemplate", help="Skip script diagnostics"),
    only_typescript: bool = typer.Option(
        False, "--only-typescript", "--onlyTypeScript", help='Check .ts/.tsx files and lang="ts" components only',
    ),
    exclude_dir: Optional[List[str]] = typer.Option(
        None, "--exclude-dir", "--excludeDir", help="Skip paths starting with this prefix (repeatable)",
    ),
    fail_exit: bool = typer.Option(False, "--fail-exit", "--failExit", help="Stop at the first file with errors"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .vuecheck.toml"),
    template_producer: Optional[str] = typer.Option(
        None, "--template-producer", help="Template producer factory, 'package.module:factory'",
    ),
    script_producer: Optional[str] = typer.Option(
        None, "--script-producer", help="Script producer factory, 'package.module:factory'",
    ),
    no_progress: bool = typer.Option(False, "--no-progress", help="Do not draw the progress bar"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Check component files and exit 1 if any diagnostic is reported."""
    from vuecheck.config.loader import ConfigError, load_config
    from vuecheck.config.schema import RunOptions
    from vuecheck.discovery.selector import ExclusionConfigError
    from vuecheck.documents.loader import FileReadError
    from vuecheck.logging import configure_logging
    from vuecheck.runner import run_check

    logger = configure_logging(verbose=verbose)

    # --- Load config ---
    try:
        cfg = load_config(workspace, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if template_producer:
        cfg.producers.template = template_producer
    if script_producer:
        cfg.producers.script = script_producer
    if no_progress:
        cfg.output.show_progress = False

    if src_dir is not None:
        source_root = src_dir
    elif cfg.check.src_dir:
        source_root = workspace / cfg.check.src_dir
    else:
        source_root = workspace

    # Config and env entries are workspace-relative; --exclude-dir stays cwd-relative.
    config_excludes = tuple(str(workspace / d) for d in cfg.check.exclude_dirs)

    options = RunOptions(
        workspace_root=workspace,
        source_root=source_root,
        strict_only=only_typescript or cfg.check.only_typescript,
        template_only=only_template or cfg.check.only_template,
        exclude_dirs=config_excludes + tuple(exclude_dir or ()),
        fail_fast=fail_exit or cfg.check.fail_exit,
        explicit_files=tuple(files or ()),
    )
    logger.debug("Workspace: %s", options.workspace_root)
    logger.debug("Source root: %s", options.source_root)
    logger.debug("Extensions: %s", ", ".join(options.extensions))

    # --- Run ---
    try:
        outcome = run_check(options, cfg, console=console)
    except (FileReadError, ExclusionConfigError) as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc

    raise typer.Exit(code=outcome.exit_code)


# ── exclude-args ──────────────────────────────────────────────────────────────


@app.command("exclude-args")
def exclude_args(
    files: Optional[List[str]] = typer.Argument(None, help="Changed files"),
) -> None:
    """Print an --excludeDir flag for every component file given."""
    flags = [f"--excludeDir {f}" for f in files or () if f.endswith(".vue")]
    typer.echo(" ".join(flags))


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    workspace: Path = typer.Option(Path("."), "--workspace", "-w", file_okay=False, help="Project root"),
) -> None:
    """Generate a starter .vuecheck.toml in the workspace."""
    from vuecheck.config.defaults import DEFAULT_TOML
    from vuecheck.config.loader import CONFIG_FILENAME

    config_path = workspace / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"vuecheck {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """vuecheck — type-check single-file components in CI."""
