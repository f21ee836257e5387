"""CLI entry point for psbuild."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich import print as rprint

from psbuild.compiler import BabelCompiler
from psbuild.config import load_config
from psbuild.errors import CompileError, ConfigError
from psbuild.pipeline import BuildPipeline

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

app = typer.Typer(
    name="psbuild",
    help="Stamp the client config, compile sources and cachebust templates.",
    add_completion=False,
)


def _parse_mode(value: str | None) -> bool:
    if value is None:
        return False
    if value != "full":
        raise typer.BadParameter(f"expected 'full', got {value!r}")
    return True


@app.command()
def build(
    mode: str | None = typer.Argument(
        None, help="Pass 'full' to recompile everything, including graphics"
    ),
) -> None:
    """Build the client in the current directory."""
    full = _parse_mode(mode)
    root = Path.cwd()

    try:
        cfg = load_config(root)
    except ConfigError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    logging.basicConfig(
        level=_LOG_LEVELS[cfg.log_level],
        format="%(levelname)s %(name)s: %(message)s",
    )

    pipeline = BuildPipeline(root, cfg, BabelCompiler(root))
    try:
        pipeline.run(full=full)
    except ConfigError as e:
        rprint(f"\n[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except CompileError as e:
        rprint(f"\n[red]Compile failed:[/red] {e}")
        if e.stderr:
            typer.echo(e.stderr, err=True)
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
