"""
tokencss command-line interface.

Running ``tokencss`` with no arguments compiles the token documents in the
current directory (or the ones named by ``tokens.toml``) into
``dist/tokens.css``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from tokencss import __version__
from tokencss.core.errors import TokenError
from tokencss.core.manifest import MANIFEST_FILE, find_manifest, load_manifest
from tokencss.core.references import ReferencePolicy
from tokencss.themes.assembler import compile_tokens

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    help="Compile design tokens into CSS custom properties.",
    add_completion=False,
)


def configure_logging(verbose: bool = False) -> None:
    """Set up root logging from LOG_LEVEL (``--verbose`` forces DEBUG)."""
    log_level = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tokencss version {__version__}")
        raise typer.Exit()


def _display_path(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


@app.command()
def build(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory (default: current directory)",
    ),
    manifest_path: Path | None = typer.Option(
        None,
        "--manifest",
        "-m",
        help=f"Manifest file (default: <project>/{MANIFEST_FILE} if present)",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output stylesheet (default: dist/tokens.css)",
    ),
    policy: ReferencePolicy | None = typer.Option(
        None,
        "--policy",
        help="What to emit for unresolved references",
        case_sensitive=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Compile primitives, semantics and themes into one CSS file.

    Examples:
        tokencss                          # Use ./tokens.toml or defaults
        tokencss -o public/tokens.css     # Custom output path
        tokencss --policy fail            # Error on unresolved references
    """
    configure_logging(verbose)

    try:
        if manifest_path is not None:
            manifest = load_manifest(manifest_path)
        else:
            manifest = find_manifest(project_dir)
        if policy is not None:
            manifest.resolve.policy = policy
        written = compile_tokens(manifest, output_path=output)
    except TokenError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from e

    console.print(
        f"[green]✅[/green] Tokens compiled to {escape(_display_path(written))}",
        highlight=False,
        soft_wrap=True,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
