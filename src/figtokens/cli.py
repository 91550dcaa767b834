"""
figtokens CLI - Entry point.

Commands:
- generate: Convert a token document into SCSS stylesheets
- check: Report variables used but never declared
"""

from __future__ import annotations

import logging
import os
import platform
from pathlib import Path

import typer

from figtokens import __version__
from figtokens.cli_ui import (
    display_documents_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from figtokens.core.errors import DanglingReferenceError, FigTokensError
from figtokens.core.manifest import MANIFEST_FILE, ProjectManifest, find_manifest, load_manifest
from figtokens.core.pipeline import build

app = typer.Typer(
    help="""figtokens – Figma design tokens to SCSS custom properties

Sources:
  • Local tokens.json / .yaml file, or a directory containing one
  • http(s) URL of a token file
  • Git repository URL (cloned to a temporary directory)
""",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"figtokens version {__version__}")
        typer.echo(f"  Python: {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load_manifest(manifest: str | None) -> ProjectManifest:
    if manifest:
        path = Path(manifest)
        if not path.exists():
            print_error(f"Manifest not found: {path}")
            raise typer.Exit(code=1)
        return load_manifest(path)
    return find_manifest()


def _resolve_source(project: ProjectManifest, source: str | None) -> str:
    resolved = project.resolve_source(source)
    if not resolved:
        print_error(
            f"No token source given. Pass SOURCE, set [source].location in {MANIFEST_FILE}, "
            "or export TOKENS_SOURCE."
        )
        raise typer.Exit(code=1)
    return resolved


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
) -> None:
    """figtokens CLI main callback for global options."""
    pass


@app.command("generate")
def generate_command(
    source: str | None = typer.Argument(
        None, help="Token file, directory, URL, or git repository"
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output directory"),
    manifest: str | None = typer.Option(
        None, "--manifest", "-m", help=f"Path to {MANIFEST_FILE}"
    ),
    token_file: str | None = typer.Option(
        None, "--token-file", help="Token file name inside a directory or repository"
    ),
    strict: bool = typer.Option(False, "--strict", help="Fail on dangling references"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Generate without writing files"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Generate SCSS stylesheets from a design token document.

    Writes base/_variables.scss, theme overrides, one component file per
    category and index.scss into the output directory.
    """
    _configure_logging(verbose)

    try:
        project = _load_manifest(manifest)
        resolved = _resolve_source(project, source)
        output_dir = Path(output or project.output.directory)

        print_info(f"Source: {resolved}")
        result = build(
            resolved,
            None if dry_run else output_dir,
            token_file=token_file or project.source.token_file,
            strict=strict or project.build.strict,
        )
    except FigTokensError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    for ref in result.dangling:
        print_warning(f"Dangling reference --{ref.name} ({ref.path})")

    if dry_run:
        display_documents_table(result.documents, title="Dry run: nothing written")
        return

    print_success(f"SCSS files generated: {output_dir} ({len(result.written)} files)")


@app.command("check")
def check_command(
    source: str | None = typer.Argument(
        None, help="Token file, directory, URL, or git repository"
    ),
    manifest: str | None = typer.Option(
        None, "--manifest", "-m", help=f"Path to {MANIFEST_FILE}"
    ),
    token_file: str | None = typer.Option(
        None, "--token-file", help="Token file name inside a directory or repository"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Check a token document for dangling references.

    Exits with code 1 if any generated stylesheet uses a variable that no
    stylesheet declares.
    """
    _configure_logging(verbose)

    try:
        project = _load_manifest(manifest)
        resolved = _resolve_source(project, source)
        build(
            resolved,
            None,
            token_file=token_file or project.source.token_file,
            strict=True,
        )
    except DanglingReferenceError as e:
        for name in e.missing:
            print_warning(f"--{name}")
        print_error(e.message)
        raise typer.Exit(code=1)
    except FigTokensError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_success("No dangling references")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main()
