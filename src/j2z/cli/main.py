"""Typer app: convert one Jekyll document to Zola and print it."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from j2z import __version__
from j2z.core.convert import convert_file
from j2z.core.errors import ConversionError, FrontMatterError
from j2z.utils.config import resolve_settings
from j2z.utils.output import configure_logging, emit_document, error, warn

app = typer.Typer(
    name="j2z",
    help="Convert a Jekyll post's YAML front matter into Zola TOML front matter.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def convert(
    path: Optional[Path] = typer.Argument(None, help="Jekyll document to convert"),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--no-strict",
        help="Fail when the document has no usable front matter",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Print the Zola version of PATH on stdout."""
    settings = resolve_settings()
    configure_logging("debug" if verbose else settings["log_level"])

    if path is None:
        warn("no input")
        return

    if strict is None:
        strict = settings["on_missing_front_matter"] == "error"

    try:
        document = convert_file(path)
    except FrontMatterError as e:
        if strict:
            error(str(e))
            raise typer.Exit(1)
        warn(f"Skipped {path}: {e}")
        return
    except ConversionError as e:
        error(str(e))
        raise typer.Exit(1)

    emit_document(document)
