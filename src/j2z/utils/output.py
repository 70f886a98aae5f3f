"""Console output: the converted document on stdout, diagnostics on stderr."""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

error_console = Console(stderr=True, soft_wrap=True)


def configure_logging(level: str = "warning") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


def emit_document(text: str) -> None:
    # Written raw: TOML tables like [extra] would be eaten as rich markup.
    sys.stdout.write(text)
    sys.stdout.flush()


def error(msg: str) -> None:
    error_console.print(f"[red]Error:[/red] {escape(msg)}", highlight=False)


def warn(msg: str) -> None:
    error_console.print(f"[yellow]{escape(msg)}[/yellow]", highlight=False)
