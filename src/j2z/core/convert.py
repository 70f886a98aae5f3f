"""Jekyll → Zola conversion: field mapping and the end-to-end pipeline."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from pathlib import Path

from j2z.core.dates import parse_toml_datetime
from j2z.core.errors import FrontMatterMissing
from j2z.core.frontmatter import assemble, decode_front, encode_front
from j2z.core.scanner import ScanResult, scan_file, scan_lines
from j2z.core.schema import JekyllFront, ZolaFront

logger = logging.getLogger(__name__)


def to_zola(front: JekyllFront) -> ZolaFront:
    """Map Jekyll front matter onto Zola's schema.

    ``subtitle`` becomes ``description`` and ``date`` is parsed as a TOML
    date-time (raises InvalidDate). Everything else is copied as-is.
    """
    return ZolaFront(
        title=front.title,
        date=parse_toml_datetime(front.date),
        description=front.subtitle,
        author=front.author,
        extra=front.extra,
    )


def _convert_scan(scan: ScanResult) -> str:
    if not scan.complete:
        raise FrontMatterMissing(f"No closed front matter block (scanner stopped in {scan.state.value})")
    zola = to_zola(decode_front(scan.front))
    logger.debug("Converted front matter for %r", zola.title)
    return assemble(encode_front(zola), scan.content)


def convert_lines(lines: Iterable[str]) -> str:
    return _convert_scan(scan_lines(lines))


def convert_text(text: str) -> str:
    return convert_lines(io.StringIO(text, newline="\n"))


def convert_file(path: Path) -> str:
    """Convert the Jekyll document at path and return the Zola document text."""
    logger.debug("Reading %s", path)
    return _convert_scan(scan_file(path))
