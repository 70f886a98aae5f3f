"""Line-mode scanner splitting a Jekyll document into front matter and content.

Only a line that is exactly ``---`` (ignoring its line terminator) counts as
a delimiter. Everything before the first delimiter is discarded, everything
between the first two is front matter, and everything after the second is
content, including any further ``---`` lines.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from j2z.core.errors import FileOpenFailure

logger = logging.getLogger(__name__)

DELIMITER = "---"


class ScanState(str, Enum):
    UNKNOWN = "unknown"
    FRONT_MATTER = "front_matter"
    CONTENT = "content"


@dataclass(frozen=True)
class ScanResult:
    front: str
    content: str
    state: ScanState

    @property
    def complete(self) -> bool:
        """True when both delimiters were seen."""
        return self.state is ScanState.CONTENT


def scan_lines(lines: Iterable[str]) -> ScanResult:
    state = ScanState.UNKNOWN
    front: list[str] = []
    content: list[str] = []

    for raw in lines:
        line = raw.removesuffix("\n").removesuffix("\r")
        if state is ScanState.UNKNOWN:
            if line == DELIMITER:
                state = ScanState.FRONT_MATTER
                logger.debug("Front matter opened")
        elif state is ScanState.FRONT_MATTER:
            if line == DELIMITER:
                state = ScanState.CONTENT
                logger.debug("Front matter closed after %d lines", len(front))
            else:
                front.append(line + "\n")
        else:
            content.append(line + "\n")

    return ScanResult(front="".join(front), content="".join(content), state=state)


def scan_file(path: Path) -> ScanResult:
    """Scan the file at path, reading it line by line as UTF-8."""
    path = Path(path)
    try:
        with path.open(encoding="utf-8", newline="\n") as fh:
            return scan_lines(fh)
    except (OSError, UnicodeDecodeError) as e:
        raise FileOpenFailure(path, str(e)) from e
