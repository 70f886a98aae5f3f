"""Failure kinds raised by the conversion pipeline."""

from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    pass


class FileOpenFailure(ConversionError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class FrontMatterError(ConversionError):
    """No usable front matter; the CLI drops the document unless --strict."""


class FrontMatterMissing(FrontMatterError):
    pass


class FrontMatterInvalid(FrontMatterError):
    pass


class InvalidDate(ConversionError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid date value: {text!r}")
        self.text = text


class EncodingFailure(ConversionError):
    pass
