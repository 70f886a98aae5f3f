"""Shared fixtures: sample Jekyll documents on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_POST = """\
---
title: Hello
date: 2023-05-01
subtitle: World
author: Jane
tags: [x, y]
---
Body text.
"""


@pytest.fixture
def sample_post() -> str:
    return SAMPLE_POST


@pytest.fixture
def write_post(tmp_path: Path):
    """Write text to a markdown file under tmp_path and return its path."""

    def _write(text: str, name: str = "post.md") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def post_file(write_post, sample_post: str) -> Path:
    return write_post(sample_post)
