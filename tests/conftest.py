"""Shared fixtures for mdbook-blog tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


class RecordingLogger:
    """Logger stand-in that keeps every message by level."""

    def __init__(self) -> None:
        self.messages: dict[str, list[str]] = {
            "debug": [],
            "info": [],
            "warning": [],
            "error": [],
        }

    def debug(self, msg: str) -> None:
        self.messages["debug"].append(msg)

    def info(self, msg: str) -> None:
        self.messages["info"].append(msg)

    def warning(self, msg: str) -> None:
        self.messages["warning"].append(msg)

    def error(self, msg: str) -> None:
        self.messages["error"].append(msg)


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def book_root(tmp_path: Path) -> Path:
    """A book root with an empty ``src`` directory."""
    root = tmp_path / "book"
    (root / "src").mkdir(parents=True)
    return root


def make_input(
    root: Path, blog_config: dict[str, Any] | None = None, sections: list[Any] | None = None
) -> str:
    """Build the JSON mdBook writes to a preprocessor's stdin."""
    config: dict[str, Any] = {
        "book": {
            "authors": ["AUTHOR"],
            "language": "en",
            "multilingual": False,
            "src": "src",
            "title": "TITLE",
        },
    }
    if blog_config is not None:
        config["preprocessor"] = {"blog": blog_config}

    context = {
        "root": str(root),
        "config": config,
        "renderer": "html",
        "mdbook_version": "0.4.28",
    }
    book = {
        "sections": sections
        if sections is not None
        else [
            {
                "Chapter": {
                    "name": "Chapter 1",
                    "content": "# Chapter 1\n",
                    "number": [1],
                    "sub_items": [],
                    "path": "chapter_1.md",
                    "source_path": "chapter_1.md",
                    "parent_names": [],
                }
            }
        ],
        "__non_exhaustive": None,
    }
    return json.dumps([context, book])
