"""Book model and the mdBook preprocessor wire format.

mdBook sends ``[context, book]`` as JSON on stdin and expects the book back on
stdout. Items already in the book are kept as raw JSON so that anything this
package does not model survives the round trip unchanged.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import IO, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ProtocolError


class PreprocessorContext(BaseModel):
    """Build context mdBook hands to every preprocessor."""

    model_config = ConfigDict(extra="allow")

    root: Path
    config: dict[str, Any] = Field(default_factory=dict)
    renderer: str = "html"
    mdbook_version: str = ""

    @property
    def source_dir(self) -> Path:
        """Directory holding the book sources (``root`` joined with ``book.src``)."""
        book_config = self.config.get("book") or {}
        return self.root / book_config.get("src", "src")

    def preprocessor_config(self, name: str) -> Any | None:
        """Return the ``[preprocessor.<name>]`` table, or None if absent."""
        preprocessors = self.config.get("preprocessor")
        if not isinstance(preprocessors, dict):
            return None
        return preprocessors.get(name)


class Chapter(BaseModel):
    """A chapter as serialized by mdBook."""

    model_config = ConfigDict(extra="allow")

    name: str
    content: str = ""
    number: list[int] | None = None
    sub_items: list[Any] = Field(default_factory=list)
    path: Path | None = None
    source_path: Path | None = None
    parent_names: list[str] = Field(default_factory=list)

    def to_item(self) -> dict[str, Any]:
        """Wrap the chapter as a book item."""
        return {"Chapter": self.model_dump(mode="json")}


class Book(BaseModel):
    """The book being built, as serialized by mdBook."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    sections: list[Any] = Field(default_factory=list)
    non_exhaustive: None = Field(default=None, alias="__non_exhaustive")

    def push_item(self, chapter: Chapter) -> None:
        """Append a chapter as a new top-level item."""
        self.sections.append(chapter.to_item())

    def iter_chapters(self) -> Iterator[dict[str, Any]]:
        """Yield the raw data of every chapter in the book, depth first."""
        yield from _iter_chapters(self.sections)

    def to_json(self) -> str:
        """Serialize the book in the format mdBook reads back."""
        return self.model_dump_json(by_alias=True)


def _iter_chapters(items: list[Any]) -> Iterator[dict[str, Any]]:
    for item in items:
        if isinstance(item, dict) and isinstance(item.get("Chapter"), dict):
            raw = item["Chapter"]
            yield raw
            yield from _iter_chapters(raw.get("sub_items") or [])


def parse_input(stream: IO[str]) -> tuple[PreprocessorContext, Book]:
    """Parse the ``[context, book]`` pair mdBook writes to a preprocessor.

    Args:
        stream: Text stream, usually stdin.

    Returns:
        Tuple of (context, book).

    Raises:
        ProtocolError: If the input is not valid preprocessor JSON.
    """
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        raise ProtocolError(f"Unable to parse the input: {e}") from e

    if not isinstance(data, list) or len(data) != 2:
        raise ProtocolError("Expected a JSON array of [context, book]")

    try:
        ctx = PreprocessorContext.model_validate(data[0])
        book = Book.model_validate(data[1])
    except ValidationError as e:
        raise ProtocolError(f"Unable to parse the input: {e}") from e

    return ctx, book
