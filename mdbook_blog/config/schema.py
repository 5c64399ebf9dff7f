"""Configuration schema for mdbook-blog."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


def _kebab_case(field_name: str) -> str:
    return field_name.replace("_", "-")


class SortBy(str, Enum):
    """Order in which posts are added to the book."""

    NEWEST = "newest"
    OLDEST = "oldest"
    NAME_A_Z = "name-a-z"
    NAME_Z_A = "name-z-a"


class Config(BaseModel):
    """The ``[preprocessor.blog]`` table from book.toml."""

    model_config = ConfigDict(
        alias_generator=_kebab_case,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    directory: str = "posts"
    future: bool = False
    chapter_name: str = "Posts"
    sort_by: SortBy = SortBy.NEWEST
