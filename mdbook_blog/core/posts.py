"""Post collection, filtering and ordering."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

from ..config import SortBy
from ..exceptions import DateParseError
from .dates import split_post_filename

if TYPE_CHECKING:
    from typing import Any

POST_EXTENSION = ".md"


@dataclass(frozen=True)
class Post:
    """A dated markdown file found in the posts directory.

    Only metadata is kept here; the file content is read when the post is
    added to the book.
    """

    path: Path
    date: date
    name: str
    parent_name: str


def walk_post_files(root: Path, logger: Any) -> Iterator[Path]:
    """Walk the posts directory and yield candidate post files.

    Directories, special files, dangling symlinks and files whose extension
    is not exactly ``.md`` are skipped.
    Entries that cannot be read are logged and the walk continues.

    Args:
        root: Directory to search recursively.
        logger: Logger instance.

    Yields:
        Path objects for each markdown file found.
    """

    def _on_error(error: OSError) -> None:
        logger.warning(f"Some error occurred reading directory entry: {error}")

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_on_error):
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.suffix == POST_EXTENSION and path.is_file():
                yield path


def collect_posts(root: Path, parent_name: str, logger: Any) -> list[Post]:
    """Collect every valid post below ``root``.

    A valid post is a file, its name ends with ``.md`` and it starts with a
    date, like ``2024-01-15-my-super-post.md``. Files with a malformed name are
    logged and skipped.

    Args:
        root: Posts directory.
        parent_name: Name of the chapter the posts belong to.
        logger: Logger instance.

    Returns:
        List of posts in walk order.
    """
    if not root.is_dir():
        logger.warning(f"Posts directory {root} not found, no posts added")
        return []

    posts = []
    for path in walk_post_files(root, logger):
        logger.debug(f"Extracting date from {path.name}")
        try:
            post_date, name = split_post_filename(path)
        except DateParseError as e:
            logger.error(f"An error occurred while extracting date from {path}: {e}")
            continue
        posts.append(Post(path=path, date=post_date, name=name, parent_name=parent_name))

    return posts


def filter_future_posts(
    posts: list[Post], logger: Any, today: date | None = None
) -> list[Post]:
    """Drop posts dated after ``today``.

    Args:
        posts: Collected posts.
        logger: Logger instance.
        today: Reference date. Defaults to the current local date.

    Returns:
        Posts dated today or earlier, in their original order.
    """
    today = today or date.today()
    kept = []
    for post in posts:
        if post.date > today:
            logger.info(f"Skipping {post.path.name}: dated in the future ({post.date})")
            continue
        kept.append(post)
    return kept


def sort_posts(posts: list[Post], sort_by: SortBy) -> None:
    """Sort posts in place.

    The sort is stable, posts with the same date or name keep their order.

    Args:
        posts: Posts to sort.
        sort_by: Ordering strategy.

    Raises:
        ValueError: If ``sort_by`` is not a known strategy.
    """
    if sort_by is SortBy.NEWEST:
        posts.sort(key=lambda post: post.date, reverse=True)
    elif sort_by is SortBy.OLDEST:
        posts.sort(key=lambda post: post.date)
    elif sort_by is SortBy.NAME_A_Z:
        posts.sort(key=lambda post: post.name)
    elif sort_by is SortBy.NAME_Z_A:
        posts.sort(key=lambda post: post.name, reverse=True)
    else:
        raise ValueError(f"Unknown sort order: {sort_by!r}")
