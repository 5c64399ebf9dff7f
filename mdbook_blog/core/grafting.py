"""Turn collected posts into book chapters."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ..exceptions import PathRebaseError, PostReadError
from .book import Book, Chapter
from .posts import Post

if TYPE_CHECKING:
    from typing import Any


def derive_title(content: str, fallback: str) -> str:
    """Use the first non-empty line as the chapter title.

    Leading ``#`` markers are stripped, so ``# Hello`` gives ``Hello``.
    """
    for line in content.splitlines():
        title = line.strip().lstrip("#").strip()
        if title:
            return title
    return fallback


def post_to_chapter(post: Post, source_dir: Path) -> Chapter:
    """Read a post and build the chapter for it.

    Args:
        post: Post to convert.
        source_dir: Book source directory; chapter paths are relative to it.

    Returns:
        Chapter with root-relative ``path`` and ``source_path``.

    Raises:
        PostReadError: If the post file cannot be read.
        PathRebaseError: If the post is not under ``source_dir``.
    """
    try:
        content = post.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PostReadError(f"Error reading {post.path}: {e}") from e

    try:
        source_path = post.path.relative_to(source_dir)
    except ValueError as e:
        raise PathRebaseError(
            f"Post {post.path} is not inside the book source directory {source_dir}"
        ) from e

    return Chapter(
        name=derive_title(content, post.name),
        content=content,
        source_path=source_path,
        path=source_path,
        parent_names=[post.parent_name],
    )


def graft_posts(posts: list[Post], source_dir: Path, book: Book, logger: Any) -> Book:
    """Append one chapter per post to the book, in list order.

    Existing items are left untouched.

    Args:
        posts: Posts, already sorted.
        source_dir: Book source directory.
        book: Book to extend.
        logger: Logger instance.

    Returns:
        The same book, with the new chapters appended.
    """
    for post in posts:
        chapter = post_to_chapter(post, source_dir)
        logger.debug(f"Adding chapter {chapter.name!r} from {chapter.source_path}")
        book.push_item(chapter)
    return book
