"""Blog preprocessor for mdBook."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config
from .core import (
    Book,
    PreprocessorContext,
    collect_posts,
    filter_future_posts,
    graft_posts,
    sort_posts,
)
from .utils import print_post_summary

if TYPE_CHECKING:
    from typing import Any


class BlogPreprocessor:
    """Collect dated posts and add them to the book as chapters."""

    SUPPORTED_RENDERERS = frozenset({"html"})

    def __init__(self, logger: Any, summary: bool = True) -> None:
        self.logger = logger
        self.summary = summary

    @property
    def name(self) -> str:
        return "blog"

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        """Add every post found in the posts directory to the book.

        Args:
            ctx: Preprocessor context received from mdBook.
            book: Book to extend.

        Returns:
            The book with one new chapter per post.

        Raises:
            PostReadError: If a collected post cannot be read.
            PathRebaseError: If a post lies outside the book source directory.
        """
        source_dir = ctx.source_dir
        config = get_config(ctx, self.logger)
        posts_dir = source_dir / config.directory

        self.logger.info(f"Collecting posts from {posts_dir}")
        posts = collect_posts(posts_dir, config.chapter_name, self.logger)

        if not config.future:
            posts = filter_future_posts(posts, self.logger)

        sort_posts(posts, config.sort_by)
        self.logger.info(f"Collected {len(posts)} posts, sorted by {config.sort_by.value}")

        graft_posts(posts, source_dir, book, self.logger)

        for chapter in book.iter_chapters():
            self.logger.debug(f"{chapter.get('name')}: {chapter.get('source_path')}")

        if self.summary and posts:
            print_post_summary(posts, source_dir, config.chapter_name)

        return book

    def supports_renderer(self, renderer: str) -> bool:
        return renderer in self.SUPPORTED_RENDERERS
