"""Core processing functions for mdbook-blog.

This module contains the post discovery, ordering and book grafting logic,
along with the book model shared with mdBook.
"""

from .book import Book, Chapter, PreprocessorContext, parse_input
from .dates import extract_date_from_filename, split_post_filename
from .grafting import derive_title, graft_posts, post_to_chapter
from .posts import (
    Post,
    collect_posts,
    filter_future_posts,
    sort_posts,
    walk_post_files,
)

__all__ = [
    "Book",
    "Chapter",
    "PreprocessorContext",
    "parse_input",
    "extract_date_from_filename",
    "split_post_filename",
    "Post",
    "collect_posts",
    "filter_future_posts",
    "sort_posts",
    "walk_post_files",
    "derive_title",
    "graft_posts",
    "post_to_chapter",
]
