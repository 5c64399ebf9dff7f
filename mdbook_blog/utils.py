"""Utility functions for mdbook-blog."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from .core.posts import Post

# stdout carries the book JSON back to mdBook
console = Console(stderr=True)


def print_post_summary(posts: list[Post], source_dir: Path, chapter_name: str) -> None:
    """Print the posts added to the book using rich console formatting."""
    console.print(
        f"[bold green]Blog[/]: added {len(posts)} posts under [bold]{chapter_name}[/]"
    )
    for post in posts:
        console.print(f"  [cyan]{post.date.isoformat()}[/] {post.path.relative_to(source_dir)}")
