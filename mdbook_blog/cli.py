"""Command line interface for mdbook-blog.

mdBook runs the preprocessor twice: ``mdbook-blog supports <renderer>`` to ask
whether a renderer is handled, then ``mdbook-blog`` with the book on stdin.
"""

from __future__ import annotations

import os
import sys
from typing import Any

import click
from loguru import logger

from . import __version__
from .core import parse_input
from .preprocessor import BlogPreprocessor

LOG_LEVEL_ENV = "MDBOOK_BLOG_LOG"
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} [{level}] ({name}): {message}"


class DefaultCommandGroup(click.Group):
    """Group that falls back to a default command when none is provided."""

    def __init__(
        self,
        *args: Any,
        default_command: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.default_command = default_command

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, Any, list[str]]:
        if args:
            cmd_name = args[0]
            cmd = self.get_command(ctx, cmd_name)
            if cmd is not None:
                return cmd_name, cmd, args[1:]

        if self.default_command:
            cmd = self.get_command(ctx, self.default_command)
            if cmd is None:
                raise click.UsageError(
                    f"Default command '{self.default_command}' not found."
                )
            return self.default_command, cmd, args
        result: tuple[str | None, Any, list[str]] = super().resolve_command(ctx, args)
        return result

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # A bare invocation must still reach the default command
        if not args and self.default_command:
            args = [self.default_command]
        return super().parse_args(ctx, args)


def setup_logger(verbose: bool = False) -> Any:
    """Set up logger with appropriate level.

    ``MDBOOK_BLOG_LOG`` overrides the level (e.g. ``MDBOOK_BLOG_LOG=WARNING``).
    """
    logger.remove()

    level = os.environ.get(LOG_LEVEL_ENV) or ("DEBUG" if verbose else "INFO")
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())

    return logger


@click.group(cls=DefaultCommandGroup, default_command="preprocess")
@click.version_option(version=__version__, prog_name="mdbook-blog")
def cli() -> None:
    """mdBook preprocessor that turns dated markdown files into blog posts.

    Posts are files named YYYY-MM-DD-title.md in the posts directory of the
    book. Each one is added to the book as a chapter under the configured
    chapter name.
    """


@cli.command()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def preprocess(verbose: bool) -> None:
    """Read the book from stdin, add the posts and write it to stdout."""
    log = setup_logger(verbose)
    preprocessor = BlogPreprocessor(log)

    try:
        ctx, book = parse_input(click.get_text_stream("stdin"))
        processed_book = preprocessor.run(ctx, book)
    except Exception as e:
        log.error(f"Error running the {preprocessor.name} preprocessor: {e}")
        raise click.ClickException(str(e)) from e

    click.echo(processed_book.to_json())


@cli.command()
@click.argument("renderer")
@click.pass_context
def supports(ctx: click.Context, renderer: str) -> None:
    """Check if the preprocessor supports RENDERER.

    Exits with status 0 when supported and 1 otherwise.
    """
    preprocessor = BlogPreprocessor(setup_logger())
    ctx.exit(0 if preprocessor.supports_renderer(renderer) else 1)
