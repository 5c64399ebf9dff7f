"""Configuration loader for mdbook-blog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from .schema import Config

if TYPE_CHECKING:
    from typing import Any

    from ..core.book import PreprocessorContext

CONFIG_SECTION = "blog"


def get_config(ctx: PreprocessorContext, logger: Any) -> Config:
    """Build the configuration from the ``[preprocessor.blog]`` table.

    A missing table gives the defaults. An invalid table is reported and the
    defaults are used instead, so a typo in book.toml never stops the build.

    Args:
        ctx: Preprocessor context received from mdBook.
        logger: Logger instance.

    Returns:
        Config object.
    """
    section = ctx.preprocessor_config(CONFIG_SECTION)
    if section is None:
        return Config()

    try:
        return Config.model_validate(section)
    except ValidationError as e:
        logger.error(
            f"The [preprocessor.{CONFIG_SECTION}] section in book.toml contains invalid keys: {e}"
        )
        return Config()
