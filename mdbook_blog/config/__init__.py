"""Configuration management for mdbook-blog.

This module handles reading and validating the [preprocessor.blog] table of book.toml.
"""

from .loader import CONFIG_SECTION, get_config
from .schema import Config, SortBy

__all__ = [
    "CONFIG_SECTION",
    "Config",
    "SortBy",
    "get_config",
]
