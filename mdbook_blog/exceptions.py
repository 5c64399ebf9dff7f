"""Custom exceptions for mdbook-blog."""


class MdbookBlogError(Exception):
    """Base exception for mdbook-blog operations."""


class ProtocolError(MdbookBlogError):
    """The preprocessor input sent by mdBook could not be parsed."""


class DateParseError(MdbookBlogError):
    """A post filename does not start with a valid YYYY-MM-DD date."""


class PostReadError(MdbookBlogError):
    """A collected post could not be read while adding it to the book."""


class PathRebaseError(MdbookBlogError):
    """A post path is not located under the book source directory."""
