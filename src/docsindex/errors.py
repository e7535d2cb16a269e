"""Exception types raised by docsindex."""

from __future__ import annotations


class DocsIndexError(Exception):
    """Base class for docsindex errors."""


class ContentFetchError(DocsIndexError):
    """The content store could not materialize a collection."""


class PublishError(DocsIndexError):
    """The index store rejected a batch of records."""


class ConfigError(DocsIndexError):
    """A configured resource could not be loaded."""
