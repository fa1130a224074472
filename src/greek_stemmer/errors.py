"""Exceptions raised by the stemmer and its loaders."""

from __future__ import annotations


class StemmerError(Exception):
    """Base class for greek_stemmer errors."""


class InvalidBufferError(StemmerError, ValueError):
    """The token buffer cannot hold the stated length, or cannot be written to."""


class ConfigurationError(StemmerError):
    """A configured resource (stopword list, samples file) could not be read."""
