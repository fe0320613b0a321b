# src/custom_escape_sequence/errors.py
"""
errors.

Does: Define the configuration errors raised while compiling patterns or
      building a CustomEscapeSequence.
Returns: Exception classes rooted at CustomEscapeSequenceError; each one also
         subclasses the closest builtin so callers may catch either.
Used by: patterns.compile_pattern and CustomEscapeSequence.__init__.
"""

from __future__ import annotations

__all__ = [
    "CustomEscapeSequenceError",
    "MissingDefaultEscape",
    "InvalidDefaultEscape",
    "DefaultEscapeMismatch",
    "UnsupportedPatternType",
]

__docformat__ = "google"


class CustomEscapeSequenceError(Exception):
    """Base class for every error raised by this package."""


class MissingDefaultEscape(CustomEscapeSequenceError, TypeError):
    """Raise when `escape` is a regex and no literal `default_escape` was given."""


class InvalidDefaultEscape(CustomEscapeSequenceError, TypeError):
    """Raise when `default_escape` is not a str."""


class DefaultEscapeMismatch(CustomEscapeSequenceError, ValueError):
    """Raise when `default_escape` is not itself matched by the escape pattern."""


class UnsupportedPatternType(CustomEscapeSequenceError, TypeError):
    """Raise when a pattern is neither a str nor a compiled str regex."""
