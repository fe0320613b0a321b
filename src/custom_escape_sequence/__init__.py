# src/custom_escape_sequence/__init__.py
"""
custom_escape_sequence
======================

Does: Escape-aware tokenizer for strings holding a custom sequence (e.g. "%")
      that a run of escape sequences (e.g. "!") can turn into literal text.
Exports: CustomEscapeSequence, compile_pattern, split_on_isolated,
         merge_around_dead, Live, DEAD and the error classes.
Used by: Parsers of user-facing templates, format strings and mini-languages.
"""

from __future__ import annotations

from .core import DEFAULT_ESCAPE, CustomEscapeSequence
from .errors import (
    CustomEscapeSequenceError,
    DefaultEscapeMismatch,
    InvalidDefaultEscape,
    MissingDefaultEscape,
    UnsupportedPatternType,
)
from .isolated import is_isolated_form, merge_around_dead, raw_parts, split_on_isolated
from .patterns import compile_pattern
from .types import DEAD, Dead, Live, Resolution, TokenList

__version__ = "0.1.0"

__all__ = [
    # Core
    "CustomEscapeSequence",
    "DEFAULT_ESCAPE",
    "compile_pattern",
    # Isolated form helpers
    "split_on_isolated",
    "merge_around_dead",
    "raw_parts",
    "is_isolated_form",
    # Types
    "DEAD",
    "Dead",
    "Live",
    "Resolution",
    "TokenList",
    # Errors
    "CustomEscapeSequenceError",
    "MissingDefaultEscape",
    "InvalidDefaultEscape",
    "DefaultEscapeMismatch",
    "UnsupportedPatternType",
    "__version__",
]

__docformat__ = "google"
