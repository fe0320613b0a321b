# src/custom_escape_sequence/patterns.py
"""
patterns.

Does: Turn a literal string or a precompiled regex into a non-capturing
      regex unit that can be embedded in larger patterns.
Returns: compile_pattern(), PatternLike.
Used by: CustomEscapeSequence to build its custom/escape matchers.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from .errors import UnsupportedPatternType

__all__ = ["PatternLike", "compile_pattern"]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

PatternLike = str | re.Pattern[str]

# Leading global flag groups, e.g. "(?i)"; their flags are already in .flags
_GLOBAL_FLAGS_RE = re.compile(r"\A(?:\(\?[aiLmsux]+\))+")

# Flags that survive embedding, as a scoped inline group "(?ims:...)"
_SCOPED_FLAGS: tuple[tuple[re.RegexFlag, str], ...] = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def _inline_flags(flags: int) -> str:
    return "".join(letter for flag, letter in _SCOPED_FLAGS if flags & flag)


@lru_cache(maxsize=256)
def _compile_literal(text: str) -> re.Pattern[str]:
    return re.compile(f"(?:{re.escape(text)})")


@lru_cache(maxsize=256)
def _compile_regex(regex: re.Pattern[str]) -> re.Pattern[str]:
    letters = _inline_flags(regex.flags)
    source = _GLOBAL_FLAGS_RE.sub("", regex.pattern)
    if not letters:
        return re.compile(f"(?:{source})")
    # a trailing comment in verbose mode would swallow the closing paren
    tail = "\n" if "x" in letters else ""
    return re.compile(f"(?{letters}:{source}{tail})")


def compile_pattern(pattern: PatternLike) -> re.Pattern[str]:
    """
    Does: Wrap `pattern` in a non-capturing group. A str is matched
          literally (regex metacharacters escaped); a compiled str regex
          keeps its source and its scopable flags.
    Returns: A compiled re.Pattern[str] whose source is safe to embed and
             quantify as a single unit.
    Raises: UnsupportedPatternType for any other input (bytes regexes included).
    """
    if isinstance(pattern, str):
        return _compile_literal(pattern)
    if isinstance(pattern, re.Pattern) and isinstance(pattern.pattern, str):
        return _compile_regex(pattern)
    log.debug("[compile] rejected %r", pattern)
    raise UnsupportedPatternType(
        f"Unsupported type {type(pattern).__name__}: {pattern!r}"
    )
