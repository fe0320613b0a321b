# src/custom_escape_sequence/isolated.py
"""
isolated.

Does: Helpers over the isolated form (an odd-length list alternating raw
      text and markers) that need no tokenizer configuration.
Returns: merge_around_dead(), split_on_isolated(), raw_parts(),
         is_isolated_form().
Used by: CustomEscapeSequence (isolate/split/merge_back) and callers that
         carry several marker kinds in one list.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from .types import Dead, TokenList

__all__ = [
    "merge_around_dead",
    "split_on_isolated",
    "raw_parts",
    "is_isolated_form",
]

__docformat__ = "google"


def merge_around_dead(parts: Iterable[str | Dead]) -> TokenList:
    """
    Does: Drop every DEAD entry and glue the string that follows it onto
          the string before it.
    Returns: New list of str.

    ["hello", "%", "world%", DEAD, "fun!", "%", "x"]
        -> ["hello", "%", "world%fun!", "%", "x"]
    """
    result: TokenList = []
    merge_next = False
    for part in parts:
        if isinstance(part, Dead):
            merge_next = True
        elif merge_next and result:
            result[-1] += part
            merge_next = False
        else:
            result.append(part)
            merge_next = False
    return result


def raw_parts(parts: Sequence[str]) -> TokenList:
    """Even-indexed (raw text) entries of an isolated list."""
    return list(parts[::2])


def is_isolated_form(parts: Any) -> bool:
    """True if `parts` is a list/tuple of str with odd length."""
    return (
        isinstance(parts, (list, tuple))
        and len(parts) % 2 == 1
        and all(isinstance(p, str) for p in parts)
    )


def split_on_isolated(parts: Sequence[str], marker: str) -> list[TokenList]:
    """
    Does: Partition an isolated list at every marker slot (odd index) equal
          to `marker`. Raw slots are never split on, even if they hold the
          same text.
    Returns: Groups that are themselves alternations of the other markers.

    split_on_isolated(["hi", "!", "!", "!", "world"], "!")
        -> [["hi"], ["!"], ["world"]]
    """
    groups: list[TokenList] = [[]]
    for index, part in enumerate(parts):
        if index % 2 == 1 and part == marker:
            groups.append([])
        else:
            groups[-1].append(part)
    return groups
