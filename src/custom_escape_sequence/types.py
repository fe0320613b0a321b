# src/custom_escape_sequence/types.py
from __future__ import annotations

"""
types.py.

Does: Define the token-list aliases and the tagged result of resolving one
special sequence (a live marker, or a dead one folded into raw text).
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final


class Dead(Enum):
    """Marker escaped by an odd escape run; its text now lives in the raw part."""

    DEAD = "dead"

    def __repr__(self) -> str:
        return "DEAD"


DEAD: Final = Dead.DEAD


@dataclass(frozen=True)
class Live:
    """Marker that stays special; `text` is the literal custom sequence."""

    text: str


Resolution = Live | Dead

# Alternating raw / marker list, always of odd length
TokenList = list[str]
PartsLike = str | Sequence[str]

__all__ = ["DEAD", "Dead", "Live", "PartsLike", "Resolution", "TokenList"]

__docformat__ = "google"
