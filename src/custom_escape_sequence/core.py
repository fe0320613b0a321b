# src/custom_escape_sequence/core.py
"""
core.

Does: Locate the "live" occurrences of a custom sequence in a string, where
      a run of escape sequences right before it decides by parity whether
      it stays special (even run) or becomes literal text (odd run).
Returns: CustomEscapeSequence with isolate/split/escape/merge_back.
Used by: Anything parsing user text with its own marker + escape convention.

Lexicon:
    custom sequence:  the special unit being located, e.g. "%".
    escape sequence:  what neutralizes it when placed in front, e.g. "!".
    special sequence: a run of escape sequences followed by one custom
                      sequence, e.g. "!!!%".

With "%" escaped by "!":
    "hello%"    -> "%" is special, raw text "hello"
    "hello!%"   -> "%" is literal, raw text "hello%"
    "hello!!%"  -> "%" is special, raw text "hello!"
    "hello!! %" -> "%" is special, raw text "hello!! " (the escapes do not
                   precede the "%", so they are not halved)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence

from .errors import DefaultEscapeMismatch, InvalidDefaultEscape, MissingDefaultEscape
from .isolated import is_isolated_form, merge_around_dead, raw_parts, split_on_isolated
from .patterns import PatternLike, compile_pattern
from .types import DEAD, Dead, Live, PartsLike, Resolution, TokenList

__all__ = ["CustomEscapeSequence", "DEFAULT_ESCAPE"]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

DEFAULT_ESCAPE = "\\"


def _pairs(parts: Sequence[str]) -> Iterator[tuple[str, str | None]]:
    # (raw, following marker); the trailing raw part has no marker
    for i in range(0, len(parts), 2):
        yield parts[i], (parts[i + 1] if i + 1 < len(parts) else None)


def _flatten(pairs: Sequence[tuple[str, Resolution | None]]) -> list[str | Dead]:
    flat: list[str | Dead] = []
    for raw, resolution in pairs:
        flat.append(raw)
        if isinstance(resolution, Live):
            flat.append(resolution.text)
        elif resolution is DEAD:
            flat.append(DEAD)
    return flat


def _as_parts(string_or_parts: PartsLike) -> Sequence[str]:
    if isinstance(string_or_parts, str):
        return [string_or_parts]
    if isinstance(string_or_parts, (list, tuple)):
        return string_or_parts
    raise TypeError(
        f"Expected a str or a list of str, got {type(string_or_parts).__name__}"
    )


class CustomEscapeSequence:
    """
    Does: Hold one (custom pattern, escape pattern, default escape)
          configuration and its derived matchers.

    Args:
        custom_pattern: The custom sequence, a literal str or a compiled regex.
        escape: The escape sequence, a literal str or a compiled regex.
        default_escape: Literal escape written back by escape()/merge_back().
            Required when `escape` is a regex; defaults to `escape` otherwise.

    Raises:
        MissingDefaultEscape, InvalidDefaultEscape, DefaultEscapeMismatch,
        UnsupportedPatternType.
    """

    def __init__(
        self,
        custom_pattern: PatternLike,
        *,
        escape: PatternLike = DEFAULT_ESCAPE,
        default_escape: str | None = None,
    ) -> None:
        if not isinstance(escape, str) and not isinstance(default_escape, str):
            raise MissingDefaultEscape(
                "escape is not a str, so you must define a default_escape that is a str"
            )

        if default_escape is None:
            default_escape = escape  # type: ignore[assignment]
        if not isinstance(default_escape, str):
            raise InvalidDefaultEscape(
                f"default_escape must be a str, not {default_escape!r}"
            )

        self._custom_pattern = custom_pattern
        self._escape_pattern = escape
        self._default_escape: str = default_escape
        self._custom_sequence_re = compile_pattern(custom_pattern)
        self._escape_sequence_re = compile_pattern(escape)

        if not self.escape_sequence_re.fullmatch(default_escape):
            raise DefaultEscapeMismatch(
                f"default_escape {default_escape!r} is not matched by the escape pattern"
            )

        esc = self.escape_sequence_re.pattern
        custom = self.custom_sequence_re.pattern
        self._special_sequence_re = re.compile(f"({esc}*{custom})")
        self._escape_run_re = re.compile(f"({esc}*){custom}")
        self._ending_escapes_re = re.compile(f"({esc}*)\\Z")

    # ── Read-only configuration ─────────────────────────────────────────────

    @property
    def custom_pattern(self) -> PatternLike:
        return self._custom_pattern

    @property
    def escape_pattern(self) -> PatternLike:
        return self._escape_pattern

    @property
    def default_escape(self) -> str:
        return self._default_escape

    @property
    def custom_sequence_re(self) -> re.Pattern[str]:
        return self._custom_sequence_re

    @property
    def escape_sequence_re(self) -> re.Pattern[str]:
        return self._escape_sequence_re

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.custom_pattern!r}, "
            f"escape={self.escape_pattern!r}, default_escape={self.default_escape!r})"
        )

    def _key(self) -> tuple[str, str, str]:
        return (
            self.custom_sequence_re.pattern,
            self.escape_sequence_re.pattern,
            self.default_escape,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomEscapeSequence):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # ─────────────────────────────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────────────────────────────

    def isolate(self, string_or_parts: PartsLike) -> TokenList:
        """
        Does: Split the input on its live custom sequences.
        Returns: Odd-length list; even indexes are raw text (escapes already
                 resolved), odd indexes are single live custom sequences.
                 Raw parts may be empty, e.g. around consecutive markers or
                 when the string starts/ends with one.

        CustomEscapeSequence("%", escape="!").isolate("hello%%world")
            -> ["hello", "%", "", "%", "world"]
        """
        parts = self.isolate_special_sequences(string_or_parts)
        resolved = [self.parse_special_sequence(raw, special) for raw, special in _pairs(parts)]
        result = merge_around_dead(_flatten(resolved))
        log.debug("[isolate] %r -> %r", string_or_parts, result)
        return result

    def split(self, string_or_parts: PartsLike) -> TokenList:
        """
        Does: Split on the live custom sequences and keep only the raw parts.

        CustomEscapeSequence("%", escape="!").split("hello%world!%fun!!%stuff! and more!!")
            -> ["hello", "world%fun!", "stuff! and more!!"]
        """
        return raw_parts(self.isolate(string_or_parts))

    def escape(self, string_or_parts: PartsLike) -> str:
        """
        Does: Neutralize every custom sequence of the input: each escape of
              a special sequence is doubled and default_escape is inserted
              right before the custom sequence. Escapes that do not precede
              a custom sequence are left alone.
        Returns: A str in which isolate() finds no live custom sequence.

        CustomEscapeSequence("%", escape="!").escape("hello%world!%fun!!%stuff! and more!!")
            -> "hello!%world!!!%fun!!!!!%stuff! and more!!"
        """
        parts = self.isolate_special_sequences(string_or_parts)
        pieces: list[str] = []
        for raw, special in _pairs(parts):
            pieces.append(raw)
            if special is not None:
                pieces.append(self.escape_special_sequence(special))
        return "".join(pieces)

    def merge_back(self, string_or_parts: PartsLike) -> str | TokenList:
        """
        Does: Inverse of isolate(): re-escape the raw parts and glue the
              custom sequences back in, doubling any escapes that end the
              raw part right before a custom sequence.
        Returns: A str, or a list when markers this instance does not handle
                 remain (those are left in place for another instance).
        Raises: TypeError for anything but a str or a list/tuple, ValueError
                for a list that is not an odd-length list of str.

        CustomEscapeSequence("%", escape="!").merge_back(
            ["hello", "%", "world%fun!", "%", "stuff! and more!!"])
            -> "hello%world!%fun!!%stuff! and more!!"
        """
        if isinstance(string_or_parts, str):
            return string_or_parts

        parts = _as_parts(string_or_parts)
        if not is_isolated_form(parts):
            raise ValueError(
                f"Expected an odd-length list of str, got {string_or_parts!r}"
            )
        resolved = [
            self.merge_back_custom_sequence(self.escape(raw), marker)
            for raw, marker in _pairs(parts)
        ]
        result = merge_around_dead(_flatten(resolved))
        log.debug("[merge_back] %r -> %r", string_or_parts, result)

        if len(result) == 1:
            return result[0]
        return result

    def is_custom_sequence_handled(self, custom_sequence: str) -> bool:
        """True if `custom_sequence` is, in full, a custom sequence of this instance."""
        return self.custom_sequence_re.fullmatch(custom_sequence) is not None

    split_on_isolated = staticmethod(split_on_isolated)

    # ─────────────────────────────────────────────────────────────────────
    # Steps (public for debugging and composition)
    # ─────────────────────────────────────────────────────────────────────

    def isolate_special_sequences(self, string_or_parts: PartsLike) -> TokenList:
        """
        Does: Split every raw part on the special sequences (not on the
              custom sequence alone, that is isolate's job). Markers already
              present in a list input are kept as they are.
        Returns: Flat list, raw parts at even indexes, special sequences or
                 foreign markers at odd indexes.
        """
        result: TokenList = []
        for raw, other_marker in _pairs(_as_parts(string_or_parts)):
            result.extend(self._split_keeping_specials(raw))
            if other_marker is not None:
                result.append(other_marker)
        return result

    def _split_keeping_specials(self, raw: str) -> TokenList:
        # re.split would also emit the groups of a user-supplied regex
        pieces: TokenList = []
        start = 0
        for match in self._special_sequence_re.finditer(raw):
            pieces.append(raw[start : match.start()])
            pieces.append(match.group(0))
            start = match.end()
        pieces.append(raw[start:])
        return pieces

    def extract_from_special_sequence(self, special_sequence: str) -> tuple[list[str], str]:
        """
        Does: Split a special sequence into its escapes and its custom sequence.
        Returns: (each escape sequence individually, the custom sequence).

        CustomEscapeSequence("%", escape="!").extract_from_special_sequence("!!!%")
            -> (["!", "!", "!"], "%")
        """
        match = self._escape_run_re.match(special_sequence)
        escapes_string = match.group(1) if match else ""
        return (
            self.split_escape_sequences(escapes_string),
            special_sequence[len(escapes_string) :],
        )

    def split_escape_sequences(self, escapes_string: str) -> list[str]:
        """Each escape sequence of `escapes_string`, individually."""
        return [m.group(0) for m in self.escape_sequence_re.finditer(escapes_string)]

    def parse_special_sequence(
        self, previous_raw_part: str, special_sequence: str | None
    ) -> tuple[str, Resolution | None]:
        """
        Does: Resolve one special sequence against the raw part before it.
              Every odd-indexed escape is appended to the raw part, so a run
              of n escapes leaves n // 2 of them. With an odd run the custom
              sequence is literal and appended too.
        Returns: (new raw part, Live(custom) or DEAD). A missing special
                 sequence (end of input) gives (raw part, None); a marker
                 that is not a special sequence of this instance is Live as-is.
        """
        if special_sequence is None:
            return previous_raw_part, None
        if not self._special_sequence_re.fullmatch(special_sequence):
            return previous_raw_part, Live(special_sequence)

        escapes, custom_sequence = self.extract_from_special_sequence(special_sequence)
        previous_raw_part += "".join(escapes[1::2])
        if len(escapes) % 2 == 1:
            return previous_raw_part + custom_sequence, DEAD
        return previous_raw_part, Live(custom_sequence)

    def escape_special_sequence(self, special_sequence: str) -> str:
        """
        Does: Double every escape of the special sequence and insert
              default_escape before its custom sequence. Foreign markers
              are returned unchanged.
        """
        if not self._special_sequence_re.fullmatch(special_sequence):
            return special_sequence
        escapes, custom_sequence = self.extract_from_special_sequence(special_sequence)
        return "".join(e + e for e in escapes) + self.default_escape + custom_sequence

    def merge_back_custom_sequence(
        self, previous_raw_part: str, custom_sequence: str | None
    ) -> tuple[str, Resolution | None]:
        """
        Does: Append a custom sequence to the raw part before it, doubling
              the escapes that end the raw part so they stay literal.
        Returns: (merged raw part, DEAD), or (raw part, Live(marker)) when the
                 marker is not handled here, or (raw part, None) at the end.
        """
        if custom_sequence is None:
            return previous_raw_part, None
        if not self.is_custom_sequence_handled(custom_sequence):
            return previous_raw_part, Live(custom_sequence)

        match = self._ending_escapes_re.search(previous_raw_part)
        cut = match.start() if match else len(previous_raw_part)
        ending_escapes = self.split_escape_sequences(previous_raw_part[cut:])
        merged = previous_raw_part[:cut] + "".join(e + e for e in ending_escapes) + custom_sequence
        return merged, DEAD
