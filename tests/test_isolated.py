# tests/test_isolated.py
from __future__ import annotations

import pytest

from custom_escape_sequence import DEAD, CustomEscapeSequence
from custom_escape_sequence import isolated as I


# ─────────────────────────────────────────────────────────────────────────────
# split_on_isolated
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "parts,expected",
    [
        (["hi", "!", "world"], [["hi"], ["world"]]),
        (["hi", "!", "", "%", "world"], [["hi"], ["", "%", "world"]]),
        (["hi", "!", "!", "!", "world"], [["hi"], ["!"], ["world"]]),
        (["only raw"], [["only raw"]]),
        (["", "!", ""], [[""], [""]]),
    ],
)
def test_split_on_isolated(parts, expected):
    assert I.split_on_isolated(parts, "!") == expected


def test_split_on_isolated_static_on_class():
    out = CustomEscapeSequence.split_on_isolated(["a", "|", "b"], "|")
    assert out == [["a"], ["b"]]


def test_split_on_isolated_groups_keep_odd_length():
    parts = ["a", "%", "b", ";", "c", "%", "d", ";", "e"]
    groups = I.split_on_isolated(parts, ";")
    assert groups == [["a", "%", "b"], ["c", "%", "d"], ["e"]]
    assert all(len(g) % 2 == 1 for g in groups)


def test_split_on_isolated_with_tokenizers():
    fields = CustomEscapeSequence(";", escape="!")
    vars_ = CustomEscapeSequence("%", escape="!")
    parts = vars_.isolate(fields.isolate("a%b;c!;d;e"))
    assert I.split_on_isolated(parts, ";") == [["a", "%", "b"], ["c;d"], ["e"]]


# ─────────────────────────────────────────────────────────────────────────────
# merge_around_dead / raw_parts / is_isolated_form
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "parts,expected",
    [
        (["hello", "%", "world%", DEAD, "fun!", "%", "x"], ["hello", "%", "world%fun!", "%", "x"]),
        (["a", DEAD, "b", DEAD, "c"], ["abc"]),
        (["a", DEAD], ["a"]),
        ([], []),
        ([DEAD, "a"], ["a"]),
    ],
)
def test_merge_around_dead(parts, expected):
    assert I.merge_around_dead(parts) == expected


def test_raw_parts():
    assert I.raw_parts(["a", "%", "b", "%", "c"]) == ["a", "b", "c"]


@pytest.mark.parametrize(
    "value,expected",
    [
        (["a"], True),
        (("a", "%", "b"), True),
        (["a", "%"], False),
        ([], False),
        (["a", 1, "b"], False),
        ("a", False),
    ],
)
def test_is_isolated_form(value, expected):
    assert I.is_isolated_form(value) is expected
