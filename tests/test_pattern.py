"""Tests for specifier lookup and sentinel wrapping (statusclock/text/pattern.py)."""

from __future__ import annotations

import pytest

from statusclock.text.pattern import (
    SENTINEL_CLOSE,
    SENTINEL_OPEN,
    annotate,
    locate_specifier,
    wrap_specifier,
)


# Locating the specifier


@pytest.mark.parametrize(
    ("template", "index", "start"),
    [
        ("h:mm a", 5, 4),
        ("h:mm\u202fa", 5, 4),
        ("a h:mm", 0, 0),
        ("h:mma", 4, 4),
        ("h:mm   a", 7, 4),
        ("HH:mm 'Uhr' a", 12, 11),
    ],
)
def test_locate_specifier_finds_unquoted(template, index, start):
    pos = locate_specifier(template)
    assert pos is not None
    assert pos.index == index
    assert pos.start == start


def test_locate_specifier_skips_quoted_occurrence():
    pos = locate_specifier("'at' h:mm a")
    assert pos.index == 10


def test_locate_specifier_absent_when_only_quoted():
    assert locate_specifier("h:mm 'a'") is None


def test_locate_specifier_absent_for_24_hour_pattern():
    assert locate_specifier("HH:mm") is None


def test_locate_specifier_other_character():
    pos = locate_specifier("HH:mm z", "z")
    assert (pos.index, pos.start) == (6, 5)


# Wrapping


def test_wrap_specifier_brackets_whitespace_and_specifier():
    assert wrap_specifier("h:mm a", 4, 5) == "h:mm" + SENTINEL_OPEN + " a" + SENTINEL_CLOSE


def test_wrap_specifier_is_idempotent_for_same_input():
    assert wrap_specifier("h:mm a", 4, 5) == wrap_specifier("h:mm a", 4, 5)


@pytest.mark.parametrize("template", ["h:mm a", "a h:mm", "h:mm  a 'x'", "K:mm a, z"])
def test_wrap_then_strip_restores_template(template):
    pos = locate_specifier(template)
    wrapped = wrap_specifier(template, pos.start, pos.index)

    stripped = wrapped.replace(SENTINEL_OPEN, "").replace(SENTINEL_CLOSE, "")
    assert stripped == template
    # Specifier sits right before the closing sentinel
    assert wrapped[wrapped.index(SENTINEL_CLOSE) - 1] == "a"
    assert wrapped.index(SENTINEL_OPEN) == pos.start


def test_annotate_leaves_template_without_specifier_untouched():
    assert annotate("HH:mm") == "HH:mm"
    assert annotate("h:mm 'a'") == "h:mm 'a'"
