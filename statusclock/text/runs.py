"""
Turning the rendered clock text into styled runs.

All spans are expressed against the final rendered string (sentinels and
prefixes included). Nothing is edited in place: each character is marked
as kept or dropped and given a size, and the kept characters are then
copied out into runs of equal size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .display import DisplayConfig, SizeMode
from .locator import Span

SMALL_SCALE = 0.7


@dataclass(frozen=True)
class StyledRun:
    text: str
    scale: Optional[float] = None
    color: Optional[str] = None


class _Marks:
    def __init__(self, length):
        self.keep = [True] * length
        self.scale = [None] * length

    def delete(self, start, end):
        for i in range(start, end):
            self.keep[i] = False

    def resize(self, start, end, factor):
        for i in range(start, end):
            self.scale[i] = factor


def _style_prefix(marks, span, visible, size):
    if span is None or size == SizeMode.NORMAL:
        return
    if not visible:
        marks.delete(*span)
    elif size == SizeMode.SMALL:
        marks.resize(span[0], span[1], SMALL_SCALE)


def build_runs(
    rendered: str,
    config: DisplayConfig,
    sentinels: Optional[Span] = None,
    weekday: Optional[Span] = None,
    daymonth: Optional[Span] = None,
    color: Optional[str] = None,
) -> tuple[StyledRun, ...]:
    """
    Builds the run list for ``rendered``.

    ``sentinels`` is the (open, close) index pair of the markers around the
    designator; ``weekday`` and ``daymonth`` are half-open prefix spans.
    Absent spans are skipped. The colour (``config.foreground_color`` when
    not given) is set on every run that survives.
    """
    marks = _Marks(len(rendered))

    if sentinels is not None:
        open_idx, close_idx = sentinels
        if not config.specifier_visible:
            marks.delete(open_idx, close_idx + 1)
        else:
            if config.specifier_size == SizeMode.SMALL:
                marks.resize(open_idx + 1, close_idx, SMALL_SCALE)
            marks.delete(close_idx, close_idx + 1)
            marks.delete(open_idx, open_idx + 1)

    _style_prefix(marks, weekday, config.weekday_visible, config.weekday_size)
    _style_prefix(marks, daymonth, config.daymonth_visible, config.daymonth_size)

    if color is None:
        color = config.foreground_color

    runs = []
    chunk = []
    chunk_scale = None
    for ch, keep, scale in zip(rendered, marks.keep, marks.scale):
        if not keep:
            continue
        if chunk and scale != chunk_scale:
            runs.append(StyledRun("".join(chunk), chunk_scale, color))
            chunk = []
        chunk_scale = scale
        chunk.append(ch)
    if chunk:
        runs.append(StyledRun("".join(chunk), chunk_scale, color))
    return tuple(runs)


def visible_text(runs) -> str:
    return "".join(run.text for run in runs)
