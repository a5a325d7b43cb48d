"""Per-character speed and accuracy statistics for one layout's chart."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

CHART_HEIGHT = 300
"""Height in pixels of a full-scale bar."""

SLOWEST_TIME_MS = 3000
"""Average press time, in milliseconds, that fills a speed bar."""

LEADER_COUNT = 5
"""How many characters the slowest and least accurate summaries name."""

_COLOUR_SCALE = 390
_COLOUR_HALF = 195

Colour = tuple[int, int, int]


@dataclass
class KeyStat:
    """Typing record for one character, with its computed bar geometry."""

    char: str
    num: int = 0
    total_time: float = 0.0
    missed: int = 0
    speed_height: int = 0
    speed_colour: Colour = (0, 0, 0)
    accuracy_height: int = 0
    accuracy_colour: Colour = (0, 0, 0)

    @property
    def is_letter(self) -> bool:
        return unicodedata.category(self.char).startswith("L")

    @property
    def is_upper(self) -> bool:
        return unicodedata.category(self.char) == "Lu"


def order_chars(stats: Iterable[KeyStat]) -> list[KeyStat]:
    """Order records letters first, lower case before upper case, then by code."""
    return sorted(stats, key=lambda s: (not s.is_letter, s.is_upper, s.char))


def _colour(y: int) -> Colour:
    """Blend from red (low ``y``) through yellow to green (high ``y``)."""
    add_green = y
    take_red = 0
    if y > _COLOUR_HALF:
        add_green = _COLOUR_HALF
        take_red = y - _COLOUR_HALF
    return (205 - take_red, 10 + add_green, 10)


def _leaders(
    items: list[KeyStat],
    better: Callable[[KeyStat, KeyStat], bool],
    count: int = LEADER_COUNT,
) -> Iterator[KeyStat]:
    """Yield the first ``count`` items of a partial exchange selection.

    The exchange order is kept deliberately so that ties come out in the
    same order every time the chart is drawn.
    """
    items = list(items)
    for i in range(min(count, len(items))):
        for j in range(i + 1, len(items)):
            if better(items[j], items[i]):
                items[i], items[j] = items[j], items[i]
        yield items[i]


class CharChart:
    """Speed and accuracy chart data for the characters of one layout."""

    def __init__(
        self,
        heading: str = "",
        letters_only: bool = False,
        preferences: dict[str, bool] | None = None,
    ) -> None:
        self.heading = heading
        self.letters_only = letters_only
        self.preferences: dict[str, bool] = {} if preferences is None else preferences
        self.all: list[KeyStat] = []
        self.used: list[KeyStat] = []
        self.unused: list[KeyStat] = []
        self.slowest = ""
        self.worst = ""

    @property
    def width(self) -> int:
        """Pixel width the chart needs for its characters."""
        return 140 + 40 + 20 * len(self.all) + 100

    def set_letters_only(self, on: bool) -> None:
        """Show only letters, or every character, and remember the choice."""
        self.preferences[self.heading] = on
        self.letters_only = on
        self.calculate(self.all)

    def calculate(self, stats: Iterable[KeyStat]) -> None:
        """Split, order and measure the records, and find the worst ones."""
        self.all = list(stats)
        shown = [s for s in self.all if not self.letters_only or s.is_letter]
        self.used = order_chars(s for s in shown if s.num > 0)
        self.unused = order_chars(s for s in shown if s.num <= 0)

        for stat in self.used:
            share = (stat.total_time / stat.num) / SLOWEST_TIME_MS
            stat.speed_height = int(share * CHART_HEIGHT)
            stat.speed_colour = _colour(int(_COLOUR_SCALE - share * _COLOUR_SCALE))

            share = stat.num / (stat.num + stat.missed)
            stat.accuracy_height = int(share * CHART_HEIGHT)
            stat.accuracy_colour = _colour(int(share * _COLOUR_SCALE))

        self.slowest = "".join(
            s.char
            for s in _leaders(self.used, lambda a, b: a.speed_height > b.speed_height)
        )
        self.worst = "".join(
            s.char
            for s in _leaders(
                self.used, lambda a, b: a.accuracy_height < b.accuracy_height
            )
        )