"""Edges of a key outline, chained end to start around the key."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Compass direction in which a line runs from its start point."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def horizontal(self) -> bool:
        return self in (Direction.EAST, Direction.WEST)


@dataclass
class ButtonPoint:
    """A mutable point shared by two consecutive lines."""

    x: int = 0
    y: int = 0


class ButtonLine:
    """One straight edge of a key outline.

    A line starts at the end point of the previous line (or at a fresh
    point at the origin when there is none) and runs ``length`` pixels
    in its direction.  ``proportion`` is the share of the key's width
    (east/west) or height (north/south) that the line covers.
    """

    def __init__(
        self,
        prev: ButtonLine | None,
        direction: Direction,
        proportion: float = 0.0,
    ) -> None:
        self.direction = direction
        self.proportion = proportion
        self.first = prev is None
        self.start = ButtonPoint() if prev is None else prev.end
        self.end = ButtonPoint()
        self.length = 0

    @property
    def horizontal(self) -> bool:
        return self.direction.horizontal

    @property
    def from_x(self) -> int:
        return self.end.x if self.direction is Direction.WEST else self.start.x

    @property
    def to_x(self) -> int:
        return self.end.x if self.direction is Direction.EAST else self.start.x

    @property
    def from_y(self) -> int:
        return self.end.y if self.direction is Direction.NORTH else self.start.y

    @property
    def to_y(self) -> int:
        return self.end.y if self.direction is Direction.SOUTH else self.start.y

    def resize(self, width: int, height: int) -> None:
        """Set the length from the key size and this line's proportion."""
        if self.proportion == 0.0:
            raise ValueError("line proportion has not been set")
        extent = width if self.horizontal else height
        self.set_length(int(self.proportion * extent))

    def set_length(self, length: int) -> None:
        """Move the end point so the line is ``length`` pixels long."""
        start, end = self.start, self.end
        if self.direction is Direction.NORTH:
            end.x, end.y = start.x, start.y - length
        elif self.direction is Direction.EAST:
            end.x, end.y = start.x + length, start.y
        elif self.direction is Direction.SOUTH:
            end.x, end.y = start.x, start.y + length
        else:
            end.x, end.y = start.x - length, start.y
        self.length = length