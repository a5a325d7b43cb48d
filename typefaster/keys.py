"""Key shapes and key kinds used by keyboard layouts."""

from __future__ import annotations

from enum import IntEnum


class ShapeType(IntEnum):
    IRREGULAR = 0
    SQUARE = 1
    RECT = 2

    @property
    def xml_name(self) -> str:
        return self.name.lower()


class KeyType(IntEnum):
    NORMAL = 0
    ALTGR = 1
    ALT = 2
    ENTER = 3
    BACKSPACE = 4
    TAB = 5
    CAPSLOCK = 6
    CONTROL = 7
    LEFTSHIFT = 8
    RIGHTSHIFT = 9
    NUMLOCK = 10
    FORWARDACCENT = 11
    DOUBLEDOT = 12
    HAT = 13
    BACKWARDACCENT = 14
    SQUIGGLE = 15
    CEDILLA = 16
    CARON = 17
    BREVE = 18
    DEGREESIGN = 19
    OGONEK = 20
    DOTABOVE = 21
    DOUBLEACUTEACCENT = 22

    @property
    def xml_name(self) -> str:
        return self.name.lower()


def key_type(name: str) -> KeyType:
    """Return the key type named as in a layout file, e.g. ``"rightshift"``."""
    if not name.islower():
        raise ValueError(f"unknown key type: {name!r}")
    try:
        return KeyType[name.upper()]
    except KeyError:
        raise ValueError(f"unknown key type: {name!r}") from None


def shape_type(name: str) -> ShapeType:
    """Return the key shape named as in a layout file, e.g. ``"square"``."""
    if not name.islower():
        raise ValueError(f"unknown key shape: {name!r}")
    try:
        return ShapeType[name.upper()]
    except KeyError:
        raise ValueError(f"unknown key shape: {name!r}") from None