"""Keyboard layout descriptions and the built-in US English layout."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .keys import KeyType, ShapeType, key_type, shape_type


class LayoutError(ValueError):
    """A layout document could not be read."""


@dataclass(frozen=True)
class KeyValue:
    """A character a key produces, and the modifier needed for it."""

    text: str
    when: KeyType = KeyType.NORMAL
    draw: bool = False
    newline: bool = False


@dataclass
class KeyDef:
    """One key of a layout."""

    shape: ShapeType
    types: tuple[KeyType, ...]
    home_key: bool = False
    size: tuple[float, float] = (1.0, 1.0)
    home_index: int | None = None
    values: list[KeyValue] = field(default_factory=list)


@dataclass
class Row:
    scale: float = 1.0
    keys: list[KeyDef] = field(default_factory=list)


@dataclass
class Layout:
    version: str = "1.0"
    horizontal_gap: float = 0.1
    vertical_gap: float = 0.1
    left_to_right: bool = True
    rows: list[Row] = field(default_factory=list)

    def characters(self) -> list[str]:
        """All characters the layout can type, in layout order, without repeats."""
        return list(
            dict.fromkeys(
                value.text
                for row in self.rows
                for key in row.keys
                for value in key.values
            )
        )

    def find_key(self, char: str) -> KeyDef:
        """Return the key that types ``char``."""
        for row in self.rows:
            for key in row.keys:
                if any(value.text == char for value in key.values):
                    return key
        raise KeyError(char)


def _bool(text: str | None, default: bool = False) -> bool:
    if text is None:
        return default
    if text == "true":
        return True
    if text == "false":
        return False
    raise LayoutError(f"expected true or false, got {text!r}")


def _required(element: ET.Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise LayoutError(f"<{element.tag}> lacks attribute {name!r}")
    return value


def _float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise LayoutError(f"not a number: {text!r}") from None


def _size(text: str) -> tuple[float, float]:
    parts = text.split(";")
    if len(parts) == 1:
        width = _float(parts[0])
        return (width, width)
    if len(parts) == 2:
        return (_float(parts[0]), _float(parts[1]))
    raise LayoutError(f"bad key size: {text!r}")


def _key(element: ET.Element) -> KeyDef:
    try:
        shape = shape_type(_required(element, "shape"))
        types = (key_type(_required(element, "type")),)
        values = [
            KeyValue(
                text=value.text or "",
                when=key_type(_required(value, "when")),
                draw=_bool(value.get("draw")),
                newline=_bool(value.get("newline")),
            )
            for value in element.findall("value")
        ]
    except LayoutError:
        raise
    except ValueError as exc:
        raise LayoutError(str(exc)) from exc
    index = element.get("homeindex")
    if index is not None:
        try:
            home_index: int | None = int(index)
        except ValueError:
            raise LayoutError(f"bad home index: {index!r}") from None
    else:
        home_index = None
    return KeyDef(
        shape=shape,
        types=types,
        home_key=_bool(element.get("homekey")),
        size=_size(element.get("size", "1")),
        home_index=home_index,
        values=values,
    )


def parse_layout(text: str) -> Layout:
    """Read a layout from its XML document."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise LayoutError(f"malformed layout: {exc}") from exc
    if root.tag != "layout":
        raise LayoutError(f"expected <layout>, got <{root.tag}>")
    rows = [
        Row(
            scale=_float(row.get("scale", "1.0")),
            keys=[_key(key) for key in row.findall("key")],
        )
        for row in root.findall("row")
    ]
    return Layout(
        version=root.get("version", "1.0"),
        horizontal_gap=_float(_required(root, "horizgap")),
        vertical_gap=_float(_required(root, "vertgap")),
        left_to_right=_bool(root.get("ltr"), default=True),
        rows=rows,
    )


def _char_key(
    normal: str,
    shifted: str,
    shift: KeyType,
    home_index: int | None,
    drawn: bool,
    home: bool = False,
    shape: ShapeType = ShapeType.SQUARE,
    size: tuple[float, float] = (1.0, 1.0),
) -> KeyDef:
    return KeyDef(
        shape=shape,
        types=(KeyType.NORMAL,),
        home_key=home,
        size=size,
        home_index=home_index,
        values=[
            KeyValue(shifted, shift, draw=True),
            KeyValue(normal, KeyType.NORMAL, draw=drawn, newline=drawn),
        ],
    )


def _special(kind: KeyType, width: float) -> KeyDef:
    return KeyDef(shape=ShapeType.RECT, types=(kind,), size=(width, 1.0))


def _run(
    normals: str, shifteds: str, indexes: list[int | None], drawn: bool,
    right_count: int, home: set[str] = frozenset(),
) -> list[KeyDef]:
    return [
        _char_key(
            normal,
            shifted,
            KeyType.RIGHTSHIFT if position < right_count else KeyType.LEFTSHIFT,
            None if normal in home else index,
            drawn,
            home=normal in home,
        )
        for position, (normal, shifted, index) in enumerate(
            zip(normals, shifteds, indexes)
        )
    ]


def us_english() -> Layout:
    """The built-in US English layout."""
    left = KeyType.LEFTSHIFT
    number_row = _run(
        "`1234567890-=", "~!@#$%^&*()_+",
        [29, 29, 30, 31, 31, 32, 32, 35, 35, 36, 37, 37, 38], True, 7,
    ) + [_special(KeyType.BACKSPACE, 2.3)]
    top_row = (
        [_special(KeyType.TAB, 1.65)]
        + _run("qwertyuiop", "QWERTYUIOP",
               [29, 30, 31, 32, 32, 35, 35, 36, 37, 38], False, 5)
        + [
            _char_key("[", "{", left, 38, True),
            _char_key("]", "}", left, 38, True),
            _char_key("\\", "|", left, 38, True,
                      shape=ShapeType.RECT, size=(1.65, 1.0)),
        ]
    )
    home_row = (
        [_special(KeyType.CAPSLOCK, 2.1)]
        + _run("asdfghjkl", "ASDFGHJKL",
               [None, None, None, None, 32, 35, None, None, None], False, 5,
               home=set("asdfjkl"))
        + [
            _char_key(";", ":", left, None, True, home=True),
            _char_key("'", '"', left, 38, True),
            _special(KeyType.ENTER, 2.3),
        ]
    )
    bottom_row = (
        [_special(KeyType.LEFTSHIFT, 2.8)]
        + _run("zxcvbnm", "ZXCVBNM", [29, 30, 31, 32, 32, 35, 35], False, 5)
        + [
            _char_key(",", "<", left, 36, True),
            _char_key(".", ">", left, 37, True),
            _char_key("/", "?", left, 38, True),
            _special(KeyType.RIGHTSHIFT, 2.7),
        ]
    )
    space = KeyDef(
        shape=ShapeType.RECT,
        types=(KeyType.NORMAL,),
        size=(10.5, 1.0),
        values=[KeyValue(" ", KeyType.NORMAL, draw=False)],
    )
    space_row = [
        _special(KeyType.CONTROL, 1.425),
        _special(KeyType.ALT, 1.425),
        space,
        _special(KeyType.ALT, 1.425),
        _special(KeyType.CONTROL, 1.425),
    ]
    return Layout(
        version="1.0",
        horizontal_gap=0.1,
        vertical_gap=0.1,
        left_to_right=True,
        rows=[Row(1.0, keys) for keys in
              (number_row, top_row, home_row, bottom_row, space_row)],
    )