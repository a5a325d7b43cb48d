import pytest

from typefaster.keys import KeyType, ShapeType
from typefaster.layouts import (
    KeyDef,
    KeyValue,
    Layout,
    LayoutError,
    Row,
    parse_layout,
    us_english,
)

SAMPLE = (
    '<?xml version="1.0"?>'
    '<layout version="1.0" horizgap="0.1" vertgap="0.2" ltr="false">'
    '<row scale="0.5">'
    '<key shape="square" type="normal" homekey="true" size="1"> <!--29-->'
    '<value when="rightshift" draw="true">A</value>'
    '<value when="normal" draw="false">a</value>'
    "</key>"
    '<key shape="square" type="normal" homekey="false" size="1" homeindex="36">'
    '<value when="leftshift" draw="true"><![CDATA[<]]></value>'
    '<value when="normal" draw="true" newline="true">,</value>'
    "</key>"
    '<key shape="rect" type="backspace" homekey="false" size="2.3;1"></key>'
    "</row>"
    "</layout>"
)


def test_parse_header():
    layout = parse_layout(SAMPLE)
    assert layout.horizontal_gap == 0.1
    assert layout.vertical_gap == 0.2
    assert layout.left_to_right is False
    assert layout.rows[0].scale == 0.5


def test_parse_keys():
    keys = parse_layout(SAMPLE).rows[0].keys
    assert keys[0].home_key is True
    assert keys[0].home_index is None
    assert keys[0].values == [
        KeyValue("A", KeyType.RIGHTSHIFT, draw=True),
        KeyValue("a", KeyType.NORMAL, draw=False),
    ]
    assert keys[1].home_index == 36
    assert keys[1].values[0].text == "<"
    assert keys[1].values[1].newline is True
    assert keys[2] == KeyDef(ShapeType.RECT, (KeyType.BACKSPACE,), size=(2.3, 1.0))


def test_parsed_characters_and_lookup():
    layout = parse_layout(SAMPLE)
    assert layout.characters() == ["A", "a", "<", ","]
    assert layout.find_key(",") is layout.rows[0].keys[1]


def test_find_key_missing_raises():
    with pytest.raises(KeyError):
        parse_layout(SAMPLE).find_key("z")


@pytest.mark.parametrize(
    "text",
    [
        "<layout horizgap='0.1'",
        "<keyboard horizgap='0.1' vertgap='0.1'/>",
        "<layout vertgap='0.1'/>",
        "<layout horizgap='x' vertgap='0.1'/>",
        "<layout horizgap='0.1' vertgap='0.1'><row>"
        "<key shape='blob' type='normal'/></row></layout>",
        "<layout horizgap='0.1' vertgap='0.1'><row>"
        "<key shape='square' type='normal'><value when='shift'>a</value></key>"
        "</row></layout>",
        "<layout horizgap='0.1' vertgap='0.1'><row>"
        "<key shape='square' type='normal' size='1;2;3'/></row></layout>",
        "<layout horizgap='0.1' vertgap='0.1' ltr='yes'/>",
    ],
)
def test_bad_documents_raise(text):
    with pytest.raises(LayoutError):
        parse_layout(text)


def test_layout_error_is_value_error():
    with pytest.raises(ValueError):
        parse_layout("not xml at all <")


def test_us_english_shape():
    layout = us_english()
    assert len(layout.rows) == 5
    assert layout.horizontal_gap == 0.1
    assert layout.left_to_right
    assert all(row.scale == 1.0 for row in layout.rows)


def test_us_english_home_keys():
    layout = us_english()
    for char in "asdfjkl;":
        key = layout.find_key(char)
        assert key.home_key
        assert key.home_index is None
    assert layout.find_key("q").home_index == 29
    assert layout.find_key("g").home_index == 32


def test_us_english_shift_sides():
    layout = us_english()
    for char in "QWERTASDFGZXCVB":
        key = layout.find_key(char)
        assert key.values[0] == KeyValue(char, KeyType.RIGHTSHIFT, draw=True)
    for char in "YUIOPHJKLNM&*<>?":
        assert layout.find_key(char).values[0].when is KeyType.LEFTSHIFT


def test_us_english_characters_unique_and_complete():
    chars = us_english().characters()
    assert len(chars) == len(set(chars))
    for char in "azAZ09 `~\\|\"'&<>":
        assert char in chars


def test_us_english_special_keys():
    layout = us_english()
    backspace = layout.rows[0].keys[-1]
    assert backspace.types == (KeyType.BACKSPACE,)
    assert backspace.size == (2.3, 1.0)
    assert backspace.values == []
    space = layout.find_key(" ")
    assert space.size == (10.5, 1.0)
    assert space.values[0].draw is False


def test_letters_not_drawn_symbols_drawn():
    layout = us_english()
    assert layout.find_key("a").values[1].draw is False
    assert layout.find_key("1").values[1].newline is True


def test_empty_layout_has_no_characters():
    layout = Layout(rows=[Row()])
    assert layout.characters() == []
    with pytest.raises(KeyError):
        layout.find_key("a")