# typefaster

The data and calculation core of a touch-typing tutor. It has no user interface and no external dependencies.

## What it contains

- **Key outline geometry** (`typefaster.buttonline`)
  - A `ButtonLine` is one straight edge of a key outline. It runs in a `Direction` (`NORTH`, `EAST`, `SOUTH`, `WEST`) from the end point of the previous line. Consecutive lines share a `ButtonPoint`.
  - `set_length(length)` moves the end point of the line.
  - `resize(width, height)` sets the length from the line's proportion of the key's width (east/west lines) or height (north/south lines). It raises `ValueError` when no proportion was given.
  - `from_x`, `to_x`, `from_y` and `to_y` give the extent of the line.

- **Key kinds** (`typefaster.keys`)
  - `ShapeType` and `KeyType` are integer enumerations.
  - `shape_type(name)` and `key_type(name)` convert the lower-case names used in layout files, such as `"square"` or `"rightshift"`, into members. They raise `ValueError` for any other name.

- **Layouts** (`typefaster.layouts`)
  - `parse_layout(text)` reads an XML layout document into a `Layout` of `Row`, `KeyDef` and `KeyValue` objects. It raises `LayoutError`, a subclass of `ValueError`, for malformed documents.
  - `us_english()` builds the built-in US English layout.
  - `Layout.characters()` lists every typeable character once, in layout order.
  - `Layout.find_key(char)` returns the key that types a character and raises `KeyError` if there is none.

- **Per-character statistics** (`typefaster.charts`)
  - A `KeyStat` records presses (`num`), total time in milliseconds (`total_time`) and misses (`missed`) for one character.
  - `CharChart.calculate(stats)` splits the records into `used` (pressed at least once) and `unused`. Both are ordered by `order_chars`: letters first, lower case before upper case, then by character.
  - For each used record it computes speed and accuracy bar heights on a 300-pixel scale, with red-to-green colours. A 3000 ms average fills the speed bar.
  - It puts up to five of the slowest characters in `slowest` and up to five of the least accurate in `worst`.
  - `set_letters_only(on)` restricts the chart to letters, stores the choice in `preferences` under the chart's heading, and recalculates.

- **Class results** (`typefaster.classchart`)
  - `ClassRoster` holds a teacher's `StudentStats`. Each has attempted, accuracy and speed measures between 0 and 1, and `bar_widths` converts them to pixel widths.
  - `remove_student(name)` drops the first student with that name and rewrites `users/<teacher>/students.txt`. It returns whether a student was removed, and silently ignores write errors.
  - `save()` writes the student names, one per line.
  - `clear()` forgets every loaded student.

## Installation

```
pip install .
```

## Example

```python
from typefaster.layouts import us_english
from typefaster.charts import CharChart, KeyStat

layout = us_english()
print(layout.find_key("a").home_key)   # True
print("".join(layout.characters()))

chart = CharChart()
chart.calculate([
    KeyStat("a", num=10, total_time=4000, missed=2),
    KeyStat("b", num=5, total_time=9000, missed=0),
])
print(chart.slowest, chart.worst)       # ba ab
```

## What it does not do

This package does not provide:

- a typing window or on-screen keyboard, or any drawing of charts;
- lesson generation or lesson files;
- user accounts or logins;
- reading of stored typing results.

It supplies the layout data, the key geometry and the statistics that such parts would use. There is no command to run.

## Tests

```
pip install .[test]
pytest
```