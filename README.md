# chromakit

The state and rules behind colour-picking widgets, with no GUI toolkit
attached. You can drive them from any interface, or test them headless.

- `chromakit.color`: `Color`, a frozen RGBA value with 0–255 channels. It has
  HSV and HSL views (`hsv_hue_f`, `hsv_saturation_f`, `value_f`, ...),
  constructors (`from_rgbf`, `from_hsv`, `from_hsvf`, `from_rgba_int`, and
  `parse` for `#rgb`, `#rrggbb`, `#aarrggbb`, `transparent` and SVG colour
  names) and `name()` for `#rrggbb`. It also has `color_from_hsl`.
- `chromakit.color_names`: `color_from_string` and `string_from_color`. They
  convert between colours and text such as `#ff8000`, `#ff800080`,
  `rgb(255, 128, 0)` and `rgba(255, 128, 0, 128)`. `color_from_string`
  returns `None` for text that is not a colour.
- `chromakit.slider2d`: `Color2DSlider`, a square that maps two HSV
  components to its axes. Each axis takes a `Component` (`HUE`, `SATURATION`
  or `VALUE`). `render()` returns the square as rows of colours.
- `chromakit.line_edit`: `ColorLineEdit`, the text and validation rules of a
  colour entry field. Typed text is adopted when it parses. On
  `editing_finished()`, text that does not parse is restored from the colour.
- `chromakit.palette`: `ColorPalette`, an ordered list of colours, each with an
  optional name. It reads and writes GIMP `.gpl` files. `PaletteFormatError`
  is raised for files that are not GIMP palettes.
- `chromakit.palette_model`: `ColorPaletteModel`, a collection of palettes. It
  loads them from search directories and saves new ones under a save path,
  choosing a free file name when the palette has none.
- `chromakit.gradient`: `GradientEditor`, which edits gradient stops through
  press, drag, release, hover and drop calls. It works in either
  `Orientation`.
- `chromakit.color_list`: `ColorList`, an editable, reorderable list of
  colours.

## Installation

```
pip install chromakit
```

chromakit has no runtime dependencies.

## Examples

Parse and format colours:

```python
from chromakit.color_names import color_from_string, string_from_color

orange = color_from_string("rgb(255, 128, 0)", False)
print(string_from_color(orange, False))      # #ff8000

translucent = color_from_string("#ff800080", True)
print(string_from_color(translucent, True))  # #ff800080
```

Work with GIMP palettes:

```python
from chromakit.color import Color
from chromakit.palette import ColorPalette

palette = ColorPalette([Color.parse("#ff0000"), Color.parse("#00ff00")], "Basics", 2)
palette.append_color(Color.parse("#0000ff"), "Blue")
palette.save("basics.gpl")

again = ColorPalette.from_file("basics.gpl")
print(again.name, again.columns, again.name_at(2))   # Basics 2 Blue
```

When a palette is saved, a colour without a name is written as `Unnamed`.

Manage a palette collection:

```python
from chromakit.palette_model import ColorPaletteModel

model = ColorPaletteModel(["palettes"], "palettes")
model.load()
index = model.index_from_file("palettes/Basics.gpl")
if index is not None:
    print(model.tooltip(index))              # e.g. Basics (3 colors)
```

Edit gradient stops:

```python
from chromakit.color import Color
from chromakit.gradient import GradientEditor, Orientation

editor = GradientEditor(
    [(0.0, Color.parse("#000000")), (1.0, Color.parse("#ffffff"))],
    205, 24, Orientation.HORIZONTAL,
)
editor.press(200, 10)        # selects the stop nearest to the point
editor.drag(102, 10)         # moves it to about 0.5
print(editor.stops[editor.selected][0])
```

Listeners are registered with `connect(callback)`:

- `Color2DSlider` calls `callback(color)` when its colour changes.
- `ColorLineEdit` calls `callback(event, value)`. The event is `"changed"`,
  `"edited"`, `"finished"` or `"show_alpha"`.
- `ColorList` calls `callback(colors)` with a copy of the list after every
  change.

Out-of-range indices raise `IndexError`.

## What it does not do

chromakit draws nothing and has no widgets, windows or dialogs. It does not
grab colours from the screen, and it does not build palettes from images.
`ColorPalette.preview_layout` returns the rectangles of a preview, not an
image.

## Running the tests

```
pip install chromakit[test]
pytest
```