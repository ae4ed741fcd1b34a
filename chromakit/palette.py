"""Named, ordered colour palettes stored in the GIMP palette format."""

from __future__ import annotations

import math
import os
import re
from collections import deque
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import NamedTuple, Union

from .color import Color

_HEADER = "GIMP Palette"
_UNNAMED = "Unnamed"
_ENTRY = re.compile(r"\s*(\d+)\s+(\d+)\s+(\d+)(.*)")

ColorEntry = Union[Color, "tuple[Color, str]"]


class PaletteFormatError(ValueError):
    """Raised when a file is not a readable GIMP palette."""


class PreviewCell(NamedTuple):
    """One colour rectangle of a palette preview."""

    x: float
    y: float
    width: float
    height: float
    color: Color


def _unnamed(name: str) -> str:
    return name or _UNNAMED


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _entry(item: ColorEntry) -> tuple[Color, str]:
    if isinstance(item, Color):
        return (item, "")
    color, name = item
    return (color, name)


def _parse_entry(line: str) -> tuple[Color, str]:
    match = _ENTRY.fullmatch(line)
    if not match:
        raise PaletteFormatError(f"malformed palette entry: {line!r}")
    try:
        color = Color(*(int(match.group(i)) for i in (1, 2, 3)))
    except ValueError as exc:
        raise PaletteFormatError(f"malformed palette entry: {line!r}") from exc
    return (color, match.group(4).strip())


class ColorPalette:
    """An ordered list of colours, each with an optional name."""

    def __init__(
        self,
        colors: Iterable[ColorEntry] | None = None,
        name: str = "",
        columns: int = 0,
    ) -> None:
        self._colors: list[tuple[Color, str]] = [_entry(c) for c in colors or ()]
        self._name = name
        self._columns = max(columns, 0)
        self._file_name = ""
        self._dirty = False

    # -- construction -------------------------------------------------

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> ColorPalette:
        palette = cls()
        palette.load(path)
        return palette

    @classmethod
    def from_color_table(cls, table: Iterable[int]) -> ColorPalette:
        palette = cls()
        palette.load_color_table(table)
        return palette

    def copy(self) -> ColorPalette:
        other = ColorPalette(self._colors, self._name, self._columns)
        other._file_name = self._file_name
        other._dirty = self._dirty
        return other

    # -- properties ---------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._dirty = True
        self._name = name

    @property
    def file_name(self) -> str:
        return self._file_name

    @file_name.setter
    def file_name(self, file_name: str) -> None:
        self._dirty = True
        self._file_name = file_name

    @property
    def columns(self) -> int:
        return self._columns

    @columns.setter
    def columns(self, columns: int) -> None:
        columns = max(columns, 0)
        if columns != self._columns:
            self._dirty = True
            self._columns = columns

    @property
    def dirty(self) -> bool:
        return self._dirty

    @dirty.setter
    def dirty(self, dirty: bool) -> None:
        self._dirty = dirty

    @property
    def colors(self) -> list[tuple[Color, str]]:
        return list(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[tuple[Color, str]]:
        return iter(list(self._colors))

    # -- access and editing -------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._colors):
            raise IndexError(f"palette index out of range: {index}")

    def color_at(self, index: int) -> Color:
        self._check_index(index)
        return self._colors[index][0]

    def name_at(self, index: int) -> str:
        self._check_index(index)
        return self._colors[index][1]

    def set_color_at(self, index: int, color: Color, name: str | None = None) -> None:
        """Replace the colour at index, and its name when one is given."""
        self._check_index(index)
        old_color, old_name = self._colors[index]
        self._colors[index] = (color, old_name if name is None else name)
        self._dirty = True

    def set_name_at(self, index: int, name: str) -> None:
        self._check_index(index)
        self._colors[index] = (self._colors[index][0], name)
        self._dirty = True

    def append_color(self, color: Color, name: str = "") -> None:
        self._colors.append((color, name))
        self._dirty = True

    def insert_color(self, index: int, color: Color, name: str = "") -> None:
        if not 0 <= index <= len(self._colors):
            raise IndexError(f"palette index out of range: {index}")
        self._colors.insert(index, (color, name))
        self._dirty = True

    def erase_color(self, index: int) -> None:
        self._check_index(index)
        del self._colors[index]
        self._dirty = True

    def set_colors(self, colors: Iterable[ColorEntry]) -> None:
        """Replace all colours; items are colours or (colour, name) pairs."""
        self._colors = [_entry(c) for c in colors]
        self._dirty = True

    def only_colors(self) -> list[Color]:
        return [color for color, _ in self._colors]

    def load_color_table(self, table: Iterable[int]) -> None:
        """Replace the colours with opaque versions of 0xAARRGGBB values."""
        self._colors = [(Color.from_rgba_int(value).opaque(), "") for value in table]
        self._dirty = True

    def color_table(self) -> list[int]:
        return [color.to_rgba_int() for color, _ in self._colors]

    # -- files --------------------------------------------------------

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read a GIMP palette, replacing the current contents."""
        path = os.fspath(path)
        self._file_name = path
        self._colors = []
        self._columns = 0
        self._dirty = False
        self._name = Path(path).name.split(".", 1)[0]

        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()

        if not lines or lines[0] != _HEADER:
            raise PaletteFormatError(f"{path}: not a GIMP palette")

        pending = deque(lines[1:])
        properties: dict[str, str] = {}
        while pending:
            line = pending.popleft()
            if not line:
                continue
            if line.startswith("#"):
                break
            key, sep, value = line.partition(":")
            if not sep:
                pending.appendleft(line)
                break
            properties[key.lower()] = value.strip()

        self._name = properties.get("name", "")
        self.columns = _to_int(properties.get("columns", ""))

        for line in pending:
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            self._colors.append(_parse_entry(line))

        self._dirty = False

    def save(self, path: str | os.PathLike[str] | None = None) -> str:
        """Write the palette; returns the path written.

        With a path, it becomes the palette's file name. Without one and
        without a file name, the palette is written to '<name>.gpl'.
        """
        if path is not None:
            self.file_name = os.fspath(path)
        filename = self._file_name or _unnamed(self._name) + ".gpl"

        lines = [_HEADER, f"Name: {_unnamed(self._name)}"]
        if self._columns:
            lines.append(f"Columns: {self._columns}")
        lines.append("#")
        lines.extend(
            f"{c.red:3d} {c.green:3d} {c.blue:3d}\t{_unnamed(n)}" for c, n in self._colors
        )
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write("\n".join(lines) + "\n")

        self._dirty = False
        return filename

    # -- preview ------------------------------------------------------

    def preview_layout(self, width: int, height: int) -> list[PreviewCell]:
        """Rectangles that tile a width x height preview, one per colour."""
        if width <= 0 or height <= 0 or not self._colors:
            return []
        count = len(self._colors)
        columns = self._columns or math.ceil(math.sqrt(count * width / height))
        rows = math.ceil(count / columns)
        cell_w = width / columns
        cell_h = height / rows
        return [
            PreviewCell((i % columns) * cell_w, (i // columns) * cell_h, cell_w, cell_h, color)
            for i, (color, _) in enumerate(self._colors)
        ]