"""An editable, ordered list of colours with move and remove operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .color import Color


class ColorList:
    """Colours in rows that can be appended, removed and reordered.

    Listeners registered with connect() are called with a copy of the
    colour list after every change.
    """

    def __init__(self, colors: Iterable[Color] | None = None) -> None:
        self._colors: list[Color] = list(colors or ())
        self._current_color = Color(0, 0, 0)
        self._listeners: list[Callable[[list[Color]], None]] = []

    @property
    def colors(self) -> list[Color]:
        return list(self._colors)

    @property
    def current_color(self) -> Color:
        """The colour that append() adds."""
        return self._current_color

    def __len__(self) -> int:
        return len(self._colors)

    def __getitem__(self, index: int) -> Color:
        self._check_index(index)
        return self._colors[index]

    def connect(self, callback: Callable[[list[Color]], None]) -> None:
        self._listeners.append(callback)

    def _emit(self) -> None:
        snapshot = list(self._colors)
        for callback in self._listeners:
            callback(list(snapshot))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._colors):
            raise IndexError(f"colour index out of range: {index}")

    def set_colors(self, colors: Iterable[Color]) -> None:
        """Replace every colour."""
        self._colors = list(colors)
        self._emit()

    def set_current_color(self, color: Color) -> None:
        self._current_color = color

    def append(self) -> None:
        """Add the current colour as a new last row."""
        self._colors.append(self._current_color)
        self._emit()

    def remove(self, index: int) -> None:
        self._check_index(index)
        del self._colors[index]
        self._emit()

    def can_move_up(self, index: int) -> bool:
        self._check_index(index)
        return index > 0

    def can_move_down(self, index: int) -> bool:
        self._check_index(index)
        return index < len(self._colors) - 1

    def move_up(self, index: int) -> bool:
        """Swap a row with the one above it; False when it is already first."""
        if not self.can_move_up(index):
            return False
        self.swap(index, index - 1)
        return True

    def move_down(self, index: int) -> bool:
        """Swap a row with the one below it; False when it is already last."""
        if not self.can_move_down(index):
            return False
        self.swap(index, index + 1)
        return True

    def swap(self, a: int, b: int) -> None:
        self._check_index(a)
        self._check_index(b)
        self._colors[a], self._colors[b] = self._colors[b], self._colors[a]
        self._emit()

    def set_color_at(self, index: int, color: Color) -> None:
        self._check_index(index)
        self._colors[index] = color
        self._emit()

    def clear(self) -> None:
        """Remove every row."""
        self._colors.clear()
        self._emit()