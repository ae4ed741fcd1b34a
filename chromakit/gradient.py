"""Editing state of a linear gradient: stops that can be picked, moved and dropped."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .color import Color

Stop = tuple[float, Color]

_MARGIN = 2.5
_RELEASE_MARGIN_W = 24
_RELEASE_MARGIN_H = 8


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def _as_color(color: Color | str) -> Color | None:
    if isinstance(color, Color):
        return color
    try:
        return Color.parse(color)
    except ValueError:
        return None


class GradientEditor:
    """Gradient stops laid out across a widget of a given size.

    Selected and highlighted stops are indices, or None when there is none.
    """

    def __init__(
        self,
        stops: Iterable[Stop] | None = None,
        width: int = 100,
        height: int = 24,
        orientation: Orientation = Orientation.HORIZONTAL,
    ) -> None:
        self.width = width
        self.height = height
        self.orientation = orientation
        self._stops: list[Stop] = [(float(p), c) for p, c in stops or ()]
        self._selected: int | None = None
        self._highlighted: int | None = None

    @property
    def stops(self) -> list[Stop]:
        return list(self._stops)

    @property
    def selected(self) -> int | None:
        return self._selected

    @property
    def highlighted(self) -> int | None:
        return self._highlighted

    def set_stops(self, stops: Iterable[Stop]) -> None:
        """Replace all stops and clear the selection."""
        self._selected = self._highlighted = None
        self._stops = [(float(p), c) for p, c in stops]

    def _extent(self) -> int:
        return self.width if self.orientation is Orientation.HORIZONTAL else self.height

    def position_at(self, x: float, y: float) -> float:
        """Gradient position in [0, 1] under a point of the widget."""
        extent = self._extent()
        coord = x if self.orientation is Orientation.HORIZONTAL else y
        if extent <= 5:
            return 0.0
        return max(min((coord - _MARGIN) / (extent - 5), 1.0), 0.0)

    def closest(self, x: float, y: float) -> int | None:
        """Index of the stop nearest to a point, or None when there are no stops."""
        if not self._stops:
            return None
        if len(self._stops) == 1 or self.width <= 5:
            return 0
        pos = self.position_at(x, y)
        i = next(
            (j for j in range(1, len(self._stops) - 1) if self._stops[j][0] >= pos),
            len(self._stops) - 1,
        )
        if self._stops[i][0] - pos < pos - self._stops[i - 1][0]:
            return i
        return i - 1

    def paint_position(self, index: int) -> float:
        """Pixel coordinate along the widget where a stop is drawn."""
        return _MARGIN + self._stops[index][0] * (self.width - 5)

    def press(self, x: float, y: float) -> int | None:
        """Left button pressed: select and highlight the closest stop."""
        self._selected = self._highlighted = self.closest(x, y)
        return self._selected

    def drag(self, x: float, y: float) -> None:
        """Mouse moved with the left button down: move the selected stop."""
        if self._selected is None:
            self.hover(x, y)
            return
        pos = self.position_at(x, y)
        sel = self._selected
        if sel > 0 and pos < self._stops[sel - 1][0]:
            self._stops[sel], self._stops[sel - 1] = self._stops[sel - 1], self._stops[sel]
            sel -= 1
        elif sel < len(self._stops) - 1 and pos > self._stops[sel + 1][0]:
            self._stops[sel], self._stops[sel + 1] = self._stops[sel + 1], self._stops[sel]
            sel += 1
        self._selected = self._highlighted = sel
        self._stops[sel] = (pos, self._stops[sel][1])

    def release(self, x: float, y: float) -> bool:
        """Left button released; a stop dragged off the widget is removed.

        Returns True when a stop was removed.
        """
        if self._selected is None:
            return False
        x_out = x < -_RELEASE_MARGIN_W or x > self.width + _RELEASE_MARGIN_W
        y_out = y < -_RELEASE_MARGIN_H or y > self.height + _RELEASE_MARGIN_H
        horizontal = self.orientation is Orientation.HORIZONTAL
        off = (horizontal and not x_out and y_out) or (not horizontal and x_out and not y_out)
        if len(self._stops) > 1 and off:
            del self._stops[self._selected]
            self._selected = self._highlighted = None
            return True
        return False

    def hover(self, x: float, y: float) -> int | None:
        """Mouse moved without a drag: highlight the closest stop."""
        self._highlighted = self.closest(x, y)
        return self._highlighted

    def leave(self) -> None:
        self._highlighted = None

    def drop(self, x: float, y: float, color: Color | str) -> bool:
        """Insert a dropped colour (or colour text) at a point; True when accepted."""
        parsed = _as_color(color)
        if parsed is None:
            return False
        index = self.closest(x, y)
        if index is None:
            index = len(self._stops)
        self._stops.insert(index, (self.position_at(x, y), parsed))
        self._selected = index
        return True

    def remove_stop(self) -> None:
        """Remove the selected stop, or the last one; at least one stop is kept."""
        if len(self._stops) < 2:
            return
        index = self._selected if self._selected is not None else len(self._stops) - 1
        del self._stops[index]
        self._selected = None
        if self._highlighted is not None and self._highlighted >= len(self._stops):
            self._highlighted = None

    def set_selected_stop(self, stop: int | None) -> None:
        if stop is not None and not 0 <= stop < len(self._stops):
            raise IndexError(f"stop index out of range: {stop}")
        self._selected = stop

    def selected_color(self) -> Color | None:
        if self._selected is None:
            return None
        return self._stops[self._selected][1]

    def set_selected_color(self, color: Color) -> None:
        if self._selected is not None:
            pos = self._stops[self._selected][0]
            self._stops[self._selected] = (pos, color)