"""A square that maps two HSV components to its x and y axes."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from .color import Color


class Component(Enum):
    HUE = "hue"
    SATURATION = "saturation"
    VALUE = "value"


class Color2DSlider:
    """Two-dimensional HSV selector; the third component is held fixed."""

    def __init__(self, width: int = 128, height: int = 128) -> None:
        self._width = width
        self._height = height
        self._hsv = {Component.HUE: 1.0, Component.SATURATION: 1.0, Component.VALUE: 1.0}
        self._comp_x = Component.SATURATION
        self._comp_y = Component.VALUE
        self._square: list[list[Color]] | None = None
        self._listeners: list[Callable[[Color], None]] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def hue(self) -> float:
        return self._hsv[Component.HUE]

    @property
    def saturation(self) -> float:
        return self._hsv[Component.SATURATION]

    @property
    def value(self) -> float:
        return self._hsv[Component.VALUE]

    @property
    def component_x(self) -> Component:
        return self._comp_x

    @property
    def component_y(self) -> Component:
        return self._comp_y

    def connect(self, callback: Callable[[Color], None]) -> None:
        """Call callback with the new colour whenever the colour changes."""
        self._listeners.append(callback)

    def _emit(self) -> None:
        color = self.color()
        for callback in self._listeners:
            callback(color)

    def color(self) -> Color:
        return Color.from_hsvf(self.hue, self.saturation, self.value, 1.0)

    def _set(self, component: Component, amount: float) -> None:
        self._hsv[component] = amount
        self._square = None
        self._emit()

    def set_color(self, color: Color) -> None:
        self._hsv[Component.HUE] = color.hsv_hue_f()
        self._hsv[Component.SATURATION] = color.hsv_saturation_f()
        self._hsv[Component.VALUE] = color.value_f()
        self._square = None
        self._emit()

    def set_hue(self, hue: float) -> None:
        self._set(Component.HUE, hue)

    def set_saturation(self, saturation: float) -> None:
        self._set(Component.SATURATION, saturation)

    def set_value(self, value: float) -> None:
        self._set(Component.VALUE, value)

    def set_component_x(self, component: Component) -> None:
        if component != self._comp_x:
            self._comp_x = component
            self._square = None

    def set_component_y(self, component: Component) -> None:
        if component != self._comp_y:
            self._comp_y = component
            self._square = None

    def resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._square = None

    def _pixel(self, xf: float, yf: float) -> Color:
        hsv = dict(self._hsv)
        hsv[self._comp_y] = yf
        hsv[self._comp_x] = xf
        return Color.from_hsvf(
            hsv[Component.HUE], hsv[Component.SATURATION], hsv[Component.VALUE], 1.0
        )

    def render(self) -> list[list[Color]]:
        """The square as rows of colours, top row first."""
        if self._square is None:
            self._square = [
                [self._pixel(x / self._width, 1 - y / self._height) for x in range(self._width)]
                for y in range(self._height)
            ]
        return [list(row) for row in self._square]

    def selector_position(self) -> tuple[float, float]:
        """Where the selector circle is drawn, in pixels."""
        return (
            self._width * self._hsv[self._comp_x],
            self._height * (1 - self._hsv[self._comp_y]),
        )

    def set_color_from_position(self, x: float, y: float) -> None:
        """Update the two axis components from a point in the square."""
        xf = min(max(x / self._width, 0.0), 1.0)
        yf = min(max(1 - y / self._height, 0.0), 1.0)
        self._hsv[self._comp_x] = xf
        self._hsv[self._comp_y] = yf
        self._square = None
        self._emit()