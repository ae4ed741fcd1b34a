"""Text field state that holds a colour and keeps its text in step."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .color import Color
from .color_names import color_from_string, string_from_color


class ColorLineEdit:
    """A colour edited as text.

    Listeners are called as callback(event, value) where event is one of
    "changed", "edited", "finished" (value is the colour) or "show_alpha"
    (value is the new flag).
    """

    def __init__(self, show_alpha: bool = False) -> None:
        self._show_alpha = show_alpha
        self._color: Color | None = None
        self._listeners: list[Callable[[str, Any], None]] = []
        self.read_only = False
        self.text = ""
        self.set_color(Color(255, 255, 255))

    @property
    def color(self) -> Color:
        return self._color

    @property
    def show_alpha(self) -> bool:
        return self._show_alpha

    def connect(self, callback: Callable[[str, Any], None]) -> None:
        self._listeners.append(callback)

    def _emit(self, event: str, value: Any) -> None:
        for callback in self._listeners:
            callback(event, value)

    def _format(self) -> str:
        return string_from_color(self._color, self._show_alpha)

    def set_color(self, color: Color) -> None:
        if color != self._color:
            self._color = color
            self.text = self._format()
            self._emit("changed", color)

    def set_show_alpha(self, show_alpha: bool) -> None:
        if show_alpha != self._show_alpha:
            self._show_alpha = show_alpha
            self.text = self._format()
            self._emit("show_alpha", show_alpha)

    def text_edited(self, text: str) -> Color | None:
        """The user typed text; adopt it as the colour when it parses."""
        self.text = text
        parsed = color_from_string(text, self._show_alpha)
        if parsed is not None:
            self._color = parsed
            self._emit("edited", parsed)
            self._emit("changed", parsed)
        return parsed

    def editing_finished(self) -> Color:
        """Commit the text, restoring it from the colour if it does not parse."""
        parsed = color_from_string(self.text, self._show_alpha)
        if parsed is not None:
            self._color = parsed
            self._emit("finished", parsed)
            self._emit("changed", parsed)
        else:
            self.text = self._format()
            self._emit("finished", self._color)
        return self._color

    def accepts_drop(self, text: str | Color) -> bool:
        if self.read_only:
            return False
        if isinstance(text, Color):
            return True
        return color_from_string(text, self._show_alpha) is not None

    def drop(self, text: str | Color) -> bool:
        """Take a dropped colour or colour text; True when it was accepted."""
        if self.read_only:
            return False
        color = text if isinstance(text, Color) else color_from_string(text, self._show_alpha)
        if color is None:
            return False
        self.set_color(color)
        return True