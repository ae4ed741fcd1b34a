"""Conversion between colours and the strings a user may type."""

from __future__ import annotations

import re

from .color import Color

_QCOLOR = re.compile(r"(?:#[0-9A-Fa-f]{3}|#[0-9A-Fa-f]{6}|[^\W\d_]+)")
_FUNC_RGB = re.compile(r"rgb\s*\(\s*([0-9]+)\s*,\s*([0-9]+)\s*,\s*([0-9]+)\s*\)")
_HEX_RGBA = re.compile(r"#[0-9A-Fa-f]{8}")
_FUNC_RGBA = re.compile(
    r"rgba?\s*\(\s*([0-9]+)\s*,\s*([0-9]+)\s*,\s*([0-9]+)\s*,\s*([0-9]+)\s*\)"
)


def string_from_color(color: Color, alpha: bool = True) -> str:
    """'#rrggbb', followed by two alpha digits when alpha is shown and not opaque."""
    if not alpha or color.alpha == 255:
        return color.name()
    return f"{color.name()}{color.alpha:02x}"


def _build(*components: int) -> Color | None:
    try:
        return Color(*components)
    except ValueError:
        return None


def color_from_string(text: str, alpha: bool = True) -> Color | None:
    """Parse a colour string; None when the text is not a colour."""
    xs = text.strip()

    if _QCOLOR.fullmatch(xs):
        try:
            return Color.parse(xs)
        except ValueError:
            return None

    match = _FUNC_RGB.fullmatch(xs)
    if match:
        return _build(*(int(g) for g in match.groups()))

    if alpha:
        if _HEX_RGBA.fullmatch(xs):
            return _build(*(int(xs[i:i + 2], 16) for i in (1, 3, 5, 7)))
        match = _FUNC_RGBA.fullmatch(xs)
        if match:
            return _build(*(int(g) for g in match.groups()))

    return None