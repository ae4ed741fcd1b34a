"""RGBA colour value with HSV and HSL helpers."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass

_SVG_COLORS = """
aliceblue f0f8ff antiquewhite faebd7 aqua 00ffff aquamarine 7fffd4 azure f0ffff
beige f5f5dc bisque ffe4c4 black 000000 blanchedalmond ffebcd blue 0000ff
blueviolet 8a2be2 brown a52a2a burlywood deb887 cadetblue 5f9ea0 chartreuse 7fff00
chocolate d2691e coral ff7f50 cornflowerblue 6495ed cornsilk fff8dc crimson dc143c
cyan 00ffff darkblue 00008b darkcyan 008b8b darkgoldenrod b8860b darkgray a9a9a9
darkgreen 006400 darkgrey a9a9a9 darkkhaki bdb76b darkmagenta 8b008b
darkolivegreen 556b2f darkorange ff8c00 darkorchid 9932cc darkred 8b0000
darksalmon e9967a darkseagreen 8fbc8f darkslateblue 483d8b darkslategray 2f4f4f
darkslategrey 2f4f4f darkturquoise 00ced1 darkviolet 9400d3 deeppink ff1493
deepskyblue 00bfff dimgray 696969 dimgrey 696969 dodgerblue 1e90ff firebrick b22222
floralwhite fffaf0 forestgreen 228b22 fuchsia ff00ff gainsboro dcdcdc
ghostwhite f8f8ff gold ffd700 goldenrod daa520 gray 808080 grey 808080 green 008000
greenyellow adff2f honeydew f0fff0 hotpink ff69b4 indianred cd5c5c indigo 4b0082
ivory fffff0 khaki f0e68c lavender e6e6fa lavenderblush fff0f5 lawngreen 7cfc00
lemonchiffon fffacd lightblue add8e6 lightcoral f08080 lightcyan e0ffff
lightgoldenrodyellow fafad2 lightgray d3d3d3 lightgreen 90ee90 lightgrey d3d3d3
lightpink ffb6c1 lightsalmon ffa07a lightseagreen 20b2aa lightskyblue 87cefa
lightslategray 778899 lightslategrey 778899 lightsteelblue b0c4de
lightyellow ffffe0 lime 00ff00 limegreen 32cd32 linen faf0e6 magenta ff00ff
maroon 800000 mediumaquamarine 66cdaa mediumblue 0000cd mediumorchid ba55d3
mediumpurple 9370db mediumseagreen 3cb371 mediumslateblue 7b68ee
mediumspringgreen 00fa9a mediumturquoise 48d1cc mediumvioletred c71585
midnightblue 191970 mintcream f5fffa mistyrose ffe4e1 moccasin ffe4b5
navajowhite ffdead navy 000080 oldlace fdf5e6 olive 808000 olivedrab 6b8e23
orange ffa500 orangered ff4500 orchid da70d6 palegoldenrod eee8aa palegreen 98fb98
paleturquoise afeeee palevioletred db7093 papayawhip ffefd5 peachpuff ffdab9
peru cd853f pink ffc0cb plum dda0dd powderblue b0e0e6 purple 800080 red ff0000
rosybrown bc8f8f royalblue 4169e1 saddlebrown 8b4513 salmon fa8072
sandybrown f4a460 seagreen 2e8b57 seashell fff5ee sienna a0522d silver c0c0c0
skyblue 87ceeb slateblue 6a5acd slategray 708090 slategrey 708090 snow fffafa
springgreen 00ff7f steelblue 4682b4 tan d2b48c teal 008080 thistle d8bfd8
tomato ff6347 turquoise 40e0d0 violet ee82ee wheat f5deb3 white ffffff
whitesmoke f5f5f5 yellow ffff00 yellowgreen 9acd32
"""


def _named_colors() -> dict[str, str]:
    words = _SVG_COLORS.split()
    return dict(zip(words[::2], words[1::2]))


_NAMED = _named_colors()


def _check_unit(*values: float) -> None:
    if any(not 0.0 <= v <= 1.0 for v in values):
        raise ValueError(f"colour components must lie in [0, 1]: {values}")


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel in ("red", "green", "blue", "alpha"):
            value = getattr(self, channel)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{channel} must be an integer in [0, 255], got {value!r}")

    @classmethod
    def from_rgbf(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> Color:
        """Build a colour from components in [0, 1]."""
        _check_unit(red, green, blue, alpha)
        return cls(*(round(c * 255) for c in (red, green, blue, alpha)))

    @classmethod
    def from_hsv(cls, hue: int, saturation: int, value: int, alpha: int = 255) -> Color:
        """Build a colour from hue in degrees (or -1) and 0-255 components."""
        if (hue != -1 and not 0 <= hue < 360) or any(
            not 0 <= c <= 255 for c in (saturation, value, alpha)
        ):
            raise ValueError("HSV components out of range")
        return cls.from_hsvf(
            hue / 360 if hue >= 0 else -1.0, saturation / 255, value / 255, alpha / 255
        )

    @classmethod
    def from_hsvf(cls, hue: float, saturation: float, value: float, alpha: float = 1.0) -> Color:
        """Build a colour from HSV components in [0, 1]; a hue of -1 means achromatic."""
        if (hue < 0.0 or hue > 1.0) and hue != -1.0:
            raise ValueError(f"hue must lie in [0, 1] or be -1, got {hue}")
        _check_unit(saturation, value, alpha)
        if hue == -1.0 or saturation == 0.0:
            return cls.from_rgbf(value, value, value, alpha)
        h = 0.0 if hue == 1.0 else hue * 6
        sector = min(int(h), 5)
        frac = h - sector
        p = value * (1 - saturation)
        q = value * (1 - saturation * frac)
        t = value * (1 - saturation * (1 - frac))
        rgb = (
            (value, t, p),
            (q, value, p),
            (p, value, t),
            (p, q, value),
            (t, p, value),
            (value, p, q),
        )[sector]
        return cls.from_rgbf(*rgb, alpha)

    @classmethod
    def from_rgba_int(cls, value: int) -> Color:
        """Build a colour from a 0xAARRGGBB integer."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"not a 32-bit ARGB value: {value!r}")
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, (value >> 24) & 0xFF)

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse '#rgb', '#rrggbb', '#aarrggbb', 'transparent' or an SVG colour name."""
        s = text.strip()
        if s.startswith("#"):
            digits = s[1:]
            if not all(c in string.hexdigits for c in digits):
                raise ValueError(f"invalid colour: {text!r}")
            if len(digits) == 3:
                return cls(*(int(c * 2, 16) for c in digits))
            if len(digits) == 6:
                return cls(*(int(digits[i:i + 2], 16) for i in (0, 2, 4)))
            if len(digits) == 8:
                a, r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4, 6))
                return cls(r, g, b, a)
            raise ValueError(f"invalid colour: {text!r}")
        key = s.lower().replace(" ", "")
        if key == "transparent":
            return cls(0, 0, 0, 0)
        if key in _NAMED:
            return cls.parse("#" + _NAMED[key])
        raise ValueError(f"invalid colour: {text!r}")

    def name(self) -> str:
        """The colour as '#rrggbb'."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def red_f(self) -> float:
        return self.red / 255

    def green_f(self) -> float:
        return self.green / 255

    def blue_f(self) -> float:
        return self.blue / 255

    def alpha_f(self) -> float:
        return self.alpha / 255

    def hsv_hue_f(self) -> float:
        """Hue in [0, 1), or -1 for achromatic colours."""
        r, g, b = self.red, self.green, self.blue
        high, low = max(r, g, b), min(r, g, b)
        delta = high - low
        if delta == 0:
            return -1.0
        if high == r:
            h = ((g - b) / delta) % 6
        elif high == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4
        return h / 6

    def hsv_saturation_f(self) -> float:
        high = max(self.red, self.green, self.blue)
        if high == 0:
            return 0.0
        return (high - min(self.red, self.green, self.blue)) / high

    def value_f(self) -> float:
        return max(self.red, self.green, self.blue) / 255

    def saturation(self) -> int:
        """HSV saturation in [0, 255]."""
        return round(self.hsv_saturation_f() * 255)

    def value(self) -> int:
        """HSV value in [0, 255]."""
        return max(self.red, self.green, self.blue)

    def hsl_hue_f(self) -> float:
        """HSL hue, which equals the HSV hue."""
        return self.hsv_hue_f()

    def opaque(self) -> Color:
        return self.with_alpha(255)

    def with_alpha(self, alpha: int) -> Color:
        return Color(self.red, self.green, self.blue, alpha)

    def to_rgba_int(self) -> int:
        """The colour as a 0xAARRGGBB integer."""
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue


def color_from_hsl(hue: float, sat: float, lig: float, alpha: float = 1.0) -> Color:
    """Build a colour from HSL components in [0, 1]."""
    chroma = (1 - abs(2 * lig - 1)) * sat
    h1 = hue * 6
    x = chroma * (1 - abs(math.fmod(h1, 2) - 1))
    r = g = b = 0.0
    if 0 <= h1 < 1:
        r, g, b = chroma, x, 0.0
    elif h1 < 2:
        r, g, b = x, chroma, 0.0
    elif h1 < 3:
        r, g, b = 0.0, chroma, x
    elif h1 < 4:
        r, g, b = 0.0, x, chroma
    elif h1 < 5:
        r, g, b = x, 0.0, chroma
    elif h1 < 6:
        r, g, b = chroma, 0.0, x
    m = lig - chroma / 2
    return Color.from_rgbf(*(min(max(c + m, 0.0), 1.0) for c in (r, g, b)), alpha)