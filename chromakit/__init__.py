"""Toolkit-independent colour models: colours, colour names, palettes, gradients and pickers."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "color_names",
    "slider2d",
    "line_edit",
    "palette",
    "palette_model",
    "gradient",
    "color_list",
]