"""Resource converters, widget class trees, standard colormap rules, white points and a Compound Text parser."""

__version__ = "1.2.1"

__all__ = [
    "converters",
    "style_converters",
    "widgets",
    "widget_node",
    "stdcmap",
    "whitepoint",
    "xct",
]