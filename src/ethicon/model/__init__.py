"""Core data model for ethicon: shapes, icons, colours, and styles.

Everything is re-exported here so that ``from ethicon.model import
Shape`` works without knowing the submodule layout.
"""

from ethicon.model.colour import (
    FALLBACK_FILL,
    Colour,
    colour_to_hex,
    normalise_colour,
    palette_fill,
    resolve_shape_colours,
)
from ethicon.model.icon import Icon
from ethicon.model.icon_style import IconStyle
from ethicon.model.shape import Shape, ShapeVertex

__all__ = [
    "FALLBACK_FILL",
    "Colour",
    "Icon",
    "IconStyle",
    "Shape",
    "ShapeVertex",
    "colour_to_hex",
    "normalise_colour",
    "palette_fill",
    "resolve_shape_colours",
]
