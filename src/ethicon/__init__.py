"""ethicon: reproducible geometric icons from hex identifiers.

An identifier such as an account address is turned into a small set of
coloured polygons.  The same identifier always gives the same icon.

Example usage::

    from ethicon import generate_icon

    icon = generate_icon("5aae2d4c8c1e9f6a3b2d7e0f1a4c6b8d9e2f3a5c")
    icon.render_svg("icon.svg")
    icon.export_png("out/")
"""

from ethicon._constants import (
    CANVAS_MARGIN,
    DEFAULT_CANVAS_SIZE,
    DEFAULT_SHAPE_COUNT,
)
from ethicon.construction import (
    compute_coords,
    count_occurrences,
    generate_icon,
    generate_palette,
    load_style,
    normalise_address,
    random_address,
    save_style,
    select_shapes,
)
from ethicon.model import (
    Colour,
    Icon,
    IconStyle,
    Shape,
    ShapeVertex,
    normalise_colour,
    resolve_shape_colours,
)
from ethicon.rendering import export_png, render_mpl, render_svg

__all__ = [
    "CANVAS_MARGIN",
    "Colour",
    "DEFAULT_CANVAS_SIZE",
    "DEFAULT_SHAPE_COUNT",
    "Icon",
    "IconStyle",
    "Shape",
    "ShapeVertex",
    "compute_coords",
    "count_occurrences",
    "export_png",
    "generate_icon",
    "generate_palette",
    "load_style",
    "normalise_address",
    "normalise_colour",
    "random_address",
    "render_mpl",
    "render_svg",
    "resolve_shape_colours",
    "save_style",
    "select_shapes",
]
