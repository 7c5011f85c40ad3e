"""Icon generation entry point."""

from __future__ import annotations

import logging

from ethicon._constants import DEFAULT_CANVAS_SIZE, DEFAULT_SHAPE_COUNT
from ethicon.construction.coordinates import compute_coords
from ethicon.construction.frequency import count_occurrences
from ethicon.construction.palette import generate_palette
from ethicon.construction.shapes import select_shapes
from ethicon.model import Icon, IconStyle

logger = logging.getLogger(__name__)


def generate_icon(
    identifier: str,
    canvas_size: int = DEFAULT_CANVAS_SIZE,
    shape_count: int = DEFAULT_SHAPE_COUNT,
) -> Icon:
    """Derive the icon for *identifier*.

    Runs the full pipeline: palette extraction, frequency indexing,
    coordinate mapping, and shape selection.  The result depends only
    on the three arguments, so repeated calls give identical icons.

    Example usage::

        from ethicon import generate_icon

        icon = generate_icon("aabbccddaabbccdd")
        icon.palette          # ['aabbcc', 'ddaabb']
        len(icon.shapes)      # 3
        icon.render_svg("icon.svg")

    Args:
        identifier: Lowercase hex string, e.g. an account address
            without its ``0x`` prefix.  Uppercase digits are rejected,
            so pass wallet addresses through
            :func:`~ethicon.construction.identifier.normalise_address`
            first.
        canvas_size: Side of the square canvas.  Points are laid out
            in ``[10, canvas_size - 10]``.
        shape_count: Maximum number of shapes.  Zero or negative gives
            an icon with no shapes.

    Returns:
        The :class:`~ethicon.model.Icon` holding every stage's output.

    Raises:
        TypeError: If *identifier* is not a string.
        ValueError: If *identifier* is empty or contains characters
            other than lowercase hex digits, or if *canvas_size* is
            not a positive integer, or if *shape_count* is not an
            integer.
    """
    if not isinstance(identifier, str):
        raise TypeError(
            f"identifier must be a str, got {type(identifier).__name__}"
        )
    if not identifier:
        raise ValueError("identifier must not be empty")
    if isinstance(canvas_size, bool) or not isinstance(canvas_size, int):
        raise ValueError(f"canvas_size must be an integer, got {canvas_size!r}")
    if canvas_size <= 0:
        raise ValueError(f"canvas_size must be positive, got {canvas_size}")
    if isinstance(shape_count, bool) or not isinstance(shape_count, int):
        raise ValueError(f"shape_count must be an integer, got {shape_count!r}")

    logger.debug(
        "Generating icon for %s (canvas_size=%d, shape_count=%d)",
        identifier, canvas_size, shape_count,
    )
    palette = generate_palette(identifier)
    letters = count_occurrences(identifier)
    points = compute_coords(letters, canvas_size)
    shapes = select_shapes(letters, points, shape_count)

    return Icon(
        identifier=identifier,
        canvas_size=canvas_size,
        palette=palette,
        letters=letters,
        points=points,
        shapes=shapes,
    )


def generate_icon_from_style(identifier: str, style: IconStyle) -> Icon:
    """Derive an icon using the canvas size and shape count of *style*."""
    return generate_icon(identifier, style.canvas_size, style.shape_count)
