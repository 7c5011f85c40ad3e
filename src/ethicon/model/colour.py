from __future__ import annotations

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)

#: A colour specification accepted throughout ethicon.
#:
#: Can be any of:
#:
#: - A CSS colour name or hex string (e.g. ``"red"``, ``"#ff0000"``).
#: - A single float for grey (``0.0`` = black, ``1.0`` = white).
#: - An RGB tuple or list with values in ``[0, 1]``
#:   (e.g. ``(1.0, 0.0, 0.0)``).
#:
#: See :func:`normalise_colour` for conversion to a normalised RGB tuple.
Colour = str | float | tuple[float, float, float] | list[float]

#: Fill used for shapes when the palette is empty.
FALLBACK_FILL = "#808080"


def normalise_colour(colour: Colour) -> tuple[float, float, float]:
    """Convert a colour specification to a normalised (r, g, b) tuple.

    Accepts CSS colour names (e.g. ``"red"``), hex strings
    (e.g. ``"#FF0000"``), grey floats (e.g. ``0.7``), or RGB tuples
    (e.g. ``(1.0, 0.3, 0.3)``).

    Args:
        colour: The colour to normalise.

    Returns:
        A tuple of three floats in [0, 1].

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, (int, float)) and not isinstance(colour, bool):
        f = float(colour)
        if not 0.0 <= f <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {f}")
        return (f, f, f)

    if isinstance(colour, (tuple, list)):
        if len(colour) != 3:
            raise ValueError(
                f"RGB sequence must have 3 elements, got {len(colour)}"
            )
        r, g, b = (float(c) for c in colour)
        for name, val in [("r", r), ("g", g), ("b", b)]:
            if not 0.0 <= val <= 1.0:
                raise ValueError(
                    f"RGB component {name} must be in [0, 1], got {val}"
                )
        return (r, g, b)

    if isinstance(colour, str):
        from matplotlib.colors import to_rgb

        try:
            return to_rgb(colour)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}")

    raise ValueError(f"Cannot interpret colour: {colour!r}")


def colour_to_hex(colour: Colour) -> str:
    """Return *colour* as a lowercase ``#rrggbb`` string."""
    from matplotlib.colors import to_hex

    return to_hex(normalise_colour(colour))


def palette_fill(chunk: str) -> str:
    """Turn a six-character palette chunk into a ``#rrggbb`` fill."""
    return "#" + chunk.lower()


def resolve_shape_colours(palette: Sequence[str], n_shapes: int) -> list[str]:
    """Return one ``#rrggbb`` fill per shape.

    Shape *i* takes ``palette[i]``.  When there are more shapes than
    palette entries the palette is cycled, and an empty palette gives
    every shape :data:`FALLBACK_FILL`.

    Args:
        palette: Hex chunks from
            :func:`~ethicon.construction.palette.generate_palette`.
        n_shapes: Number of shapes to colour.

    Returns:
        List of ``n_shapes`` hex colour strings.
    """
    if n_shapes <= 0:
        return []
    if not palette:
        logger.debug("Empty palette, filling %d shape(s) with grey", n_shapes)
        return [FALLBACK_FILL] * n_shapes
    if n_shapes > len(palette):
        logger.debug(
            "Cycling %d palette colour(s) over %d shapes",
            len(palette), n_shapes,
        )
    return [palette_fill(palette[i % len(palette)]) for i in range(n_shapes)]
