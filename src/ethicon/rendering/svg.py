"""SVG renderer: closed ``<path>`` elements, one per shape."""

from __future__ import annotations

import html
from pathlib import Path

from ethicon.model import Icon, IconStyle, Shape, colour_to_hex
from ethicon.rendering._style import _resolve_style

_SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    # Avoid "-0.00" so equal icons always serialise identically.
    if text.startswith("-") and float(text) == 0:
        text = text[1:]
    return text


def shape_path(shape: Shape, precision: int = 2) -> str | None:
    """Return SVG path data tracing *shape* as a closed polygon.

    The path moves to the first vertex, draws straight lines through
    the rest in order, and closes back to the start: ``M x,y L x,y
    ... Z``.  Returns ``None`` for a shape with no vertices.
    """
    if not shape.vertices:
        return None
    coords = [
        f"{_fmt(x, precision)},{_fmt(y, precision)}"
        for x, y in (v.point for v in shape.vertices)
    ]
    return "M" + "L".join(coords) + "Z"


def render_svg(
    icon: Icon,
    output: str | Path | None = None,
    *,
    style: IconStyle | None = None,
    **style_kwargs: object,
) -> str:
    """Render *icon* as a standalone SVG document.

    Shape *i* is filled with palette colour *i* (see
    :func:`~ethicon.model.resolve_shape_colours` for what happens when
    the palette runs short).  The canvas is ``icon.canvas_size``
    square; ``style.canvas_size`` is not used here because the points
    were already laid out for the icon's own canvas.

    Output contains no timestamps or ids, so rendering the same icon
    twice gives byte-identical text.

    Args:
        icon: The icon to draw.
        output: Optional file path to write the SVG to.
        style: An :class:`IconStyle` controlling appearance.
        **style_kwargs: Any :class:`IconStyle` field name as a keyword
            argument.

    Returns:
        The SVG document as a string.
    """
    resolved = _resolve_style(style, **style_kwargs)
    size = icon.canvas_size
    background = colour_to_hex(resolved.background)

    lines = [
        f'<svg xmlns="{_SVG_NS}" width="{size}" height="{size}" '
        f'viewBox="0 0 {size} {size}">',
        f'  <rect width="{size}" height="{size}" fill="{background}"/>',
        '  <g class="shapes">',
    ]

    extra = ""
    if resolved.alpha < 1.0:
        extra += f' fill-opacity="{resolved.alpha:g}"'
    if resolved.edge_colour is not None and resolved.edge_width > 0:
        extra += (
            f' stroke="{colour_to_hex(resolved.edge_colour)}"'
            f' stroke-width="{resolved.edge_width:g}"'
        )

    for shape, fill in zip(icon.shapes, icon.colours):
        d = shape_path(shape, resolved.precision)
        if d is None:
            continue
        lines.append(
            f'    <path class="shape" data-character="{html.escape(shape.character)}" '
            f'd="{d}" fill="{fill}"{extra}/>'
        )

    lines.append("  </g>")
    lines.append("</svg>")
    svg = "\n".join(lines) + "\n"

    if output is not None:
        Path(output).write_text(svg)
    return svg
