"""Rendering: SVG documents and matplotlib figures."""

from ethicon.rendering.static import export_png, render_mpl
from ethicon.rendering.svg import render_svg, shape_path

__all__ = [
    "export_png",
    "render_mpl",
    "render_svg",
    "shape_path",
]
