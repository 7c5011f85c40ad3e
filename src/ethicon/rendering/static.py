"""Static matplotlib renderer: :func:`render_mpl` and PNG export."""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from ethicon.model import Icon, IconStyle, normalise_colour
from ethicon.rendering._style import _resolve_style

logger = logging.getLogger(__name__)


def _draw_icon(ax: Axes, icon: Icon, style: IconStyle) -> list[Polygon]:
    """Add one closed polygon patch per shape to *ax*.

    The axes is set up to span the icon canvas with the y axis pointing
    down, so points land where they would in an SVG of the same size.
    """
    size = icon.canvas_size
    ax.set_xlim(0, size)
    ax.set_ylim(size, 0)
    ax.set_aspect("equal")
    ax.axis("off")

    if style.edge_colour is not None and style.edge_width > 0:
        edge = normalise_colour(style.edge_colour)
        width = style.edge_width
    else:
        edge = "none"
        width = 0.0

    patches: list[Polygon] = []
    for zorder, (shape, fill) in enumerate(zip(icon.shapes, icon.colours)):
        if len(shape) == 0:
            continue
        patch = Polygon(
            shape.points,
            closed=True,
            facecolor=fill,
            edgecolor=edge,
            linewidth=width,
            alpha=style.alpha,
            zorder=zorder + 1,
        )
        ax.add_patch(patch)
        patches.append(patch)
    return patches


def render_mpl(
    icon: Icon,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    style: IconStyle | None = None,
    show: bool | None = None,
    **style_kwargs: object,
) -> Figure:
    """Render an icon as a static matplotlib figure.

    Shapes are drawn as filled :class:`~matplotlib.patches.Polygon`
    patches in selection order, so later shapes overlap earlier ones.
    The figure is sized to ``icon.canvas_size / dpi`` inches, giving a
    raster of exactly ``canvas_size`` pixels per side.

    Example usage::

        icon = generate_icon("aabbccddaabbccdd")

        # Save to file (no interactive window):
        icon.render_mpl("icon.png")

        # Outlined, translucent shapes:
        icon.render_mpl("icon.pdf", edge_colour="black",
                        edge_width=1.0, alpha=0.7)

        # Render into an existing axes for a gallery:
        fig, axes = plt.subplots(1, 3)
        for ax, icon in zip(axes, icons):
            render_mpl(icon, ax=ax)

    Args:
        icon: The icon to render.
        output: Optional file path to save the figure.  The format is
            inferred from the extension.  Ignored when *ax* is
            provided.
        ax: Optional matplotlib axes to draw into.  The caller keeps
            control of the parent figure; *output* and *show* are
            ignored.
        style: An :class:`IconStyle` controlling visual appearance.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None``, ``False`` when saving.
        **style_kwargs: Any :class:`IconStyle` field name as a keyword
            argument.  Unknown names raise :class:`TypeError`.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.
    """
    resolved = _resolve_style(style, **style_kwargs)
    bg_rgb = normalise_colour(resolved.background)

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        ax.set_facecolor(bg_rgb)
        _draw_icon(ax, icon, resolved)
        return fig

    inches = icon.canvas_size / resolved.dpi
    fig = plt.figure(figsize=(inches, inches), dpi=resolved.dpi)
    fig.set_facecolor(bg_rgb)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_facecolor(bg_rgb)
    _draw_icon(ax, icon, resolved)

    if output is not None:
        fig.savefig(str(output), dpi=resolved.dpi, facecolor=bg_rgb)
        logger.debug("Saved icon %s to %s", icon.identifier, output)

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig


def png_filename(identifier: str) -> str:
    """Return the export file name for *identifier*."""
    return f"ethicon-{identifier}.png"


def export_png(
    icon: Icon,
    directory: str | Path = ".",
    *,
    style: IconStyle | None = None,
) -> Path:
    """Write *icon* as a PNG raster named after its identifier.

    Args:
        icon: The icon to export.
        directory: Existing directory to write into.
        style: Optional appearance settings.

    Returns:
        Path of the written ``ethicon-<identifier>.png`` file.

    Raises:
        FileNotFoundError: If *directory* does not exist.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"export directory not found: {directory}")
    path = directory / png_filename(icon.identifier)
    render_mpl(icon, path, style=style, show=False)
    return path
