from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from ethicon.model.colour import resolve_shape_colours
from ethicon.model.icon_style import IconStyle
from ethicon.model.shape import Shape

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure


@dataclass
class Icon:
    """Every pipeline output for one identifier.

    An ``Icon`` is normally built by
    :func:`~ethicon.construction.pipeline.generate_icon`; the
    attributes are the intermediate and final products of the
    pipeline, kept together so that renderers and callers can inspect
    any stage.

    Attributes:
        identifier: The hex string the icon was derived from.
        canvas_size: Side of the square canvas the points live in.
        palette: Hex colour chunks, one per potential shape.
        letters: Character to ascending positions, in first-occurrence
            order.
        points: Scaled coordinates, shape ``(len(identifier), 2)``,
            ordered by character then position.
        shapes: Selected shapes in drawing order.
    """

    identifier: str
    canvas_size: int
    palette: list[str] = field(default_factory=list)
    letters: dict[str, list[int]] = field(default_factory=dict)
    points: np.ndarray = field(default_factory=lambda: np.empty((0, 2)))
    shapes: list[Shape] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.points = np.asarray(self.points, dtype=float).reshape(-1, 2)

    @classmethod
    def from_identifier(
        cls,
        identifier: str,
        canvas_size: int | None = None,
        shape_count: int | None = None,
    ) -> Icon:
        """Build an icon for *identifier*.

        See Also:
            :func:`ethicon.construction.pipeline.generate_icon`
        """
        from ethicon.construction.pipeline import generate_icon

        kwargs: dict = {}
        if canvas_size is not None:
            kwargs["canvas_size"] = canvas_size
        if shape_count is not None:
            kwargs["shape_count"] = shape_count
        return generate_icon(identifier, **kwargs)

    @property
    def colours(self) -> list[str]:
        """Fill colour for each shape, in drawing order."""
        return resolve_shape_colours(self.palette, len(self.shapes))

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary."""
        return {
            "identifier": self.identifier,
            "canvas_size": self.canvas_size,
            "palette": list(self.palette),
            "letters": {k: list(v) for k, v in self.letters.items()},
            "points": self.points.tolist(),
            "shapes": [shape.to_dict() for shape in self.shapes],
        }

    @classmethod
    def from_dict(cls, d: dict) -> Icon:
        """Deserialise from a dictionary produced by :meth:`to_dict`."""
        return cls(
            identifier=d["identifier"],
            canvas_size=d["canvas_size"],
            palette=list(d.get("palette", [])),
            letters={k: list(v) for k, v in d.get("letters", {}).items()},
            points=np.array(d.get("points", []), dtype=float),
            shapes=[Shape.from_dict(s) for s in d.get("shapes", [])],
        )

    def render_svg(
        self,
        output: str | Path | None = None,
        *,
        style: IconStyle | None = None,
        **style_kwargs: object,
    ) -> str:
        """Render the icon as an SVG document.

        See Also:
            :func:`ethicon.rendering.svg.render_svg`
        """
        from ethicon.rendering.svg import render_svg

        return render_svg(self, output, style=style, **style_kwargs)

    def render_mpl(
        self,
        output: str | Path | None = None,
        *,
        ax: Axes | None = None,
        style: IconStyle | None = None,
        show: bool | None = None,
        **style_kwargs: object,
    ) -> Figure:
        """Render the icon as a static matplotlib figure.

        Args:
            output: Optional file path to save the figure.  The format
                is inferred from the extension.  Ignored when *ax* is
                provided.
            ax: Optional matplotlib axes to draw into.
            style: An :class:`IconStyle` controlling appearance.  Any
                field name may also be passed as a keyword argument.
            show: Whether to call ``plt.show()``.  Defaults to
                ``True`` when *output* is ``None``.

        Returns:
            The matplotlib :class:`~matplotlib.figure.Figure`.

        See Also:
            :func:`ethicon.rendering.static.render_mpl`
        """
        from ethicon.rendering.static import render_mpl

        return render_mpl(
            self, output, ax=ax, style=style, show=show, **style_kwargs,
        )

    def render_plotly(self, *, style: IconStyle | None = None):
        """Render the icon as an interactive plotly figure.

        See Also:
            :func:`ethicon.render_plotly.render_plotly`
        """
        from ethicon.render_plotly import render_plotly

        return render_plotly(self, style=style)

    def export_png(
        self,
        directory: str | Path = ".",
        *,
        style: IconStyle | None = None,
    ) -> Path:
        """Write ``ethicon-<identifier>.png`` into *directory*.

        See Also:
            :func:`ethicon.rendering.static.export_png`
        """
        from ethicon.rendering.static import export_png

        return export_png(self, directory, style=style)
