from __future__ import annotations

from dataclasses import dataclass

from ethicon._constants import DEFAULT_CANVAS_SIZE, DEFAULT_SHAPE_COUNT
from ethicon.model._util import _field_defaults
from ethicon.model.colour import Colour, normalise_colour

_COLOUR_FIELDS = frozenset({"background", "edge_colour"})


@dataclass
class IconStyle:
    """Generation and appearance settings for an icon.

    Groups the two pipeline parameters (canvas size and shape count)
    with the visual parameters used by the renderers.  A default
    ``IconStyle()`` gives the classic 256-pixel, three-shape look.

    Attributes:
        canvas_size: Side length of the square canvas.  Coordinates
            are laid out in ``[10, canvas_size - 10]``.
        shape_count: Maximum number of shapes to draw.  Zero or a
            negative value draws none.
        background: Canvas background colour.
        edge_colour: Outline colour for shape polygons, or ``None``
            to draw fills only.
        edge_width: Outline width (canvas units for SVG, points for
            matplotlib).
        alpha: Fill opacity (0 = fully transparent, 1 = opaque).
        dpi: Resolution used by the matplotlib renderer.  The figure
            is sized so that the saved raster is ``canvas_size``
            pixels square.
        precision: Decimal places used for SVG coordinates.
    """

    canvas_size: int = DEFAULT_CANVAS_SIZE
    shape_count: int = DEFAULT_SHAPE_COUNT
    background: Colour = "white"
    edge_colour: Colour | None = None
    edge_width: float = 0.0
    alpha: float = 1.0
    dpi: int = 100
    precision: int = 2

    def __post_init__(self) -> None:
        if isinstance(self.canvas_size, bool) or not isinstance(self.canvas_size, int):
            raise ValueError(
                f"canvas_size must be an integer, got {self.canvas_size!r}"
            )
        if self.canvas_size <= 0:
            raise ValueError(
                f"canvas_size must be positive, got {self.canvas_size}"
            )
        if isinstance(self.shape_count, bool) or not isinstance(self.shape_count, int):
            raise ValueError(
                f"shape_count must be an integer, got {self.shape_count!r}"
            )
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(
                f"alpha must be between 0.0 and 1.0, got {self.alpha}"
            )
        if self.edge_width < 0:
            raise ValueError(
                f"edge_width must be non-negative, got {self.edge_width}"
            )
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")
        if self.precision < 0:
            raise ValueError(
                f"precision must be non-negative, got {self.precision}"
            )
        # Fail early on bad colours rather than at render time.
        normalise_colour(self.background)
        if self.edge_colour is not None:
            normalise_colour(self.edge_colour)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.  Colours are
        normalised to ``[r, g, b]`` lists.
        """
        defaults = _field_defaults(type(self))
        d: dict = {}
        for field_name, default in defaults.items():
            val = getattr(self, field_name)
            if field_name == "background":
                if normalise_colour(val) != normalise_colour(default):
                    d[field_name] = list(normalise_colour(val))
            elif field_name == "edge_colour":
                if val is not None:
                    d[field_name] = list(normalise_colour(val))
            elif val != default:
                d[field_name] = val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> IconStyle:
        """Deserialise from a dictionary.

        Missing fields use their defaults.  Colour lists are converted
        to tuples for type consistency.
        """
        kwargs: dict = {}
        for field_name in _field_defaults(cls):
            if field_name in d:
                val = d[field_name]
                if field_name in _COLOUR_FIELDS and isinstance(val, list):
                    val = tuple(val)
                kwargs[field_name] = val
        return cls(**kwargs)
