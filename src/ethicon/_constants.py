"""Shared constants used across the construction and rendering layers."""

DEFAULT_CANVAS_SIZE: int = 256
"""Side length of the square icon canvas."""

DEFAULT_SHAPE_COUNT: int = 3
"""Maximum number of shapes drawn per icon."""

CANVAS_MARGIN: int = 10
"""Margin kept clear on every side of the canvas."""

PALETTE_CHUNK: int = 6
"""Number of identifier characters per palette colour."""

MIN_SHAPE_FREQUENCY: int = 3
"""A character must occur at least this often to become a shape."""

HEX_VALUES: dict[str, int] = {
    c: i for i, c in enumerate("0123456789abcdef")
}
"""Lookup from lowercase hex digit to its integer value."""
