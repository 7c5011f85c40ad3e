"""Icon construction: palette, frequency index, coordinates, and shapes."""

from ethicon.construction.coordinates import compute_coords, rescale
from ethicon.construction.frequency import count_occurrences
from ethicon.construction.identifier import normalise_address, random_address
from ethicon.construction.palette import generate_palette
from ethicon.construction.pipeline import generate_icon, generate_icon_from_style
from ethicon.construction.shapes import most_used_characters, select_shapes
from ethicon.construction.styles import load_style, save_style

__all__ = [
    "compute_coords",
    "count_occurrences",
    "generate_icon",
    "generate_icon_from_style",
    "generate_palette",
    "load_style",
    "most_used_characters",
    "normalise_address",
    "random_address",
    "rescale",
    "save_style",
    "select_shapes",
]
