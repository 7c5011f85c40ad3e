"""Coordinate mapping: frequency index -> scaled 2-D points."""

from __future__ import annotations

import logging

import numpy as np

from ethicon._constants import CANVAS_MARGIN, DEFAULT_CANVAS_SIZE, HEX_VALUES

logger = logging.getLogger(__name__)


def rescale(
    values: np.ndarray,
    in_min: float,
    in_max: float,
    out_min: float,
    out_max: float,
) -> np.ndarray:
    """Linearly map *values* from ``[in_min, in_max]`` to ``[out_min, out_max]``.

    When the input range is empty (``in_min == in_max``) every value
    maps to the midpoint of the output range instead of dividing by
    zero.
    """
    values = np.asarray(values, dtype=float)
    if in_max == in_min:
        return np.full(values.shape, (out_min + out_max) / 2)
    return (values - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def _letter_pairs(letters: dict[str, list[int]]) -> np.ndarray:
    """Return ``(position, hex value)`` rows in character-then-position order.

    Raises:
        ValueError: If a character is not a lowercase hex digit.
    """
    pairs: list[tuple[int, int]] = []
    for char, positions in letters.items():
        value = HEX_VALUES.get(char)
        if value is None:
            raise ValueError(
                f"character {char!r} at position {positions[0]} is not a "
                f"lowercase hex digit"
            )
        pairs.extend((p, value) for p in positions)
    if not pairs:
        return np.empty((0, 2), dtype=int)
    return np.array(pairs, dtype=int)


def compute_coords(
    letters: dict[str, list[int]],
    canvas_size: int = DEFAULT_CANVAS_SIZE,
) -> np.ndarray:
    """Convert a frequency index into canvas coordinates.

    Each ``(character, position)`` pair becomes one point whose x is
    the position and whose y is the character's hex value, both
    rescaled from ``[0, max]`` into ``[10, canvas_size - 10]``.  Rows
    follow the index order (character first, then position), **not**
    raw position order, so row *p* is generally not the point computed
    for position *p*.  Shape construction relies on exactly that
    layout.

    An axis whose maximum is zero (a one-character identifier, or one
    made only of ``"0"``) collapses to the canvas midpoint.

    Args:
        letters: Output of
            :func:`~ethicon.construction.frequency.count_occurrences`.
        canvas_size: Side of the square canvas.

    Returns:
        Array of shape ``(n_positions, 2)``.

    Raises:
        ValueError: If a key of *letters* is not a lowercase hex digit.
    """
    pairs = _letter_pairs(letters)
    if len(pairs) == 0:
        return np.empty((0, 2))

    lo, hi = CANVAS_MARGIN, canvas_size - CANVAS_MARGIN
    max_x = int(pairs[:, 0].max())
    max_y = int(pairs[:, 1].max())
    if max_x == 0 or max_y == 0:
        logger.info(
            "Degenerate coordinate range (max_x=%d, max_y=%d); "
            "using canvas midpoint", max_x, max_y,
        )

    return np.column_stack([
        rescale(pairs[:, 0], 0, max_x, lo, hi),
        rescale(pairs[:, 1], 0, max_y, lo, hi),
    ])
