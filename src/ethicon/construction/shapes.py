"""Shape selection: most used characters -> closed polygons."""

from __future__ import annotations

import logging

import numpy as np

from ethicon._constants import MIN_SHAPE_FREQUENCY
from ethicon.model import Shape, ShapeVertex

logger = logging.getLogger(__name__)


def most_used_characters(
    letters: dict[str, list[int]],
    limit: int,
) -> list[str]:
    """Return up to *limit* characters that occur more than twice.

    Order is first-occurrence order; frequency only decides
    eligibility, never rank.  A *limit* of zero or less gives an empty
    list.
    """
    if limit <= 0:
        return []
    eligible = [
        char for char, positions in letters.items()
        if len(positions) >= MIN_SHAPE_FREQUENCY
    ]
    return eligible[:limit]


def select_shapes(
    letters: dict[str, list[int]],
    points: np.ndarray,
    limit: int,
) -> list[Shape]:
    """Build one polygon for each of the most used characters.

    The vertices of a character's shape are looked up as
    ``points[p]`` for each of its raw identifier positions *p*.
    Because *points* is ordered by character and not by position,
    this picks whichever point occupies row *p*; icons are defined by
    that lookup and it must not be changed to a true position match.

    Args:
        letters: Output of
            :func:`~ethicon.construction.frequency.count_occurrences`.
        points: Output of
            :func:`~ethicon.construction.coordinates.compute_coords`.
        limit: Maximum number of shapes.

    Returns:
        Shapes in first-occurrence order of their characters.

    Raises:
        ValueError: If *points* has fewer rows than the identifier
            has positions.
    """
    n_positions = sum(len(v) for v in letters.values())
    points = np.asarray(points, dtype=float)
    if len(points) < n_positions:
        raise ValueError(
            f"points has {len(points)} rows but the index covers "
            f"{n_positions} positions"
        )

    selected = set(most_used_characters(letters, limit))
    shapes = [
        Shape(
            character=char,
            vertices=tuple(
                ShapeVertex(
                    point=(float(points[p, 0]), float(points[p, 1])),
                    character=char,
                )
                for p in positions
            ),
        )
        for char, positions in letters.items()
        if char in selected
    ]
    logger.debug(
        "Selected %d shape(s): %s",
        len(shapes), "".join(s.character for s in shapes),
    )
    return shapes
