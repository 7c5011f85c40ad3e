"""Palette extraction: identifier -> hex colour chunks."""

from __future__ import annotations

import logging

from ethicon._constants import PALETTE_CHUNK

logger = logging.getLogger(__name__)


def generate_palette(identifier: str) -> list[str]:
    """Split *identifier* into consecutive six-character colour chunks.

    Chunks are taken at offsets ``0, 6, 12, ...``.  A chunk starting at
    offset *i* is kept unless ``len(identifier) - i`` equals
    ``len(identifier) % 6``, which only happens for the trailing
    partial chunk.  So a 16-character identifier gives two colours and
    drops its last four characters, while an identifier shorter than
    six characters gives no colours at all.

    Example::

        >>> generate_palette("aabbccddaabbccdd")
        ['aabbcc', 'ddaabb']

    Args:
        identifier: The hex identifier string.  An empty string gives
            an empty palette.

    Returns:
        List of six-character hex strings, without a ``#`` prefix.
    """
    n = len(identifier)
    remainder = n % PALETTE_CHUNK
    palette = [
        identifier[i:i + PALETTE_CHUNK]
        for i in range(0, n, PALETTE_CHUNK)
        if n - i != remainder
    ]
    logger.debug("Palette of %d colour(s) from %d characters", len(palette), n)
    return palette
