"""Character frequency indexing."""

from __future__ import annotations


def count_occurrences(identifier: str) -> dict[str, list[int]]:
    """Group the positions of *identifier* by character.

    Keys appear in the order each character is first seen, and each
    position list is ascending.  Characters are not validated or
    case-folded; anything in the string becomes its own key.

    Example::

        >>> count_occurrences("aabb")
        {'a': [0, 1], 'b': [2, 3]}

    Args:
        identifier: The string to scan.

    Returns:
        Insertion-ordered mapping from character to positions.
    """
    letters: dict[str, list[int]] = {}
    for i, char in enumerate(identifier):
        letters.setdefault(char, []).append(i)
    return letters
