"""Icon style save/load for JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from ethicon.model import IconStyle

_VALID_SECTIONS = frozenset({"icon_style"})


def save_style(path: str | Path, style: IconStyle) -> None:
    """Save an :class:`IconStyle` to a JSON file.

    Only non-default fields are written.  The file is human-readable
    with two-space indentation.

    Args:
        path: Destination file path.
        style: The style to save.
    """
    data = {"icon_style": style.to_dict()}
    Path(path).write_text(json.dumps(data, indent=2) + "\n")


def load_style(path: str | Path) -> IconStyle:
    """Load an :class:`IconStyle` from a JSON file.

    A missing ``"icon_style"`` section gives the default style.

    Args:
        path: Source file path.

    Returns:
        The parsed :class:`IconStyle`.

    Raises:
        ValueError: If the file contains unknown top-level keys or an
            invalid field value.
    """
    data = json.loads(Path(path).read_text())

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in style file: {sorted(unknown)}"
        )

    return IconStyle.from_dict(data.get("icon_style", {}))
