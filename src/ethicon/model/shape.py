from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ShapeVertex:
    """One corner of a shape polygon.

    Attributes:
        point: Canvas coordinates ``(x, y)``.
        character: The identifier character that owns the shape.
    """

    point: tuple[float, float]
    character: str

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary."""
        return {"point": list(self.point), "character": self.character}


@dataclass(frozen=True)
class Shape:
    """A closed polygon drawn for one frequently used character.

    Vertices are kept in the order they are connected; the polygon is
    closed back to the first vertex when rendered.

    Attributes:
        character: The identifier character this shape represents.
        vertices: Ordered polygon corners.

    Raises:
        ValueError: If a vertex belongs to a different character.
    """

    character: str
    vertices: tuple[ShapeVertex, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))
        for vertex in self.vertices:
            if vertex.character != self.character:
                raise ValueError(
                    f"vertex character {vertex.character!r} does not match "
                    f"shape character {self.character!r}"
                )

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def points(self) -> np.ndarray:
        """Vertex coordinates as an array of shape ``(n_vertices, 2)``."""
        if not self.vertices:
            return np.empty((0, 2))
        return np.array([v.point for v in self.vertices], dtype=float)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary."""
        return {
            "character": self.character,
            "vertices": [v.to_dict() for v in self.vertices],
        }

    @classmethod
    def from_dict(cls, d: dict) -> Shape:
        """Deserialise from a dictionary produced by :meth:`to_dict`."""
        return cls(
            character=d["character"],
            vertices=tuple(
                ShapeVertex(
                    point=(float(v["point"][0]), float(v["point"][1])),
                    character=v["character"],
                )
                for v in d["vertices"]
            ),
        )
