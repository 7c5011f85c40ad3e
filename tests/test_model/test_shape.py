"""Tests for Shape and ShapeVertex."""

import json

import numpy as np
import pytest

from ethicon.model.shape import Shape, ShapeVertex


def _triangle(character="a"):
    return Shape(
        character=character,
        vertices=(
            ShapeVertex((10.0, 20.0), character),
            ShapeVertex((30.0, 40.0), character),
            ShapeVertex((50.0, 60.0), character),
        ),
    )


class TestShape:
    def test_len(self):
        assert len(_triangle()) == 3

    def test_points(self):
        np.testing.assert_allclose(
            _triangle().points, [[10, 20], [30, 40], [50, 60]],
        )

    def test_empty_points_shape(self):
        assert Shape("a", ()).points.shape == (0, 2)

    def test_list_vertices_converted_to_tuple(self):
        shape = Shape("a", [ShapeVertex((1.0, 2.0), "a")])  # type: ignore[arg-type]
        assert isinstance(shape.vertices, tuple)

    def test_mismatched_character_raises(self):
        with pytest.raises(ValueError, match="does not match"):
            Shape("a", (ShapeVertex((1.0, 2.0), "b"),))

    def test_frozen(self):
        shape = _triangle()
        with pytest.raises(AttributeError):
            shape.character = "b"  # type: ignore[misc]

    def test_dict_round_trip(self):
        shape = _triangle()
        d = json.loads(json.dumps(shape.to_dict()))
        assert Shape.from_dict(d) == shape

    def test_vertex_to_dict(self):
        assert ShapeVertex((1.5, 2.5), "f").to_dict() == {
            "point": [1.5, 2.5], "character": "f",
        }
