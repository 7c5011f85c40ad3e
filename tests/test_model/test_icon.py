"""Tests for the Icon container."""

import json

import numpy as np

from ethicon.model import Icon


class TestIcon:
    def test_colours_cycle_palette(self, icon):
        assert icon.colours == ["#aabbcc", "#ddaabb", "#aabbcc"]

    def test_points_coerced_to_array(self):
        icon = Icon(identifier="a", canvas_size=256, points=[[1, 2]])
        assert isinstance(icon.points, np.ndarray)
        assert icon.points.dtype == float
        assert icon.points.shape == (1, 2)

    def test_empty_defaults(self):
        icon = Icon(identifier="a", canvas_size=256)
        assert icon.points.shape == (0, 2)
        assert icon.shapes == []
        assert icon.colours == []

    def test_to_dict_is_json_serialisable(self, icon):
        d = json.loads(json.dumps(icon.to_dict()))
        assert d["identifier"] == icon.identifier
        assert d["palette"] == ["aabbcc", "ddaabb"]
        assert list(d["letters"]) == ["a", "b", "c", "d"]
        assert len(d["shapes"]) == 3

    def test_dict_round_trip(self, icon):
        restored = Icon.from_dict(json.loads(json.dumps(icon.to_dict())))
        assert restored.identifier == icon.identifier
        assert restored.palette == icon.palette
        assert list(restored.letters) == list(icon.letters)
        np.testing.assert_allclose(restored.points, icon.points)
        assert restored.shapes == icon.shapes
