"""Tests for shape selection."""

import numpy as np
import pytest

from ethicon.construction.coordinates import compute_coords
from ethicon.construction.frequency import count_occurrences
from ethicon.construction.shapes import most_used_characters, select_shapes
from ethicon.model import Shape


def _select(identifier, limit, canvas_size=256):
    letters = count_occurrences(identifier)
    points = compute_coords(letters, canvas_size)
    return letters, points, select_shapes(letters, points, limit)


class TestMostUsedCharacters:
    def test_frequency_threshold(self):
        letters = count_occurrences("aaabbc")
        assert most_used_characters(letters, 3) == ["a"]

    def test_order_is_first_occurrence_not_frequency(self):
        letters = count_occurrences("bbbaaaaa")
        assert most_used_characters(letters, 3) == ["b", "a"]

    def test_limit_truncates(self, identifier):
        letters = count_occurrences(identifier)
        assert most_used_characters(letters, 2) == ["a", "b"]

    @pytest.mark.parametrize("limit", [0, -1, -10])
    def test_non_positive_limit(self, identifier, limit):
        assert most_used_characters(count_occurrences(identifier), limit) == []


class TestSelectShapes:
    def test_cardinality_capped_by_eligible(self):
        # a:5, b:3, c:1
        _, _, shapes = _select("aaaaabbbc", 3)
        assert [s.character for s in shapes] == ["a", "b"]

    def test_limit_one_takes_first_seen(self):
        _, _, shapes = _select("aaaaabbbc", 1)
        assert [s.character for s in shapes] == ["a"]
        _, _, shapes = _select("bbbaaaaac", 1)
        assert [s.character for s in shapes] == ["b"]

    def test_no_eligible_characters(self):
        _, _, shapes = _select("0123456789abcdef", 3)
        assert shapes == []

    def test_zero_limit(self, identifier):
        _, _, shapes = _select(identifier, 0)
        assert shapes == []

    def test_vertex_count_matches_frequency(self):
        letters, _, shapes = _select("aaaaabbbc", 3)
        assert len(shapes[0]) == 5
        assert len(shapes[1]) == 3

    def test_vertices_carry_character(self, identifier):
        _, _, shapes = _select(identifier, 3)
        for shape in shapes:
            assert isinstance(shape, Shape)
            assert all(v.character == shape.character for v in shape.vertices)

    def test_vertices_indexed_by_raw_position(self, identifier):
        letters, points, shapes = _select(identifier, 3)
        a = shapes[0]
        assert a.character == "a"
        # "a" occurs at positions 0, 1, 8, 9 and those rows are used
        # directly, even though row 8 belongs to "c".
        np.testing.assert_allclose(a.points, points[[0, 1, 8, 9]])
        assert a.vertices[2].point == pytest.approx(
            (4 * 236 / 15 + 10, 12 * 236 / 13 + 10)
        )

    def test_lookup_differs_from_true_position(self, identifier):
        _, _, shapes = _select(identifier, 3)
        true_point_for_position_8 = (8 * 236 / 15 + 10, 10 * 236 / 13 + 10)
        assert shapes[0].vertices[2].point != pytest.approx(true_point_for_position_8)

    def test_short_points_raises(self, identifier):
        letters = count_occurrences(identifier)
        with pytest.raises(ValueError, match="rows"):
            select_shapes(letters, np.zeros((3, 2)), 3)
