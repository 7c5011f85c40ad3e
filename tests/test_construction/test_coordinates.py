"""Tests for coordinate mapping."""

import numpy as np
import pytest

from ethicon.construction.coordinates import compute_coords, rescale
from ethicon.construction.frequency import count_occurrences
from ethicon.construction.identifier import random_address


class TestRescale:
    def test_endpoints(self):
        out = rescale(np.array([0, 15]), 0, 15, 10, 246)
        np.testing.assert_allclose(out, [10.0, 246.0])

    def test_linear(self):
        out = rescale(np.array([5]), 0, 10, 10, 110)
        np.testing.assert_allclose(out, [60.0])

    def test_degenerate_range_gives_midpoint(self):
        out = rescale(np.array([0, 0, 0]), 0, 0, 10, 246)
        np.testing.assert_allclose(out, [128.0, 128.0, 128.0])


class TestComputeCoords:
    def test_shape(self, identifier):
        points = compute_coords(count_occurrences(identifier))
        assert points.shape == (len(identifier), 2)

    def test_rows_follow_character_order(self, identifier):
        points = compute_coords(count_occurrences(identifier), 256)
        # Row 2 is the third position of "a" (raw position 8, value 10).
        assert points[2, 0] == pytest.approx(8 * 236 / 15 + 10)
        assert points[2, 1] == pytest.approx(10 * 236 / 13 + 10)
        # Row 4 is the first position of "b" (raw position 2, value 11).
        assert points[4, 0] == pytest.approx(2 * 236 / 15 + 10)
        assert points[4, 1] == pytest.approx(11 * 236 / 13 + 10)

    def test_extremes_hit_margins(self, identifier):
        points = compute_coords(count_occurrences(identifier), 256)
        assert points[:, 0].min() == pytest.approx(10.0)
        assert points[:, 0].max() == pytest.approx(246.0)
        assert points[:, 1].max() == pytest.approx(246.0)

    def test_y_min_is_margin_only_for_zero_digit(self):
        points = compute_coords(count_occurrences("0f0f"), 100)
        assert points[:, 1].min() == pytest.approx(10.0)
        assert points[:, 1].max() == pytest.approx(90.0)

    @pytest.mark.parametrize("token", ["a", "b", "c", "d", "e"])
    @pytest.mark.parametrize("canvas_size", [64, 256, 512])
    def test_points_within_canvas(self, token, canvas_size):
        identifier = random_address(40, token=token)
        points = compute_coords(count_occurrences(identifier), canvas_size)
        assert np.all(points >= 10.0 - 1e-9)
        assert np.all(points <= canvas_size - 10.0 + 1e-9)

    def test_single_character_is_midpoint(self):
        points = compute_coords(count_occurrences("a"), 256)
        np.testing.assert_allclose(points, [[128.0, 246.0]])

    def test_all_zero_digits_degenerate_y(self):
        points = compute_coords(count_occurrences("0000"), 256)
        np.testing.assert_allclose(points[:, 1], 128.0)
        np.testing.assert_allclose(points[:, 0], [10.0, 88.66666667, 167.33333333, 246.0])

    def test_empty_index(self):
        assert compute_coords({}).shape == (0, 2)

    def test_non_hex_character_raises(self):
        with pytest.raises(ValueError, match="'x' at position 1"):
            compute_coords(count_occurrences("axa"))

    def test_uppercase_raises(self):
        with pytest.raises(ValueError, match="lowercase hex digit"):
            compute_coords(count_occurrences("A"))

    def test_deterministic(self, address):
        letters = count_occurrences(address)
        np.testing.assert_array_equal(
            compute_coords(letters), compute_coords(letters),
        )
