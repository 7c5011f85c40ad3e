"""Shared test fixtures for ethicon."""

import matplotlib
import pytest

matplotlib.use("Agg")

from ethicon import generate_icon  # noqa: E402


@pytest.fixture
def identifier():
    """A 16-character identifier with four characters used four times each."""
    return "aabbccddaabbccdd"


@pytest.fixture
def icon(identifier):
    """The default icon for :func:`identifier`."""
    return generate_icon(identifier, canvas_size=256, shape_count=3)


@pytest.fixture
def address():
    """A 40-character wallet-style address."""
    return "5aae2d4c8c1e9f6a3b2d7e0f1a4c6b8d9e2f3a5c"
