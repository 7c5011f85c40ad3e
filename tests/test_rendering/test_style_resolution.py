"""Tests for renderer style resolution."""

import pytest

from ethicon.model import IconStyle
from ethicon.rendering._style import _DEFAULT_ICON_STYLE, _resolve_style


class TestResolveStyle:
    def test_none_kwarg_preserves_base_style(self):
        style = IconStyle(alpha=0.8)
        assert _resolve_style(style, alpha=None).alpha == 0.8

    def test_explicit_kwarg_overrides_style(self):
        style = IconStyle(alpha=0.5)
        assert _resolve_style(style, alpha=0.8).alpha == 0.8

    def test_nullable_field_accepts_none(self):
        style = IconStyle(edge_colour="red")
        assert _resolve_style(style, edge_colour=None).edge_colour is None

    def test_unknown_kwarg_raises(self):
        with pytest.raises(TypeError, match="Unknown style keyword"):
            _resolve_style(None, colour="red")

    def test_override_is_validated(self):
        with pytest.raises(ValueError, match="alpha"):
            _resolve_style(None, alpha=3.0)

    def test_default_style_not_mutated_by_caller(self):
        resolved = _resolve_style(None)
        resolved.alpha = 0.1
        assert _DEFAULT_ICON_STYLE.alpha == IconStyle().alpha
