"""Style resolution shared by the renderers."""

from __future__ import annotations

import types
import typing
from dataclasses import fields, replace
from typing import Any

from ethicon.model import IconStyle

_STYLE_FIELDS = frozenset(f.name for f in fields(IconStyle))
_DEFAULT_ICON_STYLE = IconStyle()

# Fields where ``None`` is a meaningful value (not just "unset").
_NULLABLE_STYLE_FIELDS = frozenset(
    name for name, tp in typing.get_type_hints(IconStyle).items()
    if typing.get_origin(tp) is types.UnionType
    and type(None) in typing.get_args(tp)
)


def _resolve_style(
    style: IconStyle | None,
    **kwargs: Any,
) -> IconStyle:
    """Build an :class:`IconStyle` from an optional base plus overrides.

    Any kwarg whose name matches an ``IconStyle`` field replaces that
    field's value.  Passing ``None`` keeps the base value, except for
    fields where ``None`` means something (``edge_colour``), which
    take it as an explicit override.

    Raises:
        TypeError: If a kwarg name does not match any ``IconStyle`` field.
    """
    unknown = kwargs.keys() - _STYLE_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown style keyword argument(s): {', '.join(sorted(unknown))}"
        )

    s = style if style is not None else replace(_DEFAULT_ICON_STYLE)
    overrides = {
        k: v for k, v in kwargs.items()
        if v is not None or k in _NULLABLE_STYLE_FIELDS
    }
    if overrides:
        s = replace(s, **overrides)
    return s
