"""Interactive plotly renderer."""

from __future__ import annotations

from ethicon.model import Colour, Icon, IconStyle, normalise_colour


def _rgb_string(colour: Colour) -> str:
    """Convert a colour spec to a plotly-compatible ``rgb(r,g,b)`` string."""
    r, g, b = normalise_colour(colour)
    return f"rgb({int(r * 255)}, {int(g * 255)}, {int(b * 255)})"


def _build_traces(icon: Icon, style: IconStyle) -> list:
    """Build one filled, closed scatter trace per non-empty shape."""
    import plotly.graph_objects as go

    traces = []
    for shape, fill in zip(icon.shapes, icon.colours):
        pts = shape.points
        if len(pts) == 0:
            continue
        # Repeat the first vertex so the outline closes.
        x = list(pts[:, 0]) + [pts[0, 0]]
        y = list(pts[:, 1]) + [pts[0, 1]]
        if style.edge_colour is not None and style.edge_width > 0:
            line = dict(color=_rgb_string(style.edge_colour), width=style.edge_width)
        else:
            line = dict(width=0)
        traces.append(go.Scatter(
            x=x,
            y=y,
            mode="lines",
            fill="toself",
            fillcolor=fill,
            opacity=style.alpha,
            line=line,
            name=shape.character,
            hoverinfo="name",
        ))
    return traces


def render_plotly(icon: Icon, *, style: IconStyle | None = None):
    """Render an icon as an interactive plotly figure.

    Each shape becomes a closed, filled ``Scatter`` trace named after
    its character.  The y axis is reversed so the layout matches the
    SVG and matplotlib renderers.

    Args:
        icon: The icon to render.
        style: Appearance settings; ``None`` uses the defaults.

    Returns:
        A plotly ``Figure`` object.

    Raises:
        ImportError: If plotly is not installed.
    """
    try:
        import plotly.graph_objects as go
    except ImportError:
        raise ImportError(
            "plotly is required for render_plotly(). "
            "Install it with: pip install plotly"
        )

    if style is None:
        style = IconStyle()
    size = icon.canvas_size
    bg = _rgb_string(style.background)

    fig = go.Figure(data=_build_traces(icon, style))
    fig.update_layout(
        width=size,
        height=size,
        plot_bgcolor=bg,
        paper_bgcolor=bg,
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
        title=None,
    )
    fig.update_xaxes(range=[0, size], visible=False)
    fig.update_yaxes(
        range=[size, 0], visible=False, scaleanchor="x", scaleratio=1,
    )
    return fig
