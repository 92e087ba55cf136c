"""Figure-level nodes: the figure itself, animation frames and plot config."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from plotly_wire.protocols import Trace
from plotly_wire.schema.layout import Layout
from plotly_wire.schema.node import node

__all__ = ["Config", "Figure", "Frame"]


@node
class Frame:
    """One animation frame.

    ``data`` and ``layout`` have the same format as the figure's own traces
    and layout but are kept opaque here; ``traces`` lists the indices of the
    figure traces that ``data`` updates.
    """

    group: str | None = None
    name: str | None = None
    traces: Any = None
    base_frame: str | None = None
    data: Any = None
    layout: Any = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "group": "group",
        "name": "name",
        "traces": "traces",
        "base_frame": "baseframe",
        "data": "data",
        "layout": "layout",
    }


@node
class Config:
    """Plot configuration passed next to the figure (``Plotly.newPlot(..., config)``).

    Unlike the figure schema, config attributes are camelCase on the wire.
    """

    static_plot: bool | None = None
    editable: bool | None = None
    scroll_zoom: bool | None = None
    double_click: str | None = None
    show_tips: bool | None = None
    display_mode_bar: bool | None = None
    mode_bar_buttons_to_remove: list[str] | None = None
    display_logo: bool | None = None
    responsive: bool | None = None
    locale: str | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "static_plot": "staticPlot",
        "editable": "editable",
        "scroll_zoom": "scrollZoom",
        "double_click": "doubleClick",
        "show_tips": "showTips",
        "display_mode_bar": "displayModeBar",
        "mode_bar_buttons_to_remove": "modeBarButtonsToRemove",
        "display_logo": "displaylogo",
        "responsive": "responsive",
        "locale": "locale",
    }


@node
class Figure:
    """A complete figure: traces, layout, frames and plot config."""

    data: list[Trace] | None = None
    layout: Layout | None = None
    frames: list[Frame] | None = None
    config: Config | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "data": "data",
        "layout": "layout",
        "frames": "frames",
        "config": "config",
    }
