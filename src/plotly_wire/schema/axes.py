"""Cartesian axes: ``layout.xaxis`` and ``layout.yaxis``.

``XAxis`` and ``YAxis`` are declared separately even though they share most
attributes: nodes never inherit from each other, and the two differ in their
``side`` vocabulary.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Flag, StrEnum, auto
from typing import Any, ClassVar

from plotly_wire.flags import wire_flags
from plotly_wire.schema.common import Font, Title
from plotly_wire.schema.node import node

__all__ = [
    "AutoRange",
    "AxisType",
    "RangeMode",
    "SpikeMode",
    "SpikeSnap",
    "TickMode",
    "Ticks",
    "XAxis",
    "XAxisSide",
    "YAxis",
    "YAxisSide",
]


class AxisType(StrEnum):
    """Axis type; ``"-"`` lets Plotly infer it from the first trace."""

    INFER = "-"
    LINEAR = "linear"
    LOG = "log"
    DATE = "date"
    CATEGORY = "category"
    MULTICATEGORY = "multicategory"


class AutoRange(StrEnum):
    ENABLED = "true"
    DISABLED = "false"
    REVERSED = "reversed"


class RangeMode(StrEnum):
    NORMAL = "normal"
    TO_ZERO = "tozero"
    NON_NEGATIVE = "nonnegative"


class TickMode(StrEnum):
    AUTO = "auto"
    LINEAR = "linear"
    ARRAY = "array"


class Ticks(StrEnum):
    """Where tick marks are drawn; the empty token hides them."""

    OUTSIDE = "outside"
    INSIDE = "inside"
    NONE = ""


class SpikeSnap(StrEnum):
    DATA = "data"
    CURSOR = "cursor"
    HOVERED_DATA = "hovered data"


class XAxisSide(StrEnum):
    TOP = "top"
    BOTTOM = "bottom"


class YAxisSide(StrEnum):
    LEFT = "left"
    RIGHT = "right"


@wire_flags
class SpikeMode(Flag):
    """How spike lines are drawn from a hovered point."""

    TOAXIS = auto()
    ACROSS = auto()
    MARKER = auto()


@node
class XAxis:
    visible: bool | None = None
    color: str | None = None
    title: Title | None = None
    type: AxisType | None = None
    auto_range: AutoRange | None = None
    range_mode: RangeMode | None = None
    range: list[Any] | None = None
    fixed_range: bool | None = None
    tick_mode: TickMode | None = None
    num_ticks: int | None = None
    tick0: float | str | None = None
    dtick: float | str | None = None
    tick_values: list[Any] | None = None
    tick_text: list[str] | None = None
    ticks: Ticks | None = None
    tick_font: Font | None = None
    tick_format: str | None = None
    show_tick_labels: bool | None = None
    show_spikes: bool | None = None
    spike_color: str | None = None
    spike_thickness: float | None = None
    spike_mode: SpikeMode | None = None
    spike_snap: SpikeSnap | None = None
    show_line: bool | None = None
    line_color: str | None = None
    show_grid: bool | None = None
    grid_color: str | None = None
    zero_line: bool | None = None
    anchor: str | None = None
    side: XAxisSide | None = None
    overlaying: str | None = None
    domain: list[float] | None = None
    position: float | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "visible": "visible",
        "color": "color",
        "title": "title",
        "type": "type",
        "auto_range": "autorange",
        "range_mode": "rangemode",
        "range": "range",
        "fixed_range": "fixedrange",
        "tick_mode": "tickmode",
        "num_ticks": "nticks",
        "tick0": "tick0",
        "dtick": "dtick",
        "tick_values": "tickvals",
        "tick_text": "ticktext",
        "ticks": "ticks",
        "tick_font": "tickfont",
        "tick_format": "tickformat",
        "show_tick_labels": "showticklabels",
        "show_spikes": "showspikes",
        "spike_color": "spikecolor",
        "spike_thickness": "spikethickness",
        "spike_mode": "spikemode",
        "spike_snap": "spikesnap",
        "show_line": "showline",
        "line_color": "linecolor",
        "show_grid": "showgrid",
        "grid_color": "gridcolor",
        "zero_line": "zeroline",
        "anchor": "anchor",
        "side": "side",
        "overlaying": "overlaying",
        "domain": "domain",
        "position": "position",
    }


@node
class YAxis:
    visible: bool | None = None
    color: str | None = None
    title: Title | None = None
    type: AxisType | None = None
    auto_range: AutoRange | None = None
    range_mode: RangeMode | None = None
    range: list[Any] | None = None
    fixed_range: bool | None = None
    tick_mode: TickMode | None = None
    num_ticks: int | None = None
    tick0: float | str | None = None
    dtick: float | str | None = None
    tick_values: list[Any] | None = None
    tick_text: list[str] | None = None
    ticks: Ticks | None = None
    tick_font: Font | None = None
    tick_format: str | None = None
    show_spikes: bool | None = None
    spike_mode: SpikeMode | None = None
    show_grid: bool | None = None
    grid_color: str | None = None
    zero_line: bool | None = None
    zero_line_color: str | None = None
    anchor: str | None = None
    side: YAxisSide | None = None
    overlaying: str | None = None
    domain: list[float] | None = None
    position: float | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "visible": "visible",
        "color": "color",
        "title": "title",
        "type": "type",
        "auto_range": "autorange",
        "range_mode": "rangemode",
        "range": "range",
        "fixed_range": "fixedrange",
        "tick_mode": "tickmode",
        "num_ticks": "nticks",
        "tick0": "tick0",
        "dtick": "dtick",
        "tick_values": "tickvals",
        "tick_text": "ticktext",
        "ticks": "ticks",
        "tick_font": "tickfont",
        "tick_format": "tickformat",
        "show_spikes": "showspikes",
        "spike_mode": "spikemode",
        "show_grid": "showgrid",
        "grid_color": "gridcolor",
        "zero_line": "zeroline",
        "zero_line_color": "zerolinecolor",
        "anchor": "anchor",
        "side": "side",
        "overlaying": "overlaying",
        "domain": "domain",
        "position": "position",
    }
