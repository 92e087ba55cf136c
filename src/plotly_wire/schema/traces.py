"""Trace node types.

Every trace declares its Plotly type as a non-init ``type`` field.  Being a
regular field with a constant value it is always present, so it is always
encoded, first, as ``"type"``.  ``ANIMATABLE`` is class metadata and is not
part of the wire document.

Data arrays (``x``, ``y``, ``values``, ``z``, ...) accept lists or numpy
arrays; see ``EncoderConfig.coerce_numpy``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import field
from enum import Flag, StrEnum, auto
from typing import Any, ClassVar

from plotly_wire.flags import wire_flags
from plotly_wire.schema.common import Domain, Font, HoverLabel
from plotly_wire.schema.enums import Visible
from plotly_wire.schema.node import node

__all__ = [
    "ChoroplethHoverInfo",
    "ChoroplethMapbox",
    "ChoroplethMarker",
    "ChoroplethMarkerLine",
    "Fill",
    "FunnelArea",
    "FunnelAreaHoverInfo",
    "FunnelAreaMarker",
    "FunnelAreaMarkerLine",
    "FunnelAreaTitle",
    "HoverInfo",
    "LineShape",
    "Scatter",
    "ScatterLine",
    "ScatterMarker",
    "ScatterMode",
    "TextInfo",
    "TextPosition",
    "TitlePosition",
]


# ---------------------------------------------------------------------------
# scatter
# ---------------------------------------------------------------------------


@wire_flags
class ScatterMode(Flag):
    """Drawing mode of a scatter trace, e.g. ``"lines+markers"``."""

    LINES = auto()
    MARKERS = auto()
    TEXT = auto()
    NONE = auto()


@wire_flags
class HoverInfo(Flag):
    """Trace information shown on hover for cartesian traces."""

    X = auto()
    Y = auto()
    Z = auto()
    TEXT = auto()
    NAME = auto()
    ALL = auto()
    NONE = auto()
    SKIP = auto()


class Fill(StrEnum):
    NONE = "none"
    TO_ZERO_Y = "tozeroy"
    TO_ZERO_X = "tozerox"
    TO_NEXT_Y = "tonexty"
    TO_NEXT_X = "tonextx"
    TO_SELF = "toself"
    TO_NEXT = "tonext"


class LineShape(StrEnum):
    LINEAR = "linear"
    SPLINE = "spline"
    HV = "hv"
    VH = "vh"
    HVH = "hvh"
    VHV = "vhv"


@node
class ScatterLine:
    color: str | None = None
    width: float | None = None
    dash: str | None = None
    shape: LineShape | None = None
    smoothing: float | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "color": "color",
        "width": "width",
        "dash": "dash",
        "shape": "shape",
        "smoothing": "smoothing",
    }


@node
class ScatterMarker:
    """Marker style; ``size`` and ``color`` take a scalar or one value per point."""

    symbol: str | None = None
    size: Any = None
    color: Any = None
    opacity: float | None = None
    line: ScatterLine | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "symbol": "symbol",
        "size": "size",
        "color": "color",
        "opacity": "opacity",
        "line": "line",
    }


@node
class Scatter:
    ANIMATABLE: ClassVar[bool] = True

    type: str = field(default="scatter", init=False)
    visible: Visible | None = None
    show_legend: bool | None = None
    legend_group: str | None = None
    opacity: float | None = None
    name: str | None = None
    uid: str | None = None
    ids: list[str] | None = None
    custom_data: list[Any] | None = None
    meta: Any = None
    x: list[Any] | None = None
    y: list[Any] | None = None
    text: list[str] | None = None
    mode: ScatterMode | None = None
    hover_info: HoverInfo | None = None
    hover_template: str | None = None
    hover_label: HoverLabel | None = None
    line: ScatterLine | None = None
    marker: ScatterMarker | None = None
    connect_gaps: bool | None = None
    fill: Fill | None = None
    fill_color: str | None = None
    x_axis: str | None = None
    y_axis: str | None = None
    ui_revision: Any = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "type": "type",
        "visible": "visible",
        "show_legend": "showlegend",
        "legend_group": "legendgroup",
        "opacity": "opacity",
        "name": "name",
        "uid": "uid",
        "ids": "ids",
        "custom_data": "customdata",
        "meta": "meta",
        "x": "x",
        "y": "y",
        "text": "text",
        "mode": "mode",
        "hover_info": "hoverinfo",
        "hover_template": "hovertemplate",
        "hover_label": "hoverlabel",
        "line": "line",
        "marker": "marker",
        "connect_gaps": "connectgaps",
        "fill": "fill",
        "fill_color": "fillcolor",
        "x_axis": "xaxis",
        "y_axis": "yaxis",
        "ui_revision": "uirevision",
    }


# ---------------------------------------------------------------------------
# funnelarea
# ---------------------------------------------------------------------------


@wire_flags
class TextInfo(Flag):
    """Information shown on the sectors of a funnelarea."""

    LABEL = auto()
    TEXT = auto()
    VALUE = auto()
    PERCENT = auto()
    NONE = auto()


@wire_flags
class FunnelAreaHoverInfo(Flag):
    LABEL = auto()
    TEXT = auto()
    VALUE = auto()
    PERCENT = auto()
    NAME = auto()
    ALL = auto()
    NONE = auto()
    SKIP = auto()


class TextPosition(StrEnum):
    INSIDE = "inside"
    NONE = "none"


class TitlePosition(StrEnum):
    TOP_LEFT = "top left"
    TOP_CENTER = "top center"
    TOP_RIGHT = "top right"


@node
class FunnelAreaMarkerLine:
    color: Any = None
    width: Any = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {"color": "color", "width": "width"}


@node
class FunnelAreaMarker:
    colors: list[Any] | None = None
    line: FunnelAreaMarkerLine | None = None
    colors_source: str | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "colors": "colors",
        "line": "line",
        "colors_source": "colorssrc",
    }


@node
class FunnelAreaTitle:
    text: str | None = None
    font: Font | None = None
    position: TitlePosition | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "text": "text",
        "font": "font",
        "position": "position",
    }


@node
class FunnelArea:
    """Stages of a process drawn as area-encoded trapezoids.

    Part-to-whole like a pie: ``labels``/``values`` name and size the stages,
    ``base_ratio`` sets the bottom width relative to the top.
    """

    ANIMATABLE: ClassVar[bool] = False

    type: str = field(default="funnelarea", init=False)
    visible: Visible | None = None
    show_legend: bool | None = None
    legend_group: str | None = None
    opacity: float | None = None
    name: str | None = None
    uid: str | None = None
    ids: list[str] | None = None
    custom_data: list[Any] | None = None
    meta: Any = None
    hover_label: HoverLabel | None = None
    ui_revision: Any = None
    labels: list[Any] | None = None
    label0: float | None = None
    dlabel: float | None = None
    values: list[float] | None = None
    marker: FunnelAreaMarker | None = None
    text: list[str] | None = None
    hover_text: str | None = None
    scale_group: str | None = None
    text_info: TextInfo | None = None
    text_template: str | None = None
    hover_info: FunnelAreaHoverInfo | None = None
    hover_template: str | None = None
    text_position: TextPosition | None = None
    text_font: Font | None = None
    inside_text_font: Font | None = None
    title: FunnelAreaTitle | None = None
    domain: Domain | None = None
    aspect_ratio: float | None = None
    base_ratio: float | None = None
    labels_source: str | None = None
    values_source: str | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "type": "type",
        "visible": "visible",
        "show_legend": "showlegend",
        "legend_group": "legendgroup",
        "opacity": "opacity",
        "name": "name",
        "uid": "uid",
        "ids": "ids",
        "custom_data": "customdata",
        "meta": "meta",
        "hover_label": "hoverlabel",
        "ui_revision": "uirevision",
        "labels": "labels",
        "label0": "label0",
        "dlabel": "dlabel",
        "values": "values",
        "marker": "marker",
        "text": "text",
        "hover_text": "hovertext",
        "scale_group": "scalegroup",
        "text_info": "textinfo",
        "text_template": "texttemplate",
        "hover_info": "hoverinfo",
        "hover_template": "hovertemplate",
        "text_position": "textposition",
        "text_font": "textfont",
        "inside_text_font": "insidetextfont",
        "title": "title",
        "domain": "domain",
        "aspect_ratio": "aspectratio",
        "base_ratio": "baseratio",
        "labels_source": "labelssrc",
        "values_source": "valuessrc",
    }


# ---------------------------------------------------------------------------
# choroplethmapbox
# ---------------------------------------------------------------------------


@wire_flags
class ChoroplethHoverInfo(Flag):
    LOCATION = auto()
    Z = auto()
    TEXT = auto()
    NAME = auto()
    ALL = auto()
    NONE = auto()
    SKIP = auto()


@node
class ChoroplethMarkerLine:
    color: Any = None
    width: Any = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {"color": "color", "width": "width"}


@node
class ChoroplethMarker:
    line: ChoroplethMarkerLine | None = None
    opacity: Any = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {"line": "line", "opacity": "opacity"}


@node
class ChoroplethMapbox:
    """GeoJSON features on a mapbox map, colored by ``z``.

    ``locations`` are matched against ``feature_id_key`` of the features in
    ``geojson``; ``geojson`` itself is opaque (a URL or a FeatureCollection).
    """

    ANIMATABLE: ClassVar[bool] = False

    type: str = field(default="choroplethmapbox", init=False)
    visible: Visible | None = None
    show_legend: bool | None = None
    name: str | None = None
    uid: str | None = None
    ids: list[str] | None = None
    custom_data: list[Any] | None = None
    meta: Any = None
    selected_points: Any = None
    hover_label: HoverLabel | None = None
    ui_revision: Any = None
    locations: list[Any] | None = None
    z: list[float] | None = None
    geojson: Any = None
    feature_id_key: str | None = None
    below: str | None = None
    text: list[str] | None = None
    hover_text: list[str] | None = None
    marker: ChoroplethMarker | None = None
    hover_info: ChoroplethHoverInfo | None = None
    hover_template: str | None = None
    z_auto: bool | None = None
    z_min: float | None = None
    z_max: float | None = None
    z_middle: float | None = None
    color_scale: Any = None
    auto_color_scale: bool | None = None
    reverse_scale: bool | None = None
    show_scale: bool | None = None
    color_axis: str | None = None
    subplot: str | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "type": "type",
        "visible": "visible",
        "show_legend": "showlegend",
        "name": "name",
        "uid": "uid",
        "ids": "ids",
        "custom_data": "customdata",
        "meta": "meta",
        "selected_points": "selectedpoints",
        "hover_label": "hoverlabel",
        "ui_revision": "uirevision",
        "locations": "locations",
        "z": "z",
        "geojson": "geojson",
        "feature_id_key": "featureidkey",
        "below": "below",
        "text": "text",
        "hover_text": "hovertext",
        "marker": "marker",
        "hover_info": "hoverinfo",
        "hover_template": "hovertemplate",
        "z_auto": "zauto",
        "z_min": "zmin",
        "z_max": "zmax",
        "z_middle": "zmid",
        "color_scale": "colorscale",
        "auto_color_scale": "autocolorscale",
        "reverse_scale": "reversescale",
        "show_scale": "showscale",
        "color_axis": "coloraxis",
        "subplot": "subplot",
    }
