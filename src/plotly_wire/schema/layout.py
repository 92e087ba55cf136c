"""Figure layout: ``Layout`` and the components hanging off it."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Flag, StrEnum, auto
from typing import Any, ClassVar

from plotly_wire.flags import wire_flags
from plotly_wire.schema.axes import XAxis, YAxis
from plotly_wire.schema.common import Font, HoverLabel, Title
from plotly_wire.schema.enums import (
    HorizontalAlign,
    Orientation,
    VerticalAlign,
    XAnchor,
    YAnchor,
)
from plotly_wire.schema.node import node
from plotly_wire.schema.scene import Scene

__all__ = [
    "Annotation",
    "ArrowSide",
    "ClickMode",
    "DragMode",
    "HoverMode",
    "ItemClick",
    "ItemSizing",
    "Layout",
    "Legend",
    "Margin",
    "Shape",
    "ShapeLayer",
    "ShapeLine",
    "ShapeType",
    "TraceOrder",
]


class ItemSizing(StrEnum):
    TRACE = "trace"
    CONSTANT = "constant"


class ItemClick(StrEnum):
    """What clicking a legend item does; ``DISABLED`` turns clicks off."""

    TOGGLE = "toggle"
    TOGGLE_OTHERS = "toggleothers"
    DISABLED = "false"


class HoverMode(StrEnum):
    X = "x"
    Y = "y"
    CLOSEST = "closest"
    DISABLED = "false"
    X_UNIFIED = "x unified"
    Y_UNIFIED = "y unified"


class DragMode(StrEnum):
    ZOOM = "zoom"
    PAN = "pan"
    SELECT = "select"
    LASSO = "lasso"
    ORBIT = "orbit"
    TURNTABLE = "turntable"
    DISABLED = "false"


class ShapeType(StrEnum):
    CIRCLE = "circle"
    RECT = "rect"
    PATH = "path"
    LINE = "line"


class ShapeLayer(StrEnum):
    BELOW = "below"
    ABOVE = "above"


@wire_flags
class ClickMode(Flag):
    """Interactions triggered by clicking on data points."""

    EVENT = auto()
    SELECT = auto()
    NONE = auto()


@wire_flags
class TraceOrder(Flag):
    """Order in which legend items are listed."""

    REVERSED = auto()
    GROUPED = auto()
    NORMAL = auto()


@wire_flags
class ArrowSide(Flag):
    """Ends of an annotation arrow that get an arrowhead."""

    END = auto()
    START = auto()
    NONE = auto()


@node
class Margin:
    """Figure margins in px.

    With ``auto_expand`` set, Plotly may grow the margins to fit legends,
    colorbars and automargin axes.
    """

    l: float | None = None
    r: float | None = None
    t: float | None = None
    b: float | None = None
    padding: float | None = None
    auto_expand: bool | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "l": "l",
        "r": "r",
        "t": "t",
        "b": "b",
        "padding": "pad",
        "auto_expand": "autoexpand",
    }


@node
class Legend:
    background_color: str | None = None
    border_color: str | None = None
    border_width: float | None = None
    font: Font | None = None
    title: Title | None = None
    orientation: Orientation | None = None
    trace_order: TraceOrder | None = None
    trace_group_gap: float | None = None
    item_sizing: ItemSizing | None = None
    item_click: ItemClick | None = None
    item_double_click: ItemClick | None = None
    x: float | None = None
    x_anchor: XAnchor | None = None
    y: float | None = None
    y_anchor: YAnchor | None = None
    vertical_align: VerticalAlign | None = None
    ui_revision: Any = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "background_color": "bgcolor",
        "border_color": "bordercolor",
        "border_width": "borderwidth",
        "font": "font",
        "title": "title",
        "orientation": "orientation",
        "trace_order": "traceorder",
        "trace_group_gap": "tracegroupgap",
        "item_sizing": "itemsizing",
        "item_click": "itemclick",
        "item_double_click": "itemdoubleclick",
        "x": "x",
        "x_anchor": "xanchor",
        "y": "y",
        "y_anchor": "yanchor",
        "vertical_align": "valign",
        "ui_revision": "uirevision",
    }


@node
class Annotation:
    """Text (optionally with an arrow) placed at a point of the figure.

    ``x_ref``/``y_ref`` are ``"paper"`` or an axis id such as ``"x2"``.
    """

    visible: bool | None = None
    text: str | None = None
    font: Font | None = None
    align: HorizontalAlign | None = None
    vertical_align: VerticalAlign | None = None
    background_color: str | None = None
    opacity: float | None = None
    x: float | str | None = None
    x_ref: str | None = None
    x_anchor: XAnchor | None = None
    y: float | str | None = None
    y_ref: str | None = None
    y_anchor: YAnchor | None = None
    show_arrow: bool | None = None
    arrow_color: str | None = None
    arrow_head: int | None = None
    arrow_side: ArrowSide | None = None
    arrow_width: float | None = None
    ax: float | str | None = None
    ay: float | str | None = None
    name: str | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "visible": "visible",
        "text": "text",
        "font": "font",
        "align": "align",
        "vertical_align": "valign",
        "background_color": "bgcolor",
        "opacity": "opacity",
        "x": "x",
        "x_ref": "xref",
        "x_anchor": "xanchor",
        "y": "y",
        "y_ref": "yref",
        "y_anchor": "yanchor",
        "show_arrow": "showarrow",
        "arrow_color": "arrowcolor",
        "arrow_head": "arrowhead",
        "arrow_side": "arrowside",
        "arrow_width": "arrowwidth",
        "ax": "ax",
        "ay": "ay",
        "name": "name",
    }


@node
class ShapeLine:
    color: str | None = None
    width: float | None = None
    dash: str | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "color": "color",
        "width": "width",
        "dash": "dash",
    }


@node
class Shape:
    visible: bool | None = None
    type: ShapeType | None = None
    layer: ShapeLayer | None = None
    x_ref: str | None = None
    x0: float | str | None = None
    x1: float | str | None = None
    y_ref: str | None = None
    y0: float | str | None = None
    y1: float | str | None = None
    path: str | None = None
    opacity: float | None = None
    line: ShapeLine | None = None
    fill_color: str | None = None
    name: str | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "visible": "visible",
        "type": "type",
        "layer": "layer",
        "x_ref": "xref",
        "x0": "x0",
        "x1": "x1",
        "y_ref": "yref",
        "y0": "y0",
        "y1": "y1",
        "path": "path",
        "opacity": "opacity",
        "line": "line",
        "fill_color": "fillcolor",
        "name": "name",
    }


@node
class Layout:
    """Top-level figure layout.

    ``meta``, ``template`` and ``ui_revision`` are opaque: whatever JSON value
    they hold is written to the document as it is.
    """

    title: Title | None = None
    font: Font | None = None
    show_legend: bool | None = None
    legend: Legend | None = None
    margin: Margin | None = None
    auto_size: bool | None = None
    width: float | None = None
    height: float | None = None
    paper_background_color: str | None = None
    plot_background_color: str | None = None
    separators: str | None = None
    colorway: list[str] | None = None
    hover_mode: HoverMode | None = None
    click_mode: ClickMode | None = None
    drag_mode: DragMode | None = None
    hover_label: HoverLabel | None = None
    x_axis: XAxis | None = None
    y_axis: YAxis | None = None
    scene: Scene | None = None
    annotations: list[Annotation] | None = None
    shapes: list[Shape] | None = None
    meta: Any = None
    template: Any = None
    ui_revision: Any = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "title": "title",
        "font": "font",
        "show_legend": "showlegend",
        "legend": "legend",
        "margin": "margin",
        "auto_size": "autosize",
        "width": "width",
        "height": "height",
        "paper_background_color": "paper_bgcolor",
        "plot_background_color": "plot_bgcolor",
        "separators": "separators",
        "colorway": "colorway",
        "hover_mode": "hovermode",
        "click_mode": "clickmode",
        "drag_mode": "dragmode",
        "hover_label": "hoverlabel",
        "x_axis": "xaxis",
        "y_axis": "yaxis",
        "scene": "scene",
        "annotations": "annotations",
        "shapes": "shapes",
        "meta": "meta",
        "template": "template",
        "ui_revision": "uirevision",
    }
