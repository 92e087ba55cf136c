"""Small node types reused across layout, axes and traces."""

from __future__ import annotations

from collections.abc import Mapping
from typing import ClassVar

from plotly_wire.schema.enums import (
    ContainerRef,
    HorizontalAlign,
    XAnchor,
    YAnchor,
)
from plotly_wire.schema.node import node

__all__ = ["Domain", "Font", "HoverLabel", "Padding", "Title"]


@node
class Font:
    """Font of a text element.

    ``family`` takes an HTML font family (or a comma separated list), ``color``
    any CSS color string.
    """

    family: str | None = None
    size: float | None = None
    color: str | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "family": "family",
        "size": "size",
        "color": "color",
    }


@node
class Padding:
    """Padding in px around a title, measured from the anchored edge."""

    top: float | None = None
    right: float | None = None
    bottom: float | None = None
    left: float | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "top": "t",
        "right": "r",
        "bottom": "b",
        "left": "l",
    }


@node
class Title:
    """Title of the figure, an axis or a legend.

    ``x``/``y`` are in normalized coordinates of ``x_ref``/``y_ref``; the
    anchors pick which edge of the text box sits at that position.
    """

    text: str | None = None
    font: Font | None = None
    x: float | None = None
    y: float | None = None
    x_anchor: XAnchor | None = None
    y_anchor: YAnchor | None = None
    x_ref: ContainerRef | None = None
    y_ref: ContainerRef | None = None
    padding: Padding | None = None
    standoff: float | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "text": "text",
        "font": "font",
        "x": "x",
        "y": "y",
        "x_anchor": "xanchor",
        "y_anchor": "yanchor",
        "x_ref": "xref",
        "y_ref": "yref",
        "padding": "pad",
        "standoff": "standoff",
    }


@node
class HoverLabel:
    """Appearance of hover labels."""

    background_color: str | None = None
    border_color: str | None = None
    font: Font | None = None
    align: HorizontalAlign | None = None
    name_length: int | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "background_color": "bgcolor",
        "border_color": "bordercolor",
        "font": "font",
        "align": "align",
        "name_length": "namelength",
    }


@node
class Domain:
    """Placement of a subplot within the figure, in paper fractions or grid cells."""

    x: list[float] | None = None
    y: list[float] | None = None
    row: int | None = None
    column: int | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "x": "x",
        "y": "y",
        "row": "row",
        "column": "column",
    }
