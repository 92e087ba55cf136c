"""Enumerations shared by several node types.

Member values are the literal wire tokens.  Python member names follow Python
conventions and may differ from the token; a few tokens are the *strings*
``"true"``/``"false"`` inherited from the Plotly schema and are kept as
strings rather than turned into booleans.
"""

from __future__ import annotations

from enum import StrEnum


class Visible(StrEnum):
    """Whether a trace or layout component is drawn."""

    VISIBLE = "true"
    HIDDEN = "false"
    LEGEND_ONLY = "legendonly"


class XAnchor(StrEnum):
    AUTO = "auto"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class YAnchor(StrEnum):
    AUTO = "auto"
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class HorizontalAlign(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlign(StrEnum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class Orientation(StrEnum):
    VERTICAL = "v"
    HORIZONTAL = "h"


class ContainerRef(StrEnum):
    """Coordinate system of a title: the whole container or the plotting area."""

    CONTAINER = "container"
    PAPER = "paper"
