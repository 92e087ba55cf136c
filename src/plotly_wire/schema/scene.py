"""3D scene: ``layout.scene`` with its camera and three axes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, ClassVar

from plotly_wire.schema.axes import AutoRange, AxisType
from plotly_wire.schema.common import Domain, Font, Title
from plotly_wire.schema.node import node

__all__ = [
    "AspectMode",
    "Camera",
    "CameraProjection",
    "CameraVector",
    "Projection",
    "Scene",
    "SceneAxis",
    "SceneDragMode",
    "SceneHoverMode",
]


class AspectMode(StrEnum):
    AUTO = "auto"
    CUBE = "cube"
    DATA = "data"
    MANUAL = "manual"


class SceneDragMode(StrEnum):
    ORBIT = "orbit"
    TURNTABLE = "turntable"
    ZOOM = "zoom"
    PAN = "pan"
    DISABLED = "false"


class SceneHoverMode(StrEnum):
    CLOSEST = "closest"
    DISABLED = "false"


class CameraProjection(StrEnum):
    PERSPECTIVE = "perspective"
    ORTHOGRAPHIC = "orthographic"


@node
class CameraVector:
    x: float | None = None
    y: float | None = None
    z: float | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {"x": "x", "y": "y", "z": "z"}


@node
class Projection:
    type: CameraProjection | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {"type": "type"}


@node
class Camera:
    """Camera position: ``eye`` is the viewpoint, ``center`` the look-at point."""

    up: CameraVector | None = None
    center: CameraVector | None = None
    eye: CameraVector | None = None
    projection: Projection | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "up": "up",
        "center": "center",
        "eye": "eye",
        "projection": "projection",
    }


@node
class SceneAxis:
    visible: bool | None = None
    title: Title | None = None
    type: AxisType | None = None
    auto_range: AutoRange | None = None
    range: list[Any] | None = None
    num_ticks: int | None = None
    tick_font: Font | None = None
    show_spikes: bool | None = None
    spike_color: str | None = None
    show_background: bool | None = None
    background_color: str | None = None
    show_grid: bool | None = None
    grid_color: str | None = None
    zero_line: bool | None = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "visible": "visible",
        "title": "title",
        "type": "type",
        "auto_range": "autorange",
        "range": "range",
        "num_ticks": "nticks",
        "tick_font": "tickfont",
        "show_spikes": "showspikes",
        "spike_color": "spikecolor",
        "show_background": "showbackground",
        "background_color": "backgroundcolor",
        "show_grid": "showgrid",
        "grid_color": "gridcolor",
        "zero_line": "zeroline",
    }


@node
class Scene:
    background_color: str | None = None
    camera: Camera | None = None
    domain: Domain | None = None
    aspect_mode: AspectMode | None = None
    aspect_ratio: CameraVector | None = None
    x_axis: SceneAxis | None = None
    y_axis: SceneAxis | None = None
    z_axis: SceneAxis | None = None
    drag_mode: SceneDragMode | None = None
    hover_mode: SceneHoverMode | None = None
    ui_revision: Any = None

    WIRE_KEYS: ClassVar[Mapping[str, str]] = {
        "background_color": "bgcolor",
        "camera": "camera",
        "domain": "domain",
        "aspect_mode": "aspectmode",
        "aspect_ratio": "aspectratio",
        "x_axis": "xaxis",
        "y_axis": "yaxis",
        "z_axis": "zaxis",
        "drag_mode": "dragmode",
        "hover_mode": "hovermode",
        "ui_revision": "uirevision",
    }
