"""Schema subpackage: the registry of node types and a representative slice of
the Plotly figure schema.

Re-exports:
- node, is_node, fields_of, wire_key, registered_nodes: the node registry
- Layout and its components (Margin, Legend, XAxis, YAxis, Scene, ...)
- Traces (Scatter, FunnelArea, ChoroplethMapbox) and figure-level nodes
"""

from plotly_wire.schema.axes import (
    AutoRange,
    AxisType,
    SpikeMode,
    SpikeSnap,
    TickMode,
    Ticks,
    XAxis,
    YAxis,
)
from plotly_wire.schema.common import Domain, Font, HoverLabel, Padding, Title
from plotly_wire.schema.enums import Visible
from plotly_wire.schema.figure import Config, Figure, Frame
from plotly_wire.schema.layout import (
    Annotation,
    ArrowSide,
    ClickMode,
    DragMode,
    HoverMode,
    ItemClick,
    Layout,
    Legend,
    Margin,
    Shape,
    ShapeLine,
    TraceOrder,
)
from plotly_wire.schema.node import (
    FieldKind,
    FieldSpec,
    fields_of,
    is_node,
    node,
    registered_nodes,
    wire_key,
)
from plotly_wire.schema.scene import Camera, CameraVector, Scene, SceneAxis, SceneDragMode
from plotly_wire.schema.traces import (
    ChoroplethMapbox,
    FunnelArea,
    HoverInfo,
    Scatter,
    ScatterMode,
    TextInfo,
)

__all__ = [
    "Annotation",
    "ArrowSide",
    "AutoRange",
    "AxisType",
    "Camera",
    "CameraVector",
    "ChoroplethMapbox",
    "ClickMode",
    "Config",
    "Domain",
    "DragMode",
    "FieldKind",
    "FieldSpec",
    "Figure",
    "Font",
    "Frame",
    "FunnelArea",
    "HoverInfo",
    "HoverLabel",
    "HoverMode",
    "ItemClick",
    "Layout",
    "Legend",
    "Margin",
    "Padding",
    "Scatter",
    "ScatterMode",
    "Scene",
    "SceneAxis",
    "SceneDragMode",
    "Shape",
    "ShapeLine",
    "SpikeMode",
    "SpikeSnap",
    "TextInfo",
    "TickMode",
    "Ticks",
    "Title",
    "TraceOrder",
    "Visible",
    "XAxis",
    "YAxis",
    "fields_of",
    "is_node",
    "node",
    "registered_nodes",
    "wire_key",
]
