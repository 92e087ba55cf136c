"""plotly-wire - typed Plotly figure nodes and their wire encoding."""

from __future__ import annotations

import logging

from plotly_wire.api import encode, to_json, wire_keys
from plotly_wire.encoding import EncoderConfig, NodeEncoder
from plotly_wire.errors import SchemaError
from plotly_wire.flags import FLAG_SEPARATOR, combine_flags, wire_flags
from plotly_wire.protocols import Trace
from plotly_wire.schema import Config, Figure, Frame, Layout, is_node, node

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "FLAG_SEPARATOR",
    "Config",
    "EncoderConfig",
    "Figure",
    "Frame",
    "Layout",
    "NodeEncoder",
    "SchemaError",
    "Trace",
    "combine_flags",
    "encode",
    "is_node",
    "node",
    "to_json",
    "wire_flags",
    "wire_keys",
]
