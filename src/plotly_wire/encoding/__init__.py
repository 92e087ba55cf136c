"""encoding subpackage - public API for turning node trees into wire documents.

Example::

    from plotly_wire.encoding import NodeEncoder, EncoderConfig
    from plotly_wire.schema import Margin

    encoder = NodeEncoder(EncoderConfig(emit_empty_flags=False))
    encoder.encode(Margin(l=10, auto_expand=True))
    # {"l": 10, "autoexpand": True}
"""

from __future__ import annotations

from plotly_wire.encoding.config import EncoderConfig
from plotly_wire.encoding.encoder import NodeEncoder
from plotly_wire.flags import FLAG_SEPARATOR, combine_flags, wire_flags

__all__ = ["FLAG_SEPARATOR", "EncoderConfig", "NodeEncoder", "combine_flags", "wire_flags"]
