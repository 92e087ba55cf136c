"""Trace Protocol: the structural interface shared by every trace node.

A figure's ``data`` holds traces of many different types (``scatter``,
``funnelarea``, ``choroplethmapbox``, ...).  Trace node types do not inherit
from a common base; any registered node with the attributes below satisfies
the protocol and may be placed in ``Figure.data``.

Example::

    from plotly_wire.protocols import Trace
    from plotly_wire.schema import Scatter

    assert isinstance(Scatter(x=[1, 2], y=[3, 4]), Trace)  # structural conformance
"""

from __future__ import annotations

from typing import Any, ClassVar, Protocol, runtime_checkable

from plotly_wire.schema.node import node_family


@node_family
@runtime_checkable
class Trace(Protocol):
    """Structural protocol for trace nodes.

    - ``type`` is the Plotly trace type token, always encoded.
    - ``ANIMATABLE`` tells whether the trace type supports animated
      transitions between frames; it is class metadata and never encoded.
    """

    ANIMATABLE: ClassVar[bool]

    type: str
    uid: str | None
    name: str | None
    visible: Any
