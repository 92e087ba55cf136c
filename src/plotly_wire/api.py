"""Public API functions for plotly-wire.

This module provides the user-facing functions: encode, to_json and
wire_keys. Each encode call creates a fresh NodeEncoder so that no state is
shared between calls.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from plotly_wire.encoding.config import EncoderConfig
from plotly_wire.encoding.encoder import NodeEncoder
from plotly_wire.schema.node import fields_of

__all__ = ["encode", "to_json", "wire_keys"]


def encode(node: Any, config: EncoderConfig | None = None) -> dict[str, Any]:
    """Encode a configuration node into its wire document.

    Args:
        node:   An instance of any ``@node`` type (``Figure``, ``Layout``,
                ``Margin``, a trace, ...).
        config: Encoder options. Defaults to ``EncoderConfig()`` when None.

    Returns:
        A dict holding only the fields that were explicitly set, keyed by
        their Plotly attribute names, with nested nodes as nested dicts.
    """
    return NodeEncoder(config=config).encode(node)


def to_json(node: Any, config: EncoderConfig | None = None, **json_kwargs: Any) -> str:
    """Encode ``node`` and serialize the document with ``json.dumps``.

    Keyword arguments (``indent``, ``allow_nan``, ...) are forwarded to
    ``json.dumps``; errors it raises are not caught.
    """
    return json.dumps(encode(node, config=config), **json_kwargs)


def wire_keys(node_type: type) -> Mapping[str, str]:
    """Return the Field Renaming Table of ``node_type`` in declaration order.

    Raises:
        TypeError: If ``node_type`` is not a registered node type.
    """
    return {spec.name: spec.wire_key for spec in fields_of(node_type)}
