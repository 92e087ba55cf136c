"""NodeEncoder: converts a configuration node tree into a Plotly wire document.

Walks a node depth-first using the FieldSpec tuple registered by ``@node``:

- absent (``None``) fields contribute no key at all
- keys come from the node type's WIRE_KEYS table, in field declaration order
- enums encode as their literal token, flag sets as ``+``-joined tokens
- nested nodes recurse; a present node with no fields set encodes as ``{}``
- sequences keep their order
- opaque ``Any`` slots keep plain JSON values as they are; nodes, enums,
  flag sets and numpy values found inside them (at any depth of lists and
  dicts) are converted by the same rules

JSON Pointer paths (RFC 6901) are tracked during the walk purely for error
messages, e.g. ``/layout/xaxis/spikemode``.
"""

from __future__ import annotations

import logging
from enum import Enum, Flag
from typing import Any

import numpy as np

from plotly_wire.encoding.config import EncoderConfig
from plotly_wire.flags import combine_flags
from plotly_wire.schema.node import FieldKind, ValueShape, fields_of, is_node

__all__ = ["NodeEncoder"]

log = logging.getLogger(__name__)

_PRIMITIVES = (bool, int, float, str)


class NodeEncoder:
    """Encodes configuration nodes into nested dicts and lists.

    The encoder holds no per-call state: encoding never mutates the node and
    the same instance may be used from several threads at once, as long as no
    thread mutates a node while it is being encoded.

    Example::

        encoder = NodeEncoder()
        encoder.encode(Margin(l=10, auto_expand=True))
        # {"l": 10, "autoexpand": True}
    """

    def __init__(self, config: EncoderConfig | None = None) -> None:
        self._config: EncoderConfig = config if config is not None else EncoderConfig()

    @property
    def config(self) -> EncoderConfig:
        return self._config

    def encode(self, node: Any) -> dict[str, Any]:
        """Encode ``node`` and everything below it.

        Args:
            node: An instance of a ``@node`` type.

        Returns:
            The wire document: a dict containing only explicitly set fields.

        Raises:
            TypeError: If ``node`` is not a node instance, or a field holds a
                value whose type contradicts its declaration.
        """
        if isinstance(node, type) or not is_node(node):
            msg = f"Expected a configuration node instance, got {type(node)!r}"
            raise TypeError(msg)
        document = self._encode_node(node, path="")
        log.debug("encoded %s into %d top-level keys", type(node).__qualname__, len(document))
        return document

    def _encode_node(self, node: Any, path: str) -> dict[str, Any]:
        document: dict[str, Any] = {}
        for spec in fields_of(type(node)):
            value = getattr(node, spec.name)
            if value is None:
                continue
            if (
                spec.shape.kind == FieldKind.FLAGS
                and not self._config.emit_empty_flags
                and isinstance(value, Flag)
                and not value
            ):
                continue
            key_path = f"{path}/{spec.wire_key}"
            document[spec.wire_key] = self._encode_value(value, spec.shape, key_path)
        return document

    def _encode_value(self, value: Any, shape: ValueShape, path: str) -> Any:
        kind = shape.kind

        if kind == FieldKind.ANY:
            return self._encode_opaque(value, path)

        if kind == FieldKind.PRIMITIVE:
            return self._encode_primitive(value, path)

        if kind == FieldKind.ENUM:
            if isinstance(value, Flag) or not isinstance(value, shape.target):
                raise _mismatch(path, shape, value)
            return value.value

        if kind == FieldKind.FLAGS:
            if not isinstance(value, shape.target):
                raise _mismatch(path, shape, value)
            return combine_flags(value)

        if kind == FieldKind.NODE:
            if not is_node(value) or isinstance(value, type) or not isinstance(value, shape.target):
                raise _mismatch(path, shape, value)
            return self._encode_node(value, path)

        if kind == FieldKind.SEQUENCE:
            return self._encode_sequence(value, shape, path)

        # Unreachable while FieldKind and this dispatch stay in sync.
        msg = f"{path}: unhandled field kind {kind!r}"
        raise AssertionError(msg)

    def _encode_primitive(self, value: Any, path: str) -> Any:
        # Enum members subclass str/int; they never belong in a primitive slot.
        if isinstance(value, Enum):
            msg = f"{path}: enum member {value!r} in a primitive field"
            raise TypeError(msg)
        # np.float64 subclasses float, so numpy scalars are checked first.
        if isinstance(value, np.generic):
            if self._config.coerce_numpy:
                return value.item()
            msg = f"{path}: numpy scalar {type(value).__name__} with coerce_numpy disabled"
            raise TypeError(msg)
        if isinstance(value, _PRIMITIVES):
            return value
        msg = f"{path}: expected bool, int, float or str, got {type(value).__name__}"
        raise TypeError(msg)

    def _encode_sequence(self, value: Any, shape: ValueShape, path: str) -> list[Any]:
        if self._config.coerce_numpy and isinstance(value, np.ndarray):
            value = value.tolist()
        # str is a Sequence too, but never a valid list value.
        if not isinstance(value, (list, tuple)):
            msg = f"{path}: expected a list, got {type(value).__name__}"
            raise TypeError(msg)

        item_shape = shape.item
        if item_shape is None:
            msg = f"{path}: sequence field has no item shape"
            raise AssertionError(msg)
        return [
            self._encode_value(item, item_shape, f"{path}/{idx}")
            for idx, item in enumerate(value)
        ]

    def _encode_opaque(self, value: Any, path: str) -> Any:
        """Normalize a value held by an ``Any`` slot.

        Plain JSON values (None, bool, int, float, str) are returned as they
        are.  Nodes encode as documents, flag sets as ``+``-joined tokens and
        enum members as their value.  Lists, tuples and dicts are rebuilt
        with their contents normalized; dict keys are kept.  Anything else
        is returned unchanged for the caller's JSON serializer to handle.
        """
        if is_node(value) and not isinstance(value, type):
            return self._encode_node(value, path)
        # Flag before Enum: every flag set is also an enum member.
        if isinstance(value, Flag):
            return combine_flags(value)
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, (np.generic, np.ndarray)):
            if not self._config.coerce_numpy:
                msg = f"{path}: numpy value {type(value).__name__} with coerce_numpy disabled"
                raise TypeError(msg)
            return value.item() if isinstance(value, np.generic) else value.tolist()
        if isinstance(value, dict):
            return {k: self._encode_opaque(v, f"{path}/{k}") for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._encode_opaque(v, f"{path}/{idx}") for idx, v in enumerate(value)]
        return value


def _mismatch(path: str, shape: ValueShape, value: Any) -> TypeError:
    target = shape.target.__qualname__ if shape.target is not None else shape.kind
    return TypeError(f"{path}: expected {target}, got {type(value).__qualname__}")
