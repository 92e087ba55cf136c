"""The ``@node`` decorator and the registry of configuration node types.

A configuration node is a plain dataclass whose fields are all keyword-only
and default to ``None`` (absent).  Each node type declares its Field Renaming
Table as a ``WIRE_KEYS`` class variable right next to the fields, mirroring
Plotly's attribute names::

    @node
    class Margin:
        l: float | None = None
        padding: float | None = None
        auto_expand: bool | None = None

        WIRE_KEYS: ClassVar[Mapping[str, str]] = {
            "l": "l",
            "padding": "pad",
            "auto_expand": "autoexpand",
        }

Decoration happens at import time and performs every schema check up front:

- the renaming table is total over the fields, has no extra entries and maps
  no two fields to the same wire key
- every field defaults to ``None`` (or is a non-init constant such as a
  trace's ``type``)
- every field annotation classifies into exactly one ``FieldKind``

The resulting ``FieldSpec`` tuple, in declaration order, is what the encoder
walks.  The registry is written only while modules are imported and read-only
afterwards, so it is safe to share across threads.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import types
import typing
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from types import MappingProxyType
from typing import Any, TypeVar

from plotly_wire.errors import SchemaError
from plotly_wire.flags import is_wire_flags
from plotly_wire.schema.naming import KeyNormalizer

__all__ = [
    "FieldKind",
    "FieldSpec",
    "ValueShape",
    "fields_of",
    "is_node",
    "node",
    "node_family",
    "registered_nodes",
    "wire_key",
]

log = logging.getLogger(__name__)

_normalizer = KeyNormalizer()

T = TypeVar("T", bound=type)

_PRIMITIVES: tuple[type, ...] = (bool, int, float, str)


class FieldKind(StrEnum):
    """How a field's value is turned into a wire value.

    - PRIMITIVE -> "primitive" : bool, int, float, str (or a union of them)
    - ANY       -> "any"       : opaque JSON value, normalized recursively
    - ENUM      -> "enum"      : closed set of literal tokens
    - FLAGS     -> "flags"     : combinable options, joined with "+"
    - NODE      -> "node"      : nested configuration node
    - SEQUENCE  -> "sequence"  : ordered list of any of the above
    """

    PRIMITIVE = auto()
    ANY = auto()
    ENUM = auto()
    FLAGS = auto()
    NODE = auto()
    SEQUENCE = auto()


@dataclass(frozen=True, slots=True)
class ValueShape:
    """Classified form of a field annotation.

    Attributes:
        kind:   The FieldKind of the value.
        target: The enum, flag or node class for ENUM/FLAGS/NODE shapes;
                ``None`` otherwise.
        item:   Shape of the elements for SEQUENCE shapes; ``None`` otherwise.
    """

    kind: FieldKind
    target: type | None = None
    item: ValueShape | None = None

    def __post_init__(self) -> None:
        if self.kind == FieldKind.SEQUENCE and self.item is None:
            msg = "a SEQUENCE shape needs an item shape"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One serializable field of a node type."""

    name: str
    wire_key: str
    shape: ValueShape


# node class -> its fields in declaration order
_REGISTRY: dict[type, tuple[FieldSpec, ...]] = {}

# Protocols standing for a family of node types (e.g. Trace)
_FAMILIES: set[type] = set()


def node_family(proto: T) -> T:
    """Allow ``proto`` (a runtime-checkable Protocol) as a node field annotation.

    Fields annotated with a family accept any registered node that satisfies
    the protocol, e.g. ``Figure.data: list[Trace]``.
    """
    _FAMILIES.add(proto)
    return proto


def node(cls: T) -> T:
    """Turn ``cls`` into a registered configuration node type.

    Applies ``dataclass(kw_only=True, slots=True)`` and validates the class
    against its ``WIRE_KEYS`` table.

    Raises:
        SchemaError: If the renaming table or any field declaration is invalid.
    """
    name = cls.__qualname__
    table = cls.__dict__.get("WIRE_KEYS")
    if not isinstance(table, Mapping):
        msg = f"{name} must declare a WIRE_KEYS mapping next to its fields"
        raise SchemaError(msg, node_type=name)

    node_cls = dataclass(kw_only=True, slots=True)(cls)
    try:
        hints = typing.get_type_hints(node_cls)
    except NameError as exc:
        msg = f"{name} refers to a type that is not defined yet: {exc}"
        raise SchemaError(msg, node_type=name) from exc

    fields = dataclasses.fields(node_cls)
    _check_table(name, [f.name for f in fields], table)

    specs = []
    for f in fields:
        _check_default(name, f)
        shape = _classify(hints[f.name], owner=name, field_name=f.name)
        specs.append(FieldSpec(name=f.name, wire_key=table[f.name], shape=shape))

    node_cls.WIRE_KEYS = MappingProxyType(dict(table))
    _REGISTRY[node_cls] = tuple(specs)
    log.debug("registered node %s with %d fields", name, len(specs))
    return node_cls


def is_node(obj: object) -> bool:
    """Return True for a registered node type or an instance of one."""
    cls = obj if isinstance(obj, type) else type(obj)
    return cls in _REGISTRY


def fields_of(node_type: type) -> tuple[FieldSpec, ...]:
    """Return the serializable fields of ``node_type`` in declaration order.

    Raises:
        TypeError: If ``node_type`` is not a registered node type.
    """
    try:
        return _REGISTRY[node_type]
    except KeyError:
        msg = f"{node_type!r} is not a registered node type"
        raise TypeError(msg) from None


def wire_key(node_type: type, field_name: str) -> str:
    """Look up the wire key of ``field_name`` on ``node_type``.

    Identity mappings resolve like any other entry.

    Raises:
        SchemaError: If ``field_name`` is not a field of ``node_type``.
    """
    for spec in fields_of(node_type):
        if spec.name == field_name:
            return spec.wire_key
    msg = f"{node_type.__qualname__} has no field {field_name!r}"
    raise SchemaError(msg, node_type=node_type.__qualname__, field_name=field_name)


def registered_nodes() -> list[type]:
    """Return every registered node type, in registration order."""
    return list(_REGISTRY)


def _check_table(name: str, field_names: list[str], table: Mapping[str, str]) -> None:
    for field_name in field_names:
        if field_name not in table:
            suggestion = _normalizer.compact(field_name)
            msg = (
                f"{name}.{field_name} has no WIRE_KEYS entry "
                f"(Plotly usually spells it {suggestion!r})"
            )
            raise SchemaError(msg, node_type=name, field_name=field_name)

    extra = sorted(set(table) - set(field_names))
    if extra:
        msg = f"{name}.WIRE_KEYS names unknown fields: {', '.join(extra)}"
        raise SchemaError(msg, node_type=name)

    seen: dict[str, str] = {}
    for field_name in field_names:
        key = table[field_name]
        if not isinstance(key, str) or not key:
            msg = f"{name}.{field_name} must map to a non-empty string, got {key!r}"
            raise SchemaError(msg, node_type=name, field_name=field_name)
        if key in seen:
            msg = f"{name}.{field_name} and {name}.{seen[key]} both map to {key!r}"
            raise SchemaError(msg, node_type=name, field_name=field_name)
        seen[key] = field_name


def _check_default(name: str, f: dataclasses.Field[Any]) -> None:
    if f.init:
        if f.default is not None:
            msg = f"{name}.{f.name} must default to None (absent)"
            raise SchemaError(msg, node_type=name, field_name=f.name)
    elif f.default is dataclasses.MISSING:
        # non-init fields are constants such as a trace's type
        msg = f"{name}.{f.name} is not an init field and needs a default"
        raise SchemaError(msg, node_type=name, field_name=f.name)


def _classify(annotation: Any, *, owner: str, field_name: str) -> ValueShape:
    """Map a resolved field annotation to a ValueShape.

    Dispatch order matters: ``Flag`` is checked before ``Enum`` because every
    flag vocabulary is also an enum.
    """
    origin = typing.get_origin(annotation)

    if origin is typing.Union or origin is types.UnionType:
        members = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(members) == 1:
            return _classify(members[0], owner=owner, field_name=field_name)
        if all(m in _PRIMITIVES for m in members):
            return ValueShape(FieldKind.PRIMITIVE)
        msg = (
            f"{owner}.{field_name}: unions are only supported between primitive "
            f"types, got {annotation!r}"
        )
        raise SchemaError(msg, node_type=owner, field_name=field_name)

    if annotation is Any:
        return ValueShape(FieldKind.ANY)

    if origin is list or origin is Sequence:
        (item,) = typing.get_args(annotation) or (Any,)
        return ValueShape(
            FieldKind.SEQUENCE,
            item=_classify(item, owner=owner, field_name=field_name),
        )

    if annotation in _PRIMITIVES:
        return ValueShape(FieldKind.PRIMITIVE)

    if isinstance(annotation, type):
        if issubclass(annotation, enum.Flag):
            if not is_wire_flags(annotation):
                msg = (
                    f"{owner}.{field_name}: flag vocabulary "
                    f"{annotation.__qualname__} must be decorated with @wire_flags"
                )
                raise SchemaError(msg, node_type=owner, field_name=field_name)
            return ValueShape(FieldKind.FLAGS, target=annotation)
        if issubclass(annotation, enum.Enum):
            return ValueShape(FieldKind.ENUM, target=annotation)
        if annotation in _REGISTRY or annotation in _FAMILIES:
            return ValueShape(FieldKind.NODE, target=annotation)

    msg = f"{owner}.{field_name}: cannot encode values of type {annotation!r}"
    raise SchemaError(msg, node_type=owner, field_name=field_name)
