"""pytest plugin for plotly-wire.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Projects that define their own ``@node`` types get two fixtures:

- ``assert_wire_document``: exact comparison of an encoded node against the
  expected document, key order included.
- ``assert_key_fidelity``: sets every field of a node type and checks that
  the encoded keys are exactly its WIRE_KEYS values, in declaration order.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from plotly_wire import EncoderConfig, encode
from plotly_wire.schema.node import (
    FieldKind,
    ValueShape,
    fields_of,
    is_node,
    registered_nodes,
)


def _ordered(value: Any) -> Any:
    """Rewrite dicts as lists of (key, value) pairs so comparison sees key order."""
    if isinstance(value, dict):
        return [(k, _ordered(v)) for k, v in value.items()]
    if isinstance(value, (list, tuple)):
        return [_ordered(v) for v in value]
    return value


def _sample(shape: ValueShape) -> Any:
    kind = shape.kind
    if kind == FieldKind.PRIMITIVE:
        return 1
    if kind == FieldKind.ANY:
        return {"sample": True}
    if kind in (FieldKind.ENUM, FieldKind.FLAGS):
        assert shape.target is not None
        return next(iter(shape.target))
    if kind == FieldKind.NODE:
        assert shape.target is not None
        if is_node(shape.target):
            return shape.target()
        return _family_member(shape.target)
    assert shape.item is not None
    return [_sample(shape.item)]


def _family_member(family: type) -> Any:
    for cls in registered_nodes():
        candidate = cls()
        if isinstance(candidate, family):
            return candidate
    msg = f"no registered node satisfies {family.__qualname__}"
    raise LookupError(msg)


def populated(node_type: type) -> Any:
    """Build an instance of ``node_type`` with every init field set.

    Nested nodes are set to empty instances, sequences to one element, enums
    and flag sets to their first member.
    """
    init_fields = {f.name for f in dataclasses.fields(node_type) if f.init}
    kwargs = {
        spec.name: _sample(spec.shape)
        for spec in fields_of(node_type)
        if spec.name in init_fields
    }
    return node_type(**kwargs)


@pytest.fixture(scope="session")
def assert_wire_document() -> Any:
    """Fixture that returns a callable exact-match asserter for encoded nodes.

    Usage in tests::

        def test_margin(assert_wire_document):
            assert_wire_document(Margin(l=10, auto_expand=True), {"l": 10, "autoexpand": True})

    Returns:
        A callable ``_assert(node, expected, config=None) -> None`` that raises
        ``AssertionError`` when the encoded document differs from ``expected``
        in content or key order.
    """

    def _assert(node: Any, expected: dict[str, Any], config: EncoderConfig | None = None) -> None:
        actual = encode(node, config=config)
        if _ordered(actual) != _ordered(expected):
            missing = [k for k in expected if k not in actual]
            unexpected = [k for k in actual if k not in expected]
            raise AssertionError(
                f"wire document of {type(node).__qualname__} does not match\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}\n"
                f"  missing keys:    {missing}\n"
                f"  unexpected keys: {unexpected}"
            )

    return _assert


@pytest.fixture(scope="session")
def assert_key_fidelity() -> Any:
    """Fixture that returns a callable checking one node type's renaming table.

    Returns:
        A callable ``_assert(node_type) -> None`` raising ``AssertionError``
        when a fully populated instance does not encode to exactly the
        registered wire keys, in declaration order.
    """

    def _assert(node_type: type) -> None:
        if not is_node(node_type):
            raise AssertionError(f"{node_type!r} is not a registered node type")
        expected = [spec.wire_key for spec in fields_of(node_type)]
        actual = list(encode(populated(node_type)))
        if actual != expected:
            raise AssertionError(
                f"{node_type.__qualname__} encodes keys {actual}, "
                f"WIRE_KEYS declares {expected}"
            )

    return _assert

