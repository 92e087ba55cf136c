"""Key fidelity of every node type shipped with the package.

For each registered node type, a fully populated instance must encode to
exactly its WIRE_KEYS values, in declaration order, and no two fields may
share a wire key.
"""

from __future__ import annotations

from typing import Any

import pytest

from plotly_wire import encode, wire_keys
from plotly_wire.integrations._pytest_plugin import populated
from plotly_wire.schema.node import fields_of, registered_nodes

SHIPPED = [cls for cls in registered_nodes() if cls.__module__.startswith("plotly_wire.")]


def test_schema_slice_is_registered() -> None:
    names = {cls.__name__ for cls in SHIPPED}
    assert {"Figure", "Layout", "Margin", "XAxis", "Scatter", "FunnelArea"} <= names
    assert {"ChoroplethMapbox", "Frame", "Config", "Scene", "Legend"} <= names


@pytest.mark.parametrize("node_type", SHIPPED, ids=lambda cls: cls.__name__)
class TestEveryNodeType:
    def test_populated_encodes_all_wire_keys(
        self, node_type: type, assert_key_fidelity: Any
    ) -> None:
        assert_key_fidelity(node_type)

    def test_table_matches_fields(self, node_type: type) -> None:
        assert list(wire_keys(node_type)) == [spec.name for spec in fields_of(node_type)]
        assert dict(node_type.WIRE_KEYS) == dict(wire_keys(node_type))  # type: ignore[attr-defined]

    def test_wire_keys_unique(self, node_type: type) -> None:
        keys = list(wire_keys(node_type).values())
        assert len(keys) == len(set(keys))

    def test_default_instance_is_minimal(self, node_type: type) -> None:
        doc = encode(node_type())
        assert set(doc) <= {"type"}

    def test_populated_children_are_empty_documents(self, node_type: type) -> None:
        doc = encode(populated(node_type))
        for value in doc.values():
            if isinstance(value, dict) and value and "sample" not in value:
                assert set(value) <= {"type"}
