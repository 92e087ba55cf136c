"""Unit tests for flag vocabularies and the combinator (plotly_wire.flags)."""

import itertools
from enum import Flag, auto

import pytest

from plotly_wire.errors import SchemaError
from plotly_wire.flags import (
    FLAG_SEPARATOR,
    combine_flags,
    flag_tokens,
    is_wire_flags,
    wire_flags,
)
from plotly_wire.schema.axes import SpikeMode
from plotly_wire.schema.layout import ArrowSide, ClickMode, TraceOrder
from plotly_wire.schema.traces import (
    ChoroplethHoverInfo,
    FunnelAreaHoverInfo,
    HoverInfo,
    ScatterMode,
    TextInfo,
)

SHIPPED_VOCABULARIES = [
    SpikeMode,
    ClickMode,
    TraceOrder,
    ArrowSide,
    ScatterMode,
    HoverInfo,
    TextInfo,
    FunnelAreaHoverInfo,
    ChoroplethHoverInfo,
]


class TestCombineFlags:
    """Tests for combine_flags()."""

    def test_separator_is_plus(self) -> None:
        assert FLAG_SEPARATOR == "+"

    def test_single_option(self) -> None:
        assert combine_flags(ScatterMode.MARKERS) == "markers"

    def test_two_options(self) -> None:
        assert combine_flags(ScatterMode.LINES | ScatterMode.MARKERS) == "lines+markers"

    def test_declaration_order_not_combination_order(self) -> None:
        assert combine_flags(SpikeMode.MARKER | SpikeMode.TOAXIS) == "toaxis+marker"
        assert combine_flags(SpikeMode.TOAXIS | SpikeMode.MARKER) == "toaxis+marker"

    def test_none_token_combines_like_any_other_option(self) -> None:
        assert combine_flags(ClickMode.EVENT | ClickMode.NONE) == "event+none"

    def test_all_options(self) -> None:
        value = SpikeMode.ACROSS | SpikeMode.MARKER | SpikeMode.TOAXIS
        assert combine_flags(value) == "toaxis+across+marker"

    def test_empty_set_is_empty_string(self) -> None:
        assert combine_flags(SpikeMode(0)) == ""

    def test_tokens_are_lowercased_member_names(self) -> None:
        assert flag_tokens(TextInfo.LABEL | TextInfo.PERCENT) == ["label", "percent"]

    def test_repeated_calls_are_identical(self) -> None:
        value = HoverInfo.NAME | HoverInfo.X | HoverInfo.Y
        results = {combine_flags(value) for _ in range(10)}
        assert results == {"x+y+name"}

    def test_library_vocabularies_are_registered(self) -> None:
        for vocabulary in (SpikeMode, ClickMode, TraceOrder, ArrowSide, ScatterMode):
            assert is_wire_flags(vocabulary)


class TestWireFlags:
    """Tests for the @wire_flags vocabulary check."""

    def test_accepts_auto_bits(self) -> None:
        @wire_flags
        class Sides(Flag):
            TOP = auto()
            BOTTOM = auto()

        assert is_wire_flags(Sides)
        assert combine_flags(Sides.BOTTOM | Sides.TOP) == "top+bottom"

    def test_unregistered_flag_is_not_a_vocabulary(self) -> None:
        class Loose(Flag):
            A = auto()

        assert not is_wire_flags(Loose)

    def test_rejects_duplicate_bit(self) -> None:
        with pytest.raises(SchemaError):

            @wire_flags
            class Dup(Flag):
                A = 1
                B = 1

    def test_rejects_gap_in_bits(self) -> None:
        with pytest.raises(SchemaError):

            @wire_flags
            class Gap(Flag):
                A = 1
                B = 4

    def test_rejects_composite_member(self) -> None:
        with pytest.raises(SchemaError, match="single bit"):

            @wire_flags
            class Combo(Flag):
                A = 1
                B = 2
                BOTH = 3

    def test_rejects_empty_vocabulary(self) -> None:
        with pytest.raises(SchemaError, match="no options"):

            @wire_flags
            class Empty(Flag):
                pass

    def test_rejects_plain_enum(self) -> None:
        from enum import Enum

        with pytest.raises(SchemaError, match="enum.Flag"):

            @wire_flags
            class NotFlags(Enum):  # type: ignore[type-var]
                A = 1

    def test_error_names_the_vocabulary(self) -> None:
        with pytest.raises(SchemaError) as exc_info:

            @wire_flags
            class Broken(Flag):
                A = 1
                B = 1

        assert "Broken" in exc_info.value.node_type
        assert exc_info.value.field_name is None


@pytest.mark.parametrize("vocabulary", SHIPPED_VOCABULARIES, ids=lambda cls: cls.__name__)
class TestCanonicalOrderForEverySubset:
    """Every subset, combined in every order, encodes in declaration order."""

    def test_every_subset_in_every_order(self, vocabulary: type[Flag]) -> None:
        members = list(vocabulary)
        for size in range(1, min(len(members), 4) + 1):
            for subset in itertools.combinations(members, size):
                expected = FLAG_SEPARATOR.join(m.name.lower() for m in subset)
                for ordering in itertools.permutations(subset):
                    value = vocabulary(0)
                    for member in ordering:
                        value |= member
                    assert combine_flags(value) == expected

    def test_every_subset_any_size(self, vocabulary: type[Flag]) -> None:
        members = list(vocabulary)
        for size in range(len(members) + 1):
            for subset in itertools.combinations(members, size):
                value = vocabulary(0)
                for member in reversed(subset):
                    value |= member
                assert flag_tokens(value) == [m.name.lower() for m in subset]

    def test_full_set(self, vocabulary: type[Flag]) -> None:
        members = list(vocabulary)
        value = vocabulary(0)
        for member in reversed(members):
            value |= member
        assert combine_flags(value) == FLAG_SEPARATOR.join(m.name.lower() for m in members)
