"""Encoding tests for trace node types."""

from __future__ import annotations

import numpy as np

from plotly_wire import Trace, encode
from plotly_wire.schema import ChoroplethMapbox, FunnelArea, HoverInfo, Scatter, ScatterMode, TextInfo
from plotly_wire.schema.common import Domain, Font
from plotly_wire.schema.enums import Visible
from plotly_wire.schema.traces import (
    ChoroplethHoverInfo,
    ChoroplethMarker,
    ChoroplethMarkerLine,
    Fill,
    FunnelAreaMarker,
    FunnelAreaTitle,
    ScatterLine,
    ScatterMarker,
    TitlePosition,
)


class TestTraceProtocol:
    def test_traces_satisfy_protocol(self) -> None:
        for trace in (Scatter(), FunnelArea(), ChoroplethMapbox()):
            assert isinstance(trace, Trace)

    def test_layout_parts_are_not_traces(self) -> None:
        from plotly_wire.schema import Margin, XAxis

        assert not isinstance(Margin(), Trace)
        assert not isinstance(XAxis(), Trace)

    def test_animatable_is_class_metadata(self) -> None:
        assert Scatter.ANIMATABLE is True
        assert FunnelArea.ANIMATABLE is False
        assert ChoroplethMapbox.ANIMATABLE is False
        assert "animatable" not in encode(Scatter())

    def test_type_tokens(self) -> None:
        assert Scatter().type == "scatter"
        assert FunnelArea().type == "funnelarea"
        assert ChoroplethMapbox().type == "choroplethmapbox"


class TestScatter:
    def test_lines_and_markers(self) -> None:
        trace = Scatter(
            x=[1, 2, 3],
            y=[2, 4, 8],
            mode=ScatterMode.LINES | ScatterMode.MARKERS,
            name="growth",
            line=ScatterLine(color="blue", width=2),
            marker=ScatterMarker(size=[4, 6, 8]),
        )
        assert encode(trace) == {
            "type": "scatter",
            "name": "growth",
            "x": [1, 2, 3],
            "y": [2, 4, 8],
            "mode": "lines+markers",
            "line": {"color": "blue", "width": 2},
            "marker": {"size": [4, 6, 8]},
        }

    def test_renamed_keys(self) -> None:
        trace = Scatter(
            show_legend=False,
            legend_group="g",
            custom_data=[{"id": 1}],
            hover_info=HoverInfo.NAME | HoverInfo.Y,
            hover_template="%{y}",
            connect_gaps=True,
            fill=Fill.TO_ZERO_Y,
            fill_color="red",
            x_axis="x2",
        )
        assert encode(trace) == {
            "type": "scatter",
            "showlegend": False,
            "legendgroup": "g",
            "customdata": [{"id": 1}],
            "hoverinfo": "y+name",
            "hovertemplate": "%{y}",
            "connectgaps": True,
            "fill": "tozeroy",
            "fillcolor": "red",
            "xaxis": "x2",
        }

    def test_visible_legend_only(self) -> None:
        assert encode(Scatter(visible=Visible.HIDDEN)) == {"type": "scatter", "visible": "false"}

    def test_numpy_data(self) -> None:
        doc = encode(Scatter(x=np.arange(3), y=np.linspace(0.0, 1.0, 3)))
        assert doc["x"] == [0, 1, 2]
        assert doc["y"] == [0.0, 0.5, 1.0]


class TestFunnelArea:
    def test_stages(self) -> None:
        trace = FunnelArea(
            labels=["visit", "cart", "buy"],
            values=[100.0, 40.0, 10.0],
            text_info=TextInfo.PERCENT | TextInfo.LABEL,
            marker=FunnelAreaMarker(colors=["#a", "#b", "#c"]),
            title=FunnelAreaTitle(text="Funnel", position=TitlePosition.TOP_LEFT),
            domain=Domain(x=[0.0, 0.5]),
            base_ratio=0.3,
            inside_text_font=Font(color="white"),
        )
        assert encode(trace) == {
            "type": "funnelarea",
            "labels": ["visit", "cart", "buy"],
            "values": [100.0, 40.0, 10.0],
            "marker": {"colors": ["#a", "#b", "#c"]},
            "textinfo": "label+percent",
            "insidetextfont": {"color": "white"},
            "title": {"text": "Funnel", "position": "top left"},
            "domain": {"x": [0.0, 0.5]},
            "baseratio": 0.3,
        }

    def test_source_keys(self) -> None:
        trace = FunnelArea(labels_source="grid:1", values_source="grid:2")
        assert encode(trace) == {
            "type": "funnelarea",
            "labelssrc": "grid:1",
            "valuessrc": "grid:2",
        }


class TestChoroplethMapbox:
    def test_features(self) -> None:
        geojson = {"type": "FeatureCollection", "features": []}
        trace = ChoroplethMapbox(
            locations=["NY", "CA"],
            z=[1.0, 2.0],
            geojson=geojson,
            feature_id_key="properties.code",
            z_middle=1.5,
            hover_info=ChoroplethHoverInfo.LOCATION | ChoroplethHoverInfo.Z,
            marker=ChoroplethMarker(line=ChoroplethMarkerLine(width=0), opacity=0.8),
        )
        doc = encode(trace)
        assert list(doc)[0] == "type"
        assert doc["type"] == "choroplethmapbox"
        assert doc["geojson"] == geojson
        assert doc["featureidkey"] == "properties.code"
        assert doc["zmid"] == 1.5
        assert doc["hoverinfo"] == "location+z"
        assert doc["marker"] == {"line": {"width": 0}, "opacity": 0.8}
