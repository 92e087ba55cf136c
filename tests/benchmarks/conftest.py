"""Deterministic figure generators for performance benchmarks.

All generators produce fixed, reproducible figures. No random values.
Three tiers: a bare layout, a dashboard-sized figure, and a figure with
many traces and long data arrays.
"""

from __future__ import annotations

import numpy as np
import pytest

from plotly_wire import Figure, Layout
from plotly_wire.schema import (
    Annotation,
    ClickMode,
    Font,
    FunnelArea,
    Legend,
    Margin,
    Scatter,
    ScatterMode,
    SpikeMode,
    TextInfo,
    Title,
    XAxis,
    YAxis,
)


def make_layout() -> Layout:
    """A fully styled layout with no traces."""
    return Layout(
        title=Title(text="Benchmark", font=Font(family="Inter", size=20)),
        show_legend=True,
        legend=Legend(x=1.02, y=1.0),
        margin=Margin(l=40, r=20, t=60, b=40, auto_expand=True),
        click_mode=ClickMode.EVENT | ClickMode.SELECT,
        x_axis=XAxis(show_spikes=True, spike_mode=SpikeMode.TOAXIS | SpikeMode.ACROSS),
        y_axis=YAxis(show_grid=True, grid_color="#eee"),
        annotations=[Annotation(text=f"a{i}", x=i, y=i) for i in range(10)],
    )


def make_figure(num_traces: int, num_points: int) -> Figure:
    """``num_traces`` scatter traces of ``num_points`` points plus one funnelarea."""
    xs = list(range(num_points))
    data: list = [
        Scatter(
            name=f"trace {i}",
            x=xs,
            y=[float(i * p) for p in xs],
            mode=ScatterMode.LINES | ScatterMode.MARKERS,
        )
        for i in range(num_traces)
    ]
    data.append(
        FunnelArea(labels=["a", "b", "c"], values=[3.0, 2.0, 1.0], text_info=TextInfo.LABEL)
    )
    return Figure(data=data, layout=make_layout())


@pytest.fixture(scope="session")
def layout_only() -> Layout:
    return make_layout()


@pytest.fixture(scope="session")
def figure_dashboard() -> Figure:
    return make_figure(num_traces=10, num_points=100)


@pytest.fixture(scope="session")
def figure_large() -> Figure:
    return make_figure(num_traces=50, num_points=1000)


@pytest.fixture(scope="session")
def figure_numpy() -> Figure:
    xs = np.arange(10_000)
    return Figure(data=[Scatter(x=xs, y=np.sin(xs / 100.0))])
