"""Concurrent encoding from several threads.

Node types are registered at import time and the encoder keeps no per-call
state, so one encoder (or the module-level encode function) can serve many
threads at once.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from plotly_wire import Figure, Layout, NodeEncoder, encode
from plotly_wire.schema import Margin, Scatter, ScatterMode, SpikeMode, XAxis


def _figure(i: int) -> Figure:
    return Figure(
        data=[Scatter(x=list(range(i)), mode=ScatterMode.LINES | ScatterMode.TEXT)],
        layout=Layout(
            margin=Margin(l=i, auto_expand=i % 2 == 0),
            x_axis=XAxis(spike_mode=SpikeMode.ACROSS),
        ),
    )


def test_shared_encoder_across_threads() -> None:
    encoder = NodeEncoder()
    figures = [_figure(i) for i in range(64)]
    expected = [encode(f) for f in figures]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(encoder.encode, figures))

    assert results == expected


def test_same_node_from_many_threads() -> None:
    figure = _figure(10)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: encode(figure), range(32)))

    first = results[0]
    assert first["data"][0]["mode"] == "lines+text"
    assert all(r == first for r in results)
