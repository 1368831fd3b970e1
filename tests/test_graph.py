import matplotlib
matplotlib.use("Agg")

import pytest

from step_pipeline.core.errors import ChannelIndexError
from step_pipeline.plotting.graph import SignalGraph

def test_points_before_start_are_skipped():
    graph = SignalGraph()
    graph.add_new_point(20, [1.0])
    graph.add_new_point(21, [2.0])
    assert list(graph.series[0]) == [(21, 2.0)]

def test_window_keeps_latest_points():
    graph = SignalGraph(resolution=5)
    for t in range(21, 40):
        graph.add_new_point(t, [float(t)])
    assert [t for t, _ in graph.series[0]] == [35, 36, 37, 38, 39]

def test_series_limit():
    graph = SignalGraph(max_series=2)
    assert graph.add_new_series() == 1
    with pytest.raises(ChannelIndexError):
        graph.add_new_series()

def test_clear_and_render(tmp_path):
    graph = SignalGraph()
    graph.add_new_series()
    for t in range(21, 60):
        graph.add_new_point(t, [t * 0.1, t * 0.2])
    out = tmp_path / 'graph.png'
    graph.render(str(out), steps=[30, 45])
    assert out.exists()

    graph.clear()
    assert all(len(points) == 0 for points in graph.series)
