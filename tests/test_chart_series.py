"""Tests for trace and chart description assembly."""

from __future__ import annotations

import pytest

from services.chart_series import UnsupportedChartKind, build_chart, build_trace
from services.grouping import PALETTE

pytestmark = pytest.mark.unit

ROWS = [
    {"day": "1", "temp": "10", "site": "north"},
    {"day": "2", "temp": "n/a", "site": "south"},
    {"day": "3", "site": "north"},
]


def test_build_trace_coerces_values_in_table_order() -> None:
    trace = build_trace(ROWS, "day", "temp", "temp", "#000000", "line")

    assert trace["type"] == "scatter"
    assert trace["mode"] == "lines"
    assert trace["name"] == "temp"
    assert trace["marker"] == {"color": "#000000"}
    assert trace["x"] == [1.0, 2.0, 3.0]
    assert trace["y"] == [10.0, "n/a", None]


def test_build_trace_kind_vocabulary() -> None:
    bar = build_trace(ROWS, "day", "temp", "t", "#fff", "bar")
    scatter = build_trace(ROWS, "day", "temp", "t", "#fff", "scatter")

    assert bar["type"] == "bar"
    assert "mode" not in bar
    assert (scatter["type"], scatter["mode"]) == ("scatter", "markers")


def test_build_trace_rejects_unknown_kind() -> None:
    with pytest.raises(UnsupportedChartKind):
        build_trace(ROWS, "day", "temp", "t", "#fff", "pie")
    with pytest.raises(ValueError):
        build_chart(ROWS, "day", "temp", "")


def test_build_chart_single_series() -> None:
    chart = build_chart(ROWS, "day", "temp", "LINE")

    assert chart["kind"] == "line"
    assert len(chart["traces"]) == 1
    assert chart["traces"][0]["name"] == "temp"
    assert chart["traces"][0]["marker"]["color"] == PALETTE[0]
    assert chart["layout"]["xaxis"]["type"] == "linear"
    assert chart["layout"]["xaxis"]["title"]["text"] == "day"
    assert chart["layout"]["yaxis"]["title"]["text"] == "temp"


def test_build_chart_scatter_series_name() -> None:
    chart = build_chart(ROWS, "day", "temp", "scatter")

    assert chart["traces"][0]["name"] == "temp vs day"


def test_build_chart_uses_category_axis_for_text_x() -> None:
    chart = build_chart(ROWS, "site", "day", "bar")

    assert chart["layout"]["xaxis"]["type"] == "category"
    assert chart["traces"][0]["x"] == ["north", "south", "north"]


def test_build_chart_grouped_series_follow_discovery_order() -> None:
    chart = build_chart(ROWS, "day", "temp", "line", group_key="site")

    traces = chart["traces"]
    assert [t["name"] for t in traces] == ["north", "south"]
    assert [t["marker"]["color"] for t in traces] == [PALETTE[0], PALETTE[1]]
    assert traces[0]["x"] == [1.0, 3.0]
    assert traces[1]["y"] == ["n/a"]
    assert chart["layout"]["legend"]["title"]["text"] == "site"


def test_grouped_scatter_names_series_by_group_value() -> None:
    chart = build_chart(ROWS, "day", "temp", "scatter", group_key="site")

    assert [t["name"] for t in chart["traces"]] == ["north", "south"]
    assert chart["layout"]["xaxis"]["title"]["text"] == "day"
    assert chart["layout"]["yaxis"]["title"]["text"] == "temp"
    assert chart["layout"]["legend"]["title"]["text"] == "site"
