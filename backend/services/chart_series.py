from typing import Any

from services.field_normalizer import coerce_value, is_column_numeric
from services.grouping import PALETTE, color_for_index, group_rows

# chart kind -> (trace type, trace mode)
CHART_KINDS: dict[str, tuple[str, str | None]] = {
    "line": ("scatter", "lines"),
    "bar": ("bar", None),
    "scatter": ("scatter", "markers"),
}


class UnsupportedChartKind(ValueError):
    pass


def _resolve_kind(kind: str) -> tuple[str, str | None]:
    key = (kind or "").strip().lower()
    if key not in CHART_KINDS:
        raise UnsupportedChartKind(
            f"Unsupported chart kind: {kind!r} (expected one of {', '.join(CHART_KINDS)})"
        )
    return CHART_KINDS[key]


def build_trace(
    rows: list[dict[str, Any]],
    x_key: str,
    y_key: str,
    name: str,
    color: str,
    kind: str,
) -> dict[str, Any]:
    trace_type, mode = _resolve_kind(kind)

    trace: dict[str, Any] = {
        "type": trace_type,
        "name": name,
        "x": [coerce_value(row.get(x_key)) for row in rows],
        "y": [coerce_value(row.get(y_key)) for row in rows],
        "marker": {"color": color},
    }
    if mode is not None:
        trace["mode"] = mode
    return trace


def _series_name(kind: str, x_key: str, y_key: str) -> str:
    if kind.strip().lower() == "scatter":
        return f"{y_key} vs {x_key}"
    return y_key


def build_chart(
    rows: list[dict[str, Any]],
    x_key: str,
    y_key: str,
    kind: str,
    group_key: str | None = None,
) -> dict[str, Any]:
    """
    Traces + layout for one chart. Grouped charts get one trace per group,
    colored in the order groups were discovered.
    """
    _resolve_kind(kind)

    if group_key:
        # series are named by group value; the axis and legend titles name the keys
        groups = group_rows(rows, group_key)
        traces = [
            build_trace(group, x_key, y_key, name, color_for_index(i), kind)
            for i, (name, group) in enumerate(groups.items())
        ]
    else:
        traces = [build_trace(rows, x_key, y_key, _series_name(kind, x_key, y_key), PALETTE[0], kind)]

    layout = {
        "xaxis": {
            "title": {"text": x_key},
            "type": "linear" if is_column_numeric(rows, x_key) else "category",
        },
        "yaxis": {"title": {"text": y_key}},
        "showlegend": True,
    }
    if group_key:
        layout["legend"] = {"title": {"text": group_key}}

    return {"kind": kind.strip().lower(), "traces": traces, "layout": layout}
