import math
import re
from typing import Any

# Longest numeric prefix accepted by JavaScript's parseFloat.
_FLOAT_PREFIX_RE = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)

# ---------- PARSING ----------

def parse_float(value: Any) -> float:
    """
    Parse the way browsers parse numbers for charting: leading whitespace is
    skipped and the longest numeric prefix wins, so "42abc" -> 42.0.
    Anything without a numeric prefix is NaN.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            # integers past float range read as Infinity, like parseFloat
            return -math.inf if value < 0 else math.inf
    if not isinstance(value, str):
        return math.nan

    match = _FLOAT_PREFIX_RE.match(value.lstrip())
    if not match:
        return math.nan

    token = match.group(0)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def is_numeric(value: Any) -> bool:
    parsed = parse_float(value)
    return not math.isnan(parsed) and math.isfinite(parsed)


def coerce_value(value: Any) -> Any:
    if is_numeric(value):
        return parse_float(value)
    return value


# ---------- COLUMNS ----------

def column_keys(rows: list[dict]) -> list[str]:
    if not rows:
        return []
    return list(rows[0].keys())


def is_column_numeric(rows: list[dict], key: str) -> bool:
    # all() is vacuously true for an empty table
    return all(is_numeric(row.get(key)) for row in rows)


def numeric_columns(rows: list[dict]) -> list[str]:
    return [key for key in column_keys(rows) if is_column_numeric(rows, key)]
