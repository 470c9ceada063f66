import json
import logging
from typing import Any

from services.ingestion.base_adapter import BaseRowAdapter
from services.ingestion.errors import JsonSyntaxError, UnsupportedJsonStructure

logger = logging.getLogger(__name__)


# ---------- FLATTENING ----------

def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def _flatten_into(value: Any, path: str, out: dict[str, Any]) -> None:
    if isinstance(value, dict):
        for key, child in value.items():
            _flatten_into(child, _join(path, key), out)
    elif isinstance(value, list):
        for index, item in enumerate(value):
            _flatten_into(item, f"{path}[{index}]", out)
    else:
        out[path] = value


def flatten(obj: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    """
    Collapse nested objects/arrays into one level:
    {"a": {"b": 1}, "c": [{"d": 2}, 3]} -> {"a.b": 1, "c[0].d": 2, "c[1]": 3}
    """
    out: dict[str, Any] = {}
    for key, value in obj.items():
        _flatten_into(value, _join(prefix, key), out)
    return out


# ---------- ARRAY PATH DISCOVERY ----------

def _is_object_array(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) > 0
        and all(isinstance(item, dict) for item in value)
    )


def _find_array_keys(obj: dict[str, Any]) -> list[str] | None:
    # pre-order, key order; only objects are descended into
    for key, value in obj.items():
        if _is_object_array(value):
            return [key]
        if isinstance(value, dict):
            found = _find_array_keys(value)
            if found is not None:
                return [key] + found
    return None


def find_array_path(obj: dict[str, Any]) -> str | None:
    keys = _find_array_keys(obj)
    return ".".join(keys) if keys is not None else None


def _without(obj: dict[str, Any], keys: list[str]) -> dict[str, Any]:
    head, rest = keys[0], keys[1:]
    if not rest:
        return {k: v for k, v in obj.items() if k != head}
    return {k: (_without(v, rest) if k == head else v) for k, v in obj.items()}


def _lookup(obj: dict[str, Any], keys: list[str]) -> Any:
    node: Any = obj
    for key in keys:
        node = node[key]
    return node


# ---------- ROW EXTRACTION ----------

def rows_from_json(data: Any) -> list[dict[str, Any]]:
    if isinstance(data, list):
        rows = []
        for element in data:
            if isinstance(element, dict):
                rows.append(flatten(element))
            else:
                rows.append(flatten({"value": element}))
        return rows

    if isinstance(data, dict):
        keys = _find_array_keys(data)
        if keys is None:
            return [flatten(data)]

        array_path = ".".join(keys)
        elements = _lookup(data, keys)
        # parent-level fields repeat on every row
        base = flatten(_without(data, keys))
        logger.debug("JSON array path=%s elements=%s", array_path, len(elements))

        rows = []
        for element in elements:
            row = dict(base)
            if isinstance(element, dict):
                row.update(flatten(element, array_path))
            else:
                row[array_path] = element
            rows.append(row)
        return rows

    raise UnsupportedJsonStructure("Unsupported JSON structure")


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON literal: {name}")


class JsonRowAdapter(BaseRowAdapter):
    def parse(self, content: str) -> list[dict[str, Any]]:
        try:
            data = json.loads(content, parse_constant=_reject_constant)
        except json.JSONDecodeError as exc:
            raise JsonSyntaxError(f"Invalid JSON: {exc}") from exc
        except ValueError as exc:
            raise JsonSyntaxError(str(exc)) from exc

        return rows_from_json(data)
