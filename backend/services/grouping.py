from typing import Any

# Category10 palette; series take colors in the order their groups are discovered.
PALETTE: tuple[str, ...] = (
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
)


def color_for_index(index: int) -> str:
    return PALETTE[index % len(PALETTE)]


def group_rows(rows: list[dict[str, Any]], key: str) -> dict[str, list[dict[str, Any]]]:
    """
    Partition rows by the stringified value at `key`.
    Dict insertion order is the order groups are first seen while scanning,
    and rows keep their input order inside each group.
    """
    groups: dict[str, list[dict[str, Any]]] = {}
    for row in rows:
        group = str(row.get(key))
        if group not in groups:
            groups[group] = []
        groups[group].append(row)
    return groups


def assign_colors(groups: dict[str, list[dict[str, Any]]]) -> dict[str, str]:
    return {group: color_for_index(i) for i, group in enumerate(groups)}
