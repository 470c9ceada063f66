# models/session.py

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from services.field_normalizer import column_keys

# request axis -> PlotSession field
AXIS_FIELDS = {
    "x": "x_key",
    "y": "y_key",
    "group": "group_key",
}


class PlotSession(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: list[dict[str, Any]] = Field(default_factory=list)
    filename: str | None = None
    warnings: list[str] = Field(default_factory=list)

    x_key: str | None = None
    y_key: str | None = None
    group_key: str | None = None

    @property
    def columns(self) -> list[str]:
        return column_keys(self.rows)

    @property
    def selection(self) -> dict[str, str | None]:
        return {"x": self.x_key, "y": self.y_key, "group": self.group_key}
