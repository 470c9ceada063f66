from pydantic import BaseModel, Field

from models.session import AXIS_FIELDS

AXIS_PATTERN = "^(" + "|".join(AXIS_FIELDS) + ")$"


class FieldAssignmentRequest(BaseModel):
    axis: str = Field(..., pattern=AXIS_PATTERN)
    key: str | None = None
