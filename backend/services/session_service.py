import logging
from typing import Any

from models.session import AXIS_FIELDS, PlotSession
from services.chart_series import build_chart
from services.ingestion.dispatcher import ingest

logger = logging.getLogger(__name__)


class SessionError(Exception):
    pass


class InvalidSelection(SessionError):
    pass


class NoDataToPlot(SessionError):
    pass


def load_file(session: PlotSession, filename: str, content: bytes | str) -> PlotSession:
    """
    Build a fresh session for the file. Selection is reset on every load;
    if ingestion raises, the caller keeps `session` as it was.
    """
    result = ingest(filename, content)
    logger.info(
        "LOAD: file=%s rows=%s columns=%s (replacing %s)",
        filename,
        len(result.rows),
        len(result.rows[0]) if result.rows else 0,
        session.filename or "nothing",
    )
    return PlotSession(rows=result.rows, filename=filename, warnings=result.warnings)


def select_field(session: PlotSession, axis: str, key: str | None) -> PlotSession:
    field_name = AXIS_FIELDS.get(axis)
    if field_name is None:
        raise InvalidSelection(f"Unknown axis: {axis!r}")
    if key is not None and key not in session.columns:
        raise InvalidSelection(f"Unknown field: {key!r}")
    return session.model_copy(update={field_name: key})


def clear_selection(session: PlotSession) -> PlotSession:
    return session.model_copy(update={"x_key": None, "y_key": None, "group_key": None})


def render_chart(session: PlotSession, kind: str) -> dict[str, Any]:
    if not session.rows:
        raise NoDataToPlot("No data available to plot")
    if session.x_key is None or session.y_key is None:
        raise InvalidSelection("Both x and y fields must be selected")
    return build_chart(
        session.rows,
        session.x_key,
        session.y_key,
        kind,
        group_key=session.group_key,
    )
