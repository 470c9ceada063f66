# routers/session.py

import logging

from fastapi import APIRouter, File, HTTPException, Query, UploadFile

from config import MAX_UPLOAD_BYTES, ROW_PREVIEW_LIMIT
from models.column_selection import FieldAssignmentRequest
from models.session import PlotSession
from services.chart_series import UnsupportedChartKind
from services.field_normalizer import numeric_columns
from services.ingestion.errors import IngestionError
from services.session_service import (
    SessionError,
    clear_selection,
    load_file,
    render_chart,
    select_field,
)
from services.session_store import get_session, update_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


def _summary(session: PlotSession) -> dict:
    return {
        "filename": session.filename,
        "rows": len(session.rows),
        "columns": session.columns,
        "numeric_columns": numeric_columns(session.rows),
        "selection": session.selection,
    }


@router.get("")
def get_session_summary():
    return _summary(get_session())


@router.post("/file")
async def upload_file(file: UploadFile = File(...)):
    contents = await file.read()
    if not contents:
        raise HTTPException(status_code=400, detail="Empty file.")
    if len(contents) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds the {MAX_UPLOAD_BYTES} byte upload limit.",
        )

    filename = file.filename or ""
    try:
        session = update_session(lambda current: load_file(current, filename, contents))
    except IngestionError as exc:
        logger.warning("UPLOAD FAILED: file=%s error=%s", filename, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.exception("UPLOAD FAILED: file=%s", filename)
        raise HTTPException(status_code=400, detail=f"Failed to parse file: {exc}")

    out = _summary(session)
    out["preview"] = session.rows[:ROW_PREVIEW_LIMIT]
    out["warnings"] = session.warnings
    return out


@router.get("/rows")
def list_rows(
    offset: int = Query(0, ge=0),
    limit: int = Query(ROW_PREVIEW_LIMIT, ge=1, le=1000),
):
    session = get_session()
    return {
        "total": len(session.rows),
        "offset": offset,
        "rows": session.rows[offset: offset + limit],
    }


@router.put("/selection")
def assign_field(payload: FieldAssignmentRequest):
    try:
        session = update_session(
            lambda current: select_field(current, payload.axis, payload.key)
        )
    except SessionError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"selection": session.selection}


@router.delete("/selection")
def reset_selection():
    session = update_session(clear_selection)
    return {"selection": session.selection}


@router.get("/chart")
def chart(kind: str = Query("line")):
    try:
        return render_chart(get_session(), kind)
    except (SessionError, UnsupportedChartKind) as exc:
        raise HTTPException(status_code=400, detail=str(exc))
