import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response

from db.database import get_store, ScheduleStore
from utils.deps import get_session
from utils.queue import ReviewSession
from utils.transfer import ImportRejected, export_schedules, parse_import

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/export")
async def export_progress(store: ScheduleStore = Depends(get_store)):
    data = export_schedules(store.load())
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    filename = f"senderos-progress-{timestamp}.json"
    headers = {"Content-Disposition": f"attachment; filename={filename}"}
    return Response(content=data, media_type="application/json", headers=headers)

@router.post("/import")
async def import_progress(
    file: UploadFile = File(...),
    store: ScheduleStore = Depends(get_store),
):
    """Replace all progress with an exported document; nothing changes on rejection."""
    data = await file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Import failed: file is empty")
    try:
        schedules = parse_import(data)
    except ImportRejected as exc:
        logger.warning("Progress import rejected: %s", exc)
        raise HTTPException(status_code=400, detail=f"Import failed: {exc}") from exc
    store.save(schedules)
    logger.info("Imported progress for %d cards", len(schedules))
    return {"message": "Progress imported!", "cards": len(schedules)}

@router.post("/reset")
async def reset_progress(
    store: ScheduleStore = Depends(get_store),
    session: ReviewSession = Depends(get_session),
):
    """Clear every schedule and the current session."""
    store.save({})
    session.reset()
    logger.info("Progress reset")
    return {"message": "Progress reset"}
