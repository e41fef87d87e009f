from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models.models import DailyLog
from ..services.crud import create_entity, delete_entity, list_entities, update_entity


router = APIRouter(prefix="/api/logs", tags=["logs"])


@router.get("")
def list_logs(db: Session = Depends(get_db)):
    # newest first
    return list_entities(db, DailyLog, order_by=DailyLog.date.desc())


@router.post("")
def create_log(payload: dict, db: Session = Depends(get_db)):
    return create_entity(db, DailyLog, payload)


@router.put("/{log_id}")
def update_log(log_id: str, payload: dict, db: Session = Depends(get_db)):
    log = update_entity(db, DailyLog, log_id, payload)
    if log is None:
        raise HTTPException(status_code=404, detail="Not found")
    return log


@router.delete("/{log_id}")
def delete_log(log_id: str, db: Session = Depends(get_db)):
    if not delete_entity(db, DailyLog, log_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"success": True}
