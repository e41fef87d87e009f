from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models.models import ConstructionWork
from ..services.crud import create_entity, delete_entity, list_entities, update_entity


router = APIRouter(prefix="/api/works", tags=["works"])


@router.get("")
def list_works(db: Session = Depends(get_db)):
    return list_entities(db, ConstructionWork)


@router.post("")
def create_work(payload: dict, db: Session = Depends(get_db)):
    return create_entity(db, ConstructionWork, payload)


@router.put("/{work_id}")
def update_work(work_id: str, payload: dict, db: Session = Depends(get_db)):
    work = update_entity(db, ConstructionWork, work_id, payload)
    if work is None:
        raise HTTPException(status_code=404, detail="Not found")
    return work


@router.delete("/{work_id}")
def delete_work(work_id: str, db: Session = Depends(get_db)):
    if not delete_entity(db, ConstructionWork, work_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"success": True}
