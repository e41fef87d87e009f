from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models.models import Task, TaskStatus
from ..services.crud import create_entity, delete_entity, list_entities, update_entity


router = APIRouter(prefix="/api", tags=["tasks"])


# ---------- TASKS ----------
@router.get("/tasks")
def list_tasks(db: Session = Depends(get_db)):
    return list_entities(db, Task)


@router.post("/tasks")
def create_task(payload: dict, db: Session = Depends(get_db)):
    return create_entity(db, Task, payload)


@router.put("/tasks/{task_id}")
def update_task(task_id: str, payload: dict, db: Session = Depends(get_db)):
    task = update_entity(db, Task, task_id, payload)
    if task is None:
        raise HTTPException(status_code=404, detail="Not found")
    return task


@router.delete("/tasks/{task_id}")
def delete_task(task_id: str, db: Session = Depends(get_db)):
    if not delete_entity(db, Task, task_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"success": True}


# ---------- STATUSES (kanban columns) ----------
@router.get("/statuses")
def list_statuses(db: Session = Depends(get_db)):
    return list_entities(db, TaskStatus, order_by=TaskStatus.order.asc())


@router.post("/statuses")
def create_status(payload: dict, db: Session = Depends(get_db)):
    return create_entity(db, TaskStatus, payload)


@router.put("/statuses/{status_id}")
def update_status(status_id: str, payload: dict, db: Session = Depends(get_db)):
    row = update_entity(db, TaskStatus, status_id, payload)
    if row is None:
        raise HTTPException(status_code=404, detail="Not found")
    return row


@router.delete("/statuses/{status_id}")
def delete_status(status_id: str, db: Session = Depends(get_db)):
    if not delete_entity(db, TaskStatus, status_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"success": True}
