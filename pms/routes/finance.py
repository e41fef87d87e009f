from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models.models import FinanceCategory, FinancialRecord
from ..services.crud import create_entity, delete_entity, list_entities, update_entity


router = APIRouter(prefix="/api", tags=["finance"])


# ---------- RECORDS ----------
@router.get("/finance")
def list_finance(db: Session = Depends(get_db)):
    return list_entities(db, FinancialRecord, order_by=FinancialRecord.due_date.asc())


@router.post("/finance")
def create_finance(payload: dict, db: Session = Depends(get_db)):
    return create_entity(db, FinancialRecord, payload)


@router.put("/finance/{record_id}")
def update_finance(record_id: str, payload: dict, db: Session = Depends(get_db)):
    record = update_entity(db, FinancialRecord, record_id, payload)
    if record is None:
        raise HTTPException(status_code=404, detail="Not found")
    return record


@router.delete("/finance/{record_id}")
def delete_finance(record_id: str, db: Session = Depends(get_db)):
    if not delete_entity(db, FinancialRecord, record_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"success": True}


# ---------- CATEGORIES ----------
@router.get("/categories")
def list_categories(db: Session = Depends(get_db)):
    return list_entities(db, FinanceCategory, order_by=FinanceCategory.name.asc())


@router.post("/categories")
def create_category(payload: dict, db: Session = Depends(get_db)):
    return create_entity(db, FinanceCategory, payload)


@router.put("/categories/{category_id}")
def update_category(category_id: str, payload: dict, db: Session = Depends(get_db)):
    category = update_entity(db, FinanceCategory, category_id, payload)
    if category is None:
        raise HTTPException(status_code=404, detail="Not found")
    return category


@router.delete("/categories/{category_id}")
def delete_category(category_id: str, db: Session = Depends(get_db)):
    if not delete_entity(db, FinanceCategory, category_id):
        raise HTTPException(status_code=404, detail="Not found")
    return {"success": True}
