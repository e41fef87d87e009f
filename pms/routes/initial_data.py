import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..models.models import (
    ConstructionWork,
    DailyLog,
    FinanceCategory,
    FinancialRecord,
    InventoryItem,
    Material,
    MaterialOrder,
    RentalItem,
    Task,
    TaskStatus,
    User,
    UserProfile,
)
from ..services.crud import list_entities


router = APIRouter(prefix="/api", tags=["initial-data"])


@router.get("/initial-data")
def initial_data(db: Session = Depends(get_db)):
    """Everything the dashboard needs on first load, one list per entity."""
    try:
        return {
            "works": list_entities(db, ConstructionWork),
            "users": list_entities(db, User),
            "profiles": list_entities(db, UserProfile),
            "tasks": list_entities(db, Task),
            "finance": list_entities(db, FinancialRecord),
            "logs": list_entities(db, DailyLog),
            "materials": list_entities(db, Material),
            "orders": list_entities(db, MaterialOrder),
            "taskStatuses": list_entities(db, TaskStatus, order_by=TaskStatus.order.asc()),
            "financeCategories": list_entities(db, FinanceCategory),
            "inventory": list_entities(db, InventoryItem),
            "rentals": list_entities(db, RentalItem),
        }
    except SQLAlchemyError as e:
        structlog.get_logger(__name__).error("initial_data_failed", error=str(e))
        return JSONResponse(status_code=500, content={"error": "Database connection failed."})
