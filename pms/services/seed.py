"""
Populate a database with the default catalogs and sample records.

Inserts go through the CRUD service so JSON fields (permissions, teamIds,
images) are stored in the same text form the API writes.
"""
import structlog
from sqlalchemy.orm import Session

from .. import constants
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
from .crud import create_entity


logger = structlog.get_logger(__name__)

# Children first so foreign keys never dangle mid-wipe
_WIPE_ORDER = (
    RentalItem,
    InventoryItem,
    MaterialOrder,
    DailyLog,
    FinancialRecord,
    Task,
    ConstructionWork,
    User,
    UserProfile,
    TaskStatus,
    FinanceCategory,
    Material,
)

_SEED_PLAN = (
    (UserProfile, constants.DEFAULT_PROFILES),
    (User, constants.SAMPLE_USERS),
    (TaskStatus, constants.DEFAULT_TASK_STATUSES),
    (ConstructionWork, constants.SAMPLE_WORKS),
    (Task, constants.SAMPLE_TASKS),
    (FinanceCategory, constants.DEFAULT_FINANCE_CATEGORIES),
    (FinancialRecord, constants.SAMPLE_FINANCE),
    (Material, constants.DEFAULT_MATERIALS),
)


def wipe(db: Session) -> None:
    for model in _WIPE_ORDER:
        db.query(model).delete()
    db.commit()


def seed(db: Session, *, reset: bool = True) -> dict:
    """Insert the seed records. Returns the number of rows created per table."""
    if reset:
        wipe(db)
    counts = {}
    for model, rows in _SEED_PLAN:
        for row in rows:
            create_entity(db, model, row)
        counts[model.__tablename__] = len(rows)
        logger.info("seed_table", table=model.__tablename__, rows=len(rows))
    return counts


def seed_if_empty(db: Session) -> bool:
    # Task statuses act as the canary: no statuses means a fresh database
    if db.query(TaskStatus).count() > 0:
        return False
    seed(db, reset=False)
    return True
