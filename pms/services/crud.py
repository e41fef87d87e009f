"""
Single-table CRUD used by every entity router.

Writes map the body onto columns and run it through ``denormalize`` before it
reaches the database; every returned row goes through ``normalize``. The
model's own ``__json_fields__`` decides which fields are JSON text. Bodies
holding NaN or infinite numbers raise ``InvalidRecordError``.
"""
from typing import Any, Dict, List, Optional, Type

import structlog
from sqlalchemy.orm import Session

from ..db import Base
from .normalization import denormalize, normalize
from .records import ensure_finite, json_columns_for, json_fields_for, record_to_columns, row_to_record


logger = structlog.get_logger(__name__)


def serialize(row: Base) -> Dict[str, Any]:
    return normalize(row_to_record(row), json_fields_for(type(row)))


def list_entities(db: Session, model: Type[Base], order_by=None) -> List[Dict[str, Any]]:
    query = db.query(model)
    if order_by is not None:
        query = query.order_by(order_by)
    return [serialize(row) for row in query.all()]


def get_entity(db: Session, model: Type[Base], entity_id: str) -> Optional[Base]:
    return db.query(model).filter(model.id == entity_id).first()


def create_entity(db: Session, model: Type[Base], payload: Dict[str, Any]) -> Dict[str, Any]:
    ensure_finite(payload)
    # Map keys first so snake_case spellings of JSON columns are encoded too
    data = denormalize(record_to_columns(model, payload), json_columns_for(model))
    if not data.get("id"):
        data.pop("id", None)
    row = model(**data)
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("entity_created", table=model.__tablename__, id=row.id)
    return serialize(row)


def update_entity(db: Session, model: Type[Base], entity_id: str, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    row = get_entity(db, model, entity_id)
    if not row:
        return None
    ensure_finite(payload)
    data = denormalize(record_to_columns(model, payload, include_id=False), json_columns_for(model))
    for key, value in data.items():
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    logger.info("entity_updated", table=model.__tablename__, id=entity_id, fields=sorted(data))
    return serialize(row)


def delete_entity(db: Session, model: Type[Base], entity_id: str) -> bool:
    row = get_entity(db, model, entity_id)
    if not row:
        return False
    db.delete(row)
    db.commit()
    logger.info("entity_deleted", table=model.__tablename__, id=entity_id)
    return True
