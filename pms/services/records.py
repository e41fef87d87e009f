"""Mapping between ORM rows and flat API records (camelCase keys)."""
import math
import re
from typing import Any, Dict, Tuple, Type

import structlog
from sqlalchemy import inspect

from ..db import Base
from ..models import models


logger = structlog.get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class InvalidRecordError(ValueError):
    """A record holds a value that cannot be stored or sent back as JSON."""


def to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _column_keys(model: Type[Base]) -> Tuple[str, ...]:
    return tuple(attr.key for attr in inspect(model).column_attrs)


def json_fields_for(model: Type[Base]) -> Tuple[str, ...]:
    return tuple(getattr(model, "__json_fields__", ()))


def json_columns_for(model: Type[Base]) -> Tuple[str, ...]:
    return tuple(to_snake(field) for field in json_fields_for(model))


ENTITY_MODELS = (
    models.ConstructionWork,
    models.User,
    models.UserProfile,
    models.Task,
    models.FinancialRecord,
    models.DailyLog,
    models.Material,
    models.MaterialOrder,
    models.TaskStatus,
    models.FinanceCategory,
    models.InventoryItem,
    models.RentalItem,
)

# Which record fields each table stores as JSON text
ENTITY_JSON_FIELDS: Dict[str, Tuple[str, ...]] = {
    m.__tablename__: json_fields_for(m) for m in ENTITY_MODELS
}


def row_to_record(row: Base) -> Dict[str, Any]:
    return {to_camel(key): getattr(row, key) for key in _column_keys(type(row))}


def record_to_columns(model: Type[Base], record: Dict[str, Any], *, include_id: bool = True) -> Dict[str, Any]:
    """
    Translate a record into column values for ``model``.

    Keys may be camelCase (API form) or snake_case. Keys with no matching
    column are dropped and logged.
    """
    keys = set(_column_keys(model))
    out: Dict[str, Any] = {}
    unknown = []
    for key, value in record.items():
        column = key if key in keys else to_snake(key)
        if column not in keys:
            unknown.append(key)
            continue
        if column == "id" and not include_id:
            continue
        out[column] = value
    if unknown:
        logger.warning("record_unknown_fields", table=model.__tablename__, fields=sorted(unknown))
    return out


def ensure_finite(record: Dict[str, Any]) -> None:
    """Raise ``InvalidRecordError`` if any number in ``record`` is NaN or infinite."""
    stack = [(key, value) for key, value in record.items()]
    while stack:
        path, value = stack.pop()
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidRecordError(f"{path}: non-finite number")
        if isinstance(value, dict):
            stack.extend((f"{path}.{k}", v) for k, v in value.items())
        elif isinstance(value, (list, tuple)):
            stack.extend((f"{path}[{i}]", v) for i, v in enumerate(value))
