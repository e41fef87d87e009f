"""
Entity JSON-field normalization.

Some entity fields hold structured values (permission maps, team member ids,
image lists, quote line-items) but are persisted as JSON text. ``normalize``
turns a stored record into its API form and ``denormalize`` does the reverse.
Both are pure and only ever look at the designated field names.
"""
import json
import math
from typing import Any, Dict, Iterable, Optional

import structlog


logger = structlog.get_logger(__name__)

DESIGNATED_FIELDS = ("permissions", "teamIds", "images", "quotes")

Record = Dict[str, Any]


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def _decode(value: str) -> Any:
    return json.loads(value, parse_constant=_reject_constant, parse_float=_finite_float)


def _encode(value: Any) -> str:
    # Same text JSON.stringify produces: compact, non-ASCII kept as-is
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def normalize(entity: Optional[Record], fields: Iterable[str] = DESIGNATED_FIELDS) -> Optional[Record]:
    """
    Storage form -> API form.

    Text values of the designated fields are parsed as JSON. Values that fail to
    parse (malformed, non-finite numbers, nested too deep) are left as the
    original text; nothing is raised.
    """
    if entity is None:
        return entity
    out = dict(entity)
    for key in fields:
        value = out.get(key)
        if not isinstance(value, str):
            continue
        try:
            out[key] = _decode(value)
        except (ValueError, RecursionError):
            logger.debug("json_field_decode_failed", field=key)
    return out


def denormalize(entity: Record, fields: Iterable[str] = DESIGNATED_FIELDS) -> Record:
    """
    Storage form of an API record: structured designated fields become JSON text.

    Raises ``ValueError`` for structured values holding NaN or infinities.
    """
    out = dict(entity)
    for key in fields:
        value = out.get(key)
        if isinstance(value, (dict, list, tuple)):
            out[key] = _encode(value)
    return out
