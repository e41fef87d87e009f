"""Tests for row <-> record mapping and the per-entity JSON field schema."""
import pytest
from sqlalchemy import Text, inspect

from pms.models.models import ConstructionWork, DailyLog, Material, MaterialOrder, Task, UserProfile
from pms.services.records import (
    ENTITY_JSON_FIELDS,
    ENTITY_MODELS,
    InvalidRecordError,
    ensure_finite,
    json_columns_for,
    record_to_columns,
    row_to_record,
    to_camel,
    to_snake,
)


def test_case_conversion():
    assert to_snake("teamIds") == "team_ids"
    assert to_snake("relatedBudgetCategoryId") == "related_budget_category_id"
    assert to_snake("name") == "name"
    assert to_camel("team_ids") == "teamIds"
    assert to_camel("image_url") == "imageUrl"
    assert to_camel("order") == "order"


def test_entity_json_fields_table():
    assert ENTITY_JSON_FIELDS["works"] == ("teamIds",)
    assert ENTITY_JSON_FIELDS["user_profiles"] == ("permissions",)
    assert ENTITY_JSON_FIELDS["tasks"] == ("images",)
    assert ENTITY_JSON_FIELDS["daily_logs"] == ("images", "teamIds")
    assert ENTITY_JSON_FIELDS["material_orders"] == ("quotes",)
    assert ENTITY_JSON_FIELDS["materials"] == ()


def test_declared_json_fields_are_text_columns():
    for model in ENTITY_MODELS:
        columns = {c.key: c for c in inspect(model).columns}
        for field in model.__json_fields__:
            column = columns[to_snake(field)]
            assert isinstance(column.type, Text), f"{model.__tablename__}.{field}"


def test_record_to_columns_maps_camel_and_snake_keys():
    data = record_to_columns(ConstructionWork, {"id": "w1", "teamIds": "[]", "image_url": "x.png", "name": "Obra"})
    assert data == {"id": "w1", "team_ids": "[]", "image_url": "x.png", "name": "Obra"}


def test_record_to_columns_drops_unknown_keys():
    data = record_to_columns(Material, {"name": "Cimento", "bogus": 1, "images": ["a"]})
    assert data == {"name": "Cimento"}


def test_record_to_columns_can_skip_id():
    data = record_to_columns(Task, {"id": "t1", "title": "Pintura"}, include_id=False)
    assert data == {"title": "Pintura"}


def test_row_to_record_uses_camel_case_keys():
    order = MaterialOrder(id="o1", item_name="Cimento", quotes='[{"id":"q1"}]', work_id="w1")
    record = row_to_record(order)
    assert record["itemName"] == "Cimento"
    assert record["workId"] == "w1"
    assert record["quotes"] == '[{"id":"q1"}]'
    assert "item_name" not in record


def test_row_to_record_covers_every_column():
    profile = UserProfile(id="p1", name="Admin")
    assert set(row_to_record(profile)) == {"id", "name", "description", "isSystem", "permissions"}
    log = DailyLog(id="l1")
    assert {"teamIds", "images", "workforce", "isResolved"} <= set(row_to_record(log))


def test_json_columns_for():
    assert json_columns_for(ConstructionWork) == ("team_ids",)
    assert json_columns_for(DailyLog) == ("images", "team_ids")
    assert json_columns_for(Material) == ()


def test_ensure_finite_accepts_plain_records():
    ensure_finite({"budget": 1.5, "quotes": [{"price": 10}], "workforce": {"roles": [0.25]}})


def test_ensure_finite_names_the_offending_value():
    with pytest.raises(InvalidRecordError, match=r"quotes\[1\]\.price"):
        ensure_finite({"quotes": [{"price": 1.0}, {"price": float("inf")}]})
    with pytest.raises(InvalidRecordError):
        ensure_finite({"budget": float("nan")})
