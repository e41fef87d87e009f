"""Tests for the JSON-field normalization layer."""
import pytest

from pms.services.normalization import DESIGNATED_FIELDS, denormalize, normalize


def test_designated_fields():
    assert set(DESIGNATED_FIELDS) == {"permissions", "teamIds", "images", "quotes"}


@pytest.mark.parametrize(
    "value",
    [
        ["u1", "u2"],
        {"viewWorks": True, "manageUsers": False},
        [{"id": "q1", "supplierId": "u6", "price": 36.9}, {"id": "q2", "tags": ["a", {"b": None}]}],
        [],
        {},
    ],
)
def test_denormalize_then_normalize_restores_value(value):
    entity = {"id": "e1", "permissions": value, "teamIds": value, "images": value, "quotes": value}
    stored = denormalize(entity)
    for key in DESIGNATED_FIELDS:
        assert isinstance(stored[key], str)
    restored = normalize(stored)
    for key in DESIGNATED_FIELDS:
        assert restored[key] == value


def test_normalize_is_idempotent_on_decoded_record():
    entity = {"id": "w1", "name": "Obra", "teamIds": '["u1","u2"]', "images": ["a.png"]}
    once = normalize(entity)
    twice = normalize(once)
    assert once == twice
    assert twice["teamIds"] == ["u1", "u2"]
    assert twice["images"] == ["a.png"]


def test_normalize_keeps_malformed_json_as_text():
    out = normalize({"id": "p1", "permissions": "not valid json"})
    assert out["permissions"] == "not valid json"


def test_normalize_keeps_empty_string():
    assert normalize({"images": ""})["images"] == ""


def test_denormalize_uses_compact_json():
    out = denormalize({"id": "o1", "quotes": [{"item": "cement", "qty": 10}]})
    assert out["quotes"] == '[{"item":"cement","qty":10}]'


def test_denormalize_keeps_non_ascii_text():
    out = denormalize({"teamIds": ["João"]})
    assert out["teamIds"] == '["João"]'


def test_normalize_none_returns_none():
    assert normalize(None) is None


def test_non_designated_fields_untouched():
    entity = {"id": "x", "notes": "[1,2,3]", "workforce": {"Pedreiro": 2}}
    assert normalize(entity)["notes"] == "[1,2,3]"
    assert denormalize(entity)["workforce"] == {"Pedreiro": 2}
    assert denormalize(entity)["notes"] == "[1,2,3]"


def test_text_values_are_not_encoded_twice():
    entity = {"images": '["a.png"]'}
    assert denormalize(entity)["images"] == '["a.png"]'


def test_scalars_and_none_pass_through_denormalize():
    out = denormalize({"images": None, "quotes": 5})
    assert out["images"] is None
    assert out["quotes"] == 5


def test_inputs_are_not_mutated():
    entity = {"teamIds": ["u1"]}
    denormalize(entity)
    assert entity == {"teamIds": ["u1"]}
    stored = {"teamIds": '["u1"]'}
    normalize(stored)
    assert stored == {"teamIds": '["u1"]'}


def test_explicit_field_list_limits_the_fields_touched():
    entity = {"images": '["a.png"]', "teamIds": '["u1"]'}
    out = normalize(entity, ("images",))
    assert out["images"] == ["a.png"]
    assert out["teamIds"] == '["u1"]'


def test_normalize_decodes_json_string_value():
    assert normalize({"images": '"cover.png"'})["images"] == "cover.png"


@pytest.mark.parametrize("text", ["NaN", "[NaN]", "Infinity", '{"price":-Infinity}', "1e999", "[1.5e400]"])
def test_normalize_keeps_non_finite_numbers_as_text(text):
    assert normalize({"permissions": text})["permissions"] == text


def test_normalize_keeps_deeply_nested_text():
    text = "[" * 100000 + "]" * 100000
    assert normalize({"images": text})["images"] == text


def test_denormalize_rejects_non_finite_numbers():
    with pytest.raises(ValueError):
        denormalize({"quotes": [{"price": float("nan")}]})
    with pytest.raises(ValueError):
        denormalize({"teamIds": [float("inf")]})
