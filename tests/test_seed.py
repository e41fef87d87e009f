"""Tests for the seed routine."""
from pms import constants
from pms.models.models import ConstructionWork, InventoryItem, Material, RentalItem, TaskStatus, UserProfile
from pms.services.seed import seed, seed_if_empty


def test_seed_populates_tables(db):
    counts = seed(db)
    assert counts["materials"] == len(constants.DEFAULT_MATERIALS)
    assert counts["task_statuses"] == len(constants.DEFAULT_TASK_STATUSES)
    assert db.query(Material).count() == len(constants.DEFAULT_MATERIALS)


def test_seed_stores_json_fields_as_text(db):
    seed(db)
    work = db.get(ConstructionWork, "w1")
    assert work.team_ids == '["u1","u2","u3","u4"]'
    admin = db.get(UserProfile, "p_admin")
    assert admin.permissions.startswith('{"viewDashboard":true')


def test_seed_is_repeatable(db):
    seed(db)
    seed(db)
    assert db.query(TaskStatus).count() == len(constants.DEFAULT_TASK_STATUSES)


def test_seed_if_empty(db):
    assert seed_if_empty(db) is True
    assert seed_if_empty(db) is False


def test_seeded_records_are_decoded_by_the_api(db, client):
    seed(db)
    data = client.get("/api/initial-data").json()
    works = {w["id"]: w for w in data["works"]}
    assert works["w2"]["teamIds"] == ["u1", "u2"]
    profiles = {p["id"]: p for p in data["profiles"]}
    assert profiles["p_client"]["permissions"]["viewWorks"] is True
    assert profiles["p_client"]["permissions"]["manageWorks"] is False
    assert [s["order"] for s in data["taskStatuses"]] == list(range(6))


def test_seed_wipes_inventory_and_rentals(db):
    db.add(InventoryItem(id="i1", name="Betoneira"))
    db.add(RentalItem(id="r1", item_name="Andaime"))
    db.commit()

    seed(db)
    assert db.query(InventoryItem).count() == 0
    assert db.query(RentalItem).count() == 0
