"""
Admin vehicle management over HTTP: add, edit (with and without status), the
form rules, listing filters and reset.
"""

import pytest


@pytest.fixture
def admin(client, login):
    assert login("admin", "admin").status_code == 200
    return client


def test_add_vehicle(admin, store):
    r = admin.post("/admin/vehicles", json={"name": "Mazda CX-5", "type": "car", "price_per_day": "62.5"})
    assert r.status_code == 201
    v = r.get_json()["vehicle"]
    assert v["vehicle_id"] == "V021"
    assert v["type"] == "Car"
    assert v["status"] == "Available"
    assert v["price_per_day"] == "62.50"
    assert store.vehicles.get_by_id("V021").price_per_day == 62.5


@pytest.mark.parametrize("payload,hint", [
    ({"name": "", "type": "Car", "price_per_day": 10}, "enter vehicle name"),
    ({"name": "X", "type": "Car", "price_per_day": 10}, "2-50"),
    ({"name": "Y" * 51, "type": "Car", "price_per_day": 10}, "2-50"),
    ({"name": "Bus", "type": "Bus", "price_per_day": 10}, "type"),
    ({"name": "Van", "type": "Truck", "price_per_day": "abc"}, "valid price"),
    ({"name": "Van", "type": "Truck", "price_per_day": 0}, "greater than 0"),
    ({"name": "Van", "type": "Truck", "price_per_day": 10001}, "too high"),
    ({"name": "Van", "type": "Truck", "price_per_day": 10, "status": "Parked"}, "status"),
    ({"name": 123, "type": 7, "price_per_day": 10}, "type"),
    ({"name": ["Van"], "type": "Truck", "price_per_day": [10]}, "valid price"),
])
def test_add_vehicle_form_rules(admin, store, payload, hint):
    r = admin.post("/admin/vehicles", json=payload)
    assert r.status_code == 400
    assert hint in r.get_json()["message"].lower()
    assert len(store.vehicles) == 20


def test_edit_vehicle_keeps_status_when_omitted(admin, store):
    r = admin.post("/admin/vehicles/V005", json={"name": "Tesla Model Y", "type": "Car", "price_per_day": 110})
    assert r.status_code == 200
    v = store.vehicles.get_by_id("V005")
    assert (v.name, v.price_per_day, v.status) == ("Tesla Model Y", 110.0, "Rented")

    r = admin.post("/admin/vehicles/V010", json={"name": "Suzuki Hayate", "type": "Motorbike",
                                                 "price_per_day": 20, "status": "available"})
    assert r.status_code == 200
    assert store.vehicles.get_by_id("V010").status == "Available"

    r = admin.post("/admin/vehicles/V404", json={"name": "Ghost", "type": "Car", "price_per_day": 20})
    assert r.status_code == 404


def test_list_filters(admin):
    rows = admin.get("/admin/vehicles").get_json()["vehicles"]
    assert len(rows) == 20
    rows = admin.get("/admin/vehicles?type=Truck").get_json()["vehicles"]
    assert len(rows) == 6
    rows = admin.get("/admin/vehicles?q=ford&type=truck").get_json()["vehicles"]
    assert [v["name"] for v in rows] == ["Ford F-150", "Ford Ranger"]


def test_reset(admin, store, start, hours):
    store.vehicles.add_vehicle("Temp", "Car", 10.0)
    store.rentals.rent_vehicle("user", "V001", start, hours(start, 2))

    r = admin.post("/admin/reset")
    assert r.status_code == 200
    assert len(store.vehicles) == 20
    assert store.rentals.total_count() == 0
    assert store.vehicles.get_by_id("V001").status == "Available"
