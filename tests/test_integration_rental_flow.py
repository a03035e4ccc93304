"""
End-to-end customer flow over HTTP: login -> browse -> quote -> rent -> return / report lost,
plus the admin dashboard and rental list seeing the results.
"""

import pytest

START = "2030-01-10T09:00"
END_3H = "2030-01-10T12:00"


def _rent(client, vid, start=START, end=END_3H):
    return client.post("/rent", json={"vehicle_id": vid, "start": start, "expected_return": end})


@pytest.fixture
def customer(client, login):
    assert login("user", "user").status_code == 200
    return client


def test_browse_available_vehicles(customer):
    body = customer.get("/vehicles").get_json()
    ids = [v["vehicle_id"] for v in body["vehicles"]]
    assert len(ids) == 18
    assert "V005" not in ids

    body = customer.get("/vehicles?type=motorbike&q=honda").get_json()
    assert [v["vehicle_id"] for v in body["vehicles"]] == ["V019"]

    r = customer.get("/vehicles/V010")
    assert r.get_json()["rentable"] is False
    assert customer.get("/vehicles/V404").status_code == 404


def test_quote_then_rent_same_total(customer, store):
    q = customer.post("/quote", json={"vehicle_id": "V015", "start": START,
                                      "expected_return": "2030-01-10T12:40"}).get_json()
    assert q["hours"] == 3
    assert q["total_cost"] == "15.00"

    r = _rent(customer, "V015", end="2030-01-10T12:40")
    assert r.status_code == 201
    rental = r.get_json()["rental"]
    assert rental["rental_id"] == "R1001"
    assert rental["total_cost"] == q["total_cost"]
    assert rental["duration"] == "3h 40m"
    assert rental["rental_start"] == "2030-01-10 09:00"
    assert rental["give_back_date"] == "-"
    assert store.vehicles.get_by_id("V015").status == "Rented"


@pytest.mark.parametrize("start,end,status,hint", [
    ("", END_3H, 400, "valid dates"),
    ("not-a-date", END_3H, 400, "valid dates"),
    (START, START, 400, "after start"),
    (START, "2030-03-01T09:00", 400, "maximum rental period"),
    (START, "2030-01-10T12:00+00:00", 400, "offset"),
])
def test_rent_date_errors(customer, store, start, end, status, hint):
    r = _rent(customer, "V001", start, end)
    assert r.status_code == status
    assert hint in r.get_json()["message"].lower()
    assert store.rentals.total_count() == 0


def test_rent_refusals(customer):
    r = _rent(customer, "V404")
    assert r.status_code == 404

    r = _rent(customer, "V010")
    assert r.status_code == 409
    assert "under maintenance" in r.get_json()["message"].lower()

    r = _rent(customer, "V005")
    assert r.status_code == 409


def test_rent_limit_over_http(customer):
    for vid in ("V001", "V002", "V003"):
        assert _rent(customer, vid).status_code == 201
    r = _rent(customer, "V004")
    assert r.status_code == 409
    assert "maximum 3" in r.get_json()["message"].lower()

    dash = customer.get("/dashboard/customer").get_json()
    assert len(dash["active_rentals"]) == 3
    assert dash["slots_left"] == 0


def test_return_flow(customer, store):
    rid = _rent(customer, "V001").get_json()["rental"]["rental_id"]

    r = customer.post("/return", json={"rental_id": rid})
    assert r.status_code == 200
    body = r.get_json()
    assert body["rental"]["status"] == "Returned"
    assert body["rental"]["actual_return"] != "-"
    assert store.vehicles.get_by_id("V001").status == "Available"

    r = customer.post("/return", json={"rental_id": rid})
    assert r.status_code == 409
    assert "already been returned" in r.get_json()["message"]

    assert customer.post("/return", json={}).status_code == 400
    assert customer.post("/return", json={"rental_id": "R9999"}).status_code == 404


def test_report_lost_flow(customer, store):
    rid = _rent(customer, "V002").get_json()["rental"]["rental_id"]

    r = customer.post("/lost", json={"rental_id": rid})
    assert r.status_code == 400

    r = customer.post("/lost", json={"rental_id": rid, "give_back_date": "2030-02-01T10:00"})
    assert r.status_code == 200
    assert r.get_json()["rental"]["give_back_date"] == "2030-02-01 10:00"
    assert store.vehicles.get_by_id("V002").status == "Lost"

    r = customer.post("/return", json={"rental_id": rid})
    assert r.status_code == 409


def test_customers_cannot_touch_each_others_rentals(client, login, store):
    login("user", "user")
    rid = _rent(client, "V001").get_json()["rental"]["rental_id"]
    client.get("/logout")

    client.post("/register", json={"username": "mallory", "password": "pw12"})
    login("mallory", "pw12")
    r = client.post("/return", json={"rental_id": rid})
    assert r.status_code == 404
    assert client.get("/rentals").get_json()["rentals"] == []
    assert store.rentals.get_by_id(rid).is_active


def test_history_and_admin_views(client, login):
    login("user", "user")
    r1 = _rent(client, "V001").get_json()["rental"]["rental_id"]
    r2 = _rent(client, "V002").get_json()["rental"]["rental_id"]
    client.post("/return", json={"rental_id": r1})

    history = client.get("/rentals").get_json()["rentals"]
    assert [r["rental_id"] for r in history] == [r2, r1]
    client.get("/logout")

    login("admin", "admin")
    dash = client.get("/dashboard/admin").get_json()
    assert dash["totals"] == {
        "available_vehicles": 17,
        "total_vehicles": 20,
        "total_rentals": 2,
        "total_revenue": round(50.0 / 24 * 3, 2),
    }
    assert dash["rentals_by_status"] == {"Active": 1, "Returned": 1, "Lost": 0}
    assert dash["vehicles_by_status"]["Rented"] == 3

    active = client.get("/admin/rentals?status=Active").get_json()["rentals"]
    assert [r["rental_id"] for r in active] == [r2]
    assert len(client.get("/admin/rentals").get_json()["rentals"]) == 2


def test_sub_hour_range_rejected_for_quote_and_rent(customer):
    r = customer.post("/quote", json={"vehicle_id": "V001", "start": START,
                                      "expected_return": "2030-01-10T09:45"})
    assert r.status_code == 400
    assert "one hour" in r.get_json()["message"]
    assert _rent(customer, "V001", end="2030-01-10T09:45").status_code == 400
    r = customer.post("/quote", json={"vehicle_id": "V404", "start": START, "expected_return": END_3H})
    assert r.status_code == 404


def test_non_string_ids_are_not_server_errors(customer):
    r = customer.post("/rent", json={"vehicle_id": 5, "start": START, "expected_return": END_3H})
    assert r.status_code == 404
    r = customer.post("/quote", json={"vehicle_id": ["V001"], "start": START, "expected_return": END_3H})
    assert r.status_code == 404
    assert customer.post("/return", json={"rental_id": 1001}).status_code == 404
    assert customer.post("/lost", json={"rental_id": None, "give_back_date": END_3H}).status_code == 400
    assert customer.post("/rent", json=["V001", START, END_3H]).status_code == 400


def test_rented_vehicle_reset_to_available_cannot_be_rented_again(client, login):
    login("user", "user")
    assert _rent(client, "V001").status_code == 201
    client.get("/logout")

    login("admin", "admin")
    r = client.post("/admin/vehicles/V001", json={"name": "Toyota Camry", "type": "Car",
                                                  "price_per_day": 50, "status": "Available"})
    assert r.status_code == 200
    client.get("/logout")

    client.post("/register", json={"username": "alice", "password": "alice"})
    login("alice", "alice")
    r = _rent(client, "V001")
    assert r.status_code == 409
    assert "active rental" in r.get_json()["message"].lower()


def test_admin_rental_filter_ignores_case(client, login):
    login("user", "user")
    rid = _rent(client, "V001").get_json()["rental"]["rental_id"]
    client.get("/logout")

    login("admin", "admin")
    for status in ("active", " ACTIVE ", "Active"):
        rows = client.get("/admin/rentals", query_string={"status": status}).get_json()["rentals"]
        assert [r["rental_id"] for r in rows] == [rid]
    assert client.get("/admin/rentals?status=returned").get_json()["rentals"] == []
    r = client.get("/admin/rentals?status=pending")
    assert r.status_code == 400
    assert "active, returned or lost" in r.get_json()["message"].lower()
