# tests/test_api.py
from decimal import Decimal


def _create_property(client, **overrides):
     payload = {
          "name": "Mapo Officetel 1203",
          "property_type": "OFFICETEL",
          "address": "Seoul Mapo-gu",
          "purchase_price": 200000000,
          "purchase_date": "2022-03-15",
     }
     payload.update(overrides)
     response = client.post("/api/properties", json=payload)
     assert response.status_code == 201, response.text
     return response.json()


def _create_lease(client, property_id, **overrides):
     tenant = client.post("/api/tenants", json={"name": "Kim Tenant"}).json()
     payload = {
          "property_id": property_id,
          "tenant_id": tenant["id"],
          "lease_type": "HALF_JEONSE",
          "deposit": 100000000,
          "monthly_rent": 3800000,
          "management_fee": 200000,
          "start_date": "2026-01-01",
          "end_date": "2027-12-31",
          "rent_due_day": 25,
     }
     payload.update(overrides)
     response = client.post("/api/leases", json=payload)
     assert response.status_code == 201, response.text
     return response.json()


def test_requests_without_token_are_rejected(client):
     response = client.get("/api/properties", headers={"Authorization": ""})
     assert response.status_code == 401

     response = client.get("/api/properties", headers={"Authorization": "Bearer nonsense"})
     assert response.status_code == 403


def test_property_crud(client):
     created = _create_property(client)
     assert created["status"] == "VACANT"

     listed = client.get("/api/properties").json()
     assert [p["id"] for p in listed] == [created["id"]]

     response = client.put(f"/api/properties/{created['id']}", json={"current_value": 250000000})
     assert response.status_code == 200
     assert Decimal(response.json()["current_value"]) == Decimal("250000000")

     assert client.delete(f"/api/properties/{created['id']}").status_code == 204
     assert client.get(f"/api/properties/{created['id']}").status_code == 404


def test_missing_record_maps_to_404(client):
     response = client.get("/api/properties/999")

     assert response.status_code == 404
     assert response.json() == {"detail": "Property with ID 999 not found"}


def test_other_owners_property_is_hidden(client, db, other_owner, make_property):
     foreign = make_property(other_owner)
     db.commit()

     assert client.get(f"/api/properties/{foreign.id}").status_code == 404
     assert client.get("/api/properties").json() == []


def test_schedule_generation_is_idempotent(client):
     prop = _create_property(client)
     lease = _create_lease(client, prop["id"])
     body = {"lease_id": lease["id"], "start_year": 2026, "start_month": 1, "end_year": 2026, "end_month": 12}

     first = client.post("/api/rent-payments/generate", json=body)
     second = client.post("/api/rent-payments/generate", json=body)

     assert first.status_code == 201
     assert first.json()["count"] == 12
     assert second.json()["count"] == 12
     payments = client.get("/api/rent-payments", params={"lease_id": lease["id"]}).json()
     assert len(payments) == 12
     assert payments[0]["payment_month"] == 12
     assert payments[0]["due_date"] == "2026-12-25"
     assert Decimal(payments[0]["total_amount"]) == Decimal("4000000")


def test_schedule_request_validates_month(client):
     body = {"lease_id": 1, "start_year": 2026, "start_month": 0, "end_year": 2026, "end_month": 13}

     assert client.post("/api/rent-payments/generate", json=body).status_code == 422


def test_payment_status_update(client):
     prop = _create_property(client)
     lease = _create_lease(client, prop["id"])
     client.post(
          "/api/rent-payments/generate",
          json={"lease_id": lease["id"], "start_year": 2026, "start_month": 1, "end_year": 2026, "end_month": 1},
     )
     payment = client.get("/api/rent-payments").json()[0]

     response = client.patch(f"/api/rent-payments/{payment['id']}/status", json={"rent_status": "PAID"})

     assert response.status_code == 200
     assert response.json()["rent_status"] == "PAID"
     assert response.json()["payment_date"] is not None


def test_overdue_listing_marks_old_payments(client):
     prop = _create_property(client)
     lease = _create_lease(client, prop["id"])
     client.post(
          "/api/rent-payments/generate",
          json={"lease_id": lease["id"], "start_year": 2020, "start_month": 1, "end_year": 2020, "end_month": 3},
     )

     overdue = client.get("/api/rent-payments/overdue/list").json()

     assert [p["payment_month"] for p in overdue] == [1, 2, 3]
     assert {p["rent_status"] for p in overdue} == {"OVERDUE"}


def test_lease_termination_vacates_property(client):
     prop = _create_property(client)
     lease = _create_lease(client, prop["id"])
     assert client.get(f"/api/properties/{prop['id']}").json()["status"] == "OCCUPIED"

     response = client.patch(f"/api/leases/{lease['id']}/status", json={"status": "TERMINATED"})

     assert response.status_code == 200
     assert client.get(f"/api/properties/{prop['id']}").json()["status"] == "VACANT"


def test_tenant_with_active_lease_cannot_be_deleted(client):
     prop = _create_property(client)
     lease = _create_lease(client, prop["id"])

     response = client.delete(f"/api/tenants/{lease['tenant_id']}")

     assert response.status_code == 409
     assert "active lease" in response.json()["detail"]


def test_valuation_and_portfolio(client):
     prop = _create_property(client)
     _create_lease(client, prop["id"])

     response = client.post("/api/valuations/calculate", json={"property_id": prop["id"]})
     assert response.status_code == 201, response.text
     result = response.json()
     assert Decimal(result["valuation"]["gross_yield"]) == Decimal("22.80")
     assert Decimal(result["details"]["suggested_price"]) == Decimal("1012000000")

     summary = client.get("/api/valuations/portfolio/summary").json()
     assert summary["total_properties"] == 1
     assert summary["occupied_count"] == 1
     assert summary["properties"][0]["lease_count"] == 1

     stored = client.get("/api/valuations", params={"property_id": prop["id"]}).json()
     assert len(stored) == 1


def test_register_and_login(client):
     response = client.post(
          "/api/auth/register",
          json={"email": "new@example.com", "password": "s3cret-pass", "name": "New Owner"},
     )
     assert response.status_code == 201, response.text
     assert response.json()["user"]["email"] == "new@example.com"

     duplicate = client.post(
          "/api/auth/register",
          json={"email": "new@example.com", "password": "s3cret-pass", "name": "New Owner"},
     )
     assert duplicate.status_code == 400

     login = client.post("/api/auth/login", json={"email": "new@example.com", "password": "s3cret-pass"})
     assert login.status_code == 200
     token = login.json()["token"]
     assert client.get("/api/properties", headers={"Authorization": f"Bearer {token}"}).json() == []

     wrong = client.post("/api/auth/login", json={"email": "new@example.com", "password": "nope"})
     assert wrong.status_code == 401


def test_expense_update(client):
     prop = _create_property(client)
     created = client.post(
          "/api/expenses",
          json={"property_id": prop["id"], "expense_type": "INSURANCE", "amount": 120000, "expense_date": "2026-03-02"},
     ).json()

     response = client.put(f"/api/expenses/{created['id']}", json={"amount": 150000, "memo": "renewed"})

     assert response.status_code == 200, response.text
     assert Decimal(response.json()["amount"]) == Decimal("150000")
     assert response.json()["memo"] == "renewed"
     assert response.json()["expense_type"] == "INSURANCE"
     assert client.put("/api/expenses/999", json={"amount": 1}).status_code == 404


def test_property_summary(client):
     prop = _create_property(client)
     lease = _create_lease(client, prop["id"])
     client.post(
          "/api/rent-payments/generate",
          json={"lease_id": lease["id"], "start_year": 2026, "start_month": 1, "end_year": 2026, "end_month": 2},
     )

     response = client.get(f"/api/properties/{prop['id']}/summary")

     assert response.status_code == 200, response.text
     body = response.json()
     assert body["property"] == {"id": prop["id"], "name": prop["name"], "status": "OCCUPIED"}
     assert Decimal(body["monthly_rent_total"]) == Decimal("3800000")
     assert Decimal(body["total_investment"]) == Decimal("200000000")
     assert set(body["yields"]) == {"gross_yield", "net_yield", "cash_on_cash"}
     assert client.get("/api/properties/999/summary").status_code == 404


def test_owner_profile(client, owner):
     profile = client.get("/api/auth/me")
     assert profile.status_code == 200
     assert profile.json()["email"] == owner.email
     assert profile.json()["created_at"] is not None

     response = client.put("/api/auth/me", json={"name": "Renamed", "phone": "010-1234-5678", "password": "n3w-pass"})

     assert response.status_code == 200, response.text
     assert response.json()["name"] == "Renamed"
     assert response.json()["phone"] == "010-1234-5678"
     assert "password" not in response.json()
     login = client.post("/api/auth/login", json={"email": owner.email, "password": "n3w-pass"})
     assert login.status_code == 200

     unchanged = client.put("/api/auth/me", json={"name": ""})
     assert unchanged.json()["name"] == "Renamed"
