"""
Integration tests for the HTTP API using FastAPI TestClient.

These tests exercise router -> service -> store against a temporary SQLite
database created by the application lifespan.
"""

from __future__ import annotations


def _script_body(**overrides) -> dict:
    body = {
        "name": "Patch",
        "command": "echo hi",
        "category": "software",
        "customers": ["1"],
    }
    body.update(overrides)
    return body


class TestHealth:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "OK"
        assert body["timestamp"]


class TestCustomerEndpoints:
    def test_create_and_list(self, client):
        resp = client.post("/api/customers", json={"id": "2", "name": "Globex"})
        assert resp.status_code == 201
        assert resp.json() == {"id": "2", "name": "Globex"}
        client.post("/api/customers", json={"id": "1", "name": "Acme"})

        resp = client.get("/api/customers")
        assert resp.status_code == 200
        assert [customer["name"] for customer in resp.json()] == ["Acme", "Globex"]

    def test_missing_fields(self, client):
        resp = client.post("/api/customers", json={"id": "1"})
        assert resp.status_code == 400

    def test_duplicate(self, client):
        client.post("/api/customers", json={"id": "1", "name": "Acme"})
        resp = client.post("/api/customers", json={"id": "1", "name": "Other"})
        assert resp.status_code == 409

    def test_delete(self, client):
        client.post("/api/customers", json={"id": "1", "name": "Acme"})
        assert client.delete("/api/customers/1").status_code == 200
        assert client.delete("/api/customers/1").status_code == 404


class TestScriptEndpoints:
    def test_create_uses_camel_case(self, client):
        client.post("/api/customers", json={"id": "1", "name": "Acme"})
        resp = client.post("/api/scripts", json=_script_body(isGlobal=True))
        assert resp.status_code == 201
        body = resp.json()
        assert body["isGlobal"] is True
        assert body["autoEnrollment"] is False
        assert body["customers"] == ["1"]
        assert body["category"] == "software"
        assert body["description"] == ""
        assert "createdAt" in body and "updatedAt" in body

    def test_invalid_category(self, client):
        resp = client.post("/api/scripts", json=_script_body(category="unknown"))
        assert resp.status_code == 400
        assert client.get("/api/scripts").json() == []

    def test_missing_required_fields(self, client):
        resp = client.post("/api/scripts", json={"name": "Patch"})
        assert resp.status_code == 400

    def test_get_update_delete(self, client):
        client.post("/api/customers", json={"id": "1", "name": "Acme"})
        script_id = client.post("/api/scripts", json=_script_body()).json()["id"]

        resp = client.get(f"/api/scripts/{script_id}")
        assert resp.status_code == 200
        assert resp.json()["customers"] == ["1"]

        resp = client.put(
            f"/api/scripts/{script_id}",
            json=_script_body(category="security", customers=[]),
        )
        assert resp.status_code == 200
        assert resp.json()["category"] == "security"
        assert resp.json()["customers"] == []

        listed = client.get("/api/scripts").json()
        assert [script["id"] for script in listed] == [script_id]

        resp = client.delete(f"/api/scripts/{script_id}")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Script deleted successfully"}
        assert client.get(f"/api/scripts/{script_id}").status_code == 404

    def test_missing_script(self, client):
        assert client.get("/api/scripts/missing").status_code == 404
        assert client.put("/api/scripts/missing", json=_script_body()).status_code == 404
        assert client.delete("/api/scripts/missing").status_code == 404


class TestErrorBodies:
    def test_client_errors_use_error_key(self, client):
        resp = client.post("/api/customers", json={"id": "1"})
        assert resp.status_code == 400
        assert set(resp.json()) == {"error"}

        client.post("/api/customers", json={"id": "1", "name": "Acme"})
        resp = client.post("/api/customers", json={"id": "1", "name": "Acme"})
        assert resp.status_code == 409
        assert set(resp.json()) == {"error"}

        resp = client.get("/api/scripts/missing")
        assert resp.json() == {"error": "Script not found"}

    def test_null_flags_are_treated_as_false(self, client):
        resp = client.post(
            "/api/scripts",
            json=_script_body(customers=[], isGlobal=None, autoEnrollment=None),
        )
        assert resp.status_code == 201
        assert resp.json()["isGlobal"] is False
        assert resp.json()["autoEnrollment"] is False

    def test_wrongly_typed_fields_are_bad_requests(self, client):
        resp = client.post("/api/scripts", json=_script_body(name=5))
        assert resp.status_code == 400
        assert "name" in resp.json()["error"]

        resp = client.post("/api/scripts", json=_script_body(customers="1"))
        assert resp.status_code == 400
        assert client.get("/api/scripts").json() == []
