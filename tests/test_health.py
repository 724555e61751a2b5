from fastapi.testclient import TestClient

from reality_check.main import app

client = TestClient(app)


def test_health_returns_200():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["concern_catalog"] == 8
    assert "source" in data["tables"]


def test_tables_returns_200():
    response = client.get("/api/tables")
    assert response.status_code == 200
    data = response.json()
    assert len(data["careers"]) >= 1
    assert data["careers"][0]["job_growth"] in ("weak", "moderate", "strong")


def test_projection_no_body_returns_422():
    response = client.post("/api/projections/run")
    assert response.status_code == 422
