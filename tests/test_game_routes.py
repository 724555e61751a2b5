"""Tests for the round, projection, concern and diagnosis endpoints."""
from fastapi.testclient import TestClient

from reality_check.config import settings
from reality_check.main import app

client = TestClient(app)

_SAMPLE_SCENARIO = {
    "name": "Casey",
    "age": 22,
    "career": "Nursing",
    "location": "Mid-size city",
    "start_salary": 62_000,
    "salary_5yr": 72_000,
    "job_growth": "strong",
    "education_path": "Community College (2 year)",
    "years_in_school": 2,
    "education_cost_per_year": 13_000,
    "total_education_cost": 26_000,
    "current_debt": 0,
    "dependents": 0,
    "monthly_expenses": 2_200,
    "will_work_during_school": True,
    "annual_income_while_studying": 18_000,
}


# --- Scenarios and rounds ---


def test_generate_scenario_without_body():
    response = client.post("/api/scenarios/generate")
    assert response.status_code == 200
    data = response.json()
    assert data["federal_loan_rate"] == 0.05
    assert data["loan_repayment_years"] == 10


def test_generate_scenario_seeded():
    r1 = client.post("/api/scenarios/generate", json={"seed": 17}).json()
    r2 = client.post("/api/scenarios/generate", json={"seed": 17}).json()
    assert r1 == r2


def test_start_round_structure():
    response = client.post("/api/rounds", json={"seed": 4})
    assert response.status_code == 200
    data = response.json()
    assert len(data["projection"]) == 10
    assert len(data["concerns"]) == 8
    assert data["summary"]["final_debt"] == data["projection"][-1]["debt"]


# --- Projection ---


def test_run_projection():
    response = client.post("/api/projections/run", json=_SAMPLE_SCENARIO)
    assert response.status_code == 200
    data = response.json()
    assert [row["year"] for row in data] == list(range(1, 11))
    assert data[2]["salary"] == 62_000
    assert data[2]["monthly_debt_payment"] == 489


def test_projection_rejects_negative_debt():
    response = client.post("/api/projections/run", json={**_SAMPLE_SCENARIO, "current_debt": -5})
    assert response.status_code == 422


def test_projection_rejects_inconsistent_total_cost():
    response = client.post("/api/projections/run", json={**_SAMPLE_SCENARIO, "total_education_cost": 0})
    assert response.status_code == 422


def test_evaluate_rejects_working_student_without_income():
    response = client.post(
        "/api/concerns/evaluate", json={**_SAMPLE_SCENARIO, "annual_income_while_studying": 0},
    )
    assert response.status_code == 422


def test_score_rejects_inconsistent_scenario():
    response = client.post("/api/diagnosis/score", json={
        "scenario": {**_SAMPLE_SCENARIO, "total_education_cost": 0},
        "selected_concern_ids": ["high_education_cost"],
    })
    assert response.status_code == 422


def test_projection_rejects_unknown_job_growth():
    response = client.post("/api/projections/run", json={**_SAMPLE_SCENARIO, "job_growth": "booming"})
    assert response.status_code == 422


# --- Concerns ---


def test_catalog():
    response = client.get("/api/concerns/catalog")
    assert response.status_code == 200
    assert len(response.json()) == 8


def test_catalog_entry():
    response = client.get("/api/concerns/catalog/extended_debt")
    assert response.status_code == 200
    assert response.json()["title"] == "Debt Extends Beyond 10 Years"


def test_catalog_unknown_entry_returns_404():
    response = client.get("/api/concerns/catalog/not_a_concern")
    assert response.status_code == 404


def test_evaluate_concerns():
    response = client.post("/api/concerns/evaluate", json=_SAMPLE_SCENARIO)
    assert response.status_code == 200
    applying = {c["id"] for c in response.json() if c["applies"]}
    assert applying == {"school_deficit", "extended_debt", "high_education_cost"}


# --- Diagnosis ---


def test_score_diagnosis():
    response = client.post("/api/diagnosis/score", json={
        "scenario": _SAMPLE_SCENARIO,
        "selected_concern_ids": ["school_deficit", "high_education_cost", "job_market"],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["correct_identifications"] == 2
    assert data["total_concerns"] == 3
    assert data["score"] == 67
    assert data["false_positives"] == ["job_market"]
    assert [c["id"] for c in data["missed_concerns"]] == ["extended_debt"]
    assert data["false_positive_details"][0]["applies"] is False


def test_score_diagnosis_missing_scenario_returns_422():
    response = client.post("/api/diagnosis/score", json={"selected_concern_ids": []})
    assert response.status_code == 422


# --- Batch ---


def test_batch_simulation():
    response = client.post("/api/simulations/batch", json={"n_rounds": 25, "seed": 3})
    assert response.status_code == 200
    data = response.json()
    assert data["n_rounds"] == 25
    assert len(data["prevalence"]) == 8


def test_batch_over_limit_returns_400():
    response = client.post("/api/simulations/batch", json={"n_rounds": settings.BATCH_MAX_ROUNDS + 1})
    assert response.status_code == 400


def test_batch_zero_rounds_returns_422():
    response = client.post("/api/simulations/batch", json={"n_rounds": 0})
    assert response.status_code == 422
