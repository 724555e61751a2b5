from fastapi import APIRouter, HTTPException

from reality_check.models.concern import (
    ConcernInstance,
    ConcernSummary,
    DiagnosisRequest,
    DiagnosisResult,
)
from reality_check.models.scenario import Scenario
from reality_check.services.game_service import evaluate_scenario, submit_diagnosis
from reality_check.simulation.concerns import get_concern_definition, list_concern_summaries

router = APIRouter(tags=["concerns"])


@router.get("/concerns/catalog", response_model=list[ConcernSummary])
def get_catalog():
    return list_concern_summaries()


@router.get("/concerns/catalog/{concern_id}", response_model=ConcernSummary)
def get_catalog_entry(concern_id: str):
    try:
        definition = get_concern_definition(concern_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Concern '{concern_id}' not found")
    return ConcernSummary(id=definition.id, title=definition.title, description=definition.description)


@router.post("/concerns/evaluate", response_model=list[ConcernInstance])
def evaluate_concerns_endpoint(scenario: Scenario):
    """Evaluate every catalog concern for an inline scenario."""
    return evaluate_scenario(scenario)


@router.post("/diagnosis/score", response_model=DiagnosisResult)
def score_diagnosis_endpoint(request: DiagnosisRequest):
    """Score the selected concern ids against the concerns that actually apply."""
    return submit_diagnosis(request)
