from pydantic import BaseModel

from reality_check.models.scenario import Scenario


class ConcernSummary(BaseModel):
    id: str
    title: str
    description: str


class ConcernInstance(BaseModel):
    """A catalog concern evaluated against one scenario."""
    id: str
    title: str
    description: str
    evidence: str
    applies: bool


class DiagnosisRequest(BaseModel):
    """Request body for scoring a diagnosis. The projection is recomputed from the scenario."""
    scenario: Scenario
    selected_concern_ids: list[str] = []


class DiagnosisResult(BaseModel):
    correct_identifications: int
    total_concerns: int
    missed_concerns: list[ConcernInstance]
    false_positives: list[str]
    score: int
    score_label: str
    perfect: bool
    false_positive_details: list[ConcernInstance] = []
    all_concerns: list[ConcernInstance] = []
