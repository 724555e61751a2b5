from typing import Optional

from pydantic import BaseModel, Field

from reality_check.models.concern import ConcernInstance
from reality_check.models.projection import ProjectionYear, RoundSummary
from reality_check.models.scenario import Scenario


class RoundConfig(BaseModel):
    """Optional seed for generating a scenario or a full round."""
    seed: Optional[int] = None


class GameRound(BaseModel):
    """Everything the front end needs to present one round."""
    scenario: Scenario
    projection: list[ProjectionYear]
    concerns: list[ConcernInstance]
    summary: RoundSummary


class BatchConfig(BaseModel):
    """Configuration for a batch of simulated rounds."""
    n_rounds: int = Field(default=200, ge=1)
    seed: Optional[int] = 42


class ConcernPrevalence(BaseModel):
    id: str
    title: str
    count: int
    rate: float


class BatchSummary(BaseModel):
    n_rounds: int
    mean_concerns_per_round: float
    rounds_without_concerns: int
    prevalence: list[ConcernPrevalence]
    final_debt_percentiles: dict[str, float]
    first_job_dti_percentiles: dict[str, float]
    config: BatchConfig
