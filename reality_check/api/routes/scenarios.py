from typing import Optional

from fastapi import APIRouter

from reality_check.models.projection import ProjectionYear
from reality_check.models.scenario import Scenario
from reality_check.models.simulation import GameRound, RoundConfig
from reality_check.services.game_service import new_scenario, run_projection, start_round

router = APIRouter(tags=["scenarios"])


@router.post("/scenarios/generate", response_model=Scenario)
def generate_scenario_endpoint(config: Optional[RoundConfig] = None):
    """Draw a random scenario from the parameter tables."""
    config = config or RoundConfig()
    return new_scenario(config.seed)


@router.post("/projections/run", response_model=list[ProjectionYear])
def run_projection_endpoint(scenario: Scenario):
    """Project an inline scenario over the 10-year horizon."""
    return run_projection(scenario)


@router.post("/rounds", response_model=GameRound)
def start_round_endpoint(config: Optional[RoundConfig] = None):
    """Start a round: scenario, projection, all concerns and headline numbers."""
    config = config or RoundConfig()
    return start_round(config.seed)
