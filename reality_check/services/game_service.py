"""Game round service.

Facade the API uses to start a round, evaluate an arbitrary scenario and
score a submitted diagnosis.
"""
from __future__ import annotations

import logging
import random

from reality_check.models.concern import ConcernInstance, DiagnosisRequest, DiagnosisResult
from reality_check.models.projection import ProjectionYear
from reality_check.models.scenario import Scenario
from reality_check.models.simulation import GameRound
from reality_check.simulation.concerns import evaluate_concerns
from reality_check.simulation.diagnosis import score_diagnosis
from reality_check.simulation.engine import play_round
from reality_check.simulation.projection import project
from reality_check.simulation.scenarios import generate_scenario

logger = logging.getLogger(__name__)


def _rng(seed: int | None) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


def new_scenario(seed: int | None = None) -> Scenario:
    return generate_scenario(_rng(seed))


def start_round(seed: int | None = None) -> GameRound:
    """Generate a scenario and return its projection, concerns and summary."""
    game_round = play_round(_rng(seed))
    scenario = game_round.scenario
    logger.info(
        "New round — %s, %s via %s, %d applicable concerns",
        scenario.name,
        scenario.career,
        scenario.education_path,
        sum(1 for c in game_round.concerns if c.applies),
    )
    return game_round


def run_projection(scenario: Scenario) -> list[ProjectionYear]:
    return project(scenario)


def evaluate_scenario(scenario: Scenario) -> list[ConcernInstance]:
    """All catalog concerns for a scenario, with applicability and evidence."""
    return evaluate_concerns(scenario, project(scenario))


def submit_diagnosis(request: DiagnosisRequest) -> DiagnosisResult:
    """Score a diagnosis. The projection is recomputed from the submitted scenario."""
    projection = project(request.scenario)
    result = score_diagnosis(request.scenario, projection, request.selected_concern_ids)
    logger.info(
        "Diagnosis scored %d%% (%d/%d correct, %d missed, %d false positives)",
        result.score,
        result.correct_identifications,
        result.total_concerns,
        len(result.missed_concerns),
        len(result.false_positives),
    )
    return result
