"""Round engine — generate, project and evaluate one or many game rounds.

Every round gets its own Scenario, projection and concern list; the only
thing shared across a batch is the random source.
"""
from __future__ import annotations

import random

from reality_check.models.projection import ProjectionYear, RoundSummary
from reality_check.models.scenario import Scenario
from reality_check.models.simulation import GameRound
from reality_check.models.tables import ParameterTables
from reality_check.simulation.concerns import evaluate_concerns
from reality_check.simulation.projection import find_first_job_year, project
from reality_check.simulation.scenarios import generate_scenario


def summarize_round(scenario: Scenario, projection: list[ProjectionYear]) -> RoundSummary:
    """Headline numbers for a round. First-job fields are None with no post-grad year."""
    first_job = find_first_job_year(projection)
    return RoundSummary(
        total_education_cost=scenario.total_education_cost,
        first_year_debt=projection[0].debt if projection else 0,
        final_debt=projection[-1].debt if projection else 0,
        monthly_expenses=scenario.monthly_expenses,
        first_job_year=first_job.year if first_job else None,
        first_job_salary=first_job.salary if first_job else None,
        first_job_monthly_payment=first_job.monthly_debt_payment if first_job else None,
        first_job_debt_to_income=first_job.debt_to_income_ratio if first_job else None,
    )


def build_round(scenario: Scenario) -> GameRound:
    """Project and evaluate an existing scenario."""
    projection = project(scenario)
    return GameRound(
        scenario=scenario,
        projection=projection,
        concerns=evaluate_concerns(scenario, projection),
        summary=summarize_round(scenario, projection),
    )


def play_round(
    rng: random.Random | None = None,
    tables: ParameterTables | None = None,
) -> GameRound:
    """Generate a fresh scenario and build its round."""
    return build_round(generate_scenario(rng, tables))


def simulate_rounds(
    n_rounds: int,
    seed: int | None = None,
    tables: ParameterTables | None = None,
) -> list[GameRound]:
    """Play n_rounds independent rounds from one random source."""
    rng = random.Random(seed) if seed is not None else random.Random()
    return [play_round(rng, tables) for _ in range(n_rounds)]
