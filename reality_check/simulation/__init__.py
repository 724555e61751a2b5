"""Simulation engine — tables, scenarios, projection, concerns and scoring."""
from reality_check.simulation.tables import TableRegistry, get_tables
from reality_check.simulation.scenarios import generate_scenario
from reality_check.simulation.projection import calculate_monthly_payment, project
from reality_check.simulation.concerns import (
    CONCERN_CATALOG,
    ConcernDefinition,
    applicable_concerns,
    evaluate_concerns,
)
from reality_check.simulation.diagnosis import score_diagnosis
from reality_check.simulation.engine import build_round, play_round, simulate_rounds

__all__ = [
    "TableRegistry",
    "get_tables",
    "generate_scenario",
    "calculate_monthly_payment",
    "project",
    "CONCERN_CATALOG",
    "ConcernDefinition",
    "evaluate_concerns",
    "applicable_concerns",
    "score_diagnosis",
    "build_round",
    "play_round",
    "simulate_rounds",
]
