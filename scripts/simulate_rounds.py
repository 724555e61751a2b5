#!/usr/bin/env python3
"""Batch round simulation — how often does each concern actually apply?

Plays N random rounds, writes one CSV row per round and logs concern
prevalence by career and by education path.

Outputs:
  - reports/simulated_rounds.csv  (per-round detail for Excel)

Usage:
    python scripts/simulate_rounds.py
    python scripts/simulate_rounds.py --rounds 5000 --seed 7 --out rounds.csv
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
PROJECT_DIR = Path(__file__).resolve().parent.parent
REPORTS_DIR = PROJECT_DIR / "reports"

sys.path.insert(0, str(PROJECT_DIR))

logging.basicConfig(level=logging.INFO, format="%(asctime)s  %(message)s", datefmt="%H:%M:%S")
logger = logging.getLogger(__name__)

from reality_check.config import settings
from reality_check.models.simulation import BatchConfig, GameRound
from reality_check.services.simulation_service import summarize_rounds
from reality_check.simulation.concerns import list_concern_ids
from reality_check.simulation.engine import simulate_rounds
from reality_check.simulation.tables import TableRegistry


def rounds_to_frame(rounds: list[GameRound]) -> pd.DataFrame:
    """One row per round: scenario inputs, headline numbers and a flag per concern."""
    concern_ids = list_concern_ids()
    rows = []
    for i, game_round in enumerate(rounds, start=1):
        s = game_round.scenario
        summary = game_round.summary
        applies = {c.id: c.applies for c in game_round.concerns}
        row = {
            "round": i,
            "career": s.career,
            "location": s.location,
            "education_path": s.education_path,
            "years_in_school": s.years_in_school,
            "dependents": s.dependents,
            "current_debt": s.current_debt,
            "works_during_school": s.will_work_during_school,
            "total_education_cost": s.total_education_cost,
            "first_job_salary": summary.first_job_salary,
            "first_job_payment": summary.first_job_monthly_payment,
            "first_job_dti": summary.first_job_debt_to_income,
            "final_debt": summary.final_debt,
            "final_net_worth": game_round.projection[-1].net_worth,
        }
        for concern_id in concern_ids:
            row[concern_id] = applies.get(concern_id, False)
        row["n_concerns"] = sum(1 for cid in concern_ids if row[cid])
        rows.append(row)
    return pd.DataFrame(rows)


def prevalence_by(df: pd.DataFrame, column: str) -> pd.DataFrame:
    """Share of rounds flagging each concern, grouped by a scenario column."""
    concern_ids = list_concern_ids()
    grouped = df.groupby(column)[concern_ids].mean().round(3)
    grouped["rounds"] = df.groupby(column).size()
    return grouped.sort_values("rounds", ascending=False)


def main():
    parser = argparse.ArgumentParser(description="Simulate game rounds and report concern prevalence")
    parser.add_argument("--rounds", type=int, default=settings.DEFAULT_BATCH_ROUNDS,
                        help=f"Number of rounds (default: {settings.DEFAULT_BATCH_ROUNDS})")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: unseeded)")
    parser.add_argument("--tables", help="Parameter table JSON override (default: TABLES_FILE or built-ins)")
    parser.add_argument("--out", help="Output CSV filename (default: simulated_rounds.csv)")
    args = parser.parse_args()

    if args.rounds < 1:
        parser.error("--rounds must be at least 1")

    registry = TableRegistry.get()
    registry.load(args.tables)
    logger.info("Parameter tables: %s", registry.source)

    rounds = simulate_rounds(args.rounds, seed=args.seed)
    summary = summarize_rounds(rounds, BatchConfig(n_rounds=args.rounds, seed=args.seed))
    df = rounds_to_frame(rounds)

    REPORTS_DIR.mkdir(exist_ok=True)
    csv_path = REPORTS_DIR / (args.out or "simulated_rounds.csv")
    df.to_csv(csv_path, index=False)
    logger.info("Wrote %d rounds to %s", len(df), csv_path)

    logger.info("Mean concerns per round: %.2f (%d rounds with none)",
                summary.mean_concerns_per_round, summary.rounds_without_concerns)
    for p in summary.prevalence:
        logger.info("  %-26s %6.1f%%  (%d)", p.id, p.rate * 100, p.count)
    logger.info("Final debt percentiles: %s", summary.final_debt_percentiles)
    logger.info("First-job DTI percentiles: %s", summary.first_job_dti_percentiles)

    logger.info("Prevalence by career:\n%s", prevalence_by(df, "career").to_string())
    logger.info("Prevalence by education path:\n%s", prevalence_by(df, "education_path").to_string())


if __name__ == "__main__":
    main()
