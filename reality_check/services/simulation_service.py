"""Batch simulation service.

Plays many independent rounds and aggregates how often each concern applies,
together with final-debt and first-job debt-to-income distributions.
"""
from __future__ import annotations

import logging
import time

from reality_check.models.simulation import BatchConfig, BatchSummary, ConcernPrevalence, GameRound
from reality_check.simulation.concerns import CONCERN_CATALOG
from reality_check.simulation.engine import simulate_rounds
from reality_check.simulation.projection import find_first_job_year

logger = logging.getLogger(__name__)


def run_batch(config: BatchConfig) -> BatchSummary:
    """Simulate config.n_rounds rounds and summarize them."""
    start = time.perf_counter()
    rounds = simulate_rounds(config.n_rounds, seed=config.seed)
    summary = summarize_rounds(rounds, config)
    logger.info(
        "Batch of %d rounds finished in %.2fs — %.2f concerns/round",
        config.n_rounds, time.perf_counter() - start, summary.mean_concerns_per_round,
    )
    return summary


def summarize_rounds(rounds: list[GameRound], config: BatchConfig) -> BatchSummary:
    """Aggregate round results into concern prevalence and percentiles."""
    n = len(rounds)
    counts = {c.id: 0 for c in CONCERN_CATALOG}
    applicable_per_round: list[int] = []
    final_debts: list[float] = []
    first_job_dtis: list[float] = []

    for game_round in rounds:
        applicable = [c.id for c in game_round.concerns if c.applies]
        applicable_per_round.append(len(applicable))
        for concern_id in applicable:
            counts[concern_id] += 1

        final_debts.append(float(game_round.projection[-1].debt))
        first_job = find_first_job_year(game_round.projection)
        if first_job is not None:
            first_job_dtis.append(first_job.debt_to_income_ratio)

    prevalence = [
        ConcernPrevalence(
            id=c.id,
            title=c.title,
            count=counts[c.id],
            rate=round(counts[c.id] / n, 4) if n else 0.0,
        )
        for c in CONCERN_CATALOG
    ]

    return BatchSummary(
        n_rounds=n,
        mean_concerns_per_round=round(sum(applicable_per_round) / n, 4) if n else 0.0,
        rounds_without_concerns=sum(1 for k in applicable_per_round if k == 0),
        prevalence=prevalence,
        final_debt_percentiles=_percentiles(sorted(final_debts)),
        first_job_dti_percentiles=_percentiles(sorted(first_job_dtis)),
        config=config,
    )


def _percentiles(values: list[float]) -> dict[str, float]:
    """Extract p5/p25/p50/p75/p95 from a sorted list."""
    if not values:
        return {}
    result = {}
    for label, p in [("p5", 0.05), ("p25", 0.25), ("p50", 0.50), ("p75", 0.75), ("p95", 0.95)]:
        idx = min(int(p * len(values)), len(values) - 1)
        result[label] = values[idx]
    return result
