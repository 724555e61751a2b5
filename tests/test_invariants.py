"""Invariant tests — properties that must hold for every generated scenario.

Covers horizon shape, debt and ratio bounds, repayment consistency, and the
relationship between the concern views and diagnosis scoring.
"""
import random

import pytest

from reality_check.simulation.concerns import applicable_concerns, evaluate_concerns, list_concern_ids
from reality_check.simulation.diagnosis import score_diagnosis
from reality_check.simulation.projection import project
from reality_check.simulation.scenarios import generate_scenario


def _scenarios(n: int = 200, seed: int = 20260):
    rng = random.Random(seed)
    return [generate_scenario(rng) for _ in range(n)]


SCENARIOS = _scenarios()


# ---------------------------------------------------------------------------
# Projection invariants
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("scenario", SCENARIOS[:50])
def test_ten_strictly_increasing_years(scenario):
    projection = project(scenario)
    assert [p.year for p in projection] == list(range(1, 11))


def test_debt_never_negative():
    for s in SCENARIOS:
        for p in project(s):
            assert p.debt >= 0, f"Negative debt in year {p.year} for {s.career}: {p.debt}"


def test_ratio_zero_without_income_nonnegative_otherwise():
    for s in SCENARIOS:
        for p in project(s):
            if p.salary == 0:
                assert p.debt_to_income_ratio == 0
            assert p.debt_to_income_ratio >= 0


def test_school_flag_matches_years_in_school():
    for s in SCENARIOS:
        for p in project(s):
            assert p.is_school == (p.year <= s.years_in_school)


def test_school_rows_precede_work_rows():
    for s in SCENARIOS:
        flags = [p.is_school for p in project(s)]
        assert flags == sorted(flags, reverse=True)


def test_monthly_payment_constant_across_horizon():
    for s in SCENARIOS:
        payments = {p.monthly_debt_payment for p in project(s)}
        assert len(payments) == 1


def test_no_payment_during_school():
    for s in SCENARIOS:
        for p in project(s):
            if p.is_school:
                assert p.annual_debt_payment == 0


def test_projection_is_deterministic():
    for s in SCENARIOS[:20]:
        assert project(s) == project(s)


# ---------------------------------------------------------------------------
# Concern and scoring invariants
# ---------------------------------------------------------------------------


def test_every_evaluation_covers_full_catalog():
    ids = list_concern_ids()
    for s in SCENARIOS:
        assert [c.id for c in evaluate_concerns(s, project(s))] == ids


def test_job_market_tracks_job_growth():
    for s in SCENARIOS:
        applies = {c.id: c.applies for c in evaluate_concerns(s, project(s))}
        assert applies["job_market"] == (s.job_growth.value == "weak")
        assert applies["no_work_income"] == (not s.will_work_during_school)


def test_perfect_selection_always_scores_100():
    for s in SCENARIOS:
        projection = project(s)
        actual = {c.id for c in applicable_concerns(s, projection)}
        result = score_diagnosis(s, projection, actual)
        assert result.score == 100
        assert result.missed_concerns == []
        assert result.false_positives == []
        assert result.correct_identifications == result.total_concerns


def test_selecting_everything_never_misses():
    ids = list_concern_ids()
    for s in SCENARIOS:
        result = score_diagnosis(s, project(s), ids)
        assert result.missed_concerns == []
        assert len(result.false_positives) == 8 - result.total_concerns
        assert 0 <= result.score <= 100
