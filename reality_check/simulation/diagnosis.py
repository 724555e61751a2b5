"""Diagnosis scorer — compares a player's selected concerns with the ground truth."""
from __future__ import annotations

from collections.abc import Collection

from reality_check.models.concern import DiagnosisResult
from reality_check.models.projection import ProjectionYear
from reality_check.models.scenario import Scenario
from reality_check.simulation.concerns import evaluate_concerns
from reality_check.simulation.projection import round_half_up

# (minimum score, label), highest band first
_SCORE_BANDS: list[tuple[int, str]] = [
    (80, "Excellent assessment"),
    (60, "Good assessment with room for improvement"),
    (0, "Assessment needs improvement"),
]


def score_label(score: int) -> str:
    """Map a 0-100 score to its feedback label."""
    for minimum, label in _SCORE_BANDS:
        if score >= minimum:
            return label
    return _SCORE_BANDS[-1][1]


def score_diagnosis(
    scenario: Scenario,
    projection: list[ProjectionYear],
    selected_ids: Collection[str],
) -> DiagnosisResult:
    """Score a selection of concern ids against the concerns that actually apply.

    score = round(100 * correct / max(1, actual)). With no actual concerns the
    score is 100 for an empty selection and 0 otherwise. Ids not in the catalog
    count as false positives. A bare string is rejected with TypeError.
    """
    if isinstance(selected_ids, str):
        raise TypeError("selected_ids must be a collection of concern ids, not a single string")
    selected = set(selected_ids)
    all_concerns = evaluate_concerns(scenario, projection)
    actual = [c for c in all_concerns if c.applies]
    actual_ids = {c.id for c in actual}

    correct = len(selected & actual_ids)
    missed = [c for c in actual if c.id not in selected]
    false_positives = sorted(selected - actual_ids)
    false_positive_details = [c for c in all_concerns if c.id in selected and not c.applies]

    if actual_ids:
        score = int(round_half_up(100 * correct / len(actual_ids)))
    else:
        score = 0 if selected else 100

    return DiagnosisResult(
        correct_identifications=correct,
        total_concerns=len(actual_ids),
        missed_concerns=missed,
        false_positives=false_positives,
        score=score,
        score_label=score_label(score),
        perfect=correct == len(actual_ids) and len(actual_ids) > 0,
        false_positive_details=false_positive_details,
        all_concerns=all_concerns,
    )
