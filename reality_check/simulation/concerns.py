"""Concern catalog — declarative red-flag rules over a scenario and its projection.

Each rule pairs a predicate with an evidence template. Both receive the first
post-graduation year (None when the whole horizon is school), the scenario,
and the full projection. Predicates read the emitted (rounded) rows, the same
numbers a player sees.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from reality_check.models.concern import ConcernInstance, ConcernSummary
from reality_check.models.projection import ProjectionYear
from reality_check.models.scenario import JobGrowth, Scenario
from reality_check.simulation.projection import find_first_job_year, round_half_up

RuleFn = Callable[[Optional[ProjectionYear], Scenario, list[ProjectionYear]], bool]
EvidenceFn = Callable[[Optional[ProjectionYear], Scenario, list[ProjectionYear]], str]

DTI_THRESHOLD = 20.0  # percent
SCHOOL_SHORTFALL_THRESHOLD = -500
DEPENDENT_SALARY_FLOOR = 50_000
DEPENDENT_MONTHLY_COST = 600
RESIDUAL_DEBT_THRESHOLD = 5_000
EDUCATION_COST_SALARY_SHARE = 0.4

# Minimum first-job salary per location; other locations are never flagged
LOCATION_SALARY_FLOORS: dict[str, float] = {
    "San Francisco": 120_000,
    "Austin/Denver": 50_000,
}

_NO_FIRST_JOB = "No post-graduation year within the 10-year projection"

# Marks first_job as not supplied; None is a real value (no first job)
_UNSET: Any = object()


@dataclass(frozen=True)
class ConcernDefinition:
    """One catalog rule."""
    id: str
    title: str
    description: str
    predicate: RuleFn
    evidence: EvidenceFn


def _plain(value: float) -> str:
    """Number as plain text; whole values without a decimal point."""
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


def _grouped(value: float) -> str:
    """Number with thousands separators, up to three decimals."""
    value = float(value)
    if value.is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def _school_years(projection: list[ProjectionYear]) -> list[ProjectionYear]:
    return [p for p in projection if p.is_school]


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def _debt_burden(first_job, scenario, projection) -> bool:
    return first_job is not None and first_job.debt_to_income_ratio > DTI_THRESHOLD


def _school_deficit(first_job, scenario, projection) -> bool:
    return any(p.monthly_surplus < SCHOOL_SHORTFALL_THRESHOLD for p in _school_years(projection))


def _dependent_burden(first_job, scenario, projection) -> bool:
    return (
        scenario.dependents > 0
        and first_job is not None
        and first_job.salary < DEPENDENT_SALARY_FLOOR
    )


def _extended_debt(first_job, scenario, projection) -> bool:
    return bool(projection) and projection[-1].debt > RESIDUAL_DEBT_THRESHOLD


def _job_market(first_job, scenario, projection) -> bool:
    return scenario.job_growth == JobGrowth.weak


def _high_education_cost(first_job, scenario, projection) -> bool:
    return (
        first_job is not None
        and scenario.total_education_cost > first_job.salary * EDUCATION_COST_SALARY_SHARE
    )


def _location_salary_mismatch(first_job, scenario, projection) -> bool:
    floor = LOCATION_SALARY_FLOORS.get(scenario.location)
    return floor is not None and first_job is not None and first_job.salary < floor


def _no_work_income(first_job, scenario, projection) -> bool:
    return scenario.annual_income_while_studying == 0


# ---------------------------------------------------------------------------
# Evidence templates
# ---------------------------------------------------------------------------


def _debt_burden_evidence(first_job, scenario, projection) -> str:
    if first_job is None:
        return _NO_FIRST_JOB
    monthly_salary = int(round_half_up(first_job.salary / 12))
    return (
        f"${first_job.monthly_debt_payment}/month debt payment vs "
        f"${monthly_salary}/month salary "
        f"({_plain(first_job.debt_to_income_ratio)}% Debt-to-Income)"
    )


def _school_deficit_evidence(first_job, scenario, projection) -> str:
    school = _school_years(projection)
    shortfall = abs(int(round_half_up(school[0].monthly_surplus))) if school else 0
    return f"Around ${shortfall}/month shortfall"


def _dependent_burden_evidence(first_job, scenario, projection) -> str:
    if first_job is None:
        return _NO_FIRST_JOB
    annual_cost = scenario.dependents * DEPENDENT_MONTHLY_COST * 12
    return f"Dependent costs: ${annual_cost}/year. Entry salary: ${first_job.salary}/year"


def _extended_debt_evidence(first_job, scenario, projection) -> str:
    remaining = projection[-1].debt if projection else 0
    return f"Remaining debt: ${_grouped(remaining)}"


def _job_market_evidence(first_job, scenario, projection) -> str:
    return f"Job growth: {scenario.job_growth.value}. Salary plateau: ${_plain(scenario.salary_5yr)}/year"


def _high_education_cost_evidence(first_job, scenario, projection) -> str:
    if first_job is None:
        return _NO_FIRST_JOB
    cost = scenario.total_education_cost
    cost_ratio = int(round_half_up(cost / first_job.salary * 100)) if first_job.salary > 0 else 0
    return (
        f"Education cost: ${_grouped(cost)} vs first year salary: "
        f"${_grouped(first_job.salary)} ({cost_ratio}% of salary)"
    )


def _location_salary_mismatch_evidence(first_job, scenario, projection) -> str:
    if first_job is None:
        return _NO_FIRST_JOB
    return (
        f"{scenario.location} - Starting salary ${_grouped(first_job.salary)}, "
        f"monthly expenses ${_grouped(scenario.monthly_expenses)}"
    )


def _no_work_income_evidence(first_job, scenario, projection) -> str:
    return f"{_plain(scenario.years_in_school)} years of school with $0 income"


CONCERN_CATALOG: tuple[ConcernDefinition, ...] = (
    ConcernDefinition(
        id="debt_burden",
        title="High Debt-to-Income Ratio",
        description="Debt payments consume too much of monthly income",
        predicate=_debt_burden,
        evidence=_debt_burden_evidence,
    ),
    ConcernDefinition(
        id="school_deficit",
        title="Monthly Deficit During School",
        description="Expenses exceed income while studying",
        predicate=_school_deficit,
        evidence=_school_deficit_evidence,
    ),
    ConcernDefinition(
        id="dependent_burden",
        title="Supporting Dependents on Entry Salary",
        description="Dependent costs too high relative to starting income",
        predicate=_dependent_burden,
        evidence=_dependent_burden_evidence,
    ),
    ConcernDefinition(
        id="extended_debt",
        title="Debt Extends Beyond 10 Years",
        description="Significant debt remaining after decade of repayment",
        predicate=_extended_debt,
        evidence=_extended_debt_evidence,
    ),
    ConcernDefinition(
        id="job_market",
        title="Weak Job Market for This Career",
        description="Limited growth prospects in chosen field",
        predicate=_job_market,
        evidence=_job_market_evidence,
    ),
    ConcernDefinition(
        id="high_education_cost",
        title="High Education Cost Relative to Starting Salary",
        description="Education expense is disproportionate to entry salary",
        predicate=_high_education_cost,
        evidence=_high_education_cost_evidence,
    ),
    ConcernDefinition(
        id="location_salary_mismatch",
        title="Salary May Not Match Cost of Living",
        description="Starting salary seems low for the location",
        predicate=_location_salary_mismatch,
        evidence=_location_salary_mismatch_evidence,
    ),
    ConcernDefinition(
        id="no_work_income",
        title="No Income During School",
        description="Full-time student with no part-time work",
        predicate=_no_work_income,
        evidence=_no_work_income_evidence,
    ),
)

_BY_ID: dict[str, ConcernDefinition] = {c.id: c for c in CONCERN_CATALOG}


def get_concern_definition(concern_id: str) -> ConcernDefinition:
    """Return a catalog rule by id. Raises KeyError for unknown ids."""
    return _BY_ID[concern_id]


def list_concern_ids() -> list[str]:
    """Return all catalog ids in catalog order."""
    return [c.id for c in CONCERN_CATALOG]


def list_concern_summaries() -> list[ConcernSummary]:
    return [ConcernSummary(id=c.id, title=c.title, description=c.description) for c in CONCERN_CATALOG]


def evaluate_concern(
    definition: ConcernDefinition,
    scenario: Scenario,
    projection: list[ProjectionYear],
    first_job: ProjectionYear | None = _UNSET,
) -> ConcernInstance:
    """Evaluate a single rule; evidence is rendered whether or not it applies.

    first_job is looked up from the projection only when omitted; an explicit
    None means the horizon has no post-graduation year.
    """
    if first_job is _UNSET:
        first_job = find_first_job_year(projection)
    return ConcernInstance(
        id=definition.id,
        title=definition.title,
        description=definition.description,
        evidence=definition.evidence(first_job, scenario, projection),
        applies=bool(definition.predicate(first_job, scenario, projection)),
    )


def evaluate_concerns(scenario: Scenario, projection: list[ProjectionYear]) -> list[ConcernInstance]:
    """Evaluate every catalog rule, in catalog order."""
    first_job = find_first_job_year(projection)
    return [evaluate_concern(c, scenario, projection, first_job) for c in CONCERN_CATALOG]


def applicable_concerns(scenario: Scenario, projection: list[ProjectionYear]) -> list[ConcernInstance]:
    """Only the rules that actually apply, the ground truth for scoring."""
    return [c for c in evaluate_concerns(scenario, projection) if c.applies]
