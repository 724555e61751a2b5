"""Scenario generator — draws one student life situation from the parameter tables.

Each table is sampled uniformly; weighting comes from repeated entries in the
table itself (e.g. three zeros among five dependents values).
"""
from __future__ import annotations

import random

from reality_check.models.scenario import INCOME_WHILE_STUDYING, Scenario
from reality_check.models.tables import ParameterTables
from reality_check.simulation.tables import (
    CHILDCARE_PER_DEPENDENT_MONTHLY,
    FEDERAL_LOAN_RATE,
    LOAN_REPAYMENT_YEARS,
    get_tables,
)


def generate_scenario(
    rng: random.Random | None = None,
    tables: ParameterTables | None = None,
) -> Scenario:
    """Generate a random Scenario.

    Args:
        rng: Source of randomness. A fresh unseeded Random is used when omitted.
        tables: Parameter tables to sample from. Defaults to the active registry tables.
    """
    rng = rng or random.Random()
    tables = tables or get_tables()

    career = rng.choice(tables.careers)
    education = rng.choice(tables.education_paths)
    dependents = rng.choice(tables.dependents)
    current_debt = rng.choice(tables.existing_debt)

    will_work = rng.random() > 0.5
    income_while_studying = INCOME_WHILE_STUDYING if will_work else 0

    # Base living costs plus childcare per dependent
    monthly_expenses = career.monthly_base_expenses + dependents * CHILDCARE_PER_DEPENDENT_MONTHLY

    return Scenario(
        name=rng.choice(tables.names),
        age=rng.randint(tables.min_age, tables.max_age),
        career=career.title,
        location=career.location,
        start_salary=career.start_salary,
        salary_5yr=career.salary_5yr,
        job_growth=career.job_growth,
        education_path=education.name,
        years_in_school=education.years,
        education_cost_per_year=education.cost_per_year,
        total_education_cost=education.cost_per_year * education.years,
        current_debt=current_debt,
        dependents=dependents,
        monthly_expenses=monthly_expenses,
        will_work_during_school=will_work,
        annual_income_while_studying=income_while_studying,
        federal_loan_rate=FEDERAL_LOAN_RATE,
        loan_repayment_years=LOAN_REPAYMENT_YEARS,
    )
