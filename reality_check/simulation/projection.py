"""Projection engine — builds the 10-year financial timeline for a scenario.

Two passes over the scenario:
  1. Accrue school-phase debt to find the balance at graduation and derive
     a level monthly repayment (standard annuity / PMT formula).
  2. Replay the horizon year by year from the pre-existing debt: school years
     add unfunded costs and compound annually, working years earn salary and
     pay the loan down monthly.

Running state stays at full precision; values are only rounded when a
ProjectionYear is emitted.
"""
from __future__ import annotations

import math

from reality_check.models.projection import ProjectionYear
from reality_check.models.scenario import Scenario

PROJECTION_YEARS = 10
TAX_RATE = 0.20  # flat effective rate
LATE_CAREER_GROWTH = 0.02  # per year past year 5 of work


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties toward +inf (0.5 -> 1, -0.5 -> 0)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _to_whole(value: float) -> int:
    return int(round_half_up(value))


def calculate_monthly_payment(principal: float, annual_rate: float, n_months: int) -> float:
    """Level payment that fully amortizes principal over n_months.

    PMT = P * r * (1+r)^n / ((1+r)^n - 1), r = annual_rate / 12
    Zero principal, zero rate or zero term gives a zero payment.
    """
    r = annual_rate / 12.0
    if principal <= 0 or r <= 0 or n_months <= 0:
        return 0.0
    growth = (1.0 + r) ** n_months
    return principal * r * growth / (growth - 1.0)


def school_years_completed(scenario: Scenario) -> int:
    """Number of integer years for which `year <= years_in_school` holds.

    A fractional program shorter than a year (e.g. a 6-month bootcamp) has none.
    """
    return max(0, math.floor(scenario.years_in_school))


def accrue_school_year(debt: float, scenario: Scenario) -> float:
    """Add one school year's unfunded costs to debt, then compound annually."""
    total_annual_expenses = scenario.education_cost_per_year + scenario.monthly_expenses * 12
    deficit = max(0.0, total_annual_expenses - scenario.annual_income_while_studying)
    debt += deficit
    debt += debt * scenario.federal_loan_rate
    return debt


def apply_monthly_repayment(debt: float, monthly_rate: float, payment: float, months: int = 12) -> float:
    """Accrue monthly interest then deduct the payment, clamping at zero."""
    for _ in range(months):
        debt += debt * monthly_rate
        debt = max(0.0, debt - payment)
    return debt


def calculate_debt_at_graduation(scenario: Scenario) -> float:
    """Debt balance after the last school year, starting from pre-existing debt."""
    debt = scenario.current_debt
    for _ in range(school_years_completed(scenario)):
        debt = accrue_school_year(debt, scenario)
    return debt


def salary_for_year(scenario: Scenario, years_since_graduation: float) -> float:
    """Salary curve: start salary, linear ramp to the 5-year salary, then 2%/yr."""
    k = years_since_graduation
    if k == 1:
        return scenario.start_salary
    if k <= 5:
        progress = (k - 1) / 4
        return scenario.start_salary + (scenario.salary_5yr - scenario.start_salary) * progress
    return scenario.salary_5yr + scenario.salary_5yr * LATE_CAREER_GROWTH * (k - 5)


def project(scenario: Scenario) -> list[ProjectionYear]:
    """Project the scenario's finances over PROJECTION_YEARS years.

    Returns:
        One ProjectionYear per year, ordered 1..PROJECTION_YEARS.
    """
    monthly_rate = scenario.federal_loan_rate / 12.0
    n_months = scenario.loan_repayment_years * 12
    debt_at_graduation = calculate_debt_at_graduation(scenario)
    monthly_payment = calculate_monthly_payment(
        debt_at_graduation, scenario.federal_loan_rate, n_months,
    )

    debt = scenario.current_debt
    years: list[ProjectionYear] = []

    for year in range(1, PROJECTION_YEARS + 1):
        is_school = year <= scenario.years_in_school
        annual_debt_payment = 0.0

        if is_school:
            income = scenario.annual_income_while_studying
            debt = accrue_school_year(debt, scenario)
        else:
            income = salary_for_year(scenario, year - scenario.years_in_school)
            annual_debt_payment = monthly_payment * 12
            debt = apply_monthly_repayment(debt, monthly_rate, monthly_payment)

        taxes_owed = max(0.0, income * TAX_RATE)
        after_tax_income = income - taxes_owed

        debt_to_income = (annual_debt_payment / income) * 100 if income > 0 else 0.0
        monthly_surplus = after_tax_income / 12 - (scenario.monthly_expenses + monthly_payment)

        # Simplified: earnings to date minus outstanding debt, no savings model
        years_worked = year - scenario.years_in_school if not is_school else 0
        net_worth = after_tax_income * years_worked - max(0.0, debt)

        years.append(ProjectionYear(
            year=year,
            debt=_to_whole(max(0.0, debt)),
            salary=_to_whole(income),
            monthly_debt_payment=_to_whole(monthly_payment),
            annual_debt_payment=_to_whole(annual_debt_payment),
            debt_to_income_ratio=round_half_up(debt_to_income, 1),
            monthly_surplus=_to_whole(monthly_surplus),
            net_worth=_to_whole(net_worth),
            is_school=is_school,
        ))

    return years


def find_first_job_year(projection: list[ProjectionYear]) -> ProjectionYear | None:
    """First year after graduation, or None if the whole horizon is school."""
    return next((p for p in projection if not p.is_school), None)
