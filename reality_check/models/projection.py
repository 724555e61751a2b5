from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProjectionYear(BaseModel):
    """Financial snapshot for one year of the 10-year horizon."""
    model_config = ConfigDict(frozen=True)

    year: int
    debt: int
    salary: int  # income for the year: school-year earnings or salary
    monthly_debt_payment: int
    annual_debt_payment: int
    debt_to_income_ratio: float  # percent
    monthly_surplus: int
    net_worth: int
    is_school: bool


class RoundSummary(BaseModel):
    """Headline numbers for a round, as shown next to the diagnosis checklist."""
    total_education_cost: float
    first_year_debt: int  # balance at the end of projection year 1
    final_debt: int
    monthly_expenses: float
    first_job_year: Optional[int] = None
    first_job_salary: Optional[int] = None
    first_job_monthly_payment: Optional[int] = None
    first_job_debt_to_income: Optional[float] = None
