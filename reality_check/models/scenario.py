import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

INCOME_WHILE_STUDYING = 18_000


class JobGrowth(str, Enum):
    """Hiring outlook for a career."""
    weak = "weak"
    moderate = "moderate"
    strong = "strong"


class Scenario(BaseModel):
    """One generated student life situation. Read-only once built.

    total_education_cost and annual_income_while_studying are derived fields;
    a payload that contradicts them is rejected.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    age: int = Field(ge=0)

    career: str
    location: str
    start_salary: float = Field(ge=0)
    salary_5yr: float = Field(ge=0)
    job_growth: JobGrowth

    education_path: str
    years_in_school: float = Field(gt=0)
    education_cost_per_year: float = Field(ge=0)
    total_education_cost: float = Field(ge=0)

    current_debt: float = Field(default=0.0, ge=0)
    dependents: int = Field(default=0, ge=0)
    monthly_expenses: float = Field(ge=0)
    will_work_during_school: bool = False
    annual_income_while_studying: float = Field(default=0.0, ge=0)

    federal_loan_rate: float = Field(default=0.05, ge=0)
    loan_repayment_years: int = Field(default=10, ge=1)

    @model_validator(mode="after")
    def _check_derived_fields(self) -> "Scenario":
        expected_cost = self.years_in_school * self.education_cost_per_year
        if not math.isclose(self.total_education_cost, expected_cost, rel_tol=1e-9, abs_tol=0.01):
            raise ValueError(
                f"total_education_cost {self.total_education_cost} does not equal "
                f"years_in_school x education_cost_per_year ({expected_cost})"
            )
        expected_income = INCOME_WHILE_STUDYING if self.will_work_during_school else 0
        if self.annual_income_while_studying != expected_income:
            raise ValueError(
                f"annual_income_while_studying must be {expected_income} when "
                f"will_work_during_school is {self.will_work_during_school}"
            )
        return self
