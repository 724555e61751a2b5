"""Pydantic models for the parameter tables the scenario generator samples from."""
from pydantic import BaseModel, Field

from reality_check.models.scenario import JobGrowth


class CareerOption(BaseModel):
    title: str
    start_salary: float = Field(ge=0)
    salary_5yr: float = Field(ge=0)
    job_growth: JobGrowth
    location: str
    monthly_base_expenses: float = Field(ge=0)


class EducationPath(BaseModel):
    name: str
    years: float = Field(gt=0)
    cost_per_year: float = Field(ge=0)


class ParameterTables(BaseModel):
    """All sampling tables. Weighted tables repeat values to bias the draw."""
    careers: list[CareerOption] = Field(min_length=1)
    education_paths: list[EducationPath] = Field(min_length=1)
    dependents: list[int] = Field(min_length=1)
    existing_debt: list[float] = Field(min_length=1)
    names: list[str] = Field(min_length=1)
    min_age: int = 18
    max_age: int = 23
