"""Parameter tables: careers, education paths and the weighted draw lists.

Built-in defaults reflect 2026 cost-of-living assumptions. A JSON file named
by TABLES_FILE can replace them wholesale; it is validated against
ParameterTables and ignored (with a warning) when missing or malformed.
"""
from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from reality_check.config import settings
from reality_check.models.scenario import JobGrowth
from reality_check.models.tables import CareerOption, EducationPath, ParameterTables

logger = logging.getLogger(__name__)

FEDERAL_LOAN_RATE = 0.05
LOAN_REPAYMENT_YEARS = 10
CHILDCARE_PER_DEPENDENT_MONTHLY = 1_800

_DEFAULT_CAREERS = [
    CareerOption(title="Nursing", start_salary=62_000, salary_5yr=72_000,
                 job_growth=JobGrowth.strong, location="Mid-size city", monthly_base_expenses=2_200),
    CareerOption(title="Software Engineer (MAMAA)", start_salary=200_000, salary_5yr=250_000,
                 job_growth=JobGrowth.strong, location="San Francisco", monthly_base_expenses=4_500),
    CareerOption(title="High School Teacher", start_salary=42_000, salary_5yr=50_000,
                 job_growth=JobGrowth.weak, location="Suburban", monthly_base_expenses=1_800),
    CareerOption(title="Business Analyst", start_salary=58_000, salary_5yr=72_000,
                 job_growth=JobGrowth.moderate, location="Austin/Denver", monthly_base_expenses=2_400),
    CareerOption(title="Social Worker", start_salary=38_000, salary_5yr=42_000,
                 job_growth=JobGrowth.weak, location="Mid-size city", monthly_base_expenses=1_900),
    CareerOption(title="Mechanical Engineer", start_salary=72_000, salary_5yr=92_000,
                 job_growth=JobGrowth.strong, location="Austin/Denver", monthly_base_expenses=2_500),
]

_DEFAULT_EDUCATION_PATHS = [
    EducationPath(name="Community College (2 year)", years=2, cost_per_year=6_500),
    EducationPath(name="State University (4 year)", years=4, cost_per_year=16_000),
    EducationPath(name="Private University (4 year)", years=4, cost_per_year=32_000),
    EducationPath(name="Bootcamp (6 month)", years=0.5, cost_per_year=14_000),
]

DEFAULT_TABLES = ParameterTables(
    careers=_DEFAULT_CAREERS,
    education_paths=_DEFAULT_EDUCATION_PATHS,
    dependents=[0, 0, 0, 1, 2],  # weighted toward no dependents
    existing_debt=[0, 0, 5_000, 12_000, 25_000],
    names=["Alex", "Jordan", "Taylor", "Casey", "Morgan", "Riley", "Avery", "Quinn"],
)


class TableRegistry:
    """Singleton holding the active parameter tables."""

    _instance: "TableRegistry | None" = None

    def __init__(self) -> None:
        self.tables: ParameterTables = DEFAULT_TABLES
        self.source: str = "defaults"

    @classmethod
    def get(cls) -> "TableRegistry":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load(self, tables_file: str | None = None) -> None:
        """Load overrides from tables_file (or settings.TABLES_FILE). Falls back to defaults."""
        path_str = tables_file if tables_file is not None else settings.TABLES_FILE
        self.tables = DEFAULT_TABLES
        self.source = "defaults"
        if not path_str:
            logger.info("No TABLES_FILE configured — using built-in parameter tables")
            return

        path = Path(path_str).resolve()
        if not path.is_file():
            logger.warning("Parameter table file %s not found — using defaults", path)
            return

        try:
            self.tables = ParameterTables.model_validate_json(path.read_text())
        except (ValidationError, OSError) as e:
            logger.warning("Failed to load parameter tables from %s: %s", path, e)
            return

        self.source = str(path)
        logger.info(
            "Loaded parameter tables from %s (%d careers, %d education paths)",
            path, len(self.tables.careers), len(self.tables.education_paths),
        )

    def reset(self) -> None:
        self.tables = DEFAULT_TABLES
        self.source = "defaults"


def get_tables() -> ParameterTables:
    """Return the active parameter tables."""
    return TableRegistry.get().tables
