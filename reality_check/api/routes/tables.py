from fastapi import APIRouter

from reality_check.models.tables import ParameterTables
from reality_check.simulation.tables import get_tables

router = APIRouter(tags=["tables"])


@router.get("/tables", response_model=ParameterTables)
def get_parameter_tables():
    """Return the parameter tables scenarios are drawn from."""
    return get_tables()
