from fastapi import APIRouter

from reality_check.simulation.concerns import CONCERN_CATALOG
from reality_check.simulation.tables import TableRegistry

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    registry = TableRegistry.get()
    return {
        "status": "ok",
        "tables": {"source": registry.source, "careers": len(registry.tables.careers)},
        "concern_catalog": len(CONCERN_CATALOG),
    }
