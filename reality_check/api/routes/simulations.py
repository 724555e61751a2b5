from typing import Optional

from fastapi import APIRouter, HTTPException

from reality_check.config import settings
from reality_check.models.simulation import BatchConfig, BatchSummary
from reality_check.services.simulation_service import run_batch

router = APIRouter(tags=["simulations"])


@router.post("/simulations/batch", response_model=BatchSummary)
def run_batch_endpoint(config: Optional[BatchConfig] = None):
    """Play many rounds and report concern prevalence and debt distributions."""
    config = config or BatchConfig(n_rounds=settings.DEFAULT_BATCH_ROUNDS)
    if config.n_rounds > settings.BATCH_MAX_ROUNDS:
        raise HTTPException(
            status_code=400,
            detail=f"n_rounds must be at most {settings.BATCH_MAX_ROUNDS}",
        )
    return run_batch(config)
