import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reality_check.config import settings
from reality_check.simulation.tables import TableRegistry
from reality_check.api.routes import concerns, health, scenarios, simulations, tables

logging.basicConfig(level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: load parameter tables (defaults unless TABLES_FILE is set)
    TableRegistry.get().load()
    yield


app = FastAPI(title="Financial Reality Check", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(tables.router, prefix="/api")
app.include_router(scenarios.router, prefix="/api")
app.include_router(concerns.router, prefix="/api")
app.include_router(simulations.router, prefix="/api")
