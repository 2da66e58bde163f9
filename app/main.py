import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import connect_db, disconnect_db, ping_db
from app.logging_setup import setup_logging
from app.maps.catalog import DEFAULT_CATALOG
from app.maps.errors import MapDataError
from app.maps.ingest import load_map
from app.maps.router import router as maps_router
from app.taming.router import router as taming_router
from app.taming.service import seed_tame_calculator

logger = logging.getLogger(__name__)


async def load_all_on_startup() -> None:
    """Seed the tame calculator and reload every known map.

    A map whose file is missing or fails to load is logged and left as it
    was, so one bad file does not keep the API from starting.
    """
    await seed_tame_calculator()
    for map_id in DEFAULT_CATALOG.maps:
        try:
            await load_map(map_id)
        except MapDataError:
            logger.exception("Startup reload of %s failed; reload it via /api/maps/update", map_id)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    await connect_db()
    if settings.LOAD_ON_STARTUP:
        await load_all_on_startup()
    yield
    await disconnect_db()


app = FastAPI(
    title="ASA Map Points",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
    openapi_url="/openapi.json" if settings.DOCS_ENABLED else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(maps_router)
app.include_router(taming_router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}


@app.get("/health/db")
async def database_health():
    return {"status": "ok" if await ping_db() else "unavailable"}
