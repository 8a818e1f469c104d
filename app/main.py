import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.builder.store import BuildStore
from app.config import settings
from app.database import AsyncSessionLocal, create_tables, engine
from app.routers import builds, components, current_build
from app.services.build_service import SessionBuildLoader
from app.services.catalog_service import seed_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    await create_tables()
    if settings.seed_catalog:
        async with AsyncSessionLocal() as db:
            await seed_catalog(db)

    # One current build per process, owned by the app and injected into routes
    app.state.build_store = BuildStore(SessionBuildLoader(AsyncSessionLocal))
    logger.info("FPV Builder started")
    yield
    await engine.dispose()


app = FastAPI(
    title="FPV Builder",
    description="Pick drone, goggles, radio, battery and accessories and check they work together",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(components.router)
app.include_router(builds.router)
app.include_router(current_build.router)

# Serve frontend static files if the directory exists
frontend_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "frontend")
if os.path.isdir(frontend_dir):
    app.mount("/static", StaticFiles(directory=frontend_dir), name="static")


@app.get("/health")
async def health_check():
    return {"status": "ok"}
