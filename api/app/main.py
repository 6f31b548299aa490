from __future__ import annotations

import logging
import os
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.adapters.kv_store import InMemoryKeyValueStore
from app.adapters.project_store import InMemoryProjectStore
from app.adapters.sql_kv_store import SqlKeyValueStore
from app.routers import health, projects
from app.routers.health import HEALTH_VERSION
from app.services.favorite_service import FavoriteStore
from app.services.version_service import InvalidInputError


def _log_level(default: int = logging.INFO) -> int:
    raw = (os.getenv("LOG_LEVEL") or "").strip().upper()
    level = logging.getLevelName(raw) if raw else default
    return level if isinstance(level, int) else default


app = FastAPI(title="Docs Portal API", version=HEALTH_VERSION)
logger = logging.getLogger("docs_portal.api")
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
logger.propagate = False
logger.setLevel(_log_level())


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name, "1" if default else "").strip().lower()
    return raw in {"1", "true", "yes", "on"}


def _slow_request_ms_threshold() -> float:
    raw = os.getenv("API_SLOW_REQUEST_MS", "1500").strip()
    try:
        return max(25.0, float(raw))
    except ValueError:
        return 1500.0


# Configure CORS
allowed_origins_str = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000")
allowed_origins = [origin.strip() for origin in allowed_origins_str.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.project_store = InMemoryProjectStore(persist_path=os.getenv("PROJECT_STORE_PATH"))

# Favorites: database when configured, otherwise in-memory with optional JSON persistence
database_url = os.getenv("DATABASE_URL")
if database_url:
    app.state.favorites = FavoriteStore(SqlKeyValueStore(database_url))
else:
    app.state.favorites = FavoriteStore(InMemoryKeyValueStore(persist_path=os.getenv("FAVORITES_STORE_PATH")))


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.middleware("http")
async def log_slow_requests(request: Request, call_next):
    start = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        if elapsed_ms >= _slow_request_ms_threshold():
            logger.warning(
                "slow_api_request method=%s path=%s status=%s elapsed_ms=%.2f",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )
        elif _env_flag("API_LOG_ALL_REQUESTS", False):
            logger.info(
                "api_request method=%s path=%s status=%s elapsed_ms=%.2f",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )


@app.get("/", include_in_schema=False)
async def root():
    """Landing info for API discovery."""
    return {
        "name": app.title,
        "version": HEALTH_VERSION,
        "docs": "/docs",
        "health": "/api/health",
    }


app.include_router(projects.router, prefix="/api", tags=["projects"])
app.include_router(health.router, prefix="/api", tags=["health"])
