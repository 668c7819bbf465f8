# apps/api_main.py
from __future__ import annotations

from datetime import UTC, datetime

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

# Routes
from publicapi.api.v1.catalog_brands import router as catalog_brands_router
from publicapi.api.v1.catalog_items import router as catalog_items_router
from publicapi.api.v1.catalog_types import router as catalog_types_router
from publicapi.api.v1.system import router as system_router

# Others
from publicapi.core.config import settings
from publicapi.core.http_errors import init_error_handlers
from publicapi.core.logging import setup_logging
from publicapi.core.middleware import RequestContextMiddleware
from publicapi.infra.bootstrap import ensure_catalog_seed

setup_logging()


app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
app.add_middleware(RequestContextMiddleware)

init_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Correlation-ID"],
    max_age=86400,
)


@app.on_event("startup")
async def on_startup():
    app.state.started_at = datetime.now(UTC)
    from publicapi.models import create_db_and_tables
    from publicapi.infra.session import SessionLocal

    create_db_and_tables()
    if settings.SEED_CATALOG:
        ensure_catalog_seed(SessionLocal)


# routers
app.include_router(system_router, prefix="/api")
app.include_router(catalog_items_router, prefix="/api")
app.include_router(catalog_brands_router, prefix="/api")
app.include_router(catalog_types_router, prefix="/api")
