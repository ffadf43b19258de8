"""
PharmaCare back-office API.

ARCHITECTURE:
- FastAPI routers under /api: one per entity kind plus dashboard and auth
- Services: plain functions over an EntityStore (the repository layer)
- EntityStore: in-memory tables, rebuilt and reseeded on every start

The store is created once per application by create_app() and reached from
handlers through the get_store dependency. Tests pass their own store.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pharmacare.api.routes import (
    auth,
    customers,
    dashboard,
    medications,
    orders,
    suppliers,
    supply_orders,
    users,
)
from pharmacare.core.config import settings
from pharmacare.core.exceptions import register_exception_handlers
from pharmacare.core.rate_limiter import RateLimitMiddleware
from pharmacare.db.init_db import init_store
from pharmacare.db.store import EntityStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = app.state.store
    logger.info(
        f"[*] PharmaCare API ready: {len(store.medications)} medications, "
        f"{len(store.orders)} orders in memory"
    )
    yield
    logger.info("[*] PharmaCare API stopped, in-memory data discarded")


def create_app(store: Optional[EntityStore] = None) -> FastAPI:
    app = FastAPI(
        title="PharmaCare API",
        description="Pharmacy back-office: inventory, suppliers, customers, orders.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else init_store(seed=settings.SEED_SAMPLE_DATA)

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept", "Origin"],
        max_age=600,
    )

    if settings.RATE_LIMIT_ENABLED:
        app.add_middleware(
            RateLimitMiddleware,
            requests=settings.RATE_LIMIT_REQUESTS,
            window=settings.RATE_LIMIT_WINDOW_SECONDS,
        )

    @app.middleware("http")
    async def add_security_headers(request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response

    prefix = settings.API_PREFIX
    app.include_router(dashboard.router, prefix=f"{prefix}/dashboard", tags=["dashboard"])
    app.include_router(medications.router, prefix=f"{prefix}/medications", tags=["medications"])
    app.include_router(suppliers.router, prefix=f"{prefix}/suppliers", tags=["suppliers"])
    app.include_router(customers.router, prefix=f"{prefix}/customers", tags=["customers"])
    app.include_router(orders.router, prefix=f"{prefix}/orders", tags=["orders"])
    app.include_router(supply_orders.router, prefix=f"{prefix}/supply-orders", tags=["supply-orders"])
    app.include_router(users.router, prefix=f"{prefix}/users", tags=["users"])
    app.include_router(auth.router, prefix=f"{prefix}/auth", tags=["auth"])

    @app.get("/health")
    def health():
        return {"status": "ok", "storage": "memory"}

    return app


app = create_app()
