"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request

from order_email_cc.backends import SqlUserMetaBackend
from order_email_cc.config import Settings
from order_email_cc.models import Actor
from order_email_cc.plugin import build_plugin
from order_email_cc.store import ProfileFieldStore

logger = structlog.get_logger()

ActorResolver = Callable[[Request], Actor | None]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Dispose the SQL engine on shutdown if this app created it."""
    yield
    backend = getattr(app.state, "owned_backend", None)
    if backend is not None:
        backend.close()
        logger.info("shutdown_complete")


def create_app(
    settings: Settings | None = None,
    store: ProfileFieldStore | None = None,
    actor_resolver: ActorResolver | None = None,
) -> FastAPI:
    """Build and return the admin API.

    Without an explicit *store* the app opens ``settings.database_url``.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Order Email CC",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.owned_backend = None

    if store is None:
        backend = SqlUserMetaBackend.from_url(settings.database_url)
        backend.create_all()
        app.state.owned_backend = backend
        store = ProfileFieldStore(backend, meta_key=settings.email_cc.meta_key)

    plugin = build_plugin(store, settings.email_cc)
    app.state.store = store
    app.state.header_filter = plugin.header_filter
    app.state.actor_resolver = actor_resolver

    from order_email_cc.routers.emails import router as emails_router
    from order_email_cc.routers.profiles import router as profiles_router

    app.include_router(profiles_router)
    app.include_router(emails_router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "order-email-cc"}

    return app
