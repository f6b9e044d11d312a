"""FastAPI dependency-injection helpers."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from .enrichment import HeaderEnrichmentFilter
from .models import Actor
from .store import ProfileFieldStore


def get_store(request: Request) -> ProfileFieldStore:
    return request.app.state.store


def get_header_filter(request: Request) -> HeaderEnrichmentFilter:
    return request.app.state.header_filter


def get_actor(request: Request) -> Actor:
    """Resolve the acting user through the host-supplied resolver.

    Without a resolver nobody is authenticated and every request gets 401.
    """
    resolver = getattr(request.app.state, "actor_resolver", None)
    actor = resolver(request) if resolver is not None else None
    if actor is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return actor
