"""Header enrichment endpoint for hosts that dispatch emails out of process."""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from order_email_cc.deps import get_actor, get_header_filter
from order_email_cc.enrichment import HeaderEnrichmentFilter
from order_email_cc.models import Actor
from order_email_cc.schemas import EmailHeadersRequest, EmailHeadersResponse

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1", tags=["emails"])


@router.post("/email-headers", response_model=EmailHeadersResponse)
def enrich_email_headers(
    body: EmailHeadersRequest,
    header_filter: Annotated[HeaderEnrichmentFilter, Depends(get_header_filter)],
    actor: Annotated[Actor, Depends(get_actor)],
):
    # The response reveals stored addresses, so only mail dispatchers may call this
    if not actor.can_send_order_emails():
        logger.warning("email_headers_denied", actor_id=str(actor.user_id))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )
    headers = header_filter.enrich(body.email_type, body.order, body.headers)
    return EmailHeadersResponse(headers=headers)
