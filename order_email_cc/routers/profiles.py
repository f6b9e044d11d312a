"""Profile field endpoints backing the host's user-edit screen."""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from order_email_cc.deps import get_actor, get_store
from order_email_cc.errors import AuthError
from order_email_cc.models import Actor, ProfileField
from order_email_cc.schemas import AdditionalEmailsOut, AdditionalEmailsUpdate
from order_email_cc.store import ProfileFieldStore

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/users", tags=["profiles"])


@router.get("/{user_id}/additional-emails", response_model=ProfileField)
def get_additional_emails(
    user_id: str,
    store: Annotated[ProfileFieldStore, Depends(get_store)],
    actor: Annotated[Actor, Depends(get_actor)],
):
    if not actor.can_edit_user(user_id):
        logger.warning("profile_read_denied", user_id=user_id, actor_id=str(actor.user_id))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )
    return ProfileField(field_id=store.meta_key, value=store.get_raw(user_id))


@router.put("/{user_id}/additional-emails", response_model=AdditionalEmailsOut)
def update_additional_emails(
    user_id: str,
    body: AdditionalEmailsUpdate,
    store: Annotated[ProfileFieldStore, Depends(get_store)],
    actor: Annotated[Actor, Depends(get_actor)],
):
    try:
        stored = store.set_raw(user_id, body.value, actor)
    except AuthError:
        logger.warning("profile_edit_denied", user_id=user_id, actor_id=str(actor.user_id))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )

    profile = store.get_profile(user_id)
    return AdditionalEmailsOut(
        user_id=user_id,
        value=stored,
        additional_emails=profile.additional_emails,
    )
