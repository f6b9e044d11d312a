"""Exceptions raised by the order email CC extension."""

from __future__ import annotations

from .models import UserId


class EmailCCError(Exception):
    """Base class for all errors raised by this package."""


class AuthError(EmailCCError):
    """The acting user may not edit the target user's profile."""

    def __init__(self, actor_id: UserId | None, user_id: UserId) -> None:
        self.actor_id = actor_id
        self.user_id = user_id
        super().__init__(f"Actor {actor_id!r} may not edit the profile of user {user_id!r}")
