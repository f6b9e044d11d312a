"""ProfileFieldStore — the per-user additional address list."""

from __future__ import annotations

import structlog

from .backends import UserMetaBackend
from .config import DEFAULT_META_KEY
from .errors import AuthError
from .models import Actor, UserContactProfile, UserId
from .validation import format_address_list, parse_address_list, split_address_list

logger = structlog.get_logger()


class ProfileFieldStore:
    """Read, validate and write the raw comma-separated address list of a user.

    The stored value is always the cleaned list: valid addresses only, in the
    order they were entered, joined by ``", "``.
    """

    def __init__(self, backend: UserMetaBackend, meta_key: str = DEFAULT_META_KEY) -> None:
        self.backend = backend
        self.meta_key = meta_key

    def get_raw(self, user_id: UserId) -> str:
        """Return the stored string, or ``""`` when there is none.

        Never raises: storage failures are logged and read as empty.
        """
        try:
            value = self.backend.get(user_id, self.meta_key)
        except Exception:
            logger.exception("profile_emails_read_failed", user_id=str(user_id))
            return ""
        return value if isinstance(value, str) else ""

    def set_raw(self, user_id: UserId, value: str, actor: Actor) -> str:
        """Clean *value*, persist it and return what was stored.

        Raises :class:`AuthError` if *actor* may not edit this profile.
        Invalid addresses are dropped, not reported.
        """
        if not actor.can_edit_user(user_id):
            raise AuthError(actor.user_id, user_id)

        tokens = split_address_list(value or "")
        valid = parse_address_list(value or "")
        cleaned = format_address_list(valid)

        self.backend.set(user_id, self.meta_key, cleaned)

        if len(valid) != len(tokens):
            logger.debug(
                "invalid_addresses_dropped",
                user_id=str(user_id),
                dropped=len(tokens) - len(valid),
            )
        logger.info("profile_emails_saved", user_id=str(user_id), count=len(valid))
        return cleaned

    def get_profile(self, user_id: UserId) -> UserContactProfile:
        return UserContactProfile(
            user_id=user_id,
            additional_emails=parse_address_list(self.get_raw(user_id)),
        )
