"""Append customer CC addresses to order email headers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from .models import EmailType, UserId
from .store import ProfileFieldStore
from .validation import parse_address_list

logger = structlog.get_logger()


def resolve_user_id(order: Any) -> UserId | None:
    """Return the owning user of *order*, or None for guests and unknown shapes.

    Accepts an :class:`~order_email_cc.models.OrderRef`, any object with a
    ``user_id`` attribute or ``get_user_id()`` method, or a mapping with a
    ``user_id`` key.
    """
    if order is None:
        return None
    if isinstance(order, Mapping):
        user_id = order.get("user_id")
    elif callable(getattr(order, "get_user_id", None)):
        user_id = order.get_user_id()
    else:
        user_id = getattr(order, "user_id", None)

    if isinstance(user_id, bool) or not isinstance(user_id, (int, str)):
        return None
    if isinstance(user_id, str):
        user_id = user_id.strip()
    # 0 and "" are how hosts spell guest checkout
    if not user_id:
        return None
    return user_id


def _as_header_list(headers: Any) -> list[Any] | None:
    if headers is None:
        return []
    if isinstance(headers, str):
        return [headers]
    # Raw bytes would mix with the str Cc entries
    if isinstance(headers, (bytes, bytearray)):
        return None
    if isinstance(headers, Iterable) and not isinstance(headers, Mapping):
        return list(headers)
    return None


class HeaderEnrichmentFilter:
    """Stateless decision + transformation run once per outbound order email.

    Only reads persistent state through :meth:`ProfileFieldStore.get_raw`.
    """

    def __init__(
        self,
        store: ProfileFieldStore,
        email_types: Iterable[EmailType | str] = tuple(EmailType),
        header_name: str = "Cc",
    ) -> None:
        self.store = store
        self.email_types = frozenset(
            t.value if isinstance(t, EmailType) else t for t in email_types
        )
        self.header_name = header_name

    def __call__(self, email_type: Any, order: Any, headers: Any) -> Any:
        return self.enrich(email_type, order, headers)

    def enrich(self, email_type: Any, order: Any, headers: Any) -> Any:
        """Return *headers* with one CC entry per stored address of the order's customer.

        Returns *headers* itself whenever there is nothing to add, and never
        raises: a failure here must not block the email from being sent.
        """
        try:
            return self._enrich(email_type, order, headers)
        except Exception:
            logger.exception("cc_enrichment_failed", email_type=str(email_type))
            return headers

    def _enrich(self, email_type: Any, order: Any, headers: Any) -> Any:
        if isinstance(email_type, EmailType):
            email_type = email_type.value
        if not isinstance(email_type, str) or email_type not in self.email_types:
            return headers

        user_id = resolve_user_id(order)
        if user_id is None:
            return headers

        raw = self.store.get_raw(user_id)
        if not raw:
            return headers

        # Stored values are re-checked in case storage was edited out of band
        addresses = parse_address_list(raw)
        if not addresses:
            return headers

        result = _as_header_list(headers)
        if result is None:
            logger.warning(
                "unsupported_headers_type",
                email_type=email_type,
                headers_type=type(headers).__name__,
            )
            return headers

        result.extend(f"{self.header_name}: {address}" for address in addresses)
        logger.info(
            "cc_headers_added",
            email_type=email_type,
            user_id=str(user_id),
            count=len(addresses),
        )
        return result
