"""Parsing and syntax validation of comma-separated address lists."""

from __future__ import annotations

from collections.abc import Iterable

from email_validator import EmailNotValidError, validate_email

SEPARATOR = ","
JOINER = ", "


def is_valid_email(address: object) -> bool:
    """Return True if *address* is a syntactically valid bare email address.

    Grammar and length limits come from ``email-validator``; no DNS lookups
    are made.  Intranet and special-use domains (``corp.local``) are allowed,
    but the domain must still contain a dot.
    """
    if not isinstance(address, str) or not address or address != address.strip():
        return False
    try:
        validated = validate_email(
            address,
            check_deliverability=False,
            globally_deliverable=False,
        )
    except EmailNotValidError:
        return False
    return "." in validated.ascii_domain.strip(".")


def split_address_list(raw: str) -> list[str]:
    """Split on commas, trim each token and drop the empty ones."""
    if not raw:
        return []
    tokens = (token.strip() for token in raw.split(SEPARATOR))
    return [token for token in tokens if token]


def parse_address_list(raw: str) -> list[str]:
    """Return the valid addresses in *raw*, in their original order.

    Malformed tokens are dropped without being reported.
    """
    return [token for token in split_address_list(raw) if is_valid_email(token)]


def format_address_list(addresses: Iterable[str]) -> str:
    return JOINER.join(addresses)
