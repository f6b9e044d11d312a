"""Order Email CC: copy per-customer CC addresses on order emails.

Public API re-exported here for convenience::

    from order_email_cc import ProfileFieldStore, HeaderEnrichmentFilter, activate
"""

from .backends import InMemoryUserMetaBackend, SqlUserMetaBackend, UserMetaBackend
from .config import DEFAULT_META_KEY, EmailCCConfig, Settings
from .enrichment import HeaderEnrichmentFilter, resolve_user_id
from .errors import AuthError, EmailCCError
from .host import Hook, HostPlatform
from .logging import setup_logging
from .models import Actor, EmailType, OrderRef, ProfileField, UserContactProfile
from .plugin import EmailCCPlugin, activate, build_plugin
from .store import ProfileFieldStore
from .validation import is_valid_email, parse_address_list

__all__ = [
    "DEFAULT_META_KEY",
    "Actor",
    "AuthError",
    "EmailCCConfig",
    "EmailCCError",
    "EmailCCPlugin",
    "EmailType",
    "HeaderEnrichmentFilter",
    "Hook",
    "HostPlatform",
    "InMemoryUserMetaBackend",
    "OrderRef",
    "ProfileField",
    "ProfileFieldStore",
    "Settings",
    "SqlUserMetaBackend",
    "UserContactProfile",
    "UserMetaBackend",
    "activate",
    "build_plugin",
    "is_valid_email",
    "parse_address_list",
    "resolve_user_id",
    "setup_logging",
]
