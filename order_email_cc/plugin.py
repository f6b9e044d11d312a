"""EmailCCPlugin — wires the store and the header filter into a host."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from .config import EmailCCConfig
from .enrichment import HeaderEnrichmentFilter
from .errors import AuthError
from .host import Hook, HostPlatform
from .models import Actor, ProfileField, UserId
from .store import ProfileFieldStore

logger = structlog.get_logger()

INACTIVE_NOTICE = (
    "Customer Order Email CC requires the e-commerce platform to be installed and active."
)


class EmailCCPlugin:
    """Host-facing callbacks of the extension.

    Constructed explicitly with its collaborators; :func:`activate` is the
    usual way to build and register one.
    """

    def __init__(
        self,
        store: ProfileFieldStore,
        header_filter: HeaderEnrichmentFilter,
        config: EmailCCConfig,
    ) -> None:
        self.store = store
        self.header_filter = header_filter
        self.config = config

    # ------------------------------------------------------------------
    # Profile screen
    # ------------------------------------------------------------------

    def profile_field(self, user_id: UserId) -> ProfileField:
        """Describe the text input for *user_id*, pre-filled with the stored list."""
        return ProfileField(field_id=self.store.meta_key, value=self.store.get_raw(user_id))

    def save_profile_field(self, user_id: UserId, form: Mapping[str, Any], actor: Actor) -> bool:
        """Persist the posted field; return False if nothing was saved.

        A form without the field is left alone.  Permission failures are
        reported through the return value, as host save hooks expect.
        """
        value = form.get(self.store.meta_key)
        if value is None:
            return False
        try:
            self.store.set_raw(user_id, str(value), actor)
        except AuthError as exc:
            logger.warning(
                "profile_edit_denied",
                user_id=str(exc.user_id),
                actor_id=str(exc.actor_id),
            )
            return False
        return True

    # ------------------------------------------------------------------
    # Email dispatch
    # ------------------------------------------------------------------

    def on_email_headers(self, headers: Any, email_type: Any, order: Any) -> Any:
        """Host filter signature: headers first, then email type and order."""
        return self.header_filter.enrich(email_type, order, headers)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, host: HostPlatform) -> None:
        host.add_action(Hook.SHOW_USER_PROFILE, self.profile_field)
        host.add_action(Hook.EDIT_USER_PROFILE, self.profile_field)
        host.add_action(Hook.PERSONAL_OPTIONS_UPDATE, self.save_profile_field)
        host.add_action(Hook.EDIT_USER_PROFILE_UPDATE, self.save_profile_field)
        host.add_filter(Hook.ORDER_EMAIL_HEADERS, self.on_email_headers)
        logger.info("email_cc_registered", meta_key=self.store.meta_key)


def build_plugin(store: ProfileFieldStore, config: EmailCCConfig | None = None) -> EmailCCPlugin:
    """Construct the plugin and its header filter from *config*."""
    if config is None:
        config = EmailCCConfig()
    header_filter = HeaderEnrichmentFilter(
        store,
        email_types=config.customer_email_types,
        header_name=config.header_name,
    )
    return EmailCCPlugin(store, header_filter, config)


def activate(
    host: HostPlatform,
    store: ProfileFieldStore,
    config: EmailCCConfig | None = None,
) -> EmailCCPlugin | None:
    """Register the extension with *host*, or warn operators and do nothing.

    Returns the registered plugin, or None when the host's e-commerce
    platform is not active (no hooks are registered in that case).
    """
    if not host.commerce_active():
        host.add_admin_notice(INACTIVE_NOTICE, level="error")
        logger.warning("email_cc_inactive", reason="commerce_platform_missing")
        return None

    plugin = build_plugin(store, config)
    plugin.register(host)
    return plugin
