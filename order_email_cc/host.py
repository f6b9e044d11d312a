"""The seam between this extension and the e-commerce host."""

from __future__ import annotations

import abc
from collections.abc import Callable
from enum import Enum
from typing import Any


class Hook(str, Enum):
    """Named host events this extension subscribes to."""

    ORDER_EMAIL_HEADERS = "order_email_headers"
    SHOW_USER_PROFILE = "show_user_profile"
    EDIT_USER_PROFILE = "edit_user_profile"
    PERSONAL_OPTIONS_UPDATE = "personal_options_update"
    EDIT_USER_PROFILE_UPDATE = "edit_user_profile_update"


class HostPlatform(abc.ABC):
    """Abstract interface a host implements to load the extension.

    Filters receive a value and return a (possibly) modified one; actions
    are fire-and-forget callbacks.  The host decides when to dispatch them.
    """

    @abc.abstractmethod
    def commerce_active(self) -> bool:
        """True if the e-commerce platform is installed and active."""
        ...

    @abc.abstractmethod
    def add_filter(self, hook: Hook, callback: Callable[..., Any]) -> None:
        ...

    @abc.abstractmethod
    def add_action(self, hook: Hook, callback: Callable[..., Any]) -> None:
        ...

    @abc.abstractmethod
    def add_admin_notice(self, message: str, level: str = "error") -> None:
        """Show a one-line notice to site operators."""
        ...
