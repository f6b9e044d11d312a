"""Shared test fixtures for the order_email_cc test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from order_email_cc.backends import InMemoryUserMetaBackend
from order_email_cc.config import DEFAULT_META_KEY
from order_email_cc.enrichment import HeaderEnrichmentFilter
from order_email_cc.host import Hook, HostPlatform
from order_email_cc.models import EDIT_USERS, Actor
from order_email_cc.store import ProfileFieldStore


class FakeHost(HostPlatform):
    """Records everything the extension registers."""

    def __init__(self, *, active: bool = True) -> None:
        self.active = active
        self.filters: dict[Hook, list[Callable[..., Any]]] = {}
        self.actions: dict[Hook, list[Callable[..., Any]]] = {}
        self.notices: list[tuple[str, str]] = []

    def commerce_active(self) -> bool:
        return self.active

    def add_filter(self, hook: Hook, callback: Callable[..., Any]) -> None:
        self.filters.setdefault(hook, []).append(callback)

    def add_action(self, hook: Hook, callback: Callable[..., Any]) -> None:
        self.actions.setdefault(hook, []).append(callback)

    def add_admin_notice(self, message: str, level: str = "error") -> None:
        self.notices.append((message, level))

    def apply_filters(self, hook: Hook, value: Any, *args: Any) -> Any:
        for callback in self.filters.get(hook, []):
            value = callback(value, *args)
        return value


@pytest.fixture
def backend() -> InMemoryUserMetaBackend:
    return InMemoryUserMetaBackend()


@pytest.fixture
def store(backend: InMemoryUserMetaBackend) -> ProfileFieldStore:
    return ProfileFieldStore(backend)


@pytest.fixture
def admin() -> Actor:
    return Actor(user_id=1, capabilities={EDIT_USERS})


@pytest.fixture
def customer_actor() -> Actor:
    return Actor(user_id=42)


@pytest.fixture
def header_filter(store: ProfileFieldStore) -> HeaderEnrichmentFilter:
    return HeaderEnrichmentFilter(store)


@pytest.fixture
def stored_emails(backend: InMemoryUserMetaBackend):
    """Write a raw value straight into storage, bypassing validation."""

    def _store(user_id, value: str) -> None:
        backend.set(user_id, DEFAULT_META_KEY, value)

    return _store


@pytest.fixture
def fake_host() -> FakeHost:
    return FakeHost()
