"""Tests for order_email_cc.store (ProfileFieldStore)."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from order_email_cc.backends import InMemoryUserMetaBackend
from order_email_cc.errors import AuthError
from order_email_cc.models import Actor
from order_email_cc.store import ProfileFieldStore


class TestGetRaw:
    def test_missing_user_is_empty(self, store: ProfileFieldStore):
        assert store.get_raw(999) == ""

    def test_returns_stored_value(self, store: ProfileFieldStore, stored_emails):
        stored_emails(42, "ops@firm.com")
        assert store.get_raw(42) == "ops@firm.com"

    def test_int_and_str_ids_are_the_same_user(self, store: ProfileFieldStore, stored_emails):
        stored_emails(42, "ops@firm.com")
        assert store.get_raw("42") == "ops@firm.com"

    def test_backend_failure_reads_as_empty(self):
        backend = MagicMock()
        backend.get.side_effect = RuntimeError("db down")
        assert ProfileFieldStore(backend).get_raw(1) == ""

    def test_non_string_value_reads_as_empty(self):
        backend = MagicMock()
        backend.get.return_value = ["a@b.com"]
        assert ProfileFieldStore(backend).get_raw(1) == ""


class TestSetRaw:
    def test_keeps_valid_trimmed_addresses_in_order(self, store: ProfileFieldStore, admin: Actor):
        stored = store.set_raw(7, "  c@d.org , not-an-email,a@b.com,  ", admin)
        assert stored == "c@d.org, a@b.com"
        assert store.get_raw(7) == "c@d.org, a@b.com"

    def test_empty_input_stores_empty(self, store: ProfileFieldStore, admin: Actor):
        store.set_raw(7, "a@b.com", admin)
        store.set_raw(7, "", admin)
        assert store.get_raw(7) == ""

    def test_all_invalid_stores_empty(self, store: ProfileFieldStore, admin: Actor):
        assert store.set_raw(7, "bad, a@b", admin) == ""
        assert store.get_raw(7) == ""

    def test_idempotent(self, store: ProfileFieldStore, admin: Actor):
        store.set_raw(7, "a@b.com,bad,  c@d.org", admin)
        first = store.get_raw(7)
        store.set_raw(7, first, admin)
        assert store.get_raw(7) == first

    def test_same_input_twice_same_value(self, store: ProfileFieldStore, admin: Actor):
        store.set_raw(7, "x@acme.com, y@acme.com", admin)
        first = store.get_raw(7)
        store.set_raw(7, "x@acme.com, y@acme.com", admin)
        assert store.get_raw(7) == first

    def test_user_may_edit_own_profile(self, store: ProfileFieldStore, customer_actor: Actor):
        store.set_raw(42, "a@b.com", customer_actor)
        assert store.get_raw(42) == "a@b.com"

    def test_unauthorized_actor_raises(self, store: ProfileFieldStore, customer_actor: Actor):
        with pytest.raises(AuthError) as excinfo:
            store.set_raw(7, "a@b.com", customer_actor)
        assert excinfo.value.user_id == 7
        assert excinfo.value.actor_id == 42
        assert store.get_raw(7) == ""

    def test_anonymous_actor_raises(self, store: ProfileFieldStore):
        with pytest.raises(AuthError):
            store.set_raw(7, "a@b.com", Actor())

    def test_uses_configured_meta_key(self, admin: Actor):
        backend = InMemoryUserMetaBackend()
        store = ProfileFieldStore(backend, meta_key="custom_key")
        store.set_raw(7, "a@b.com", admin)
        assert backend.get(7, "custom_key") == "a@b.com"


class TestGetProfile:
    def test_parsed_view(self, store: ProfileFieldStore, admin: Actor):
        store.set_raw(7, "a@b.com, c@d.org", admin)
        profile = store.get_profile(7)
        assert profile.user_id == 7
        assert profile.additional_emails == ["a@b.com", "c@d.org"]
        assert profile.raw == "a@b.com, c@d.org"

    def test_empty_profile(self, store: ProfileFieldStore):
        profile = store.get_profile(7)
        assert profile.additional_emails == []
        assert profile.raw == ""
