"""Tests for order_email_cc.models."""

from __future__ import annotations

from order_email_cc.models import EDIT_USERS, SEND_ORDER_EMAILS, Actor, EmailType, OrderRef, ProfileField, UserContactProfile


class TestEmailType:
    def test_exactly_seven_customer_types(self):
        assert {t.value for t in EmailType} == {
            "customer_on_hold_order",
            "customer_processing_order",
            "customer_completed_order",
            "customer_refunded_order",
            "customer_partially_refunded_order",
            "customer_invoice",
            "customer_failed_order",
        }

    def test_string_comparison(self):
        assert EmailType.COMPLETED == "customer_completed_order"


class TestActor:
    def test_editor_may_edit_anyone(self):
        actor = Actor(user_id=1, capabilities={EDIT_USERS})
        assert actor.can_edit_user(42) is True

    def test_self_edit(self):
        assert Actor(user_id=42).can_edit_user(42) is True
        assert Actor(user_id="42").can_edit_user(42) is True

    def test_other_user_denied(self):
        assert Actor(user_id=7).can_edit_user(42) is False

    def test_anonymous_denied(self):
        assert Actor().can_edit_user(42) is False

    def test_send_order_emails(self):
        assert Actor(capabilities={SEND_ORDER_EMAILS}).can_send_order_emails() is True
        assert Actor(capabilities={EDIT_USERS}).can_send_order_emails() is True
        assert Actor(user_id=42).can_send_order_emails() is False


class TestOrderRef:
    def test_guest_default(self):
        assert OrderRef(order_id=1).user_id is None


class TestUserContactProfile:
    def test_raw_joins_with_comma_space(self):
        profile = UserContactProfile(user_id=1, additional_emails=["a@b.com", "c@d.org"])
        assert profile.raw == "a@b.com, c@d.org"


class TestProfileField:
    def test_defaults(self):
        field = ProfileField(field_id="wc_additional_email_addresses")
        assert field.value == ""
        assert "separated by commas" in field.description
