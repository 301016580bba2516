import smtplib
from datetime import datetime, timezone as dt_timezone
from types import SimpleNamespace

import pytest

from notifications.services import mailer
from notifications.services.mailer import EmailNotificationGateway


@pytest.fixture
def gateway():
    return EmailNotificationGateway(from_email="noreply@example.com", signature="IT Assets")


@pytest.fixture
def campaign():
    return SimpleNamespace(
        name="Q1 Laptop Review",
        end_date=datetime(2026, 3, 31, 17, 0, tzinfo=dt_timezone.utc),
    )


def test_reminder_email(gateway, campaign, mailoutbox):
    result = gateway.send_reminder(
        email="alice@example.com",
        campaign=campaign,
        attestation_url="https://attest.example.com/my-attestations",
    )

    assert result.success is True
    [message] = mailoutbox
    assert message.to == ["alice@example.com"]
    assert message.from_email == "noreply@example.com"
    assert message.subject == "Reminder: Asset Attestation Pending - Q1 Laptop Review"
    assert "https://attest.example.com/my-attestations" in message.body
    assert "Tuesday, 31 March 2026" in message.body
    assert message.body.endswith("- IT Assets")


def test_reminder_without_end_date(gateway, campaign, mailoutbox):
    campaign.end_date = None

    gateway.send_reminder(email="a@example.com", campaign=campaign, attestation_url="u")

    assert "closes on" not in mailoutbox[0].body


def test_escalation_email(gateway, campaign, mailoutbox):
    gateway.send_escalation(
        manager_email="boss@example.com",
        employee_name="Alice Ng",
        employee_email="alice@example.com",
        campaign=campaign,
    )

    [message] = mailoutbox
    assert message.to == ["boss@example.com"]
    assert message.subject == "Escalation: Outstanding Asset Attestation - Alice Ng"
    assert "Alice Ng (alice@example.com)" in message.body


def _unregistered_reminder(gateway, campaign, **overrides):
    payload = dict(
        email="ivy@example.com",
        first_name="Ivy",
        last_name="Lee",
        campaign=campaign,
        invite_token="tok",
        registration_url="https://attest.example.com/register?invite=tok",
        asset_count=1,
        sso_enabled=False,
        sso_button_text="Sign In with SSO",
    )
    payload.update(overrides)
    return gateway.send_unregistered_reminder(**payload)


def test_unregistered_reminder_email(gateway, campaign, mailoutbox):
    _unregistered_reminder(gateway, campaign)

    [message] = mailoutbox
    assert message.to == ["ivy@example.com"]
    assert message.subject == (
        "Reminder: Register to Complete Your Asset Attestation - Q1 Laptop Review"
    )
    assert message.body.startswith("Good day, Ivy.")
    assert "1 asset recorded" in message.body
    assert "https://attest.example.com/register?invite=tok" in message.body
    assert "single sign-on" not in message.body


def test_unregistered_reminder_mentions_sso_button(gateway, campaign, mailoutbox):
    _unregistered_reminder(
        gateway, campaign, asset_count=3, sso_enabled=True, sso_button_text="Okta Login"
    )

    body = mailoutbox[0].body
    assert "3 assets recorded" in body
    assert '"Okta Login"' in body


def test_unregistered_escalation_email(gateway, campaign, mailoutbox):
    gateway.send_unregistered_escalation(
        manager_email="boss@example.com",
        manager_name="",
        employee_email="ivy@example.com",
        employee_name="Ivy Lee",
        campaign=campaign,
        asset_count=2,
    )

    [message] = mailoutbox
    assert message.to == ["boss@example.com"]
    assert message.subject == (
        "Escalation: Team Member Has Not Registered for Asset Attestation"
    )
    assert message.body.startswith("Good day.\n")
    assert "Ivy Lee (ivy@example.com) has 2 assets" in message.body


@pytest.mark.parametrize(
    "error",
    [smtplib.SMTPRecipientsRefused({}), ConnectionRefusedError("refused"), TimeoutError()],
)
def test_transport_failure_returns_failed_result(gateway, campaign, monkeypatch, error):
    def broken_send_mail(**kwargs):
        raise error

    monkeypatch.setattr(mailer, "send_mail", broken_send_mail)

    result = gateway.send_reminder(email="a@example.com", campaign=campaign, attestation_url="u")

    assert result.success is False
    assert result.error


def test_defaults_come_from_settings(settings):
    settings.DEFAULT_FROM_EMAIL = "compliance@example.com"
    settings.ATTESTATION_EMAIL_SIGNATURE = "Compliance"

    gateway = EmailNotificationGateway()

    assert gateway.from_email == "compliance@example.com"
    assert gateway.signature == "Compliance"
