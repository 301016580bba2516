"""
notifications/services/mailer.py

Email notification gateway for attestation reminders and escalations.

Every send goes through Django's send_mail with fail_silently=False,
so transport problems come back as a failed NotificationResult
instead of disappearing. The per-call timeout is EMAIL_TIMEOUT.
"""

import logging
import smtplib

from django.conf import settings
from django.core.mail import BadHeaderError, send_mail

from notifications.services.attestation.ports import NotificationResult

logger = logging.getLogger(__name__)


def _format_date(value):
    if not value:
        return None
    return f"{value:%A, %d %B %Y}"


class EmailNotificationGateway:

    def __init__(self, from_email=None, signature=None):
        self.from_email = from_email or settings.DEFAULT_FROM_EMAIL
        self.signature = signature or getattr(
            settings, "ATTESTATION_EMAIL_SIGNATURE", "Asset Compliance Team"
        )

    # ============================================================
    # TRANSPORT
    # ============================================================

    def _send(self, *, subject, body, recipient):
        try:
            send_mail(
                subject=subject,
                message=f"{body}\n\n- {self.signature}",
                from_email=self.from_email,
                recipient_list=[recipient],
                fail_silently=False,
            )
        except (BadHeaderError, smtplib.SMTPException, OSError) as exc:
            logger.warning("Email to %s failed: %s", recipient, exc)
            return NotificationResult.failed(str(exc) or exc.__class__.__name__)

        return NotificationResult.ok()

    # ============================================================
    # REGISTERED OWNERS
    # ============================================================

    def send_reminder(self, *, email, campaign, attestation_url):
        subject = f"Reminder: Asset Attestation Pending - {campaign.name}"

        body = (
            f"Good day.\n\n"
            f"This is a reminder that your asset attestation for the campaign "
            f"\"{campaign.name}\" has not been completed yet.\n\n"
        )

        end_date = _format_date(campaign.end_date)
        if end_date:
            body += f"The campaign closes on {end_date}.\n\n"

        body += (
            f"Please review and confirm the assets assigned to you at:\n"
            f"{attestation_url}\n\n"
            f"This notice is issued for your guidance and appropriate action."
        )

        return self._send(subject=subject, body=body, recipient=email)

    def send_escalation(self, *, manager_email, employee_name, employee_email, campaign):
        subject = f"Escalation: Outstanding Asset Attestation - {employee_name}"

        body = (
            f"Good day.\n\n"
            f"This is to inform you that {employee_name} ({employee_email}), "
            f"a member of your team, has not yet completed the asset attestation "
            f"for the campaign \"{campaign.name}\".\n\n"
            f"Please follow up with them to ensure their assets are confirmed "
            f"before the campaign closes.\n\n"
            f"This notice is issued for your information and appropriate action."
        )

        return self._send(subject=subject, body=body, recipient=manager_email)

    # ============================================================
    # UNREGISTERED OWNERS
    # ============================================================

    def send_unregistered_reminder(
        self,
        *,
        email,
        first_name,
        last_name,
        campaign,
        invite_token,
        registration_url,
        asset_count,
        sso_enabled,
        sso_button_text,
    ):
        subject = (
            f"Reminder: Register to Complete Your Asset Attestation - {campaign.name}"
        )

        greeting = f"Good day, {first_name}." if first_name else "Good day."
        asset_word = "asset" if asset_count == 1 else "assets"

        body = (
            f"{greeting}\n\n"
            f"You have {asset_count} {asset_word} recorded under your name that "
            f"require attestation for the campaign \"{campaign.name}\".\n\n"
            f"You do not have an account yet. Please register using the link below "
            f"to review and confirm your assets:\n"
            f"{registration_url}\n\n"
        )

        if sso_enabled:
            body += (
                f"Your organization uses single sign-on. On the registration page, "
                f"choose \"{sso_button_text}\" to sign in with your company account.\n\n"
            )

        body += "This notice is issued for your guidance and appropriate action."

        return self._send(subject=subject, body=body, recipient=email)

    def send_unregistered_escalation(
        self,
        *,
        manager_email,
        manager_name,
        employee_email,
        employee_name,
        campaign,
        asset_count,
    ):
        subject = "Escalation: Team Member Has Not Registered for Asset Attestation"

        greeting = f"Good day, {manager_name}." if manager_name else "Good day."
        asset_word = "asset" if asset_count == 1 else "assets"

        body = (
            f"{greeting}\n\n"
            f"This is to inform you that {employee_name} ({employee_email}) has "
            f"{asset_count} {asset_word} that require attestation for the campaign "
            f"\"{campaign.name}\", but has not yet registered an account.\n\n"
            f"Please ask them to complete their registration using the invitation "
            f"they received so their assets can be confirmed.\n\n"
            f"This notice is issued for your information and appropriate action."
        )

        return self._send(subject=subject, body=body, recipient=manager_email)
