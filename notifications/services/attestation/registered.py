"""
Reminder and escalation tracks for registered owners
(one AttestationRecord per campaign participant).
"""

from .base import DispatchingProcessor, RECORD_PENDING, display_name
from .dispatch import DispatchOutcome


class RegisteredTrackProcessor(DispatchingProcessor):

    def list_candidates(self, campaign):
        records = self.deps.records.list_by_campaign(campaign.id)
        return [
            record
            for record in records
            if record.status == RECORD_PENDING
            and getattr(record, self.marker_field) is None
        ]


class ReminderProcessor(RegisteredTrackProcessor):
    """Reminds pending owners once reminder_days have passed."""

    stage_name = "reminders"
    marker_field = "reminder_sent_at"

    def threshold_for(self, campaign):
        return campaign.reminder_days

    def dispatch(self, campaign, record):
        user = self.deps.users.get_by_id(record.user_id)

        # Unreachable participant, not an error
        if user is None or not user.email:
            return DispatchOutcome.SKIPPED

        return self.send_and_commit(
            self.deps.records,
            record,
            self.deps.gateway.send_reminder,
            f"{user.email} (campaign {campaign.name!r})",
            email=user.email,
            campaign=campaign,
            attestation_url=self.deps.attestation_url,
        )


class EscalationProcessor(RegisteredTrackProcessor):
    """Notifies the owner's manager once escalation_days have passed."""

    stage_name = "escalations"
    marker_field = "escalation_sent_at"

    def threshold_for(self, campaign):
        return campaign.escalation_days

    def dispatch(self, campaign, record):
        user = self.deps.users.get_by_id(record.user_id)

        if user is None or not user.email:
            return DispatchOutcome.SKIPPED

        manager_email = getattr(user, "manager_email", None)
        if not manager_email:
            return DispatchOutcome.SKIPPED

        employee_name = display_name(
            getattr(user, "first_name", ""),
            getattr(user, "last_name", ""),
            getattr(user, "username", ""),
            user.email,
        )

        return self.send_and_commit(
            self.deps.records,
            record,
            self.deps.gateway.send_escalation,
            f"manager {manager_email} of {user.email} (campaign {campaign.name!r})",
            manager_email=manager_email,
            employee_name=employee_name,
            employee_email=user.email,
            campaign=campaign,
        )
