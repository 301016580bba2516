"""
Reminder and escalation tracks for asset owners who have been
invited but have not registered an account yet.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .base import DispatchingProcessor, display_name
from .dispatch import DispatchOutcome

logger = logging.getLogger(__name__)


DEFAULT_UNREGISTERED_REMINDER_DAYS = 7
DEFAULT_SSO_BUTTON_TEXT = "Sign In with SSO"


def resolve_unregistered_reminder_days(configured):
    """
    Threshold for the unregistered reminder track.

    Only an unset value (None) falls back to the default; an explicit
    0 is honored as "remind immediately".
    """
    if configured is None:
        return DEFAULT_UNREGISTERED_REMINDER_DAYS
    return configured


class ManagerConflictError(ValueError):
    """An employee's assets name more than one manager."""


@dataclass(frozen=True)
class Manager:
    email: str
    first_name: str = ""
    last_name: str = ""

    @property
    def name(self):
        return display_name(self.first_name, self.last_name)


@dataclass(frozen=True)
class EmployeeAssets:
    """
    An employee's current assets, seen as one unit.

    All of one employee's assets are expected to share a manager;
    the manager property checks that instead of trusting whichever
    asset happens to come first.
    """

    email: str
    assets: tuple

    @classmethod
    def load(cls, directory, email):
        return cls(email=email, assets=tuple(directory.get_by_employee(email) or ()))

    @property
    def count(self):
        return len(self.assets)

    @property
    def manager(self) -> Optional[Manager]:
        found = None

        for asset in self.assets:
            email = (getattr(asset, "manager_email", "") or "").strip()
            if not email:
                continue

            if found is None:
                found = Manager(
                    email=email,
                    first_name=getattr(asset, "manager_first_name", "") or "",
                    last_name=getattr(asset, "manager_last_name", "") or "",
                )
            elif found.email.lower() != email.lower():
                raise ManagerConflictError(
                    f"Assets of {self.email} name different managers: "
                    f"{found.email}, {email}"
                )

        return found


class UnregisteredTrackProcessor(DispatchingProcessor):

    def list_candidates(self, campaign):
        invites = self.deps.invites.list_by_campaign(campaign.id)
        return [
            invite
            for invite in invites
            if invite.registered_at is None
            and getattr(invite, self.marker_field) is None
        ]


class UnregisteredReminderProcessor(UnregisteredTrackProcessor):
    """Reminds invitees to register and attest."""

    stage_name = "unregistered reminders"
    marker_field = "reminder_sent_at"

    def prepare(self):
        # Once per invocation, not once per invitee
        sso = self.deps.sso.get()
        self.sso_enabled = bool(getattr(sso, "enabled", False))
        self.sso_button_text = getattr(sso, "button_text", "") or DEFAULT_SSO_BUTTON_TEXT

    def threshold_for(self, campaign):
        return resolve_unregistered_reminder_days(campaign.unregistered_reminder_days)

    def dispatch(self, campaign, invite):
        # Count is informational only; zero assets still gets a reminder
        holdings = EmployeeAssets.load(self.deps.assets, invite.employee_email)

        return self.send_and_commit(
            self.deps.invites,
            invite,
            self.deps.gateway.send_unregistered_reminder,
            f"{invite.employee_email} (campaign {campaign.name!r})",
            email=invite.employee_email,
            first_name=invite.employee_first_name or "",
            last_name=invite.employee_last_name or "",
            campaign=campaign,
            invite_token=invite.invite_token,
            registration_url=self.deps.registration_url(invite.invite_token),
            asset_count=holdings.count,
            sso_enabled=self.sso_enabled,
            sso_button_text=self.sso_button_text,
        )


class UnregisteredEscalationProcessor(UnregisteredTrackProcessor):
    """Tells managers which team members have not registered."""

    stage_name = "unregistered escalations"
    marker_field = "escalation_sent_at"

    def threshold_for(self, campaign):
        # Shares the registered track's escalation threshold
        return campaign.escalation_days

    def dispatch(self, campaign, invite):
        holdings = EmployeeAssets.load(self.deps.assets, invite.employee_email)
        if holdings.count == 0:
            return DispatchOutcome.SKIPPED

        try:
            manager = holdings.manager
        except ManagerConflictError as exc:
            logger.warning("Skipping unregistered escalation: %s", exc)
            return DispatchOutcome.SKIPPED

        if manager is None:
            return DispatchOutcome.SKIPPED

        employee_name = display_name(
            invite.employee_first_name,
            invite.employee_last_name,
            invite.employee_email,
        )

        return self.send_and_commit(
            self.deps.invites,
            invite,
            self.deps.gateway.send_unregistered_escalation,
            f"manager {manager.email} of {invite.employee_email} (campaign {campaign.name!r})",
            manager_email=manager.email,
            manager_name=manager.name,
            employee_email=invite.employee_email,
            employee_name=employee_name,
            campaign=campaign,
            asset_count=holdings.count,
        )
