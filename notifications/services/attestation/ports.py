"""
Collaborator interfaces consumed by the attestation scheduler.

The scheduler never talks to the ORM or the mail backend directly.
Campaigns, records, invites, users, assets and SSO settings come
through these stores and directories; every outbound message goes
through a NotificationGateway.

Entities are duck-typed: the scheduler only reads the attributes it
needs (campaign.start_date, record.reminder_sent_at, ...), so Django
model instances and plain test doubles both satisfy the contracts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol


@dataclass(frozen=True)
class NotificationResult:
    """Outcome of one send. Never persisted."""

    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "NotificationResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> "NotificationResult":
        return cls(success=False, error=error)


class CampaignStore(Protocol):
    def list_all(self) -> list[Any]:
        ...

    def update(self, campaign_id: Any, **fields: Any) -> None:
        ...


class RecordStore(Protocol):
    def list_by_campaign(self, campaign_id: Any) -> list[Any]:
        ...

    def update(self, record_id: Any, **fields: Any) -> None:
        ...


class InviteStore(Protocol):
    def list_by_campaign(self, campaign_id: Any) -> list[Any]:
        ...

    def update(self, invite_id: Any, **fields: Any) -> None:
        ...


class UserDirectory(Protocol):
    def get_by_id(self, user_id: Any) -> Optional[Any]:
        ...


class AssetDirectory(Protocol):
    def get_by_employee(self, email: str) -> list[Any]:
        ...


class SSOSettingsProvider(Protocol):
    def get(self) -> Optional[Any]:
        """Current SSO settings (enabled, button_text) or None."""
        ...


class NotificationGateway(Protocol):
    """
    Performs the actual send. Each operation returns a
    NotificationResult or raises; both outcomes are handled by
    the caller. The gateway owns its own per-call timeout.
    """

    def send_reminder(
        self,
        *,
        email: str,
        campaign: Any,
        attestation_url: str,
    ) -> NotificationResult:
        ...

    def send_escalation(
        self,
        *,
        manager_email: str,
        employee_name: str,
        employee_email: str,
        campaign: Any,
    ) -> NotificationResult:
        ...

    def send_unregistered_reminder(
        self,
        *,
        email: str,
        first_name: str,
        last_name: str,
        campaign: Any,
        invite_token: str,
        registration_url: str,
        asset_count: int,
        sso_enabled: bool,
        sso_button_text: str,
    ) -> NotificationResult:
        ...

    def send_unregistered_escalation(
        self,
        *,
        manager_email: str,
        manager_name: str,
        employee_email: str,
        employee_name: str,
        campaign: Any,
        asset_count: int,
    ) -> NotificationResult:
        ...
