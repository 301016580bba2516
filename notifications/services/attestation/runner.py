"""
Entry points that run the attestation scheduler against the
Django-backed stores and the email gateway.

These are what the background scheduler and the management
command call. Each returns a StageResult (or a RunSummary for
run_scheduled_tasks) and never raises.
"""

from django.conf import settings
from django.utils import timezone

from attestation.repositories import (
    DjangoAssetDirectory,
    DjangoCampaignStore,
    DjangoInviteStore,
    DjangoRecordStore,
    DjangoSSOSettingsProvider,
    DjangoUserDirectory,
)
from notifications.services.mailer import EmailNotificationGateway

from .base import SchedulerDependencies
from .dispatch import DispatchQueue
from .orchestrator import SchedulerOrchestrator


def build_dependencies(clock=None, gateway=None):
    return SchedulerDependencies(
        campaigns=DjangoCampaignStore(),
        records=DjangoRecordStore(),
        invites=DjangoInviteStore(),
        users=DjangoUserDirectory(),
        assets=DjangoAssetDirectory(),
        sso=DjangoSSOSettingsProvider(),
        gateway=gateway or EmailNotificationGateway(),
        clock=clock or timezone.now,
        queue=DispatchQueue(getattr(settings, "ATTESTATION_DISPATCH_WORKERS", 1)),
        frontend_url=getattr(settings, "FRONTEND_URL", "http://localhost:3000"),
    )


def build_orchestrator(clock=None, gateway=None):
    return SchedulerOrchestrator.from_dependencies(
        build_dependencies(clock=clock, gateway=gateway)
    )


def process_reminders():
    return build_orchestrator().process_reminders()


def process_escalations():
    return build_orchestrator().process_escalations()


def process_unregistered_reminders():
    return build_orchestrator().process_unregistered_reminders()


def process_unregistered_escalations():
    return build_orchestrator().process_unregistered_escalations()


def auto_close_expired_campaigns():
    return build_orchestrator().auto_close_expired_campaigns()


def run_scheduled_tasks(clock=None):
    return build_orchestrator(clock=clock).run_all()
