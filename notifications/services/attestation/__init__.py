"""
Attestation notification scheduler.

Evaluates active campaigns and sends each pending participant at most
one reminder and one escalation, on two tracks:

- registered owners (AttestationRecord)
- invited owners without an account (AttestationPendingInvite)

Expired campaigns are closed at the end of every run.

Stages are plain objects over injected stores and a gateway; see
runner.py for the Django-backed wiring.
"""

from .base import SchedulerDependencies
from .closer import CampaignAutoCloser
from .dispatch import DispatchOutcome, DispatchQueue
from .orchestrator import STAGE_ORDER, SchedulerOrchestrator
from .ports import NotificationResult
from .registered import EscalationProcessor, ReminderProcessor
from .results import RunSummary, StageResult
from .unregistered import (
    EmployeeAssets,
    ManagerConflictError,
    UnregisteredEscalationProcessor,
    UnregisteredReminderProcessor,
    resolve_unregistered_reminder_days,
)
from .windows import days_elapsed, has_passed, threshold_crossed

__all__ = [
    # Wiring
    "SchedulerDependencies",
    "SchedulerOrchestrator",
    "STAGE_ORDER",

    # Stages
    "ReminderProcessor",
    "EscalationProcessor",
    "UnregisteredReminderProcessor",
    "UnregisteredEscalationProcessor",
    "CampaignAutoCloser",

    # Dispatch
    "DispatchQueue",
    "DispatchOutcome",
    "NotificationResult",

    # Results
    "StageResult",
    "RunSummary",

    # Helpers
    "EmployeeAssets",
    "ManagerConflictError",
    "resolve_unregistered_reminder_days",
    "threshold_crossed",
    "days_elapsed",
    "has_passed",
]
