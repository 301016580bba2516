"""
Notification service layer.

- mailer: email gateway used for every outbound attestation message
- attestation: the reminder / escalation scheduler and its entry points
"""

# =====================================================
# GATEWAY
# =====================================================
from .mailer import EmailNotificationGateway

# =====================================================
# ATTESTATION SCHEDULER
# =====================================================
from .attestation.runner import (
    process_reminders,
    process_escalations,
    process_unregistered_reminders,
    process_unregistered_escalations,
    auto_close_expired_campaigns,
    run_scheduled_tasks,
)

# =====================================================
# PUBLIC EXPORTS
# =====================================================
__all__ = [
    # Gateway
    "EmailNotificationGateway",

    # Attestation
    "process_reminders",
    "process_escalations",
    "process_unregistered_reminders",
    "process_unregistered_escalations",
    "auto_close_expired_campaigns",
    "run_scheduled_tasks",
]
