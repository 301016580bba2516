import secrets

from django.conf import settings
from django.db import models
from django.utils import timezone


def generate_invite_token():
    return secrets.token_urlsafe(32)


class AttestationCampaign(models.Model):
    """
    A time-boxed exercise in which asset owners confirm their assets.

    Created and edited outside the scheduler. The scheduler only reads
    campaigns and moves expired ones from ACTIVE to COMPLETED.
    """

    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        ACTIVE = "active", "Active"
        COMPLETED = "completed", "Completed"
        CANCELLED = "cancelled", "Cancelled"

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.DRAFT,
        db_index=True,
    )

    # =====================================================
    # SCHEDULE
    # =====================================================
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(null=True, blank=True)

    reminder_days = models.PositiveIntegerField(
        default=7,
        help_text="Days after start before pending owners get a reminder",
    )
    escalation_days = models.PositiveIntegerField(
        default=14,
        help_text="Days after start before managers are notified",
    )
    unregistered_reminder_days = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Days after start before unregistered owners get a reminder "
                  "(empty = 7)",
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_campaigns",
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-start_date"]

    def __str__(self):
        return f"{self.name} ({self.status})"


class AttestationRecord(models.Model):
    """
    One registered owner's participation in one campaign.

    reminder_sent_at / escalation_sent_at are send-once markers:
    once set they are never cleared or overwritten.
    """

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        COMPLETED = "completed", "Completed"

    campaign = models.ForeignKey(
        AttestationCampaign,
        on_delete=models.CASCADE,
        related_name="records",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="attestation_records",
    )

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )

    reminder_sent_at = models.DateTimeField(null=True, blank=True)
    escalation_sent_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        unique_together = ("campaign", "user")
        ordering = ["id"]

    def __str__(self):
        return f"{self.user} - {self.campaign.name} ({self.status})"


class AttestationPendingInvite(models.Model):
    """
    An asset owner without an account, invited to register for a campaign.

    registered_at is set by the registration flow; from then on the
    invite takes no part in unregistered reminders or escalations.
    """

    campaign = models.ForeignKey(
        AttestationCampaign,
        on_delete=models.CASCADE,
        related_name="pending_invites",
    )

    employee_email = models.EmailField()
    employee_first_name = models.CharField(max_length=150, blank=True)
    employee_last_name = models.CharField(max_length=150, blank=True)

    invite_token = models.CharField(
        max_length=64,
        unique=True,
        default=generate_invite_token,
    )

    invite_sent_at = models.DateTimeField(null=True, blank=True)
    registered_at = models.DateTimeField(null=True, blank=True)
    reminder_sent_at = models.DateTimeField(null=True, blank=True)
    escalation_sent_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        unique_together = ("campaign", "employee_email")
        ordering = ["id"]

    @property
    def employee_name(self):
        full = f"{self.employee_first_name} {self.employee_last_name}".strip()
        return full or self.employee_email

    def __str__(self):
        return f"{self.employee_email} - {self.campaign.name}"
