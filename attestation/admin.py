from django.contrib import admin
from django.utils.html import format_html

from .models import (
    AttestationCampaign,
    AttestationRecord,
    AttestationPendingInvite,
)


# ============================================================
# CAMPAIGNS
# ============================================================

@admin.register(AttestationCampaign)
class AttestationCampaignAdmin(admin.ModelAdmin):

    # =====================================================
    # LIST VIEW
    # =====================================================
    list_display = (
        "id",
        "name",
        "colored_status",
        "start_date",
        "end_date",
        "reminder_days",
        "escalation_days",
        "unregistered_reminder_days",
    )

    list_filter = ("status", "start_date")
    search_fields = ("name", "description")
    ordering = ("-start_date",)
    list_per_page = 25

    # =====================================================
    # FIELDSETS (DETAIL VIEW)
    # =====================================================
    fieldsets = (
        ("Campaign", {
            "fields": ("name", "description", "status", "created_by"),
        }),
        ("Schedule", {
            "fields": ("start_date", "end_date"),
        }),
        ("Notification thresholds (days after start)", {
            "fields": (
                "reminder_days",
                "escalation_days",
                "unregistered_reminder_days",
            ),
        }),
    )

    def colored_status(self, obj):
        color_map = {
            AttestationCampaign.Status.DRAFT: "#6b7280",      # gray
            AttestationCampaign.Status.ACTIVE: "#2563eb",     # blue
            AttestationCampaign.Status.COMPLETED: "#16a34a",  # green
            AttestationCampaign.Status.CANCELLED: "#dc2626",  # red
        }

        return format_html(
            '<span style="color:{}; font-weight:600;">{}</span>',
            color_map.get(obj.status, "#000000"),
            obj.get_status_display(),
        )

    colored_status.short_description = "Status"


# ============================================================
# RECORDS (REGISTERED OWNERS)
# ============================================================

@admin.register(AttestationRecord)
class AttestationRecordAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "campaign",
        "user",
        "status",
        "reminder_sent_at",
        "escalation_sent_at",
        "completed_at",
    )
    list_filter = ("status", "campaign")
    search_fields = ("user__username", "user__email", "campaign__name")

    # Send-once markers are owned by the scheduler
    readonly_fields = ("reminder_sent_at", "escalation_sent_at", "created_at")


# ============================================================
# PENDING INVITES (UNREGISTERED OWNERS)
# ============================================================

@admin.register(AttestationPendingInvite)
class AttestationPendingInviteAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "campaign",
        "employee_email",
        "employee_first_name",
        "employee_last_name",
        "registered_at",
        "reminder_sent_at",
        "escalation_sent_at",
    )
    list_filter = ("campaign",)
    search_fields = (
        "employee_email",
        "employee_first_name",
        "employee_last_name",
    )
    readonly_fields = (
        "invite_token",
        "reminder_sent_at",
        "escalation_sent_at",
        "created_at",
    )
