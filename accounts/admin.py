from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User, SSOSettings


# ============================================================
# USER ADMIN
# ============================================================

@admin.register(User)
class UserAdmin(BaseUserAdmin):
    ordering = ("username",)

    list_display = (
        "username",
        "email",
        "first_name",
        "last_name",
        "role",
        "manager_email",
        "is_active",
    )

    list_filter = (
        "role",
        "is_active",
        "is_staff",
    )

    search_fields = (
        "username",
        "email",
        "first_name",
        "last_name",
        "manager_email",
    )

    fieldsets = BaseUserAdmin.fieldsets + (
        ("Manager", {
            "fields": (
                "role",
                "manager_first_name",
                "manager_last_name",
                "manager_email",
            )
        }),
    )


# ============================================================
# SSO SETTINGS (SINGLETON)
# ============================================================

@admin.register(SSOSettings)
class SSOSettingsAdmin(admin.ModelAdmin):
    list_display = ("enabled", "button_text", "issuer_url", "updated_at")
    readonly_fields = ("updated_at",)

    def has_add_permission(self, request):
        return not SSOSettings.objects.exists()
