from django.contrib import admin

from .models import Asset


@admin.register(Asset)
class AssetAdmin(admin.ModelAdmin):
    list_display = (
        "asset_tag",
        "asset_type",
        "employee_email",
        "manager_email",
        "status",
    )
    list_filter = ("status", "asset_type")
    search_fields = (
        "asset_tag",
        "employee_email",
        "employee_first_name",
        "employee_last_name",
        "manager_email",
    )
