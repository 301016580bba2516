from django.db import models
from django.utils import timezone


class Asset(models.Model):
    """
    A company asset assigned to an employee.

    Employees are referenced by email so assets can exist for
    owners who have not registered an account yet.
    """

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        RETURNED = "returned", "Returned"
        LOST = "lost", "Lost"
        RETIRED = "retired", "Retired"

    asset_tag = models.CharField(max_length=100, unique=True)
    asset_type = models.CharField(max_length=100, blank=True)

    # =====================================================
    # OWNER
    # =====================================================
    employee_email = models.EmailField(db_index=True)
    employee_first_name = models.CharField(max_length=150, blank=True)
    employee_last_name = models.CharField(max_length=150, blank=True)

    # =====================================================
    # MANAGER (SHARED BY ALL OF ONE EMPLOYEE'S ASSETS)
    # =====================================================
    manager_email = models.EmailField(blank=True)
    manager_first_name = models.CharField(max_length=150, blank=True)
    manager_last_name = models.CharField(max_length=150, blank=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
    )

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.asset_tag} ({self.employee_email})"
