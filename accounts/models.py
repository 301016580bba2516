from django.db import models
from django.contrib.auth.models import AbstractUser
from django.utils import timezone


class User(AbstractUser):
    role = models.CharField(
        max_length=50,
        choices=[
            ("admin", "Admin"),
            ("manager", "Manager"),
            ("employee", "Employee"),
        ],
        default="employee",
    )

    # =====================================================
    # MANAGER (ESCALATION TARGET)
    # =====================================================
    manager_first_name = models.CharField(max_length=150, blank=True)
    manager_last_name = models.CharField(max_length=150, blank=True)
    manager_email = models.EmailField(blank=True, db_index=True)

    @property
    def display_name(self):
        """Full name, falling back to username, then email."""
        return self.get_full_name() or self.username or self.email

    def __str__(self):
        full = self.get_full_name()
        return f"{full} ({self.username})" if full else self.username


class SSOSettings(models.Model):
    """
    Organization-wide single sign-on configuration.

    Stored as a single row (pk=1). Attestation emails for invitees
    only need the enabled flag and the login button label.
    """

    DEFAULT_BUTTON_TEXT = "Sign In with SSO"

    enabled = models.BooleanField(default=False)
    button_text = models.CharField(
        max_length=100,
        blank=True,
        default=DEFAULT_BUTTON_TEXT,
    )
    issuer_url = models.URLField(blank=True)
    client_id = models.CharField(max_length=255, blank=True)

    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = "SSO settings"
        verbose_name_plural = "SSO settings"

    def save(self, *args, **kwargs):
        self.pk = 1
        self.updated_at = timezone.now()
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        return cls.objects.filter(pk=1).first()

    def __str__(self):
        return f"SSO ({'enabled' if self.enabled else 'disabled'})"
