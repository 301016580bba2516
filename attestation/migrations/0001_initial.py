import attestation.models
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="AttestationCampaign",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("status", models.CharField(choices=[("draft", "Draft"), ("active", "Active"), ("completed", "Completed"), ("cancelled", "Cancelled")], db_index=True, default="draft", max_length=20)),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField(blank=True, null=True)),
                ("reminder_days", models.PositiveIntegerField(default=7, help_text="Days after start before pending owners get a reminder")),
                ("escalation_days", models.PositiveIntegerField(default=14, help_text="Days after start before managers are notified")),
                ("unregistered_reminder_days", models.PositiveIntegerField(blank=True, help_text="Days after start before unregistered owners get a reminder (empty = 7)", null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="created_campaigns", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-start_date"],
            },
        ),
        migrations.CreateModel(
            name="AttestationRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(choices=[("pending", "Pending"), ("completed", "Completed")], db_index=True, default="pending", max_length=20)),
                ("reminder_sent_at", models.DateTimeField(blank=True, null=True)),
                ("escalation_sent_at", models.DateTimeField(blank=True, null=True)),
                ("completed_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("campaign", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="records", to="attestation.attestationcampaign")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="attestation_records", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["id"],
                "unique_together": {("campaign", "user")},
            },
        ),
        migrations.CreateModel(
            name="AttestationPendingInvite",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("employee_email", models.EmailField(max_length=254)),
                ("employee_first_name", models.CharField(blank=True, max_length=150)),
                ("employee_last_name", models.CharField(blank=True, max_length=150)),
                ("invite_token", models.CharField(default=attestation.models.generate_invite_token, max_length=64, unique=True)),
                ("invite_sent_at", models.DateTimeField(blank=True, null=True)),
                ("registered_at", models.DateTimeField(blank=True, null=True)),
                ("reminder_sent_at", models.DateTimeField(blank=True, null=True)),
                ("escalation_sent_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("campaign", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="pending_invites", to="attestation.attestationcampaign")),
            ],
            options={
                "ordering": ["id"],
                "unique_together": {("campaign", "employee_email")},
            },
        ),
    ]
