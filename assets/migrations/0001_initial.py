import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Asset",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("asset_tag", models.CharField(max_length=100, unique=True)),
                ("asset_type", models.CharField(blank=True, max_length=100)),
                ("employee_email", models.EmailField(db_index=True, max_length=254)),
                ("employee_first_name", models.CharField(blank=True, max_length=150)),
                ("employee_last_name", models.CharField(blank=True, max_length=150)),
                ("manager_email", models.EmailField(blank=True, max_length=254)),
                ("manager_first_name", models.CharField(blank=True, max_length=150)),
                ("manager_last_name", models.CharField(blank=True, max_length=150)),
                ("status", models.CharField(choices=[("active", "Active"), ("returned", "Returned"), ("lost", "Lost"), ("retired", "Retired")], default="active", max_length=20)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
