from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone

from accounts.models import SSOSettings
from assets.models import Asset
from attestation.models import (
    AttestationCampaign,
    AttestationPendingInvite,
    AttestationRecord,
)
from attestation.repositories import (
    DjangoAssetDirectory,
    DjangoCampaignStore,
    DjangoInviteStore,
    DjangoRecordStore,
    DjangoSSOSettingsProvider,
    DjangoUserDirectory,
)
from notifications.services.attestation.runner import run_scheduled_tasks

pytestmark = pytest.mark.django_db


@pytest.fixture
def campaign():
    return AttestationCampaign.objects.create(
        name="Spring Audit",
        status=AttestationCampaign.Status.ACTIVE,
        start_date=timezone.now() - timedelta(days=8),
    )


@pytest.fixture
def user():
    return get_user_model().objects.create_user(
        username="bob", email="bob@example.com", manager_email="boss@example.com"
    )


# ============================================================
# STORES
# ============================================================

def test_marker_written_once(campaign, user):
    record = AttestationRecord.objects.create(campaign=campaign, user=user)
    store = DjangoRecordStore()
    first = timezone.now() - timedelta(hours=2)

    assert store.update(record.pk, reminder_sent_at=first) == 1
    assert store.update(record.pk, reminder_sent_at=timezone.now()) == 0

    record.refresh_from_db()
    assert record.reminder_sent_at == first


def test_invite_markers_independent(campaign):
    invite = AttestationPendingInvite.objects.create(
        campaign=campaign, employee_email="new@example.com"
    )
    store = DjangoInviteStore()
    stamp = timezone.now()

    store.update(invite.pk, reminder_sent_at=stamp)
    store.update(invite.pk, escalation_sent_at=stamp)

    invite.refresh_from_db()
    assert invite.reminder_sent_at == stamp
    assert invite.escalation_sent_at == stamp


def test_list_by_campaign_scoped(campaign, user):
    other = AttestationCampaign.objects.create(
        name="Other", start_date=timezone.now()
    )
    mine = AttestationRecord.objects.create(campaign=campaign, user=user)
    AttestationRecord.objects.create(campaign=other, user=user)

    assert DjangoRecordStore().list_by_campaign(campaign.pk) == [mine]


def test_campaign_store_lists_and_updates(campaign):
    store = DjangoCampaignStore()

    assert store.list_all() == [campaign]

    store.update(campaign.pk, status=AttestationCampaign.Status.COMPLETED)
    campaign.refresh_from_db()
    assert campaign.status == "completed"


def test_user_directory(user):
    directory = DjangoUserDirectory()

    assert directory.get_by_id(user.pk) == user
    assert directory.get_by_id(user.pk + 100) is None


def test_asset_lookup_ignores_case():
    asset = Asset.objects.create(asset_tag="MON-7", employee_email="Mixed@Example.com")
    Asset.objects.create(asset_tag="MON-8", employee_email="someone@example.com")
    directory = DjangoAssetDirectory()

    assert directory.get_by_employee("mixed@example.com") == [asset]
    assert directory.get_by_employee("") == []


def test_sso_settings_singleton():
    provider = DjangoSSOSettingsProvider()
    assert provider.get() is None

    SSOSettings(enabled=True, button_text="Company Login").save()
    SSOSettings(enabled=False).save()

    assert SSOSettings.objects.count() == 1
    assert provider.get().enabled is False


def test_invite_token_generated(campaign):
    a = AttestationPendingInvite.objects.create(campaign=campaign, employee_email="a@example.com")
    b = AttestationPendingInvite.objects.create(campaign=campaign, employee_email="b@example.com")

    assert a.invite_token and b.invite_token
    assert a.invite_token != b.invite_token
    assert a.employee_name == "a@example.com"


# ============================================================
# END TO END
# ============================================================

def test_scheduled_run_against_database(campaign, user, mailoutbox, settings):
    settings.FRONTEND_URL = "https://assets.example.com"
    SSOSettings(enabled=True, button_text="").save()
    AttestationRecord.objects.create(campaign=campaign, user=user)
    invite = AttestationPendingInvite.objects.create(
        campaign=campaign, employee_email="newbie@example.com"
    )
    Asset.objects.create(asset_tag="LT-9", employee_email="NEWBIE@example.com")

    summary = run_scheduled_tasks()

    assert summary.success is True
    bodies = {m.to[0]: m.body for m in mailoutbox}
    assert set(bodies) == {"bob@example.com", "newbie@example.com"}
    assert "https://assets.example.com/my-attestations" in bodies["bob@example.com"]
    assert (
        f"https://assets.example.com/register?invite={invite.invite_token}"
        in bodies["newbie@example.com"]
    )
    assert '"Sign In with SSO"' in bodies["newbie@example.com"]
    assert "1 asset recorded" in bodies["newbie@example.com"]


def test_clock_is_injectable(campaign, user, mailoutbox):
    AttestationRecord.objects.create(campaign=campaign, user=user)
    early = campaign.start_date + timedelta(days=3)

    summary = run_scheduled_tasks(clock=lambda: early)

    assert summary.success is True
    assert mailoutbox == []
