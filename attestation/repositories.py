"""
Django ORM implementations of the stores and directories the
attestation scheduler consumes.
"""

from django.contrib.auth import get_user_model

from accounts.models import SSOSettings
from assets.models import Asset

from .models import (
    AttestationCampaign,
    AttestationRecord,
    AttestationPendingInvite,
)


# Send-once markers: a write only lands on rows where the marker is
# still empty, so a racing runner can never overwrite one.
SEND_ONCE_MARKERS = ("reminder_sent_at", "escalation_sent_at")


def _guarded_update(model, pk, fields):
    qs = model.objects.filter(pk=pk)

    for marker in SEND_ONCE_MARKERS:
        if marker in fields:
            qs = qs.filter(**{f"{marker}__isnull": True})

    return qs.update(**fields)


class DjangoCampaignStore:

    def list_all(self):
        return list(AttestationCampaign.objects.all())

    def update(self, campaign_id, **fields):
        return AttestationCampaign.objects.filter(pk=campaign_id).update(**fields)


class DjangoRecordStore:

    def list_by_campaign(self, campaign_id):
        return list(AttestationRecord.objects.filter(campaign_id=campaign_id))

    def update(self, record_id, **fields):
        return _guarded_update(AttestationRecord, record_id, fields)


class DjangoInviteStore:

    def list_by_campaign(self, campaign_id):
        return list(AttestationPendingInvite.objects.filter(campaign_id=campaign_id))

    def update(self, invite_id, **fields):
        return _guarded_update(AttestationPendingInvite, invite_id, fields)


class DjangoUserDirectory:

    def get_by_id(self, user_id):
        return get_user_model().objects.filter(pk=user_id).first()


class DjangoAssetDirectory:

    def get_by_employee(self, email):
        if not email:
            return []
        return list(Asset.objects.filter(employee_email__iexact=email))


class DjangoSSOSettingsProvider:

    def get(self):
        return SSOSettings.load()
