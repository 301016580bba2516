"""Fixtures wiring the in-memory fakes into SchedulerDependencies."""

from types import SimpleNamespace

import pytest

from notifications.services.attestation import SchedulerDependencies
from notifications.services.attestation.dispatch import DispatchQueue

from .fakes import (
    NOW,
    FakeAssetDirectory,
    FakeCampaignRowStore,
    FakeCampaignStore,
    FakeSSOProvider,
    FakeUserDirectory,
    RecordingGateway,
)


@pytest.fixture
def clock():
    """Fixed clock; tests move time by setting clock.state.now."""
    state = SimpleNamespace(now=NOW)

    def now():
        return state.now

    now.state = state
    return now


@pytest.fixture
def world(clock):
    """A fresh, empty set of collaborators around one fixed clock."""
    return SchedulerDependencies(
        campaigns=FakeCampaignStore(),
        records=FakeCampaignRowStore(),
        invites=FakeCampaignRowStore(),
        users=FakeUserDirectory(),
        assets=FakeAssetDirectory(),
        sso=FakeSSOProvider(),
        gateway=RecordingGateway(),
        clock=clock,
        queue=DispatchQueue(1),
        frontend_url="https://attest.example.com/",
    )
