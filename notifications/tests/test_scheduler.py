"""Tests for the AttestationScheduler background task."""

import pytest

from notifications import scheduler as scheduler_module
from notifications.scheduler import JOB_ID, AttestationScheduler

from .fakes import NOW


@pytest.fixture
def calls():
    return []


@pytest.fixture
def attestation_scheduler(calls):
    instance = AttestationScheduler(
        job=lambda: calls.append("run") or "summary",
        clock=lambda: NOW,
        interval_hours=24,
        run_on_start=False,
        scheduler_timezone="UTC",
    )
    yield instance
    instance.stop()


def test_run_now_invokes_job_synchronously(attestation_scheduler, calls):
    assert attestation_scheduler.run_now() == "summary"
    assert calls == ["run"]
    assert attestation_scheduler.running is False


def test_start_arms_interval_job(attestation_scheduler):
    attestation_scheduler.start()

    assert attestation_scheduler.running is True
    job = attestation_scheduler._scheduler.get_job(JOB_ID)
    assert job is not None
    assert job.max_instances == 1
    assert job.coalesce is True
    assert job.trigger.interval.total_seconds() == 24 * 3600


def test_start_twice_is_noop(attestation_scheduler):
    attestation_scheduler.start()
    first = attestation_scheduler._scheduler

    attestation_scheduler.start()

    assert attestation_scheduler._scheduler is first
    assert len(first.get_jobs()) == 1


def test_stop_shuts_down(attestation_scheduler):
    attestation_scheduler.start()

    attestation_scheduler.stop()

    assert attestation_scheduler.running is False
    attestation_scheduler.stop()


class RecordingBackgroundScheduler:
    def __init__(self, **options):
        self.options = options
        self.jobs = []
        self.running = False

    def add_job(self, func, **kwargs):
        self.jobs.append((func, kwargs))

    def start(self):
        self.running = True

    def shutdown(self, wait=True):
        self.running = False


def test_run_on_start_schedules_immediate_first_run(monkeypatch):
    monkeypatch.setattr(scheduler_module, "BackgroundScheduler", RecordingBackgroundScheduler)
    instance = AttestationScheduler(
        job=lambda: None,
        clock=lambda: NOW,
        interval_hours=6,
        run_on_start=True,
        scheduler_timezone="UTC",
    )

    instance.start()

    [(func, kwargs)] = instance._scheduler.jobs
    assert func == instance.run_now
    assert kwargs["next_run_time"] == NOW
    assert kwargs["hours"] == 6
    assert kwargs["id"] == JOB_ID
    assert instance._scheduler.options == {"timezone": "UTC"}
    instance.stop()
    assert instance.running is False


def test_without_run_on_start_first_run_waits_for_interval(monkeypatch):
    monkeypatch.setattr(scheduler_module, "BackgroundScheduler", RecordingBackgroundScheduler)
    instance = AttestationScheduler(
        job=lambda: None, run_on_start=False, scheduler_timezone="UTC"
    )

    instance.start()

    [(_, kwargs)] = instance._scheduler.jobs
    assert "next_run_time" not in kwargs
    instance.stop()


def test_start_scheduler_respects_toggle(settings, monkeypatch):
    monkeypatch.setattr(scheduler_module, "_scheduler", None)
    settings.RUN_ATTESTATION_SCHEDULER = False

    assert scheduler_module.start_scheduler() is None
    assert scheduler_module._scheduler is None


def test_start_scheduler_single_instance(settings, monkeypatch):
    started = []

    class FakeScheduler:
        running = False

        def start(self):
            self.running = True
            started.append(self)

        def stop(self):
            self.running = False

    monkeypatch.setattr(scheduler_module, "_scheduler", None)
    monkeypatch.setattr(scheduler_module, "AttestationScheduler", FakeScheduler)
    settings.RUN_ATTESTATION_SCHEDULER = True

    first = scheduler_module.start_scheduler()
    second = scheduler_module.start_scheduler()

    assert first is second
    assert len(started) == 1

    scheduler_module.stop_scheduler()
    assert scheduler_module._scheduler is None
