from apscheduler.schedulers.background import BackgroundScheduler
from django.conf import settings
from django.utils import timezone
import logging

logger = logging.getLogger(__name__)

JOB_ID = "run_attestation_scheduled_tasks"


def run_attestation_tasks():
    """
    Default job: one full attestation pass against the database.
    Keeps all business logic out of the scheduler.
    """
    from notifications.services.attestation.runner import run_scheduled_tasks

    return run_scheduled_tasks()


class AttestationScheduler:
    """
    Owns the recurring attestation job.

    - Explicit start() / stop() lifecycle, both safe to repeat
    - Injectable job and clock, so tests can call run_now()
      without a live timer
    - max_instances=1 so runs never overlap inside one process
    """

    def __init__(
        self,
        job=run_attestation_tasks,
        *,
        clock=timezone.now,
        interval_hours=None,
        run_on_start=True,
        scheduler_timezone=None,
    ):
        self.job = job
        self.clock = clock
        self.interval_hours = interval_hours or getattr(
            settings, "ATTESTATION_SCHEDULER_INTERVAL_HOURS", 24
        )
        self.run_on_start = run_on_start
        self.scheduler_timezone = scheduler_timezone or settings.TIME_ZONE
        self._scheduler = None

    @property
    def running(self):
        return self._scheduler is not None and self._scheduler.running

    def run_now(self):
        """Run one pass synchronously."""
        now = self.clock()
        logger.info(f"Running attestation scheduled tasks at {now:%Y-%m-%d %H:%M:%S}")
        return self.job()

    def start(self):
        if self.running:
            logger.info("Attestation scheduler already running, skipping start")
            return

        self._scheduler = BackgroundScheduler(timezone=self.scheduler_timezone)

        # --------------------------------------------
        # SCHEDULE: EVERY N HOURS (DEFAULT 24)
        # --------------------------------------------
        job_options = {}
        if self.run_on_start:
            job_options["next_run_time"] = self.clock()

        self._scheduler.add_job(
            self.run_now,
            trigger="interval",
            hours=self.interval_hours,
            id=JOB_ID,
            replace_existing=True,
            max_instances=1,      # Prevent overlapping runs
            coalesce=True,        # Merge missed runs if server was down
            **job_options,
        )

        self._scheduler.start()

        logger.info(
            "Attestation scheduler started (%s-hour interval)",
            self.interval_hours,
        )

    def stop(self, wait=False):
        if not self.running:
            self._scheduler = None
            return

        self._scheduler.shutdown(wait=wait)
        self._scheduler = None
        logger.info("Attestation scheduler stopped")


# ============================================================
# PROCESS-WIDE INSTANCE
# Prevents the scheduler from starting more than once
# ============================================================
_scheduler = None


def start_scheduler():
    """
    Start the process-wide attestation scheduler.

    - Respects RUN_ATTESTATION_SCHEDULER (read once at startup)
    - Prevents double start (Django autoreload, repeated ready())
    """
    global _scheduler

    if not getattr(settings, "RUN_ATTESTATION_SCHEDULER", False):
        logger.info("Attestation scheduler disabled (RUN_ATTESTATION_SCHEDULER is off)")
        return None

    if _scheduler is not None and _scheduler.running:
        logger.info("Attestation scheduler already running, skipping initialization")
        return _scheduler

    _scheduler = AttestationScheduler()
    _scheduler.start()
    return _scheduler


def stop_scheduler():
    global _scheduler

    if _scheduler is not None:
        _scheduler.stop()
        _scheduler = None
