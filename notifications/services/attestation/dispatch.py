"""
Work queue for per-candidate dispatch jobs.

Each job sends one notification and commits its marker. Jobs catch
their own delivery failures; anything that escapes a job is an
infrastructure failure and is re-raised to abort the stage.
"""

import enum
import logging
from concurrent.futures import ThreadPoolExecutor

logger = logging.getLogger(__name__)


class DispatchOutcome(enum.Enum):
    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


class DispatchQueue:
    """
    Runs dispatch jobs under a fixed concurrency policy.

    max_workers=1 runs jobs one after another in submission order.
    max_workers>1 runs them on a bounded thread pool; stores and the
    gateway must then be safe to call from worker threads.
    """

    def __init__(self, max_workers=1):
        self.max_workers = max(1, int(max_workers or 1))

    @property
    def is_serial(self):
        return self.max_workers == 1

    def run(self, jobs):
        """Run every job and return their outcomes in submission order."""
        jobs = list(jobs)
        if not jobs:
            return []

        if self.is_serial:
            return [job() for job in jobs]

        with ThreadPoolExecutor(
            max_workers=min(self.max_workers, len(jobs)),
            thread_name_prefix="attestation-dispatch",
        ) as pool:
            futures = [pool.submit(job) for job in jobs]
            # result() re-raises the first infrastructure error
            return [future.result() for future in futures]


def tally(outcomes, result):
    """Add dispatch outcomes to a StageResult's counters."""
    for outcome in outcomes:
        if outcome is DispatchOutcome.SENT:
            result.sent += 1
        elif outcome is DispatchOutcome.SKIPPED:
            result.skipped += 1
        elif outcome is DispatchOutcome.FAILED:
            result.failed += 1
    return result
