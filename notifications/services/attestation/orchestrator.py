import logging

from .closer import CampaignAutoCloser
from .registered import EscalationProcessor, ReminderProcessor
from .results import RunSummary, StageResult
from .unregistered import (
    UnregisteredEscalationProcessor,
    UnregisteredReminderProcessor,
)

logger = logging.getLogger(__name__)


# ============================================================
# STAGE ORDER
# ============================================================
# Closing runs last: a campaign that crosses its escalation
# threshold and its end_date in the same pass still gets its
# final escalations before it is closed.

STAGE_ORDER = (
    ("reminders", ReminderProcessor),
    ("escalations", EscalationProcessor),
    ("unregistered_reminders", UnregisteredReminderProcessor),
    ("unregistered_escalations", UnregisteredEscalationProcessor),
    ("auto_close", CampaignAutoCloser),
)


class SchedulerOrchestrator:
    """
    Runs the attestation stages in a fixed order.

    Per-participant (NOT_DUE -> DUE_UNSENT -> SENT) state lives in the
    send-once markers; due-ness is recomputed from elapsed time on
    every run and never stored.

    Each stage is isolated: a stage that fails or raises is logged
    and reported, and the remaining stages still run.
    """

    def __init__(self, stages):
        self.stages = dict(stages)

    @classmethod
    def from_dependencies(cls, deps):
        return cls(
            (name, processor_class(deps))
            for name, processor_class in STAGE_ORDER
        )

    # =====================================================
    # SINGLE STAGES
    # =====================================================
    def run_stage(self, name):
        try:
            stage = self.stages[name]
        except KeyError:
            raise ValueError(f"Unknown attestation stage: {name}") from None

        try:
            result = stage.run()
        except Exception as exc:
            logger.exception("Attestation stage %s raised", name)
            return StageResult.failure(str(exc) or exc.__class__.__name__)

        if not result.success:
            logger.error("Attestation stage %s failed: %s", name, result.error)
        return result

    def process_reminders(self):
        return self.run_stage("reminders")

    def process_escalations(self):
        return self.run_stage("escalations")

    def process_unregistered_reminders(self):
        return self.run_stage("unregistered_reminders")

    def process_unregistered_escalations(self):
        return self.run_stage("unregistered_escalations")

    def auto_close_expired_campaigns(self):
        return self.run_stage("auto_close")

    # =====================================================
    # FULL RUN
    # =====================================================
    def run_all(self):
        logger.info("Running attestation scheduled tasks")

        summary = RunSummary()
        for name in self.stages:
            summary.stages[name] = self.run_stage(name)

        if summary.success:
            logger.info("Attestation scheduled tasks completed")
        else:
            logger.warning(
                "Attestation scheduled tasks completed with failures: %s",
                ", ".join(summary.failed_stages),
            )
        return summary
