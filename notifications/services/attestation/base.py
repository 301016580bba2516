import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable

from django.utils import timezone

from .dispatch import DispatchOutcome, DispatchQueue, tally
from .ports import NotificationResult
from .results import StageResult
from .windows import threshold_crossed

logger = logging.getLogger(__name__)


# Status values shared with attestation.models
CAMPAIGN_ACTIVE = "active"
CAMPAIGN_COMPLETED = "completed"
RECORD_PENDING = "pending"


@dataclass
class SchedulerDependencies:
    """Everything a scheduler stage needs from the outside world."""

    campaigns: Any
    records: Any
    invites: Any
    users: Any
    assets: Any
    sso: Any
    gateway: Any
    clock: Callable[[], Any] = timezone.now
    queue: DispatchQueue = field(default_factory=DispatchQueue)
    frontend_url: str = "http://localhost:3000"

    @property
    def attestation_url(self):
        return f"{self.frontend_url.rstrip('/')}/my-attestations"

    def registration_url(self, invite_token):
        return f"{self.frontend_url.rstrip('/')}/register?invite={invite_token}"


def display_name(first_name, last_name, *fallbacks):
    """'First Last', or the first non-empty fallback."""
    full = f"{first_name or ''} {last_name or ''}".strip()
    if full:
        return full
    for fallback in fallbacks:
        if fallback:
            return fallback
    return ""


class StageProcessor:
    """
    One independently callable scheduler stage.

    run() never raises: infrastructure errors are logged and
    reported as a failed StageResult.
    """

    stage_name = "stage"

    def __init__(self, deps):
        self.deps = deps

    def now(self):
        return self.deps.clock()

    def run(self):
        logger.info("Running attestation stage: %s", self.stage_name)
        try:
            result = self.process()
        except Exception as exc:
            logger.exception("Error processing attestation stage %s", self.stage_name)
            return StageResult.failure(str(exc) or exc.__class__.__name__)

        logger.info("Attestation stage %s completed (%s)", self.stage_name, result.summary())
        return result

    def process(self):
        raise NotImplementedError

    def active_campaigns(self):
        return [
            campaign
            for campaign in self.deps.campaigns.list_all()
            if campaign.status == CAMPAIGN_ACTIVE
        ]


class DispatchingProcessor(StageProcessor):
    """
    Shared loop for the four notification tracks.

    For every active campaign past this track's threshold, each
    candidate becomes one dispatch job: send, then set the
    send-once marker only on confirmed success.
    """

    marker_field = None

    def threshold_for(self, campaign):
        raise NotImplementedError

    def list_candidates(self, campaign):
        raise NotImplementedError

    def dispatch(self, campaign, candidate):
        """Send to one candidate and return a DispatchOutcome."""
        raise NotImplementedError

    def prepare(self):
        """Per-invocation setup, run once before any campaign."""

    def process(self):
        result = StageResult()
        self.prepare()

        for campaign in self.active_campaigns():
            threshold = self.threshold_for(campaign)
            if not threshold_crossed(campaign.start_date, threshold, self.now()):
                continue

            candidates = self.list_candidates(campaign)
            if not candidates:
                continue

            logger.debug(
                "%s: %d candidate(s) in campaign %s",
                self.stage_name, len(candidates), campaign.name,
            )

            jobs = [partial(self.dispatch, campaign, candidate) for candidate in candidates]
            tally(self.deps.queue.run(jobs), result)

        return result

    def deliver(self, send, **payload):
        """
        Call one gateway operation. Raised errors and returned
        failures both come back as a failed NotificationResult.
        """
        try:
            outcome = send(**payload)
        except Exception as exc:
            return NotificationResult.failed(str(exc) or exc.__class__.__name__)

        if outcome is None:
            return NotificationResult.failed("Gateway returned no result")
        return outcome

    def commit(self, store, candidate):
        store.update(candidate.id, **{self.marker_field: self.now()})

    def send_and_commit(self, store, candidate, send, log_context, **payload):
        outcome = self.deliver(send, **payload)

        if not outcome.success:
            logger.warning(
                "%s failed for %s; will retry next run: %s",
                self.stage_name, log_context, outcome.error,
            )
            return DispatchOutcome.FAILED

        self.commit(store, candidate)
        logger.info("%s sent to %s", self.stage_name, log_context)
        return DispatchOutcome.SENT
