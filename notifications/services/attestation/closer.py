import logging

from .base import CAMPAIGN_COMPLETED, StageProcessor
from .results import StageResult
from .windows import has_passed

logger = logging.getLogger(__name__)


class CampaignAutoCloser(StageProcessor):
    """
    Moves active campaigns whose end_date has passed to completed.

    Completed campaigns drop out of the active filter, so running
    this repeatedly is safe. Nothing reopens a completed campaign.
    """

    stage_name = "auto-close"

    def process(self):
        result = StageResult()
        now = self.now()

        for campaign in self.active_campaigns():
            if not has_passed(campaign.end_date, now):
                continue

            self.deps.campaigns.update(campaign.id, status=CAMPAIGN_COMPLETED)
            result.closed += 1
            logger.info("Campaign %r auto-closed (end date %s)", campaign.name, campaign.end_date)

        return result
