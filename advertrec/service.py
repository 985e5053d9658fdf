"""The recommendation RPC service, combining every group of handlers."""

from __future__ import annotations

from typing import Any

from advertrec.ad_creatives import AdCreativeHandlers
from advertrec.ad_plans import AdPlanHandlers
from advertrec.user_events import UserAdEventHandlers
from advertrec.user_interests import UserInterestHandlers


class RecommendService(
    AdPlanHandlers,
    AdCreativeHandlers,
    UserAdEventHandlers,
    UserInterestHandlers,
):
    """Serves plans, creatives, recommendations, events and interests.

    Each handler delegates to the store passed in for its area and wraps the
    outcome in a :class:`advertrec.common.Response`.
    """

    def __init__(
        self,
        ad_plan_service: Any,
        ad_creative_service: Any,
        user_interest_service: Any,
        ad_event_service: Any,
    ) -> None:
        self.ad_plan_service = ad_plan_service
        self.ad_creative_service = ad_creative_service
        self.user_interest_service = user_interest_service
        self.ad_event_service = ad_event_service