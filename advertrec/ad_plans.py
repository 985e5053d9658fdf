"""RPC handlers for advertising plan CRUD."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from advertrec.common import Response, failure, format_time, success

log = logging.getLogger(__name__)


@dataclass
class AdPlan:
    """Advertising plan as sent over the wire."""

    plan_id: int
    name: str
    objective: str
    budget: float
    bid_price: str
    targeting_rule: str
    start_time: str
    end_time: str
    status: int
    create_time: str
    update_time: str


def convert_ad_plan(plan: Any) -> AdPlan:
    """Convert a stored plan record into its wire form."""
    return AdPlan(
        plan_id=plan.plan_id,
        name=plan.name,
        objective=plan.objective,
        budget=plan.budget,
        bid_price=plan.bid_price,
        targeting_rule=plan.targeting_rule,
        start_time=format_time(plan.start_time),
        end_time=format_time(plan.end_time),
        status=plan.status,
        create_time=format_time(plan.create_time),
        update_time=format_time(plan.update_time),
    )


class AdPlanHandlers:
    """Plan endpoints; expects ``self.ad_plan_service`` to hold the plan store."""

    ad_plan_service: Any

    def create_ad_plan(
        self, name, objective, budget, bid_price, targeting_rule, start_time, end_time
    ) -> Response:
        log.info(
            "CreateAdPlan: name=%r objective=%r budget=%r bid_price=%r "
            "targeting_rule=%r start_time=%r end_time=%r",
            name, objective, budget, bid_price, targeting_rule, start_time, end_time,
        )
        try:
            plan_id = self.ad_plan_service.create_ad_plan(
                name, objective, budget, bid_price, targeting_rule, start_time, end_time
            )
        except Exception as exc:
            return failure(500, str(exc))
        return success(plan_id=plan_id)

    def update_ad_plan(
        self,
        plan_id,
        *,
        name=None,
        objective=None,
        budget=None,
        bid_price=None,
        targeting_rule=None,
        start_time=None,
        end_time=None,
        status=None,
    ) -> Response:
        fields = {
            "name": name,
            "objective": objective,
            "budget": budget,
            "bid_price": bid_price,
            "targeting_rule": targeting_rule,
            "start_time": start_time,
            "end_time": end_time,
            "status": status,
        }
        updates = {key: value for key, value in fields.items() if value is not None}
        log.info("UpdateAdPlan: plan_id=%r updates=%r", plan_id, updates)
        try:
            self.ad_plan_service.update_ad_plan(plan_id, updates)
        except Exception as exc:
            return failure(500, str(exc))
        return success()

    def get_ad_plan(self, plan_id) -> Response:
        log.info("GetAdPlan: plan_id=%r", plan_id)
        try:
            plan = self.ad_plan_service.get_ad_plan(plan_id)
        except Exception as exc:
            return failure(404, str(exc))
        return success(ad_plan=convert_ad_plan(plan))

    def list_ad_plans(self, page, page_size, status=None) -> Response:
        log.info("ListAdPlans: page=%r page_size=%r status=%r", page, page_size, status)
        try:
            plans, total = self.ad_plan_service.list_ad_plans(int(page), int(page_size), status)
        except Exception as exc:
            return failure(500, str(exc))
        return success(ad_plans=[convert_ad_plan(plan) for plan in plans], total=total)

    def delete_ad_plan(self, plan_id) -> Response:
        log.info("DeleteAdPlan: plan_id=%r", plan_id)
        try:
            self.ad_plan_service.delete_ad_plan(plan_id)
        except Exception as exc:
            return failure(500, str(exc))
        return success()