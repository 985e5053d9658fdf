from datetime import datetime
from types import SimpleNamespace

import pytest

from advertrec.ad_plans import AdPlan, AdPlanHandlers, convert_ad_plan

FMT = "%Y-%m-%d %H:%M:%S"
CREATED = datetime(2024, 1, 15, 10, 30, 5)


class FakePlanService:
    def __init__(self):
        self.plans = {}
        self.next_id = 1
        self.updates = []
        self.list_calls = []

    def create_ad_plan(self, name, objective, budget, bid_price, targeting_rule, start_time, end_time):
        if not name:
            raise ValueError("name required")
        plan_id = self.next_id
        self.next_id += 1
        self.plans[plan_id] = SimpleNamespace(
            plan_id=plan_id,
            name=name,
            objective=objective,
            budget=budget,
            bid_price=bid_price,
            targeting_rule=targeting_rule,
            start_time=datetime.strptime(start_time, FMT),
            end_time=datetime.strptime(end_time, FMT),
            status=1,
            create_time=CREATED,
            update_time=CREATED,
        )
        return plan_id

    def update_ad_plan(self, plan_id, updates):
        if plan_id not in self.plans:
            raise LookupError("plan missing")
        self.updates.append((plan_id, updates))

    def get_ad_plan(self, plan_id):
        try:
            return self.plans[plan_id]
        except KeyError:
            raise LookupError("record not found") from None

    def list_ad_plans(self, page, page_size, status):
        self.list_calls.append((page, page_size, status))
        plans = [p for p in self.plans.values() if status is None or p.status == status]
        start = (page - 1) * page_size
        return plans[start:start + page_size], len(plans)

    def delete_ad_plan(self, plan_id):
        if self.plans.pop(plan_id, None) is None:
            raise LookupError("plan missing")


@pytest.fixture
def handlers():
    h = AdPlanHandlers()
    h.ad_plan_service = FakePlanService()
    return h


def _create(handlers, name="spring sale"):
    return handlers.create_ad_plan(
        name, "click", 10000.0, "CPC:0.5", '{"age":[18,35]}',
        "2024-01-01 00:00:00", "2024-03-31 23:59:59",
    )


def test_create_returns_plan_id(handlers):
    response = _create(handlers)
    assert response.code == 200
    assert response.message == "success"
    assert response["plan_id"] in handlers.ad_plan_service.plans


def test_create_failure_is_500(handlers):
    response = _create(handlers, name="")
    assert response.code == 500
    assert response.message == "name required"
    assert response.data == {}


def test_get_round_trips_fields(handlers):
    plan_id = _create(handlers)["plan_id"]
    response = handlers.get_ad_plan(plan_id)
    assert response.ok
    plan = response["ad_plan"]
    assert isinstance(plan, AdPlan)
    assert plan.plan_id == plan_id
    assert plan.name == "spring sale"
    assert plan.bid_price == "CPC:0.5"
    assert plan.start_time == "2024-01-01 00:00:00"
    assert plan.end_time == "2024-03-31 23:59:59"


def test_get_missing_is_404(handlers):
    response = handlers.get_ad_plan(42)
    assert response.code == 404
    assert response.message == "record not found"


def test_update_passes_only_given_fields(handlers):
    plan_id = _create(handlers)["plan_id"]
    response = handlers.update_ad_plan(plan_id, status=0, budget=500.0)
    assert response.ok
    assert handlers.ad_plan_service.updates == [(plan_id, {"budget": 500.0, "status": 0})]


def test_update_with_no_fields_sends_empty_updates(handlers):
    plan_id = _create(handlers)["plan_id"]
    handlers.update_ad_plan(plan_id)
    assert handlers.ad_plan_service.updates == [(plan_id, {})]


def test_update_failure_is_500(handlers):
    response = handlers.update_ad_plan(99, name="x")
    assert response.code == 500
    assert response.message == "plan missing"


def test_list_converts_and_counts(handlers):
    for name in ("a", "b", "c"):
        _create(handlers, name=name)
    response = handlers.list_ad_plans(1, 2, None)
    assert response.ok
    assert [p.name for p in response["ad_plans"]] == ["a", "b"]
    assert response["total"] == 3
    assert handlers.ad_plan_service.list_calls == [(1, 2, None)]


def test_list_failure_is_500():
    class Broken:
        def list_ad_plans(self, page, page_size, status):
            raise RuntimeError("db down")

    h = AdPlanHandlers()
    h.ad_plan_service = Broken()
    response = h.list_ad_plans(1, 10, 1)
    assert response.code == 500
    assert response.message == "db down"


def test_delete_then_get_is_404(handlers):
    plan_id = _create(handlers)["plan_id"]
    assert handlers.delete_ad_plan(plan_id).ok
    assert handlers.get_ad_plan(plan_id).code == 404
    assert handlers.delete_ad_plan(plan_id).code == 500


def test_convert_ad_plan_formats_times():
    record = SimpleNamespace(
        plan_id=1, name="n", objective="click", budget=1.5, bid_price="CPM:2",
        targeting_rule="{}", start_time=CREATED, end_time=CREATED, status=1,
        create_time=CREATED, update_time=CREATED,
    )
    plan = convert_ad_plan(record)
    assert plan.create_time == "2024-01-15 10:30:05"
    assert plan.update_time == plan.create_time == plan.start_time == plan.end_time
    assert plan.budget == 1.5