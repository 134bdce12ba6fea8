"""Payment seeds: subscription plans, payment methods and discount coupons."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from seed_orchestrator.orchestrator.persistence import SeedDatabase
from seed_orchestrator.orchestrator.tasks import require_context

from .data import COUPONS, PAYMENT_METHODS, SUBSCRIPTION_PLANS
from .helpers import index_by_key, lookup


def seed_subscription_plans(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    plans = db.upsert_many("subscription_plan", SUBSCRIPTION_PLANS, key_fn=lambda p: p["name"])
    return {"subscriptionPlans": plans}


def seed_payment_methods(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    methods = db.upsert_many("payment_method", PAYMENT_METHODS, key_fn=lambda m: m["type"])
    return {"paymentMethods": methods}


def seed_coupons(db: SeedDatabase, context: Mapping[str, Any]) -> dict[str, object]:
    require_context(context, ["adminUser", "subscriptionPlans"], "coupons")
    admin = context["adminUser"]
    plans = index_by_key(context["subscriptionPlans"])

    valid_from = datetime.now(UTC).replace(hour=0, minute=0, second=0, microsecond=0)
    items: list[dict[str, Any]] = []
    for coupon in COUPONS:
        restricted = coupon.get("restrictedToPlans") or []
        plan_ids = [
            lookup(plans, name, entity="subscription plan", caller="coupons").id
            for name in restricted
        ]
        items.append(
            {
                **coupon,
                "appliesToAllPlans": not plan_ids,
                "planIds": plan_ids,
                "validFrom": valid_from.isoformat(),
                "validUntil": (valid_from + timedelta(days=coupon["validityDays"])).isoformat(),
                "createdById": admin.id,
            }
        )

    coupons = db.upsert_many("coupon", items, key_fn=lambda c: c["code"])
    return {"coupons": coupons}
