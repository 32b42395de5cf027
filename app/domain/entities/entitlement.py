"""Domain entity describing a member's plan entitlement."""

from dataclasses import dataclass

PLAN_FREE = "free"
PLAN_INDIVIDUAL = "individual"
PLAN_SALON = "salon"
PAID_PLANS = frozenset({PLAN_INDIVIDUAL, PLAN_SALON})

ENTITLEMENT_STATUS_ACTIVE = "active"


@dataclass
class Entitlement:
    """Plan and status granted to a user."""

    user_id: str
    plan: str
    status: str

    def is_active_subscriber(self) -> bool:
        return self.status == ENTITLEMENT_STATUS_ACTIVE and self.plan in PAID_PLANS

    def is_free(self) -> bool:
        return self.plan == PLAN_FREE
