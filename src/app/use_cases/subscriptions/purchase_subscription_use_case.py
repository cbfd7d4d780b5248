"""
Purchase Subscription Use Case

Checkout of a paid plan for a new organization.
"""

from libs.result import Error, Result, Return
from src.app.use_cases.auth.register_organization_use_case import (
    RegisterOrganizationUseCase,
)
from src.domain.entities import PlanType


class PurchaseSubscriptionUseCase(RegisterOrganizationUseCase):
    """
    Same flow as registration, restricted to paid plans.

    Business Rules:
    - Only paid plans can be purchased
    - An invoice and a completed payment are always written
    """

    always_charge_paid = True

    def _validate_plan(self, plan) -> Result[None]:
        if plan.type != PlanType.paid:
            return Return.err(
                Error("INVALID_PLAN", "Only paid plans can be purchased at checkout")
            )
        return Return.ok(None)
