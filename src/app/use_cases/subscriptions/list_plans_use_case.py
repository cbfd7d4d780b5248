from typing import List, Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PlanType

from .dtos import PlanResponse


class ListPlansUseCase:
    """Public plan catalog shown before registration"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, plan_type: Optional[str] = None) -> Result[List[PlanResponse]]:
        if plan_type is not None:
            try:
                types = [PlanType(plan_type)]
            except ValueError:
                return Return.err(Error("INVALID_PLAN_TYPE", f"Invalid plan type: {plan_type}"))
        else:
            types = [PlanType.free, PlanType.paid]

        async with self.uow:
            plans = []
            for t in types:
                plans.extend(await self.uow.subscription_plans.list_by_type(t))
            return Return.ok([PlanResponse.from_entity(p) for p in plans])
