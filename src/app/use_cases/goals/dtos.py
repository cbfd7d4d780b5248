"""
Goal Use Case DTOs
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import Goal


class GoalCommand(BaseModel):
    """Command to create or update a goal"""

    emission_source_id: UUID
    title: str
    description: Optional[str] = None
    target_value: Decimal
    period: Optional[str] = None
    start_date: date
    end_date: date
    status: Optional[str] = None


class GoalResponse(BaseModel):
    id: str
    user_id: str
    emission_source_id: str
    source_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    status: str
    target_value: float
    period: Optional[str] = None
    start_date: date
    end_date: date

    @classmethod
    def from_entity(cls, goal: Goal, source_name: Optional[str] = None) -> "GoalResponse":
        return cls(
            id=str(goal.id),
            user_id=str(goal.user_id),
            emission_source_id=str(goal.emission_source_id),
            source_name=source_name,
            title=goal.title,
            description=goal.description,
            status=goal.status.value,
            target_value=float(goal.target_value),
            period=goal.period,
            start_date=goal.start_date,
            end_date=goal.end_date,
        )


class GoalListResponse(BaseModel):
    goals: List[GoalResponse]
