"""
Goal Use Cases
"""

from .create_goal_use_case import CreateGoalUseCase
from .delete_goal_use_case import DeleteGoalUseCase
from .dtos import GoalCommand, GoalListResponse, GoalResponse
from .get_goal_use_case import GetGoalUseCase
from .list_goals_use_case import ListGoalsUseCase
from .update_goal_status_use_case import UpdateGoalStatusUseCase
from .update_goal_use_case import UpdateGoalUseCase

__all__ = [
    "ListGoalsUseCase",
    "GetGoalUseCase",
    "CreateGoalUseCase",
    "UpdateGoalUseCase",
    "UpdateGoalStatusUseCase",
    "DeleteGoalUseCase",
    "GoalCommand",
    "GoalResponse",
    "GoalListResponse",
]
