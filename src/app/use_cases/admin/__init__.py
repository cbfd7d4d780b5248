"""Admin use cases for platform administration operations."""

from .dtos import PendingSourceRequestsResponse, ReviewCustomSourceCommand
from .list_source_requests_use_case import ListSourceRequestsUseCase
from .review_custom_source_use_case import ReviewCustomSourceUseCase

__all__ = [
    "ListSourceRequestsUseCase",
    "ReviewCustomSourceUseCase",
    "ReviewCustomSourceCommand",
    "PendingSourceRequestsResponse",
]
