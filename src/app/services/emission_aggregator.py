"""
Emission Aggregation

Reduces an already-scoped collection of emission records to totals and
groupings. The functions here never touch storage and never raise.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.app.repositories.read_models import RecordWithFactorAndScope
from src.domain.entities import EmissionScope

ZERO = Decimal("0")


class EmissionSummary(BaseModel):
    """
    Aggregated emissions of a record collection.

    total == scope1_total + scope2_total + other_total, and each grouping
    sums to total.
    """

    total: Decimal = ZERO
    scope1_total: Decimal = ZERO
    scope2_total: Decimal = ZERO
    other_total: Decimal = ZERO
    by_source: Dict[str, Decimal] = Field(default_factory=dict)
    by_period: Dict[str, Decimal] = Field(default_factory=dict)
    by_factory: Dict[UUID, Decimal] = Field(default_factory=dict)


def period_key(year: int, month: int) -> str:
    return f"{year}-{month:02d}"


def aggregate_emissions(records: Iterable[RecordWithFactorAndScope]) -> EmissionSummary:
    """
    Compute emission totals and groupings.

    Args:
        records: Records joined with their source factor and scope tag

    Returns:
        EmissionSummary; zeros and empty groupings for an empty input
    """
    summary = EmissionSummary()

    for record in records:
        emissions = record.emissions
        summary.total += emissions

        if record.scope == EmissionScope.scope_1.value:
            summary.scope1_total += emissions
        elif record.scope == EmissionScope.scope_2.value:
            summary.scope2_total += emissions
        else:
            summary.other_total += emissions

        summary.by_source[record.source_name] = (
            summary.by_source.get(record.source_name, ZERO) + emissions
        )
        key = period_key(record.year, record.month)
        summary.by_period[key] = summary.by_period.get(key, ZERO) + emissions
        summary.by_factory[record.factory_id] = (
            summary.by_factory.get(record.factory_id, ZERO) + emissions
        )

    return summary


def to_display(value: Decimal, places: Optional[int] = None) -> float:
    """Round half-up to a fixed number of places for presentation"""
    if places is None:
        places = ApplicationConfig.DISPLAY_DECIMAL_PLACES
    quantum = Decimal(1).scaleb(-places)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


class EmissionSummaryView(BaseModel):
    """Presentation form of EmissionSummary"""

    total: float
    scope1_total: float
    scope2_total: float
    other_total: float
    by_source: Dict[str, float]
    by_period: Dict[str, float]
    by_factory: Dict[str, float]

    @classmethod
    def from_summary(
        cls, summary: EmissionSummary, places: Optional[int] = None
    ) -> "EmissionSummaryView":
        return cls(
            total=to_display(summary.total, places),
            scope1_total=to_display(summary.scope1_total, places),
            scope2_total=to_display(summary.scope2_total, places),
            other_total=to_display(summary.other_total, places),
            by_source={k: to_display(v, places) for k, v in summary.by_source.items()},
            by_period={k: to_display(v, places) for k, v in summary.by_period.items()},
            by_factory={str(k): to_display(v, places) for k, v in summary.by_factory.items()},
        )
