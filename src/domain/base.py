import calendar
from datetime import UTC, date, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns used by the entities"""
    return datetime.now(UTC).replace(tzinfo=None)


def add_months(start: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the target month length"""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return start.replace(year=year, month=month, day=day)
