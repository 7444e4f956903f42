"""Domain layer - Pure business entities"""

from .models import (
    CalendarEntry,
    Holiday,
    MonthDay,
    MonthStats,
    ResourceStats,
    WorkCalendar,
    WorkResource,
)

__all__ = [
    "CalendarEntry",
    "Holiday",
    "MonthDay",
    "MonthStats",
    "ResourceStats",
    "WorkCalendar",
    "WorkResource",
]
