"""
Work calendar statistics.

Public holidays, working day counts and monthly hour targets per work
resource.

Basic usage::

    from workcal import StatsService, WorkResource, CalendarEntry

    stats = StatsService().aggregate(8.0, resources, entries, 2024, 6)
"""

from workcal.domain import (
    CalendarEntry,
    Holiday,
    MonthDay,
    MonthStats,
    ResourceStats,
    WorkCalendar,
    WorkResource,
)
from workcal.services import HolidayService, StatsService, WorkingDayService

__all__ = [
    "CalendarEntry",
    "Holiday",
    "HolidayService",
    "MonthDay",
    "MonthStats",
    "ResourceStats",
    "StatsService",
    "WorkCalendar",
    "WorkResource",
    "WorkingDayService",
]
