"""
Stats Service - Aggregates logged hours against a month's work budget.

The month budget is working days x daily work hours. Each resource is
allotted its percentage of the budget and progress is tracked per resource
and overall.
"""

import datetime
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from workcal.domain.models import (
    CalendarEntry,
    MonthStats,
    ResourceStats,
    WorkCalendar,
    WorkResource,
)
from workcal.services.working_day_service import WorkingDayService

logger = logging.getLogger(__name__)


def progress_percent(logged_hours: float, target_hours: float) -> float:
    """Logged hours as a percentage of target hours, 0 when there is no target"""
    if target_hours == 0:
        return 0.0
    return logged_hours / target_hours * 100


def total_allocation(resources: Iterable[WorkResource]) -> int:
    """Sum of resource percentages. May be above or below 100."""
    return sum(resource.percentage for resource in resources)


def entries_in_month(entries: Iterable[CalendarEntry], year: int, month: int) -> List[CalendarEntry]:
    """Keep the entries dated within the given month, preserving order."""
    return [entry for entry in entries if entry.year == year and entry.month == month]


class StatsService:
    """
    Computes monthly work statistics for a calendar.

    Stateless apart from its collaborators; every call returns fresh results.
    """

    def __init__(self, working_day_service: Optional[WorkingDayService] = None,
                 default_daily_work_hours: Optional[float] = None):
        """
        Args:
            working_day_service: Working day source (default: WorkingDayService())
            default_daily_work_hours: Quota for calendars without their own
                (default: from settings)
        """
        self.working_day_service = working_day_service or WorkingDayService()

        if default_daily_work_hours is None:
            from workcal.infra.config import get_settings
            default_daily_work_hours = get_settings().preferences.default_daily_work_hours
        self.default_daily_work_hours = default_daily_work_hours

    def aggregate(self, daily_work_hours: float,
                  resources: Sequence[WorkResource],
                  entries: Iterable[CalendarEntry],
                  year: int, month: int) -> MonthStats:
        """
        Aggregate a month of entries into work statistics.

        Entries are not filtered: the caller passes only the entries of the
        target calendar and month.

        Args:
            daily_work_hours: Baseline work hours per working day
            resources: Work resources, in the order the results should follow
            entries: Calendar entries of the month
            year: Calendar year
            month: Month number (1-12)

        Returns:
            MonthStats with per-resource stats in resource order
        """
        working_days, holidays = self.working_day_service.count_working_days(year, month)
        total_work_hours = working_days * daily_work_hours

        # Insertion-ordered, keyed by resource id
        resource_stats: Dict[int, ResourceStats] = {}
        for resource in resources:
            if resource.id in resource_stats:
                logger.warning(f"Duplicate work resource id {resource.id}: '{resource.name}' replaces "
                               f"'{resource_stats[resource.id].resource_name}'")
            resource_stats[resource.id] = ResourceStats(
                resource_id=resource.id,
                resource_name=resource.name,
                percentage=resource.percentage,
                target_hours=total_work_hours * resource.percentage / 100,
            )

        logged_hours = 0.0
        unattributed_hours = 0.0
        for entry in entries:
            logged_hours += entry.hours

            stats = resource_stats.get(entry.work_resource_id) if entry.is_attributed else None
            if stats is None:
                unattributed_hours += entry.hours
                continue

            stats.logged_hours += entry.hours
            stats.progress = progress_percent(stats.logged_hours, stats.target_hours)

        month_stats = MonthStats(
            year=year,
            month=month,
            working_days=working_days,
            holidays=holidays,
            total_work_hours=total_work_hours,
            logged_hours=logged_hours,
            progress=progress_percent(logged_hours, total_work_hours),
            resource_stats=list(resource_stats.values()),
            allocated_percentage=total_allocation(resources),
            unattributed_hours=unattributed_hours,
        )

        logger.debug(
            f"Stats {year}-{month:02d}: {working_days} working days, "
            f"{logged_hours:.2f}/{total_work_hours:.2f} h logged"
        )
        return month_stats

    def calendar_month_stats(self, work_calendar: WorkCalendar,
                             resources: Sequence[WorkResource],
                             entries: Iterable[CalendarEntry],
                             year: Optional[int] = None,
                             month: Optional[int] = None) -> MonthStats:
        """
        Compute the stats of one calendar for a month.

        Entries belonging to another calendar or dated outside the month are
        skipped. Year and month default to the current ones.

        Args:
            work_calendar: The calendar to report on
            resources: Work resources of the calendar
            entries: Calendar entries (any calendar, any date)
            year: Calendar year (default: current year)
            month: Month number (default: current month)

        Returns:
            MonthStats for the calendar and month
        """
        today = datetime.date.today()
        year = year if year is not None else today.year
        month = month if month is not None else today.month

        if work_calendar.id is not None:
            entries = [
                entry for entry in entries
                if entry.calendar_id is None or entry.calendar_id == work_calendar.id
            ]

        daily_work_hours = work_calendar.daily_work_hours
        if daily_work_hours is None:
            daily_work_hours = self.default_daily_work_hours

        return self.aggregate(
            daily_work_hours,
            resources,
            entries_in_month(entries, year, month),
            year,
            month,
        )
