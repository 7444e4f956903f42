"""
Working Day Service - Counts working days net of weekends and holidays.

Architecture Decision: Holiday source is injected
The service delegates every holiday question to a HolidayService, so a
different holiday set can be supplied (e.g. in tests) without touching the
counting logic.
"""

import calendar
import datetime
from typing import List, Optional, Tuple

from workcal.domain.models import Holiday, MonthDay
from workcal.services.holiday_service import HolidayService


def month_date_range(year: int, month: int) -> List[datetime.date]:
    """Return list of all dates in a month, first to last day inclusive."""
    _, last_day = calendar.monthrange(year, month)
    return [datetime.date(year, month, day) for day in range(1, last_day + 1)]


class WorkingDayService:
    """
    Working day logic for the work calendar.

    A working day is a weekday (Mon-Fri) that is not a public holiday.
    """

    def __init__(self, holiday_service: Optional[HolidayService] = None):
        """
        Args:
            holiday_service: Source of public holidays (default: HolidayService())
        """
        self.holiday_service = holiday_service or HolidayService()

    @staticmethod
    def is_weekend(date_obj: datetime.date) -> bool:
        """Check if date is a weekend (Saturday=5, Sunday=6)"""
        return date_obj.weekday() > 4

    def is_working_day(self, date_obj: datetime.date) -> bool:
        """
        Check if a given date is a working day.

        Args:
            date_obj: The date to check

        Returns:
            True if it's a working day, False otherwise
        """
        if self.is_weekend(date_obj):
            return False
        return not self.holiday_service.is_holiday(date_obj)

    def count_working_days(self, year: int, month: int) -> Tuple[int, List[Holiday]]:
        """
        Count the working days of a month.

        Args:
            year: Calendar year
            month: Month number (1-12)

        Returns:
            Tuple of (working day count, holidays that fell on weekdays of
            the month in chronological order)
        """
        holidays = self.holiday_service.holidays_by_date(year)
        working_days = 0
        holidays_in_month: List[Holiday] = []

        for day in month_date_range(year, month):
            if self.is_weekend(day):
                continue

            holiday = holidays.get(day)
            if holiday is not None:
                holidays_in_month.append(holiday)
            else:
                working_days += 1

        return working_days, holidays_in_month

    def get_working_days_in_range(self, start_date: datetime.date,
                                  end_date: datetime.date) -> int:
        """
        Count working days in a date range.

        Args:
            start_date: Start of range (inclusive)
            end_date: End of range (inclusive)

        Returns:
            Number of working days
        """
        working_days = 0
        current = start_date
        holidays = {}

        while current <= end_date:
            if current.year not in holidays:
                holidays[current.year] = self.holiday_service.holidays_by_date(current.year)
            if not self.is_weekend(current) and current not in holidays[current.year]:
                working_days += 1
            current += datetime.timedelta(days=1)

        return working_days

    def month_days(self, year: int, month: int) -> List[MonthDay]:
        """
        Build the day grid of a month for calendar views.

        Every day is flagged as weekend and carries its holiday, if any;
        holidays on weekends are included too.
        """
        holidays = self.holiday_service.holidays_by_date(year)
        return [
            MonthDay(date=day, is_weekend=self.is_weekend(day), holiday=holidays.get(day))
            for day in month_date_range(year, month)
        ]
