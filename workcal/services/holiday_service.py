"""
Holiday Service - Computes the public holidays of the work calendar.

Architecture Decision: Computed, not looked up
Holidays are derived per year from a static table of fixed dates plus the
Easter-relative and Saturday-anchored dates. Nothing is cached, so every call
returns fresh, independent data.

Architecture Decision: Why not the holidays package?
The work calendar keeps its own fixed holiday set, which differs from the
official Finnish calendar (Midsummer's Eve is always June 24, Easter Sunday
and Pentecost are listed). The holidays package is used in the tests as an
independent check of the moveable dates instead.

Years are limited to the range of datetime.date (1 to 9999).
"""

import datetime
from typing import Dict, List, Optional, Tuple

from workcal.domain.models import Holiday

SATURDAY = 5

# (month, day, name, description)
FIXED_HOLIDAYS: Tuple[Tuple[int, int, str, str], ...] = (
    (1, 1, "New Year's Day", "Uudenvuodenpäivä"),
    (1, 6, "Epiphany", "Loppiainen"),
    (5, 1, "May Day", "Vappu"),
    (6, 24, "Midsummer's Eve", "Juhannusaatto"),
    (12, 6, "Independence Day", "Itsenäisyyspäivä"),
    (12, 24, "Christmas Eve", "Jouluaatto"),
    (12, 25, "Christmas Day", "Joulupäivä"),
    (12, 26, "St. Stephen's Day", "Tapaninpäivä"),
)

# (offset from Easter Sunday in days, name, description)
EASTER_HOLIDAYS: Tuple[Tuple[int, str, str], ...] = (
    (-2, "Good Friday", "Pitkäperjantai"),
    (0, "Easter Sunday", "Pääsiäispäivä"),
    (1, "Easter Monday", "2. pääsiäispäivä"),
    (39, "Ascension Day", "Helatorstai"),
    (49, "Pentecost", "Helluntaipäivä"),
)


def easter_sunday(year: int) -> datetime.date:
    """
    Calculate Easter Sunday with Butcher's (Meeus) Gregorian algorithm.

    Args:
        year: Year to calculate Easter for (1-9999)

    Returns:
        Date of Easter Sunday

    Raises:
        ValueError: If the year is outside datetime.date's range
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1

    return datetime.date(year, month, day)


def _first_saturday_from(start: datetime.date) -> datetime.date:
    days_until_saturday = (SATURDAY - start.weekday()) % 7
    return start + datetime.timedelta(days=days_until_saturday)


def midsummer_day(year: int) -> datetime.date:
    """Midsummer Day is the Saturday between June 20 and 26"""
    return _first_saturday_from(datetime.date(year, 6, 20))


def all_saints_day(year: int) -> datetime.date:
    """All Saints' Day is the Saturday between October 31 and November 6"""
    return _first_saturday_from(datetime.date(year, 10, 31))


def _as_date(date_obj: datetime.date) -> datetime.date:
    # datetime is a subclass of date and never compares equal to one
    if isinstance(date_obj, datetime.datetime):
        return date_obj.date()
    return date_obj


class HolidayService:
    """
    Computes the public holidays of a year and classifies dates.

    The service is stateless; instances can be shared between threads.
    """

    def compute_holidays(self, year: int) -> List[Holiday]:
        """
        Get all public holidays of a year.

        The order is stable: the fixed-date holidays first, then the
        Easter-relative ones, then Midsummer Day and All Saints' Day.

        Args:
            year: The year to compute holidays for (1-9999)

        Returns:
            List of holidays, all dated within `year`

        Raises:
            ValueError: If the year is outside datetime.date's range
        """
        fixed = [
            Holiday(date=datetime.date(year, month, day), name=name, description=description)
            for month, day, name, description in FIXED_HOLIDAYS
        ]
        return fixed + self._moveable_holidays(year)

    def _moveable_holidays(self, year: int) -> List[Holiday]:
        easter = easter_sunday(year)
        moveable = [
            Holiday(date=easter + datetime.timedelta(days=offset), name=name, description=description)
            for offset, name, description in EASTER_HOLIDAYS
        ]
        moveable.append(Holiday(date=midsummer_day(year), name="Midsummer Day", description="Juhannuspäivä"))
        moveable.append(Holiday(date=all_saints_day(year), name="All Saints' Day", description="Pyhäinpäivä"))
        return moveable

    def get_holiday(self, date_obj: datetime.date) -> Optional[Holiday]:
        """
        Get the holiday falling on a date.

        Args:
            date_obj: The date (or datetime, time of day is ignored) to check

        Returns:
            The first matching holiday, or None if the date is not a holiday
        """
        target = _as_date(date_obj)
        for holiday in self.compute_holidays(target.year):
            if holiday.date == target:
                return holiday
        return None

    def is_holiday(self, date_obj: datetime.date) -> bool:
        """Check if date is a public holiday"""
        return self.get_holiday(date_obj) is not None

    def get_holiday_name(self, date_obj: datetime.date) -> str:
        """Get the holiday name for a date, or empty string if not a holiday"""
        holiday = self.get_holiday(date_obj)
        return holiday.name if holiday else ""

    def holidays_by_date(self, year: int) -> Dict[datetime.date, Holiday]:
        """
        Index the holidays of a year by date.

        When two holidays share a date, the first one in list order wins.
        """
        index = {}
        for holiday in self.compute_holidays(year):
            index.setdefault(holiday.date, holiday)
        return index
