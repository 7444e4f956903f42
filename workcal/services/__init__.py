"""Services layer - Business logic"""

from .holiday_service import HolidayService
from .working_day_service import WorkingDayService
from .stats_service import StatsService

__all__ = ["HolidayService", "WorkingDayService", "StatsService"]
