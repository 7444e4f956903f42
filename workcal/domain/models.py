"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Calendars, resources and entries arrive from external collaborators (web layer,
database). Pydantic rejects malformed data at that boundary, so the statistics
services can stay total over well-formed inputs. The computed results are
models too, which makes them trivial to serialize for JSON or templates.
"""

import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict


class Holiday(BaseModel):
    """
    A public holiday on a specific date.

    `name` is the English name, `description` the local (Finnish) one.
    """
    model_config = ConfigDict(frozen=True)

    date: datetime.date
    name: str
    description: str = ""


class WorkCalendar(BaseModel):
    """
    Represents a work calendar with its daily hour quota.

    Resources and entries reference the calendar by id.
    """
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=100)
    work: bool = True
    daily_work_hours: Optional[float] = Field(
        default=None,
        ge=0,
        description="Baseline work hours per working day (None = use configured default)"
    )


class WorkResource(BaseModel):
    """
    A named claim on a percentage of a calendar's monthly work hours.

    Examples: "Project A" at 60%, "Support" at 40%
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = Field(..., min_length=1)
    percentage: int = Field(default=0, ge=0, le=100, description="Share of total work hours")
    calendar_id: Optional[int] = None


class CalendarEntry(BaseModel):
    """
    Hours logged on a calendar for a single date.

    An entry without a work resource (None or 0) is unattributed: it counts
    towards the month total but not towards any resource.
    """
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    calendar_id: Optional[int] = None
    date: datetime.date
    hours: float = Field(default=0.0, ge=0)
    work_resource_id: Optional[int] = None
    text: str = ""

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def week(self) -> int:
        """ISO-8601 week number of the entry date"""
        return self.date.isocalendar()[1]

    @property
    def is_attributed(self) -> bool:
        return bool(self.work_resource_id)


class ResourceStats(BaseModel):
    """Monthly target and progress for a single work resource."""

    resource_id: int
    resource_name: str
    percentage: int
    target_hours: float = 0.0
    logged_hours: float = 0.0
    progress: float = 0.0  # Percent of target_hours, 0 when there is no target


class MonthStats(BaseModel):
    """
    Work statistics for one calendar month.

    `resource_stats` follows the order in which resources were supplied.
    """

    year: int
    month: int
    working_days: int = 0
    holidays: List[Holiday] = Field(default_factory=list, description="Holidays on weekdays of the month")
    total_work_hours: float = 0.0
    logged_hours: float = 0.0
    progress: float = 0.0
    resource_stats: List[ResourceStats] = Field(default_factory=list)

    # Sum of resource percentages. Not required to be 100.
    allocated_percentage: int = 0
    unattributed_hours: float = 0.0

    def get_resource_stats(self, resource_id: int) -> Optional[ResourceStats]:
        """Look up the stats of one resource by id"""
        for stats in self.resource_stats:
            if stats.resource_id == resource_id:
                return stats
        return None


class MonthDay(BaseModel):
    """A single day of a month grid, as shown by calendar views."""
    model_config = ConfigDict(frozen=True)

    date: datetime.date
    is_weekend: bool = False
    holiday: Optional[Holiday] = None

    @property
    def is_holiday(self) -> bool:
        return self.holiday is not None

    @property
    def is_working_day(self) -> bool:
        return not self.is_weekend and self.holiday is None
