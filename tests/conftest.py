"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from workcal.domain.models import WorkResource
from workcal.infra import config
from workcal.services.holiday_service import HolidayService
from workcal.services.stats_service import StatsService
from workcal.services.working_day_service import WorkingDayService


@pytest.fixture
def holiday_service():
    return HolidayService()


@pytest.fixture
def working_day_service(holiday_service):
    return WorkingDayService(holiday_service=holiday_service)


@pytest.fixture
def stats_service(working_day_service):
    """Stats service with an explicit default quota (no settings lookup)"""
    return StatsService(working_day_service=working_day_service, default_daily_work_hours=8.0)


@pytest.fixture
def resources():
    """Two resources splitting the month 60/40"""
    return [
        WorkResource(id=1, name="R1", percentage=60),
        WorkResource(id=2, name="R2", percentage=40),
    ]


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """
    Run with a clean working directory and no cached global settings.

    Yields the directory to use as config_dir.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "_settings", None)
    for name in ("WORKCAL_APP_NAME", "WORKCAL_CONFIG_DIR", "WORKCAL_PREFERENCES",
                 "WORKCAL_PREFERENCES__DEFAULT_DAILY_WORK_HOURS"):
        monkeypatch.delenv(name, raising=False)

    config_dir = tmp_path / "config_home"
    yield config_dir
