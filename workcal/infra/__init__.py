"""Infrastructure layer - Configuration"""

from .config import CalendarPreferences, Settings, get_settings, reload_settings

__all__ = ["CalendarPreferences", "Settings", "get_settings", "reload_settings"]
