# sedmcp/config/__init__.py
# Settings dataclass & JSON-backed settings manager

from .settings import SedSettings, SettingsManager, settings_manager, get_settings

__all__ = ["SedSettings", "SettingsManager", "settings_manager", "get_settings"]
