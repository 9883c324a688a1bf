"""Config settings – 12-factor env-based configuration."""
from gatepass_access.config.settings.access import AccessSettings
from gatepass_access.config.settings.base import Settings
from gatepass_access.config.settings.factory import SettingsFactory
from gatepass_access.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = [
    "AccessSettings",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
