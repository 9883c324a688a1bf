"""Config – 12-factor settings and loaders."""

from gatepass_access.config.settings import (
    AccessSettings,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from gatepass_access.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "AccessSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
