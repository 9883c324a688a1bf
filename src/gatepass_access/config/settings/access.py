"""Config settings – AccessSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from gatepass_access.config.settings.base import Settings
from gatepass_access.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class AccessSettings(Settings):
    """Settings for the permission engine, read from ``ACCESS_*`` variables."""

    _prefix: ClassVar[str] = "ACCESS"

    database_url: str
    concurrent_fetch: bool = True
    resolve_timeout_seconds: float | None = None
    log_level: str = "INFO"
    log_json: bool = True
    echo_sql: bool = False

    def _validate(self) -> None:
        if not self.database_url:
            raise InvalidSettingValueError("database_url", self.database_url, "must not be empty")
        if self.resolve_timeout_seconds is not None and self.resolve_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "resolve_timeout_seconds", self.resolve_timeout_seconds, "must be positive"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )


__all__ = ["AccessSettings"]
