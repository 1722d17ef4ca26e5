"""
Loader state tracking for gesture configuration.

Tracks the loaded file, load timestamp, hot-reload status and reload telemetry.
"""

import time
from typing import Any, Dict, Optional

from .models import ReloadResult


def _empty_telemetry() -> Dict[str, Any]:
    return {
        "total_reload_attempts": 0,
        "successful_reloads": 0,
        "failed_reloads": 0,
        "success_rate_percent": 0.0,
        "average_reload_duration_ms": 0,
        "last_reload_duration_ms": 0,
        "total_reload_time_ms": 0
    }


class LoaderState:
    """Tracks current configuration state with reload telemetry."""

    def __init__(self):
        """Initialize loader state."""
        self.config_file: Optional[str] = None
        self.config_load_timestamp: Optional[float] = None
        self.record_count: int = 0
        self.hot_reload_active: bool = False
        self.last_result: Optional[ReloadResult] = None
        self.telemetry = _empty_telemetry()

    def record_load(self, result: ReloadResult):
        """Record a successful pass that replaced the store contents."""
        self.config_load_timestamp = time.time()
        self.record_count = result.record_count

    def record_reload_attempt(self, result: ReloadResult):
        """
        Record reload attempt telemetry.

        Args:
            result: Outcome of the reload pass
        """
        self.last_result = result
        self.telemetry["total_reload_attempts"] += 1
        self.telemetry["last_reload_duration_ms"] = result.duration_ms
        self.telemetry["total_reload_time_ms"] += result.duration_ms

        if result.success:
            self.telemetry["successful_reloads"] += 1
            self.record_load(result)
        else:
            self.telemetry["failed_reloads"] += 1

        attempts = self.telemetry["total_reload_attempts"]
        self.telemetry["success_rate_percent"] = round(
            (self.telemetry["successful_reloads"] / attempts) * 100,
            2
        )
        self.telemetry["average_reload_duration_ms"] = int(
            self.telemetry["total_reload_time_ms"] / attempts
        )

    def to_dict(self) -> dict:
        """
        Convert state to dictionary.

        Returns:
            State as dictionary with telemetry
        """
        return {
            "config_file": self.config_file,
            "config_load_timestamp": self.config_load_timestamp,
            "record_count": self.record_count,
            "hot_reload_active": self.hot_reload_active,
            "last_result": self.last_result.model_dump(mode="json") if self.last_result else None,
            "telemetry": self.telemetry
        }
