import math
from time import monotonic, time_ns
from typing import Any


class SystemRepository:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if getattr(self, "_initialized", False):
            return

        self._started_at = monotonic()
        self._initialized = True

    @staticmethod
    def _round_half_up(value: float) -> int:
        return int(math.floor(value + 0.5))

    def uptime_seconds(self) -> int:
        elapsed = max(monotonic() - self._started_at, 0.0)
        return self._round_half_up(elapsed)

    @staticmethod
    def timestamp_ms() -> int:
        return time_ns() // 1_000_000

    def get_health(self) -> dict[str, Any]:
        return {
            "status": "ok",
            "uptimeSeconds": self.uptime_seconds(),
            "timestamp": self.timestamp_ms(),
        }
