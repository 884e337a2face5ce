"""Lightweight in-memory telemetry for the calculation endpoint."""

from __future__ import annotations

import threading
import time
from collections import deque
from typing import Any, Deque, Dict, Optional


class RuntimeStats:
    """Rolling window of recent calculations for runtime visibility."""

    def __init__(self, window_seconds: int = 300) -> None:
        self.window_seconds = max(30, int(window_seconds))
        self._events: Deque[Dict[str, Any]] = deque()
        self._lock = threading.Lock()

    def _purge_locked(self, now_monotonic: float) -> None:
        threshold = now_monotonic - float(self.window_seconds)
        while self._events and self._events[0]["ts"] < threshold:
            self._events.popleft()

    def record(self, latency_ms: float, error_code: Optional[str] = None) -> None:
        now_mono = time.monotonic()
        payload = {
            "ts": now_mono,
            "latency_ms": max(0.0, float(latency_ms)),
            "error_code": error_code,
        }
        with self._lock:
            self._events.append(payload)
            self._purge_locked(now_mono)

    def snapshot(self) -> Dict[str, Any]:
        now_mono = time.monotonic()
        with self._lock:
            self._purge_locked(now_mono)
            events = list(self._events)

        errors_by_code: Dict[str, int] = {}
        latencies = []
        for item in events:
            code = item.get("error_code")
            if code:
                errors_by_code[str(code)] = errors_by_code.get(str(code), 0) + 1
            latencies.append(float(item.get("latency_ms", 0.0)))
        avg_latency = (sum(latencies) / len(latencies)) if latencies else 0.0
        return {
            "window_seconds": self.window_seconds,
            "requests": len(events),
            "succeeded": len(events) - sum(errors_by_code.values()),
            "errors_by_code": errors_by_code,
            "avg_latency_ms": round(avg_latency, 3),
        }
