from __future__ import annotations

import threading

_COUNTERS = (
    "language_set_success",
    "language_set_failure",
    "upload_success",
    "upload_failure",
    "language_validation",
    "language_fallback",
)


class Metrics:
    """Thread-safe counters for YouTube language and upload operations.

    Every increment, read and reset takes the same lock, so reset() zeroes
    all counters in one step relative to concurrent increments.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counts = dict.fromkeys(_COUNTERS, 0)

    def _inc(self, name: str):
        with self._lock:
            self._counts[name] += 1

    def _get(self, name: str) -> int:
        with self._lock:
            return self._counts[name]

    def inc_language_set_success(self):
        self._inc("language_set_success")

    def inc_language_set_failure(self):
        self._inc("language_set_failure")

    def inc_upload_success(self):
        self._inc("upload_success")

    def inc_upload_failure(self):
        self._inc("upload_failure")

    def inc_language_validation(self):
        self._inc("language_validation")

    def inc_language_fallback(self):
        self._inc("language_fallback")

    @property
    def language_set_success(self) -> int:
        return self._get("language_set_success")

    @property
    def language_set_failure(self) -> int:
        return self._get("language_set_failure")

    @property
    def upload_success(self) -> int:
        return self._get("upload_success")

    @property
    def upload_failure(self) -> int:
        return self._get("upload_failure")

    @property
    def language_validation(self) -> int:
        return self._get("language_validation")

    @property
    def language_fallback(self) -> int:
        return self._get("language_fallback")

    @property
    def language_set_total(self) -> int:
        with self._lock:
            return self._counts["language_set_success"] + self._counts["language_set_failure"]

    @property
    def upload_total(self) -> int:
        with self._lock:
            return self._counts["upload_success"] + self._counts["upload_failure"]

    @staticmethod
    def _rate(success: int, failure: int) -> float:
        total = success + failure
        if total == 0:
            return 0.0
        return success / total

    @property
    def language_set_success_rate(self) -> float:
        """Fraction of language settings that succeeded, 0.0 if none were attempted."""
        with self._lock:
            return self._rate(
                self._counts["language_set_success"], self._counts["language_set_failure"]
            )

    @property
    def upload_success_rate(self) -> float:
        """Fraction of uploads that succeeded, 0.0 if none were attempted."""
        with self._lock:
            return self._rate(self._counts["upload_success"], self._counts["upload_failure"])

    def snapshot(self) -> dict:
        """Consistent copy of every counter plus the derived totals and rates."""
        with self._lock:
            counts = dict(self._counts)
        counts["language_set_total"] = counts["language_set_success"] + counts["language_set_failure"]
        counts["upload_total"] = counts["upload_success"] + counts["upload_failure"]
        counts["language_set_success_rate"] = self._rate(
            counts["language_set_success"], counts["language_set_failure"]
        )
        counts["upload_success_rate"] = self._rate(counts["upload_success"], counts["upload_failure"])
        return counts

    def reset(self):
        with self._lock:
            for name in self._counts:
                self._counts[name] = 0


# Process-wide default, used only when a caller does not pass its own Metrics.
youtube_metrics = Metrics()


def get_metrics() -> Metrics:
    return youtube_metrics
