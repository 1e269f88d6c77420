"""Tests for the thread-safe Metrics counters."""
from __future__ import annotations

import threading

import pytest

from youtube_automation.publishing.metrics import Metrics, get_metrics, youtube_metrics


class TestCounters:
    def test_starts_at_zero(self, metrics):
        snap = metrics.snapshot()
        for name in ("language_set_success", "language_set_failure", "upload_success",
                     "upload_failure", "language_validation", "language_fallback"):
            assert snap[name] == 0

    def test_increments_are_independent(self, metrics):
        metrics.inc_language_set_success()
        metrics.inc_language_set_failure()
        metrics.inc_language_set_failure()
        metrics.inc_upload_success()
        metrics.inc_upload_failure()
        metrics.inc_language_validation()
        metrics.inc_language_fallback()
        metrics.inc_language_fallback()
        metrics.inc_language_fallback()

        assert metrics.language_set_success == 1
        assert metrics.language_set_failure == 2
        assert metrics.upload_success == 1
        assert metrics.upload_failure == 1
        assert metrics.language_validation == 1
        assert metrics.language_fallback == 3

    def test_totals(self, metrics):
        metrics.inc_language_set_success()
        metrics.inc_language_set_failure()
        metrics.inc_upload_success()
        assert metrics.language_set_total == 2
        assert metrics.upload_total == 1

    def test_reset(self, metrics):
        metrics.inc_language_set_success()
        metrics.inc_upload_failure()
        metrics.inc_language_fallback()
        metrics.reset()
        assert metrics.language_set_success == 0
        assert metrics.upload_failure == 0
        assert metrics.language_fallback == 0


class TestRates:
    def test_zero_when_nothing_attempted(self, metrics):
        assert metrics.language_set_success_rate == 0.0
        assert metrics.upload_success_rate == 0.0

    def test_language_rate(self, metrics):
        for _ in range(3):
            metrics.inc_language_set_success()
        metrics.inc_language_set_failure()
        assert metrics.language_set_success_rate == pytest.approx(0.75)

    def test_upload_rate(self, metrics):
        metrics.inc_upload_success()
        metrics.inc_upload_failure()
        assert metrics.upload_success_rate == pytest.approx(0.5)

    def test_all_failures(self, metrics):
        metrics.inc_upload_failure()
        assert metrics.upload_success_rate == 0.0

    def test_snapshot_includes_derived(self, metrics):
        metrics.inc_language_set_success()
        snap = metrics.snapshot()
        assert snap["language_set_total"] == 1
        assert snap["language_set_success_rate"] == 1.0
        assert snap["upload_total"] == 0
        assert snap["upload_success_rate"] == 0.0


class TestConcurrency:
    def test_no_lost_updates(self, metrics):
        workers, per_worker = 10, 1000

        def hammer():
            for _ in range(per_worker):
                metrics.inc_language_validation()
                metrics.inc_upload_success()

        threads = [threading.Thread(target=hammer) for _ in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert metrics.language_validation == workers * per_worker
        assert metrics.upload_success == workers * per_worker

    def test_reset_during_increments(self, metrics):
        stop = threading.Event()

        def hammer():
            while not stop.is_set():
                metrics.inc_language_fallback()

        threads = [threading.Thread(target=hammer) for _ in range(4)]
        for t in threads:
            t.start()
        for _ in range(50):
            metrics.reset()
        stop.set()
        for t in threads:
            t.join()

        value = metrics.language_fallback
        assert isinstance(value, int)
        assert value >= 0
        metrics.reset()
        assert metrics.language_fallback == 0


class TestDefaultInstance:
    def test_get_metrics_returns_shared_instance(self):
        assert get_metrics() is youtube_metrics
        assert isinstance(youtube_metrics, Metrics)

    def test_instances_are_isolated(self):
        a, b = Metrics(), Metrics()
        a.inc_upload_success()
        assert b.upload_success == 0
