"""Shared fixtures: deterministic psutil counters and sampler stubs."""

import time
from collections import namedtuple

import psutil
import pytest

from syspet.collectors.system_models import Metrics
from syspet.core.health import HealthClassifier
from syspet.core.shared_data import MonitorState

FakeMemory = namedtuple("FakeMemory", "total used")
FakeDiskUsage = namedtuple("FakeDiskUsage", "total used free percent")

GIB = 1024 ** 3


class FakeCounters:
    """Values returned by the patched psutil functions."""

    def __init__(self):
        self.mem_total = 16 * GIB
        self.mem_used = 8 * GIB
        self.cpu = 10.0
        self.disk_total = 100 * GIB
        self.disk_error = None
        self.cpu_calls = 0
        self.cpu_intervals = []
        self.last_cpu_call = None

    def virtual_memory(self):
        return FakeMemory(self.mem_total, self.mem_used)

    def cpu_percent(self, interval=None):
        """Like psutil, a non-blocking read right after the last one gives 0.0."""
        self.cpu_calls += 1
        self.cpu_intervals.append(interval)
        now = time.monotonic()
        too_soon = (interval is None and self.last_cpu_call is not None
                    and now - self.last_cpu_call < 0.1)
        self.last_cpu_call = now
        return 0.0 if too_soon else self.cpu

    def disk_usage(self, path):
        if self.disk_error is not None:
            raise self.disk_error
        return FakeDiskUsage(self.disk_total, 0, self.disk_total, 0.0)


@pytest.fixture
def counters(monkeypatch):
    """Patch psutil with controllable counters."""
    fake = FakeCounters()
    monkeypatch.setattr(psutil, "virtual_memory", fake.virtual_memory)
    monkeypatch.setattr(psutil, "cpu_percent", fake.cpu_percent)
    monkeypatch.setattr(psutil, "disk_usage", fake.disk_usage)
    return fake


@pytest.fixture
def scratch_dir(tmp_path):
    path = tmp_path / "scratch"
    path.mkdir()
    return path


class StubSampler:
    """Sampler returning queued Metrics, recording call order."""

    def __init__(self, *metrics):
        self.queue = list(metrics)
        self.calls = []
        self.scratch_dir = None

    def refresh(self):
        self.calls.append("refresh")

    def sample(self):
        self.calls.append("sample")
        if len(self.queue) > 1:
            return self.queue.pop(0)
        return self.queue[0]


def make_metrics(ram=50.0, cpu=50.0, junk_percent=3.0):
    """Metrics with the junk share of a 1,000,000 byte disk."""
    return Metrics(
        ram_percent=ram,
        cpu_percent=cpu,
        disk_junk_bytes=int(junk_percent * 10_000),
        total_disk_bytes=1_000_000,
    )


@pytest.fixture
def stub_state():
    return MonitorState(StubSampler(make_metrics()), HealthClassifier())
