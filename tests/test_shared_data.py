"""MonitorState: locking and paired metrics/state updates."""

import threading

from syspet.core.health import HealthClassifier, HealthState
from syspet.core.shared_data import MonitorState

from conftest import StubSampler, make_metrics


class TestMonitorState:

    def test_snapshot_before_first_sample(self, stub_state):
        metrics, state = stub_state.snapshot()
        assert metrics is None
        assert state is HealthState.HAPPY

    def test_refresh_then_sample_then_classify(self):
        sampler = StubSampler(make_metrics(ram=80.0))
        state = MonitorState(sampler, HealthClassifier())

        metrics, health = state.refresh_and_classify()

        assert sampler.calls == ["refresh", "sample"]
        assert metrics.ram_percent == 80.0
        assert health is HealthState.OKAY

    def test_snapshot_pairs_metrics_with_their_state(self):
        high = make_metrics(ram=99.0)
        state = MonitorState(StubSampler(high), HealthClassifier())
        state.refresh_and_classify()

        metrics, health = state.snapshot()
        assert metrics is high
        assert health is HealthState.CRITICAL

    def test_try_refresh_skips_when_locked(self, stub_state):
        stub_state._lock.acquire()
        try:
            assert stub_state.try_refresh_and_classify() is None
        finally:
            stub_state._lock.release()
        assert stub_state.sampler.calls == []

    def test_try_refresh_runs_when_free(self, stub_state):
        result = stub_state.try_refresh_and_classify()
        assert result is not None
        assert result[1] is HealthState.HAPPY
        assert not stub_state._lock.locked()

    def test_lock_released_after_sampler_error(self):
        class Exploding(StubSampler):
            def sample(self):
                raise RuntimeError("boom")

        state = MonitorState(Exploding(make_metrics()))
        try:
            state.try_refresh_and_classify()
        except RuntimeError:
            pass
        assert not state._lock.locked()

    def test_concurrent_updates_are_serialised(self):
        active = []
        overlaps = []

        class Slow(StubSampler):
            def sample(self):
                active.append(1)
                if len(active) > 1:
                    overlaps.append(True)
                threading.Event().wait(0.01)
                active.pop()
                return super().sample()

        state = MonitorState(Slow(make_metrics()))
        threads = [threading.Thread(target=state.refresh_and_classify) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert overlaps == []
