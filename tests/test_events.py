"""EventBroadcaster: fan-out, unsubscribe, listener isolation."""

import pytest

from syspet.core.events import METRICS_UPDATE, Event, EventBroadcaster


@pytest.fixture
def broadcaster():
    return EventBroadcaster()


class TestBroadcast:

    def test_publish_reaches_every_subscriber(self, broadcaster):
        received = []
        broadcaster.subscribe(METRICS_UPDATE, lambda e: received.append(("a", e.data)))
        broadcaster.subscribe(METRICS_UPDATE, lambda e: received.append(("b", e.data)))
        broadcaster.publish(METRICS_UPDATE, {"x": 1})
        assert received == [("a", {"x": 1}), ("b", {"x": 1})]

    def test_publish_without_subscribers(self, broadcaster):
        event = broadcaster.publish(METRICS_UPDATE, {})
        assert isinstance(event, Event)
        assert event.type == METRICS_UPDATE

    def test_other_event_types_not_delivered(self, broadcaster):
        received = []
        broadcaster.subscribe("other", received.append)
        broadcaster.publish(METRICS_UPDATE, {})
        assert received == []

    def test_failing_listener_does_not_block_others(self, broadcaster):
        received = []

        def broken(event):
            raise ValueError("listener bug")

        broadcaster.subscribe(METRICS_UPDATE, broken)
        broadcaster.subscribe(METRICS_UPDATE, received.append)
        broadcaster.publish(METRICS_UPDATE, {"ok": True})
        assert len(received) == 1


class TestUnsubscribe:

    def test_unsubscribe(self, broadcaster):
        received = []
        broadcaster.subscribe(METRICS_UPDATE, received.append)
        assert broadcaster.unsubscribe(METRICS_UPDATE, received.append) is True
        broadcaster.publish(METRICS_UPDATE, {})
        assert received == []
        assert broadcaster.subscriber_count(METRICS_UPDATE) == 0

    def test_unsubscribe_unknown(self, broadcaster):
        assert broadcaster.unsubscribe(METRICS_UPDATE, print) is False

    def test_unsubscribe_during_dispatch(self, broadcaster):
        calls = []

        def once(event):
            calls.append(event)
            broadcaster.unsubscribe(METRICS_UPDATE, once)

        broadcaster.subscribe(METRICS_UPDATE, once)
        broadcaster.publish(METRICS_UPDATE, {})
        broadcaster.publish(METRICS_UPDATE, {})
        assert len(calls) == 1
