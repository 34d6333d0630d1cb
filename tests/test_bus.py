"""Unit tests for EventBus."""

import asyncio
from communication.bus import EventBus


class TestEventBus:
    """Tests for EventBus class."""

    async def test_bus_creation(self):
        """EventBus initializes with default queue size."""
        bus = EventBus(queue_size=10)
        assert bus._queue_size == 10
        assert len(bus._subscribers) == 0

    async def test_subscribe(self):
        """Subscriber is added to bus."""
        bus = EventBus(queue_size=10)
        sub = await bus.subscribe("viewer")
        assert "viewer" in bus._subscribers
        assert sub.name == "viewer"

    async def test_subscribe_twice_returns_same(self):
        """Re-subscribing by name returns the existing subscriber."""
        bus = EventBus(queue_size=10)
        first = await bus.subscribe("viewer")
        second = await bus.subscribe("viewer", max_queue_size=99)
        assert first is second
        assert second.queue.maxsize == 10

    async def test_subscribe_custom_queue_size(self):
        """Subscriber can have custom queue size."""
        bus = EventBus(queue_size=10)
        sub = await bus.subscribe("viewer", max_queue_size=50)
        assert sub.queue.maxsize == 50

    async def test_unsubscribe(self):
        """Subscriber is removed from bus."""
        bus = EventBus(queue_size=10)
        await bus.subscribe("viewer")
        assert await bus.unsubscribe("viewer") is True
        assert "viewer" not in bus._subscribers

    async def test_unsubscribe_nonexistent(self):
        """Unsubscribing an unknown name returns False."""
        bus = EventBus(queue_size=10)
        assert await bus.unsubscribe("nobody") is False

    async def test_publish_to_subscriber(self):
        """Message is delivered to subscriber."""
        bus = EventBus(queue_size=10)
        sub = await bus.subscribe("viewer")
        await bus.publish({"kind": "reset"})
        msg = await asyncio.wait_for(sub.queue.get(), timeout=1.0)
        assert msg == {"kind": "reset"}

    async def test_publish_returns_delivery_count(self):
        """Publish returns number of successful deliveries."""
        bus = EventBus(queue_size=10)
        await bus.subscribe("viewer-1")
        await bus.subscribe("viewer-2")
        assert await bus.publish({"kind": "paused"}) == 2

    async def test_topic_filtering(self):
        """Topic subscribers only see their topics; others see everything."""
        bus = EventBus(queue_size=10)
        speaker = await bus.subscribe("speaker", topics=["sound"])
        everything = await bus.subscribe("everything")

        await bus.publish({"kind": "sound"}, topic="sound")
        await bus.publish({"kind": "paused"}, topic="control")

        assert speaker.queue.qsize() == 1
        assert everything.queue.qsize() == 2

    async def test_queue_overflow_drops_message(self):
        """Full queue drops new messages."""
        bus = EventBus(queue_size=2)
        sub = await bus.subscribe("slow-viewer", max_queue_size=2)
        await bus.publish({"frame": 1})
        await bus.publish({"frame": 2})
        await bus.publish({"frame": 3})
        assert sub.dropped == 1
        assert bus.get_stats()["total_dropped"] == 1

    async def test_get_stats(self):
        """Bus returns statistics."""
        bus = EventBus(queue_size=10)
        await bus.subscribe("viewer")
        await bus.publish({"kind": "reset"})
        stats = bus.get_stats()
        assert stats["subscriber_count"] == 1
        assert stats["total_published"] == 1
        assert stats["total_delivered"] == 1

    async def test_get_subscriber_info(self):
        """Bus returns subscriber details."""
        bus = EventBus(queue_size=10)
        sub = await bus.subscribe("viewer", topics=["state"])
        await bus.publish({"kind": "frame"}, topic="state")
        await sub.queue.get()

        info = await bus.get_subscriber_info()
        assert info == [{"name": "viewer", "topics": ["state"], "queued": 0, "received": 1, "dropped": 0}]
