import asyncio
import time
from internal.logging import get_logger

class Subscriber:
    __slots__ = ("name", "queue", "topics", "created_at", "received", "dropped")

    def __init__(self, name, queue, topics=None):
        self.name = name
        self.queue = queue
        self.topics = topics or set()
        self.created_at = time.time()
        self.received = 0
        self.dropped = 0

    def wants(self, topic):
        """Subscribers without topics receive everything."""
        return not self.topics or topic in self.topics

    def offer(self, item):
        try:
            self.queue.put_nowait(item)
        except asyncio.QueueFull:
            self.dropped += 1
            return False
        self.received += 1
        return True

class EventBus:
    """Copy-on-write pub/sub for frames, sound cues and control events.

    Slow subscribers lose items instead of stalling the game loop.
    """

    def __init__(self, queue_size=50):
        self._lock = asyncio.Lock()
        self._subscribers = {}
        self._snapshot = []
        self._queue_size = queue_size
        self._log = get_logger()
        self.total_published = 0
        self.total_delivered = 0
        self.total_dropped = 0

    async def subscribe(self, name, max_queue_size=None, topics=None):
        async with self._lock:
            existing = self._subscribers.get(name)
            if existing:
                return existing
            queue = asyncio.Queue(maxsize=max_queue_size or self._queue_size)
            subscriber = self._subscribers[name] = Subscriber(name, queue, set(topics or ()))
            self._snapshot = list(self._subscribers.values())
            self._log.info("subscriber added", name=name, topics=sorted(subscriber.topics))
            return subscriber

    async def unsubscribe(self, name):
        async with self._lock:
            if self._subscribers.pop(name, None) is None:
                return False
            self._snapshot = list(self._subscribers.values())
            self._log.info("subscriber removed", name=name)
            return True

    async def publish(self, item, topic=""):
        delivered = dropped = 0
        for subscriber in self._snapshot:
            if not subscriber.wants(topic):
                continue
            if subscriber.offer(item):
                delivered += 1
            else:
                dropped += 1
        self.total_published += 1
        self.total_delivered += delivered
        self.total_dropped += dropped
        return delivered

    def get_stats(self):
        return {
            "subscriber_count": len(self._snapshot),
            "total_published": self.total_published,
            "total_delivered": self.total_delivered,
            "total_dropped": self.total_dropped
        }

    async def get_subscriber_info(self):
        return [
            {"name": subscriber.name,
             "topics": sorted(subscriber.topics),
             "queued": subscriber.queue.qsize(),
             "received": subscriber.received,
             "dropped": subscriber.dropped}
            for subscriber in self._snapshot
        ]
