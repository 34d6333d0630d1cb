import asyncio
import time
from config import load_config
from gameplay.session import GameSession
from internal.logging import get_logger

class EngineState:
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"

class GameEngine:
    """Steps a GameSession at a fixed frame rate and publishes each frame."""

    def __init__(self, bus, config=None, rng=None):
        self.bus = bus
        self.config = config or load_config().game
        self._rng = rng
        self._lock = asyncio.Lock()
        self._log = get_logger()
        self._state = EngineState.STOPPED
        self._task = None
        self._stop = asyncio.Event()
        self.session = None
        self.game_time = 0.0
        self._last_publish_frame = -1
        self.reset()

    @property
    def paused(self):
        return self._state == EngineState.PAUSED

    @property
    def state(self):
        return self._state

    @property
    def frame(self):
        return self.session.frame

    def reset(self):
        self.session = GameSession(self.config, self._rng)
        self.game_time = 0.0
        self._last_publish_frame = -1

    async def press(self, direction):
        async with self._lock:
            self.session.press(direction)

    async def start(self):
        if self._task:
            return
        self._stop.clear()
        self._state = EngineState.RUNNING
        self._task = asyncio.create_task(self._loop())

    async def stop(self):
        self._stop.set()
        if self._task:
            await self._task
            self._task = None
        self._state = EngineState.STOPPED
        await self.bus.publish({"kind": "engine_stopped", "frame": self.frame}, topic="control")

    async def pause(self):
        async with self._lock:
            self._state = EngineState.PAUSED
            self._log.info("engine paused", frame=self.frame)

    async def resume(self):
        async with self._lock:
            self._state = EngineState.RUNNING
            self._log.info("engine resumed", frame=self.frame)

    async def get_snapshot(self):
        async with self._lock:
            return self.session.to_snapshot(self.game_time)

    async def _loop(self):
        tick_interval = self.config.tick_interval
        next_tick_time = time.perf_counter()
        self._log.info("engine start", dt=tick_interval)

        while not self._stop.is_set():
            wait_time = next_tick_time - time.perf_counter()
            if wait_time > 0:
                try:
                    await asyncio.wait_for(self._stop.wait(), timeout=wait_time)
                    break
                except asyncio.TimeoutError:
                    pass
            next_tick_time += tick_interval

            try:
                async with self._lock:
                    session = self.session
                    if self._state == EngineState.RUNNING:
                        session.step()
                        self.game_time += tick_interval
                    snapshot = session.to_snapshot(self.game_time)
                    cues = session.sounds.drain()
            except Exception as exc:
                self._log.error("frame failed", error=exc, frame=self.frame)
                continue

            if snapshot.frame == self._last_publish_frame:
                continue
            try:
                for cue in cues:
                    await self.bus.publish(cue, topic="sound")
                await self.bus.publish(snapshot, topic="state")
                self._last_publish_frame = snapshot.frame
            except Exception as exc:
                self._log.warn("publish failed", error=exc, frame=snapshot.frame)

        self._log.info("engine stop", frame=self.frame)
