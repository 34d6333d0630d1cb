import asyncio
import time
from enum import Enum
from utils.timestamp import format_timestamp

class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"

class CheckResult:
    __slots__ = ("name", "status", "msg")

    def __init__(self, name, status, msg=""):
        self.name = name
        self.status = status
        self.msg = msg

    def to_dict(self):
        return {"name": self.name, "status": self.status.value, "msg": self.msg}

class HealthReport:
    __slots__ = ("status", "checks", "uptime", "timestamp")

    def __init__(self, status, checks, uptime=0):
        self.status = status
        self.checks = checks
        self.uptime = uptime
        self.timestamp = format_timestamp()

    def to_dict(self):
        return {"status": self.status.value,
                "timestamp": self.timestamp,
                "uptime": round(self.uptime, 1),
                "checks": [check.to_dict() for check in self.checks]}

def overall_status(results):
    """Worst status wins; non-critical failures only degrade."""
    status = Status.OK
    for result, is_critical in results:
        if result.status == Status.FAIL and is_critical:
            return Status.FAIL
        if result.status != Status.OK:
            status = Status.DEGRADED
    return status

class HealthChecker:
    def __init__(self, ttl=1.0, timeout=5):
        self._checks = {}
        self._cache = None
        self._cache_time = 0
        self._ttl = ttl
        self._timeout = timeout
        self._start_time = time.time()

    def register(self, name, check_fn, critical=True):
        self._checks[name] = (check_fn, critical)

    async def _run_one(self, name, check_fn):
        try:
            return await asyncio.wait_for(check_fn(), timeout=self._timeout)
        except asyncio.TimeoutError:
            return CheckResult(name, Status.FAIL, "timeout")
        except Exception as exc:
            return CheckResult(name, Status.FAIL, str(exc))

    async def check(self):
        now = time.time()
        if self._cache and now - self._cache_time < self._ttl:
            return self._cache

        results = [(await self._run_one(name, check_fn), critical)
                   for name, (check_fn, critical) in self._checks.items()]

        self._cache = HealthReport(overall_status(results), [result for result, _ in results], now - self._start_time)
        self._cache_time = now
        return self._cache

# Checks
async def check_event_loop():
    await asyncio.sleep(0)
    return CheckResult("loop", Status.OK)

def create_bus_check(bus, drop_ratio=0.1):
    async def check():
        stats = bus.get_stats()
        if stats["total_published"] and stats["total_dropped"] / stats["total_published"] > drop_ratio:
            return CheckResult("bus", Status.DEGRADED, "drops")
        return CheckResult("bus", Status.OK, f"{stats['subscriber_count']}sub")
    return check

def create_engine_check(engine, threshold=5.0):
    """Fail when a running engine has not advanced a frame within `threshold` seconds."""
    last_seen = {"frame": None, "at": time.time()}

    async def check():
        snapshot = await engine.get_snapshot()
        now = time.time()
        state = engine.state

        if state == "stopped":
            return CheckResult("engine", Status.DEGRADED, "stopped")

        stuck = (state == "running" and last_seen["frame"] == snapshot.frame
                 and now - last_seen["at"] > threshold)
        if stuck:
            return CheckResult("engine", Status.FAIL, f"stuck@{snapshot.frame}")

        if last_seen["frame"] != snapshot.frame or state == "paused":
            last_seen["frame"], last_seen["at"] = snapshot.frame, now
        if state == "paused":
            return CheckResult("engine", Status.OK, f"paused@{snapshot.frame}")
        if snapshot.game_over:
            return CheckResult("engine", Status.OK, f"game-over@{snapshot.frame}")
        return CheckResult("engine", Status.OK, f"f{snapshot.frame}")
    return check

def create_logger_check(logger):
    async def check():
        queue_size, max_size = logger.queue.qsize(), logger.queue.maxsize
        if queue_size / max_size > 0.9:
            return CheckResult("log", Status.DEGRADED, f"{queue_size}/{max_size}")
        return CheckResult("log", Status.OK)
    return check
