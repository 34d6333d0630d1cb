"""FastAPI application factory."""

import asyncio
import json
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, StreamingResponse
from fastapi.staticfiles import StaticFiles

from communication.bus import EventBus
from config import load_config
from core.health import (
    HealthChecker,
    check_event_loop,
    create_bus_check,
    create_engine_check,
    create_logger_check,
)
from internal.logging import get_logger, LogLevel, StructuredLogger, AsyncFileLogger
from utils.crash import create_async_handler
from gameplay.engine import GameEngine
from gameplay.state import StateSnapshot
from ui.routes import control, api, health

STATIC_DIR = Path(__file__).parent / "static"


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    StructuredLogger.configure(min_level=LogLevel[config.logging.level.upper()])
    logger_instance = get_logger()

    bus = EventBus(queue_size=100)
    engine = GameEngine(bus=bus, config=config.game)
    file_logger = AsyncFileLogger(file_path=config.logging.file)
    health_checker = HealthChecker()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("game server starting", version="1.0.0")
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))

        await file_logger.start()
        # frames are too chatty for the file log; keep cues and control events
        log_sub = await bus.subscribe("logger", max_queue_size=200, topics=("sound", "control"))

        async def log_worker():
            while True:
                item = await log_sub.queue.get()
                file_logger.try_log(item.get("kind", "event"), item)

        app.state.log_worker = asyncio.create_task(log_worker())

        health_checker.register("event_loop", check_event_loop, critical=True)
        health_checker.register("event_bus", create_bus_check(bus), critical=True)
        health_checker.register("game_engine", create_engine_check(engine), critical=True)
        health_checker.register("async_logger", create_logger_check(file_logger), critical=False)

        await engine.start()
        logger_instance.info("game server started")

        yield

        logger_instance.info("game server shutting down")
        await engine.stop()
        app.state.log_worker.cancel()
        try:
            await app.state.log_worker
        except asyncio.CancelledError:
            pass
        await file_logger.stop()
        logger_instance.info("game server shutdown complete")

    app = FastAPI(
        title="Frog Feast",
        version="1.0.0",
        description="2D arcade game served over SSE",
        lifespan=lifespan,
    )

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    control.init(engine, bus)
    api.init(engine, bus, file_logger)
    health.init(engine, health_checker)

    app.include_router(control.router)
    app.include_router(api.router)
    app.include_router(health.router)

    @app.get("/", response_class=HTMLResponse)
    async def index():
        """Serve the game viewer."""
        return (STATIC_DIR / "index.html").read_text(encoding="utf-8")

    @app.get("/events")
    async def events(request: Request):
        """SSE endpoint - streams frames and sound cues to the viewer."""
        subscriber_name = f"ui-{uuid.uuid4().hex[:8]}"
        sub = await bus.subscribe(subscriber_name, max_queue_size=10, topics=("state", "sound"))

        async def event_generator():
            try:
                snapshot = await engine.get_snapshot()
                yield format_sse("state", snapshot.to_dict())

                while True:
                    if await request.is_disconnected():
                        break

                    try:
                        item = await asyncio.wait_for(sub.queue.get(), timeout=1.0)
                    except asyncio.TimeoutError:
                        yield ": keep-alive\n\n"
                        continue

                    if isinstance(item, StateSnapshot):
                        yield format_sse("state", item.to_dict())
                    else:
                        yield format_sse(item.get("kind", "event"), item)
            finally:
                await bus.unsubscribe(subscriber_name)

        return StreamingResponse(event_generator(), media_type="text/event-stream")

    return app


def format_sse(event, data):
    """Format data as Server-Sent Event."""
    return f"event: {event}\ndata: {json.dumps(data)}\n\n"
