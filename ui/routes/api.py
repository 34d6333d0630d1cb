"""API routes for stats, subscribers and boards."""

from fastapi import APIRouter, Depends

from utils.timestamp import format_timestamp
from ui.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1", tags=["api"])

# set by app.py
_engine = None
_bus = None
_file_logger = None


def init(engine, bus, file_logger):
    """Initialize with engine, bus, and logger references."""
    global _engine, _bus, _file_logger
    _engine = engine
    _bus = bus
    _file_logger = file_logger


@router.get("/stats")
async def stats(username=Depends(verify_basic_auth)):
    """Return bus and game statistics (requires basic auth)."""
    snapshot = await _engine.get_snapshot()
    return {
        "timestamp": format_timestamp(),
        "game": {
            "frame": snapshot.frame,
            "game_time_s": snapshot.time,
            "sprite_count": len(snapshot.sprites),
            "score": snapshot.score,
            "health": snapshot.health,
            "game_over": snapshot.game_over,
            "paused": _engine.paused,
        },
        "bus": _bus.get_stats(),
        "logger": _file_logger.get_stats(),
    }


@router.get("/subscribers")
async def subscribers(username=Depends(verify_basic_auth)):
    """Return info about all current subscribers (requires basic auth)."""
    return await _bus.get_subscriber_info()


@router.get("/boards")
async def boards(username=Depends(verify_basic_auth)):
    """Return the score and health board lines (requires basic auth)."""
    snapshot = await _engine.get_snapshot()
    return [line.to_dict() for line in snapshot.boards]
