"""Game control routes."""

import time

from fastapi import APIRouter, Depends, HTTPException, status

from core.errors import InvalidInput
from ui.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1/control", tags=["control"])

# set by app.py
_engine = None
_bus = None


def init(engine, bus):
    """Initialize with engine and bus references."""
    global _engine, _bus
    _engine = engine
    _bus = bus


async def _announce(kind, **fields):
    await _bus.publish({"kind": kind, "timestamp": time.time(), **fields}, topic="control")


@router.post("/pause")
async def pause(username=Depends(verify_basic_auth)):
    """Pause the game (requires basic auth)."""
    await _engine.pause()
    await _announce("paused")
    return {"ok": True}


@router.post("/resume")
async def resume(username=Depends(verify_basic_auth)):
    """Resume the game (requires basic auth)."""
    await _engine.resume()
    await _announce("resumed")
    return {"ok": True}


@router.post("/reset")
async def reset(username=Depends(verify_basic_auth)):
    """Start a new game (requires basic auth)."""
    _engine.reset()
    await _announce("reset")
    return {"ok": True}


@router.post("/press/{direction}")
async def press(direction: str, username=Depends(verify_basic_auth)):
    """Steer the player: left, right, up, down or stop (requires basic auth)."""
    try:
        await _engine.press(direction)
    except InvalidInput as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail={"error_id": exc.error_id, "msg": f"unknown direction: {direction}"})
    return {"ok": True, "direction": direction}
