"""Pytest fixtures for all tests."""

import random

import pytest
from httpx import AsyncClient, ASGITransport

from ui.app import create_app
from communication.bus import EventBus
from gameplay.engine import GameEngine
from gameplay.session import GameSession
from gameplay.sprites import SpriteWorld
from config import GameConfig


@pytest.fixture
def world():
    """Create an empty sprite world."""
    return SpriteWorld()


@pytest.fixture
def game_config():
    """Create test game config."""
    return GameConfig(tick_interval=0.05, viewport_width=400, viewport_height=400, starting_health=3)


@pytest.fixture
def session(game_config):
    """Create a seeded game session."""
    return GameSession(game_config, random.Random(1234))


@pytest.fixture
async def bus():
    """Create test event bus."""
    return EventBus(queue_size=10)


@pytest.fixture
async def engine(bus, game_config):
    """Create test game engine."""
    eng = GameEngine(bus=bus, config=game_config)
    yield eng
    if eng._task:
        await eng.stop()


@pytest.fixture
async def client():
    """Create async test client."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
