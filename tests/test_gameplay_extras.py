"""Unit tests for the sound board, score boards and snapshots."""

from gameplay.boards import GAME_OVER_RED, WHITE, build_boards
from gameplay.sounds import SoundBoard
from gameplay.sprites import Sprite
from gameplay.state import SpriteState, StateSnapshot
from gameplay.viewport import Viewport


class TestSoundBoard:
    """Tests for SoundBoard class."""

    def test_play_registers_clip(self):
        """First play creates the clip."""
        sounds = SoundBoard()
        sounds.play("jump.mp3")
        clip = sounds.get("jump.mp3")
        assert clip.playing is True
        assert clip.loop is False
        assert clip.plays == 1

    def test_play_again_rewinds_and_reuses(self):
        """Replaying the same file reuses one clip."""
        sounds = SoundBoard()
        sounds.play("jump.mp3")
        clip = sounds.get("jump.mp3")
        clip.position = 1.5
        sounds.play("jump.mp3", loop=True)
        assert sounds.get("jump.mp3") is clip
        assert clip.position == 0.0
        assert clip.loop is True
        assert clip.plays == 2

    def test_stop_rewinds(self):
        """Stopping pauses and rewinds."""
        sounds = SoundBoard()
        sounds.play("music.mp3", loop=True)
        sounds.get("music.mp3").position = 3.0
        sounds.stop("music.mp3")
        clip = sounds.get("music.mp3")
        assert clip.playing is False
        assert clip.position == 0.0

    def test_stop_unknown_is_ignored(self):
        """Stopping a clip never played does nothing."""
        sounds = SoundBoard()
        sounds.stop("missing.mp3")
        assert sounds.get("missing.mp3") is None
        assert sounds.drain() == []

    def test_drain_returns_cues_once(self):
        """Cues are handed out in order and cleared."""
        sounds = SoundBoard()
        sounds.play("music.mp3", loop=True)
        sounds.stop("music.mp3")
        cues = sounds.drain()
        assert [(cue["action"], cue["file"]) for cue in cues] == [("play", "music.mp3"), ("stop", "music.mp3")]
        assert cues[0]["loop"] is True
        assert sounds.drain() == []


class TestBoards:
    """Tests for build_boards."""

    def test_score_and_health_lines(self):
        """Score and health are shown top-left in white."""
        lines = build_boards(4, 2, Viewport(400, 400))
        assert [line.text for line in lines] == ["Score: 4", "Health: 2"]
        assert [(line.x, line.y) for line in lines] == [(10, 10), (10, 40)]
        assert all(line.size == 24 and line.color == WHITE for line in lines)

    def test_game_over_line(self):
        """Zero health adds a centered red Game Over."""
        lines = build_boards(7, 0, Viewport(400, 400))
        over = lines[-1]
        assert over.text == "Game Over!"
        assert (over.x, over.y) == (200, 200)
        assert over.size == 48
        assert over.color == GAME_OVER_RED
        assert over.align == "center"

    def test_board_line_to_dict(self):
        """Lines serialize with a list color."""
        line = build_boards(0, 3, Viewport(400, 400))[0]
        assert line.to_dict() == {"text": "Score: 0", "x": 10, "y": 10, "size": 24,
                                  "color": [255, 255, 255], "align": "left"}


class TestViewport:
    """Tests for Viewport class."""

    def test_ground_line(self):
        """Grass covers the bottom 100px."""
        assert Viewport(400, 400).ground_y == 300


class TestStateSnapshot:
    """Tests for SpriteState and StateSnapshot."""

    def test_sprite_state_copies_sprite(self):
        """SpriteState captures a sprite at one moment."""
        sprite = Sprite(10, 20, 30, 40, name="food")
        sprite.add_animation("food")
        state = SpriteState.of(sprite)
        sprite.x = 99
        assert state.x == 10
        assert state.to_dict()["animation"] == "food"

    def test_snapshot_has_ksuid_and_timestamp(self):
        """Snapshots get an id and ISO timestamp."""
        snap = StateSnapshot(frame=1, time=0.5, sprites=[])
        assert len(snap.id) == 27
        assert "T" in snap.timestamp

    def test_snapshot_to_dict(self):
        """Snapshots convert to plain dicts."""
        sprites = [SpriteState("player", 200, 320, 40, 40)]
        boards = build_boards(1, 3, Viewport(400, 400))
        snap = StateSnapshot(frame=100, time=5.0, sprites=sprites, score=1, health=3, boards=boards)
        d = snap.to_dict()
        assert d["frame"] == 100
        assert d["game_time_s"] == 5.0
        assert d["score"] == 1
        assert d["game_over"] is False
        assert d["sprites"][0]["name"] == "player"
        assert d["boards"][0]["text"] == "Score: 1"

    def test_snapshot_uses_slots(self):
        """StateSnapshot uses __slots__."""
        assert hasattr(StateSnapshot, "__slots__")
