"""Unit tests for utility modules."""

import json
import sys

from core.errors import InvalidRange
from utils import crash
from utils.crash import configure, install_crash_handler, log_crash
from utils.ksuid import KSUID_EPOCH, generate_ksuid
from utils.timestamp import format_timestamp, now_micros


class TestKSUID:
    """Tests for KSUID generation."""

    def test_generate_ksuid_length(self):
        """KSUID is a 27-character string."""
        ksuid = generate_ksuid()
        assert isinstance(ksuid, str)
        assert len(ksuid) == 27

    def test_generate_ksuid_unique(self):
        """KSUIDs are unique."""
        assert len({generate_ksuid() for _ in range(100)}) == 100

    def test_generate_ksuid_sortable(self):
        """Later KSUIDs sort after earlier ones."""
        earlier = generate_ksuid(now=KSUID_EPOCH + 1000)
        later = generate_ksuid(now=KSUID_EPOCH + 2000)
        assert later > earlier


class TestTimestamp:
    """Tests for timestamp utilities."""

    def test_format_epoch(self):
        """Epoch zero formats to 1970."""
        assert format_timestamp(0) == "1970-01-01T00:00:00.000000Z"

    def test_format_timestamp_has_microseconds(self):
        """Timestamp includes six fractional digits."""
        assert format_timestamp(1_500_000) == "1970-01-01T00:00:01.500000Z"

    def test_now_micros_reasonable_value(self):
        """now_micros is an int after 2020."""
        micros = now_micros()
        assert isinstance(micros, int)
        assert micros > 1577836800000000


class TestCrashHandler:
    """Tests for crash handling utilities."""

    def test_configure_sets_path(self, tmp_path):
        """configure() sets crash log path."""
        original = crash._crash_log
        configure(str(tmp_path / "crash.log"))
        assert crash._crash_log == str(tmp_path / "crash.log")
        configure(original)

    def test_log_crash_writes_record(self, tmp_path, capsys):
        """Crashes land in the crash log with game error ids."""
        original = crash._crash_log
        path = tmp_path / "logs" / "crash.log"
        configure(str(path))
        try:
            error = InvalidRange(9, 1)
            log_crash(InvalidRange, error, None)
        finally:
            configure(original)

        record = json.loads(path.read_text().splitlines()[0])
        assert record["type"] == "InvalidRange"
        assert record["error_id"] == error.error_id
        assert record["error_context"] == {"min_value": 9, "max_value": 1}
        assert "CRASH" in capsys.readouterr().err

    def test_install_crash_handler(self):
        """install_crash_handler sets sys.excepthook."""
        original_hook = sys.excepthook
        install_crash_handler()
        assert sys.excepthook == log_crash
        sys.excepthook = original_hook
