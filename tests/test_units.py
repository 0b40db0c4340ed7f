"""Tests for duration and memory formatting."""

from goatfetch.modules.units import format_duration, format_memory


class TestFormatDuration:
    """Test uptime formatting."""

    def test_minutes_only(self):
        assert format_duration(0) == "0m"
        assert format_duration(59) == "0m"
        assert format_duration(600) == "10m"

    def test_hours(self):
        assert format_duration(3661) == "1h 1m"
        assert format_duration(7200) == "2h 0m"

    def test_days_keep_zero_components(self):
        assert format_duration(90000) == "1d 1h 0m"
        assert format_duration(86400) == "1d 0h 0m"

    def test_fractional_and_negative_seconds(self):
        assert format_duration(3661.99) == "1h 1m"
        assert format_duration(-5) == "0m"


class TestFormatMemory:
    """Test memory formatting."""

    def test_one_decimal_mib(self):
        assert format_memory(8192000, 16384000) == "8000.0MiB / 16000.0MiB"
        assert format_memory(1536, 2048) == "1.5MiB / 2.0MiB"
