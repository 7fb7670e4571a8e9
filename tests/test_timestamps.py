"""
Tests for registry.timestamps - the build-time timestamp source.
"""

from datetime import datetime, timezone

import pytest

from registry.event.standard import StandardEvent
from registry.hook.event_type import EventType
from registry.timestamps import now_utc, set_timestamp_source

INSTANT = datetime(2025, 1, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def restore_system_time():
    yield
    set_timestamp_source(None)


class TestTimestampSource:
    def test_system_time_is_utc(self):
        assert now_utc().tzinfo is not None
        assert now_utc().utcoffset().total_seconds() == 0

    def test_installed_source_used(self):
        set_timestamp_source(lambda: INSTANT)
        assert now_utc() == INSTANT

    def test_events_stamped_from_source(self):
        set_timestamp_source(lambda: INSTANT)
        assert StandardEvent.Builder().event_type(EventType.REGISTRY_START).build().timestamp == INSTANT

    def test_naive_source_rejected(self):
        set_timestamp_source(lambda: datetime(2025, 1, 1, 9, 30))
        with pytest.raises(ValueError, match="timezone-aware"):
            now_utc()

    def test_none_restores_system_time(self):
        set_timestamp_source(lambda: INSTANT)
        set_timestamp_source(None)
        assert now_utc() != INSTANT
