"""
Tests for registry.event.dispatcher - delivery to hook providers.

Covers:
- Delivery in configuration order
- Whitelist filtering
- Provider failure isolation
- Never raises
"""

import logging

from registry.event import factory
from registry.event.dispatcher import dispatch
from registry.event.standard import StandardEvent
from registry.hook.event_type import EventType
from registry.hook.provider import EventHookProvider
from registry.resources import Bucket

BUCKET = Bucket(identifier="bucket-1", name="Bucket 1")


class RecordingProvider(EventHookProvider):
    def __init__(self, calls, label, whitelisted_event_types=None):
        super().__init__(whitelisted_event_types)
        self.calls = calls
        self.label = label

    def handle(self, event):
        self.calls.append((self.label, event.event_type))


class FailingProvider(EventHookProvider):
    def handle(self, event):
        raise RuntimeError("sink unavailable")


class BrokenWhitelistProvider(EventHookProvider):
    def should_handle(self, event_type):
        raise RuntimeError("whitelist lookup failed")

    def handle(self, event):
        raise AssertionError("handle must not be reached")


class TestDispatch:
    def test_delivers_in_order(self):
        calls = []
        providers = [RecordingProvider(calls, "a"), RecordingProvider(calls, "b")]

        result = dispatch(factory.bucket_created(BUCKET, "alice"), providers)

        assert calls == [("a", EventType.CREATE_BUCKET), ("b", EventType.CREATE_BUCKET)]
        assert result["event_type"] == "CREATE_BUCKET"
        assert result["providers_notified"] == 2
        assert result["providers_failed"] == 0
        assert result["failures"] == []

    def test_no_providers(self):
        result = dispatch(factory.bucket_created(BUCKET, "alice"), [])
        assert result["providers_notified"] == 0

    def test_whitelist_skips_other_types(self):
        calls = []
        providers = [
            RecordingProvider(calls, "flows", whitelisted_event_types=[EventType.CREATE_FLOW]),
            RecordingProvider(calls, "all"),
        ]

        result = dispatch(factory.bucket_created(BUCKET, "alice"), providers)

        assert calls == [("all", EventType.CREATE_BUCKET)]
        assert result["providers_skipped"] == 1
        assert result["providers_notified"] == 1

    def test_failure_does_not_stop_other_providers(self, caplog):
        calls = []
        providers = [FailingProvider(), RecordingProvider(calls, "after")]

        with caplog.at_level(logging.ERROR, logger="registry.events"):
            result = dispatch(factory.bucket_deleted(BUCKET, "alice"), providers)

        assert calls == [("after", EventType.DELETE_BUCKET)]
        assert result["providers_failed"] == 1
        assert result["providers_notified"] == 1
        assert result["failures"] == [{
            "provider": "FailingProvider",
            "error": "sink unavailable",
            "error_type": "RuntimeError",
        }]
        assert "FailingProvider" in caplog.text

    def test_whitelist_check_failure_isolated(self):
        calls = []
        providers = [BrokenWhitelistProvider(), RecordingProvider(calls, "after")]

        result = dispatch(factory.bucket_created(BUCKET, "alice"), providers)

        assert calls == [("after", EventType.CREATE_BUCKET)]
        assert result["providers_failed"] == 1
        assert result["providers_notified"] == 1
        assert result["failures"][0]["provider"] == "BrokenWhitelistProvider"
        assert result["failures"][0]["error"] == "whitelist lookup failed"

    def test_untyped_event_reaches_no_provider(self, caplog):
        calls = []
        providers = [RecordingProvider(calls, "a"), RecordingProvider(calls, "b")]

        with caplog.at_level(logging.ERROR, logger="registry.events"):
            result = dispatch(StandardEvent.Builder().build(), providers)

        assert calls == []
        assert result["event_type"] is None
        assert result["providers_skipped"] == 2
        assert result["providers_notified"] == 0
        assert "no event type" in caplog.text
