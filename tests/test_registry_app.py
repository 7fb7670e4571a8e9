"""
Tests for registry.apps - startup wiring of the event service.
"""

from django.apps import apps

from registry import apps as registry_apps
from registry.event.service import get_event_service
from registry.hook.event_type import EventType
from registry.hook.provider import EventHookProvider

RECORDED = []


class RecordingProvider(EventHookProvider):
    def handle(self, event):
        RECORDED.append(event.event_type)


class TestRegistryConfig:
    def test_app_installed(self):
        config = apps.get_app_config("registry")
        assert isinstance(config, registry_apps.RegistryConfig)

    def test_skipped_under_pytest(self):
        assert registry_apps._is_pytest_context()

    def test_ready_starts_configured_service(self, settings, monkeypatch):
        settings.REGISTRY_EVENT_HOOK_PROVIDERS = [
            {"class": f"{__name__}.RecordingProvider"},
        ]
        settings.REGISTRY_EVENT_SERVICE_SHUTDOWN_TIMEOUT = 2.0
        monkeypatch.setattr(registry_apps, "_is_pytest_context", lambda: False)
        monkeypatch.setattr(registry_apps, "_is_management_command_skip", lambda: False)
        monkeypatch.setattr(registry_apps.atexit, "register", lambda fn: None)
        RECORDED.clear()

        apps.get_app_config("registry").ready()

        service = get_event_service()
        try:
            assert service.is_running
            assert isinstance(service.providers[0], RecordingProvider)
        finally:
            service.shutdown()

        assert RECORDED == [EventType.REGISTRY_START]
