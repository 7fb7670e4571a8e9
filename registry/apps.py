"""
Registry - App Configuration
==============================
Loads the configured event hook providers and starts the
process-wide event service when Django finishes loading.

Rules:
- Runs once via ready()
- Skips during management commands and under pytest
- A bad provider entry raises ImproperlyConfigured and prevents startup
"""

import atexit
import logging
import os
import sys

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger("registry.bootstrap")

# Commands that should NOT start the event service
SKIP_COMMANDS = {
    "migrate",
    "makemigrations",
    "showmigrations",
    "shell",
    "dbshell",
    "test",
    "collectstatic",
    "check",
}


def _is_management_command_skip():
    if len(sys.argv) >= 2:
        return sys.argv[1] in SKIP_COMMANDS
    return False


def _is_pytest_context() -> bool:
    return (
        "PYTEST_CURRENT_TEST" in os.environ
        or "pytest" in sys.modules
    )


class RegistryConfig(AppConfig):
    name = "registry"
    label = "registry"
    verbose_name = "Registry Event Hooks"

    def ready(self):
        if _is_management_command_skip() or _is_pytest_context():
            logger.info("Event service startup skipped for management/test context.")
            return

        from registry.event.service import configure_event_service
        from registry.hook.loader import load_event_hook_providers

        service = configure_event_service(
            load_event_hook_providers(),
            shutdown_timeout=getattr(
                settings, "REGISTRY_EVENT_SERVICE_SHUTDOWN_TIMEOUT", 5.0
            ),
        )
        service.start()
        atexit.register(service.shutdown)
