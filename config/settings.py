"""
Registry - Django Settings
============================
Django is the configuration and app container for the registry
hook framework. There is no HTTP surface and no database here:
the service layer that performs registry actions lives elsewhere
and publishes events into this app.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

DEBUG = os.environ.get("REGISTRY_DEBUG", "false").lower() in ("1", "true", "yes")

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "registry.apps.RegistryConfig",
]

# ── Internationalization ──────────────────────────────────────
TIME_ZONE = "UTC"
USE_TZ = True

# ── Event Hooks ───────────────────────────────────────────────
# Each entry: {"class": dotted path, "properties": constructor kwargs}.
# "whitelisted_event_types" limits a provider to the listed EventType codes.
REGISTRY_EVENT_HOOK_PROVIDERS = [
    {
        "class": "registry.hook.logging_provider.LoggingEventHookProvider",
        "properties": {},
    },
]

# Seconds shutdown waits for queued events to reach the providers.
REGISTRY_EVENT_SERVICE_SHUTDOWN_TIMEOUT = 5.0

# ── Logging ───────────────────────────────────────────────────
# registry.hook.events carries the audit stream written by
# LoggingEventHookProvider; keep it on its own handler.
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        },
        "event": {
            "format": "%(asctime)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
        "events": {
            "class": "logging.StreamHandler",
            "formatter": "event",
        },
    },
    "loggers": {
        "registry": {
            "handlers": ["console"],
            "level": "DEBUG" if DEBUG else "INFO",
        },
        "registry.hook.events": {
            "handlers": ["events"],
            "level": os.environ.get("REGISTRY_HOOK_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
