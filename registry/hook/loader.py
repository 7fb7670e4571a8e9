"""
Registry Hooks - Provider Loader
==================================
Builds event hook providers from Django settings.

Settings shape:
    REGISTRY_EVENT_HOOK_PROVIDERS = [
        {
            "class": "registry.hook.logging_provider.LoggingEventHookProvider",
            "properties": {"whitelisted_event_types": ["CREATE_BUCKET"]},
        },
        {
            "class": "registry.hook.script_provider.ScriptEventHookProvider",
            "properties": {"script_path": "/opt/hooks/notify.sh"},
        },
    ]

Every key in "properties" is passed to the provider constructor.
Any problem with an entry raises ImproperlyConfigured naming the entry.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from registry.hook.errors import EventHookError
from registry.hook.provider import EventHookProvider

logger = logging.getLogger("registry.hook")

PROVIDERS_SETTING = "REGISTRY_EVENT_HOOK_PROVIDERS"


def load_event_hook_providers(
    config: Optional[Iterable[dict[str, Any]]] = None,
) -> list[EventHookProvider]:
    """
    Instantiate every configured provider, in configuration order.

    Args:
        config: Provider entries. Defaults to the
                REGISTRY_EVENT_HOOK_PROVIDERS setting.

    Raises:
        ImproperlyConfigured: unknown class, wrong base class, or the
                              provider rejected its properties.
    """
    if config is None:
        config = getattr(settings, PROVIDERS_SETTING, ())

    providers: list[EventHookProvider] = []
    for index, entry in enumerate(config):
        providers.append(_load_provider(index, entry))

    logger.info(f"Loaded {len(providers)} event hook provider(s): {providers}")
    return providers


def _load_provider(index: int, entry: Any) -> EventHookProvider:
    where = f"{PROVIDERS_SETTING}[{index}]"

    if not isinstance(entry, dict):
        raise ImproperlyConfigured(f"{where} must be a dict, got {type(entry).__name__}.")

    class_path = entry.get("class")
    if not class_path or not isinstance(class_path, str):
        raise ImproperlyConfigured(f"{where} has no 'class' entry.")

    try:
        provider_class = import_string(class_path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"{where}: cannot import '{class_path}'.") from exc

    if not (isinstance(provider_class, type) and issubclass(provider_class, EventHookProvider)):
        raise ImproperlyConfigured(
            f"{where}: '{class_path}' is not an EventHookProvider."
        )

    properties = entry.get("properties") or {}
    if not isinstance(properties, dict):
        raise ImproperlyConfigured(f"{where}: 'properties' must be a dict.")

    try:
        return provider_class(**properties)
    except (EventHookError, TypeError) as exc:
        raise ImproperlyConfigured(f"{where}: {exc}") from exc
