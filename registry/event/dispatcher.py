"""
Registry Events - Dispatcher
==============================
Routes a validated event to the configured hook providers.

Dispatch behavior:
1. Skip providers whose whitelist excludes the event type
   (a whitelist check that raises counts as a provider failure)
2. Call the remaining providers sequentially, in configuration order
3. Catch and log a provider failure, then continue with the next one

A provider failure must NOT:
- Stop delivery to the other providers
- Reach the code that published the event

An event without a type reaches no provider.

This module does NOT validate, queue or modify events.
"""

from __future__ import annotations

import logging
from typing import Iterable

from registry.hook.event import Event
from registry.hook.provider import EventHookProvider

logger = logging.getLogger("registry.events")


def dispatch(event: Event, providers: Iterable[EventHookProvider]) -> dict:
    """
    Deliver one event to every provider that handles its type.

    Returns:
        dict with dispatch results:
        {
            'event_type': str,
            'providers_notified': int,
            'providers_skipped': int,
            'providers_failed': int,
            'failures': list[dict]
        }

    This function NEVER raises exceptions.
    """
    event_type = event.event_type.value if event.event_type is not None else None
    result = {
        "event_type": event_type,
        "providers_notified": 0,
        "providers_skipped": 0,
        "providers_failed": 0,
        "failures": [],
    }

    providers = list(providers)
    if event.event_type is None:
        result["providers_skipped"] = len(providers)
        logger.error("Event has no event type; not dispatched.")
        return result

    for provider in providers:
        provider_name = type(provider).__qualname__

        try:
            if not provider.should_handle(event.event_type):
                result["providers_skipped"] += 1
                continue

            provider.handle(event)
            result["providers_notified"] += 1
            logger.debug(f"Dispatched {event_type} -> {provider_name}")

        except Exception as exc:
            result["providers_failed"] += 1
            result["failures"].append({
                "provider": provider_name,
                "error": str(exc),
                "error_type": type(exc).__name__,
            })
            logger.error(
                f"Event hook provider failed: {provider_name} for {event_type}: {exc}",
                exc_info=True,
            )

    logger.info(
        f"Dispatch complete: {event_type} - "
        f"{result['providers_notified']} notified, "
        f"{result['providers_skipped']} skipped, "
        f"{result['providers_failed']} failed"
    )
    return result
