"""
Registry Event Hooks
======================
Typed audit events for actions performed against a versioned-artifact
registry, validated per event type and dispatched to hook providers.
"""

__version__ = "0.1.0"
