"""Events services package."""

from apps.events.services.access_service import EventAccessService

__all__ = [
    'EventAccessService',
]
