"""
Domain-specific business exceptions for the Events app.

- These are BUSINESS exceptions, not HTTP exceptions
- HTTP mapping happens in the global exception handler

Not-found errors never carry the identifier in their message: a hidden
event must produce the same response body as a missing one.
"""

from apps.shared.exceptions import ResourceNotFoundError


class EventNotFoundError(ResourceNotFoundError):
    """Raised when an event does not exist or the actor may not view it."""

    def __init__(self, **kwargs):
        super().__init__('Event not found', error_code='event_not_found', **kwargs)


class CeremonyNotFoundError(ResourceNotFoundError):
    """Raised when a ceremony does not exist or the actor may not view it."""

    def __init__(self, **kwargs):
        super().__init__('Ceremony not found', error_code='ceremony_not_found', **kwargs)
