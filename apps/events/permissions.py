"""
Custom permissions for event operations using EventAccessService
"""

from rest_framework.permissions import BasePermission

from apps.events.models import Ceremony
from apps.events.models import Event
from apps.shared.base.base_api_view import get_actor_id


class EventAccessPermission(BasePermission):
    """
    Base permission resolving the event behind the checked object and
    delegating the decision to EventAccessService.
    """

    def __init__(self):
        self.access_service = None

    def _get_access_service(self):
        """Lazy initialization to avoid circular imports"""
        if self.access_service is None:
            from apps.shared.container import get_access_service

            self.access_service = get_access_service()
        return self.access_service

    def has_object_permission(self, request, view, obj):
        event_id = self._get_event_id(obj)
        if event_id is None:
            return False
        return self.check_event(get_actor_id(request), event_id)

    def _get_event_id(self, obj):
        if isinstance(obj, Event):
            return obj.pk
        # Objects hanging off an event (ceremonies, invitees...)
        return getattr(obj, 'event_id', None)

    def check_event(self, actor_id, event_id) -> bool:
        raise NotImplementedError


class CanViewEvent(EventAccessPermission):
    """
    Permission to check if actor can view event (anonymous allowed on public events)

    The resolved decision is left on the view as `event_access` for reuse.
    """

    def __init__(self):
        super().__init__()
        self.event_access = None

    def has_object_permission(self, request, view, obj):
        allowed = super().has_object_permission(request, view, obj)
        if view is not None and self.event_access is not None:
            view.event_access = self.event_access
        return allowed

    def check_event(self, actor_id, event_id) -> bool:
        self.event_access = self._get_access_service().resolve_event_access(actor_id, event_id)
        return self.event_access.can_view


class CanInteractWithEvent(EventAccessPermission):
    """
    Permission to check if actor can comment, react or upload on event
    """

    def check_event(self, actor_id, event_id) -> bool:
        return self._get_access_service().can_interact(actor_id, event_id)


class IsEventOrganizer(EventAccessPermission):
    """
    Permission to check if actor owns the event
    """

    def check_event(self, actor_id, event_id) -> bool:
        return self._get_access_service().is_event_organizer(actor_id, event_id)


class CanAccessCeremony(EventAccessPermission):
    """
    Permission to check if actor can view a ceremony
    """

    def has_object_permission(self, request, view, obj):
        if not isinstance(obj, Ceremony):
            return False
        return self._get_access_service().can_access_ceremony(get_actor_id(request), obj.pk)
