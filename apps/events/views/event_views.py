import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.events.exceptions import CeremonyNotFoundError
from apps.events.exceptions import EventNotFoundError
from apps.events.permissions import CanAccessCeremony
from apps.events.permissions import CanViewEvent
from apps.events.serializers import CeremonySerializer
from apps.events.serializers import EventAccessSerializer
from apps.events.serializers import EventSummarySerializer
from apps.events.serializers import EventWithAccessSerializer
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_access_service
from apps.shared.container import get_event_dal

logger = logging.getLogger(__name__)


class BaseEventAPIView(BaseAPIView):
    """
    Base view for event reads.

    Any denial is reported as the resource not existing, so callers cannot
    probe which ids or slugs are taken.
    """

    not_found_error = EventNotFoundError

    _access_service = None
    _event_dal = None
    # Set by CanViewEvent during object permission checks
    event_access = None

    def get_service(self):
        if self._access_service is None:
            self._access_service = get_access_service()
        return self._access_service

    def get_event_dal(self):
        if self._event_dal is None:
            self._event_dal = get_event_dal()
        return self._event_dal

    def permission_denied(self, request, message=None, code=None):
        logger.debug(f'Access denied for user {self.get_actor_id()} on {request.path}')
        raise self.not_found_error()

    def event_with_access_response(self, event, access):
        data = {
            'event': EventSummarySerializer(event).data,
            'access': EventAccessSerializer(access.to_dict()).data,
        }
        return Response(data, status=status.HTTP_200_OK)


@extend_schema(tags=['Events'], responses=EventWithAccessSerializer)
class EventDetailAPIView(BaseEventAPIView):
    """Get event details with the caller's access"""

    permission_classes = [AllowAny, CanViewEvent]

    def get(self, request, event_id):
        event = self.get_event_dal().get_event_by_id(event_id)
        if event is None:
            raise EventNotFoundError()

        self.check_object_permissions(request, event)

        access = self.event_access
        if access is None:
            access = self.get_service().resolve_event_access(self.get_actor_id(), event.pk)
        return self.event_with_access_response(event, access)


@extend_schema(tags=['Events'], responses=EventWithAccessSerializer)
class PublicEventAPIView(BaseEventAPIView):
    """Get an event by its public slug (shareable event page)"""

    permission_classes = [AllowAny]

    def get(self, request, slug):
        event = self.get_event_dal().get_event_by_slug(slug)
        if event is None:
            raise EventNotFoundError()

        access = self.get_service().resolve_event_access(self.get_actor_id(), event.pk)
        if not access.can_view:
            raise EventNotFoundError()

        return self.event_with_access_response(event, access)


@extend_schema(tags=['Ceremonies'], responses=CeremonySerializer)
class CeremonyDetailAPIView(BaseEventAPIView):
    """Get ceremony details"""

    permission_classes = [AllowAny, CanAccessCeremony]
    not_found_error = CeremonyNotFoundError

    def get(self, request, ceremony_id):
        ceremony = self.get_event_dal().get_ceremony_by_id(ceremony_id)
        if ceremony is None:
            raise CeremonyNotFoundError()

        self.check_object_permissions(request, ceremony)

        return Response(CeremonySerializer(ceremony).data, status=status.HTTP_200_OK)
