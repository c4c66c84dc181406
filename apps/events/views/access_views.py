from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.events.serializers import CeremonyAccessSerializer
from apps.events.serializers import EventAccessSerializer
from apps.events.serializers import EventsAccessQuerySerializer
from apps.events.serializers import EventsAccessResponseSerializer
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_access_service


class BaseAccessAPIView(BaseAPIView):
    """Base view exposing access decisions as they are"""

    permission_classes = [AllowAny]

    _access_service = None

    def get_service(self):
        if self._access_service is None:
            self._access_service = get_access_service()
        return self._access_service


@extend_schema(tags=['Access'], responses=EventAccessSerializer)
class EventAccessAPIView(BaseAccessAPIView):
    """Caller's access to one event"""

    def get(self, request, event_id):
        """A missing event yields the same all-false decision as a forbidden one"""
        access = self.get_service().resolve_event_access(self.get_actor_id(), event_id)
        return Response(EventAccessSerializer(access.to_dict()).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Access'], request=EventsAccessQuerySerializer, responses=EventsAccessResponseSerializer)
class EventsAccessAPIView(BaseAccessAPIView):
    """Caller's access to a list of events (timeline, listings)"""

    def post(self, request):
        serializer = EventsAccessQuerySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        access_map = self.get_service().resolve_events_access(
            self.get_actor_id(), serializer.validated_data['event_ids']
        )

        response_data = {
            'access': {
                str(event_id): EventAccessSerializer(access.to_dict()).data for event_id, access in access_map.items()
            }
        }
        return Response(response_data, status=status.HTTP_200_OK)


@extend_schema(tags=['Access'], responses=CeremonyAccessSerializer)
class CeremonyAccessAPIView(BaseAccessAPIView):
    """Whether the caller is admitted to a ceremony"""

    def get(self, request, ceremony_id):
        can_access = self.get_service().can_access_ceremony(self.get_actor_id(), ceremony_id)
        data = CeremonyAccessSerializer({'ceremony_id': ceremony_id, 'can_access': can_access}).data
        return Response(data, status=status.HTTP_200_OK)
