from apps.events.views.access_views import CeremonyAccessAPIView
from apps.events.views.access_views import EventAccessAPIView
from apps.events.views.access_views import EventsAccessAPIView
from apps.events.views.event_views import BaseEventAPIView
from apps.events.views.event_views import CeremonyDetailAPIView
from apps.events.views.event_views import EventDetailAPIView
from apps.events.views.event_views import PublicEventAPIView

__all__ = [
    'BaseEventAPIView',
    'CeremonyAccessAPIView',
    'CeremonyDetailAPIView',
    'EventAccessAPIView',
    'EventDetailAPIView',
    'EventsAccessAPIView',
    'PublicEventAPIView',
]
