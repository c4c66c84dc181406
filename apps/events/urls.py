from django.urls import path

from apps.events.views import CeremonyAccessAPIView
from apps.events.views import CeremonyDetailAPIView
from apps.events.views import EventAccessAPIView
from apps.events.views import EventDetailAPIView
from apps.events.views import EventsAccessAPIView
from apps.events.views import PublicEventAPIView

app_name = 'events'


urlpatterns = [
    # Access decisions
    path('access/', EventsAccessAPIView.as_view(), name='events-access'),  # POST /events/access/
    path('<int:event_id>/access/', EventAccessAPIView.as_view(), name='event-access'),  # GET
    path(
        'ceremonies/<int:ceremony_id>/access/',
        CeremonyAccessAPIView.as_view(),
        name='ceremony-access',
    ),  # GET
    # Gated reads
    path('<int:event_id>/', EventDetailAPIView.as_view(), name='event-detail'),  # GET /events/{id}/
    path('public/<slug:slug>/', PublicEventAPIView.as_view(), name='event-public'),  # GET /events/public/{slug}/
    path('ceremonies/<int:ceremony_id>/', CeremonyDetailAPIView.as_view(), name='ceremony-detail'),  # GET
]
