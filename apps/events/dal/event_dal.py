from apps.events.models import Ceremony
from apps.events.models import Event
from apps.events.models import Visibility
from apps.shared.decorators.database import handle_db_errors


class EventDAL:
    """Data Access Layer for Event and Ceremony reads used by the API views"""

    @handle_db_errors(operation_type='read', model_name='Event')
    def get_event_by_id(self, event_id: int) -> Event | None:
        return Event.objects.select_related('owner').filter(pk=event_id).first()

    @handle_db_errors(operation_type='read', model_name='Event')
    def get_event_by_slug(self, slug: str) -> Event | None:
        return Event.objects.select_related('owner').filter(slug=slug).first()

    @handle_db_errors(operation_type='read', model_name='Ceremony')
    def get_ceremony_by_id(self, ceremony_id: int) -> Ceremony | None:
        return Ceremony.objects.select_related('event').filter(pk=ceremony_id).first()

    @handle_db_errors(operation_type='update', model_name='Event')
    def sync_legacy_public_visibility(self, dry_run: bool = False) -> int:
        """Set PUBLIC visibility on events that are public only through the legacy flag"""
        queryset = Event.objects.visibility_out_of_sync()
        if dry_run:
            return queryset.count()
        return queryset.update(visibility=Visibility.PUBLIC)

    @handle_db_errors(operation_type='update', model_name='Event')
    def make_all_events_public(self, dry_run: bool = False) -> int:
        """Open every event to anonymous visitors"""
        queryset = Event.objects.exclude(visibility=Visibility.PUBLIC, is_public=True)
        if dry_run:
            return queryset.count()
        return queryset.update(visibility=Visibility.PUBLIC, is_public=True)
