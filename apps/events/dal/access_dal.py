"""
Access Data Access Layer

ORM-backed implementation of IAccessStore. Every method is a read-only
projection; rows are returned as the small records the access engine
consumes, never as model instances.
"""

from collections.abc import Iterable
from typing import Any

from apps.events.access_types import CeremonyRecord
from apps.events.access_types import EventRecord
from apps.events.access_types import InviteeSummary
from apps.events.access_types import ParentEventRecord
from apps.events.models import Ceremony
from apps.events.models import Event
from apps.events.models import Invite
from apps.events.models import Invitee
from apps.shared.decorators.database import handle_db_errors
from apps.shared.interfaces.access_store import IAccessStore


class EventAccessDAL(IAccessStore):
    """Data Access Layer for the lookups behind access decisions"""

    @handle_db_errors(operation_type='read', model_name='Event')
    def get_event(self, event_id: Any) -> EventRecord | None:
        row = (
            Event.objects.filter(pk=event_id)
            .values('id', 'owner_id', 'is_public', 'visibility', 'status')
            .first()
        )
        if row is None:
            return None
        return EventRecord(**row)

    @handle_db_errors(operation_type='read', model_name='Ceremony')
    def get_ceremony_with_event(self, ceremony_id: Any) -> CeremonyRecord | None:
        row = (
            Ceremony.objects.filter(pk=ceremony_id)
            .values('id', 'event_id', 'visibility', 'event__owner_id', 'event__visibility', 'event__is_public')
            .first()
        )
        if row is None:
            return None
        return CeremonyRecord(
            id=row['id'],
            event_id=row['event_id'],
            visibility=row['visibility'],
            event=ParentEventRecord(
                owner_id=row['event__owner_id'],
                visibility=row['event__visibility'],
                is_public=row['event__is_public'],
            ),
        )

    @handle_db_errors(operation_type='read', model_name='Invitee')
    def find_invitee(self, event_id: Any, user_id: Any, rsvp_statuses: Iterable[str]) -> InviteeSummary | None:
        row = (
            Invitee.objects.linked_to(event_id, user_id)
            .with_rsvp_in(rsvp_statuses)
            .order_by('created_at')
            .values('id', 'rsvp_status', 'role')
            .first()
        )
        if row is None:
            return None
        return InviteeSummary(**row)

    @handle_db_errors(operation_type='read', model_name='Invite')
    def find_invite(self, ceremony_id: Any, invitee_user_id: Any, statuses: Iterable[str]) -> bool:
        return Invite.objects.for_ceremony(ceremony_id).for_user(invitee_user_id).with_status_in(statuses).exists()

    @handle_db_errors(operation_type='read', model_name='Invitee')
    def find_invitee_by_event(self, event_id: Any, user_id: Any) -> Any | None:
        return Invitee.objects.linked_to(event_id, user_id).order_by('created_at').values_list('id', flat=True).first()

    @handle_db_errors(operation_type='read', model_name='Invite')
    def find_invite_by_ceremony_and_invitee(self, ceremony_id: Any, invitee_id: Any) -> bool:
        return Invite.objects.for_ceremony(ceremony_id).filter(invitee_id=invitee_id).exists()
