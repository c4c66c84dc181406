import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from django.conf import settings
from django.db import connections

from apps.events.access_types import CeremonyRecord
from apps.events.access_types import EventAccess
from apps.events.dal.access_dal import EventAccessDAL
from apps.events.models import Invite
from apps.events.models import Invitee
from apps.events.models import Visibility
from apps.shared.interfaces.access_store import IAccessStore

logger = logging.getLogger(__name__)

# A declined invitee keeps seeing the event but can no longer interact with it
INTERACTIVE_RSVP_STATUSES = (
    Invitee.RsvpStatus.PENDING,
    Invitee.RsvpStatus.ACCEPTED,
    Invitee.RsvpStatus.MAYBE,
)

ADMITTING_INVITE_STATUSES = (
    Invite.Status.PENDING,
    Invite.Status.SENT,
    Invite.Status.DELIVERED,
    Invite.Status.OPENED,
    Invite.Status.CLICKED,
)


def _parse_visibility(value: Any) -> Visibility | None:
    try:
        return Visibility(value)
    except ValueError:
        return None


class EventAccessService:
    """
    Decides what an actor may do with events and ceremonies.

    Every public method is total: store failures are logged and turned into
    the denied decision, and a missing resource is denied exactly like a
    forbidden one. Nothing here writes to the store.

    `actor_id` is the authenticated user's id, or None for anonymous visitors.
    """

    def __init__(self, store: IAccessStore | None = None, max_workers: int | None = None) -> None:
        self.store = store if store is not None else EventAccessDAL()
        if max_workers is None:
            max_workers = settings.EVENT_ACCESS['BATCH_MAX_WORKERS']
        self.max_workers = max_workers

    # =============================================================================
    # EVENT ACCESS
    # =============================================================================

    def resolve_event_access(self, actor_id: Any, event_id: Any) -> EventAccess:
        """Compute view/interact/organizer flags of an actor for one event"""
        try:
            event = self.store.get_event(event_id)
            if event is None:
                logger.debug(f'Event {event_id} not found, denying access to user {actor_id}')
                return EventAccess.denied()

            if actor_id is None:
                # The legacy flag can only widen anonymous access, never narrow it
                can_view = event.visibility == Visibility.PUBLIC or event.is_public
                return EventAccess(can_view=bool(can_view), can_interact=False, is_organizer=False)

            if event.owner_id == actor_id:
                return EventAccess.organizer()

            invitee = self.store.find_invitee(event.id, actor_id, INTERACTIVE_RSVP_STATUSES)
            return EventAccess(
                can_view=True,
                can_interact=invitee is not None,
                is_organizer=False,
                invitee=invitee,
            )

        except Exception as e:
            logger.exception(f'Error checking access for user {actor_id}, event {event_id}: {e}')
            return EventAccess.denied()

    def can_interact(self, actor_id: Any, event_id: Any) -> bool:
        """Check if actor may upload, comment or react on the event"""
        if actor_id is None:
            return False
        access = self.resolve_event_access(actor_id, event_id)
        return access.can_interact or access.is_organizer

    def is_event_organizer(self, actor_id: Any, event_id: Any) -> bool:
        if actor_id is None:
            return False
        return self.resolve_event_access(actor_id, event_id).is_organizer

    # =============================================================================
    # CEREMONY ACCESS
    # =============================================================================

    def can_access_ceremony(self, actor_id: Any, ceremony_id: Any) -> bool:
        """
        Check if actor may view a ceremony.

        The organizer of the parent event sees every ceremony. Otherwise the
        ceremony's own visibility decides:
        PUBLIC admits everyone, CONNECTED admits signed-in actors who can view
        the parent event, INVITED_ONLY admits signed-in actors holding an
        invite to this ceremony.
        """
        try:
            ceremony = self.store.get_ceremony_with_event(ceremony_id)
            if ceremony is None:
                logger.debug(f'Ceremony {ceremony_id} not found, denying access to user {actor_id}')
                return False

            if actor_id is not None and actor_id == ceremony.event.owner_id:
                return True

            visibility = _parse_visibility(ceremony.visibility)

            if visibility == Visibility.PUBLIC:
                return True

            if visibility == Visibility.CONNECTED:
                if actor_id is None:
                    return False
                return self.resolve_event_access(actor_id, ceremony.event_id).can_view

            if visibility == Visibility.INVITED_ONLY:
                if actor_id is None:
                    return False
                return self._is_invited_to_ceremony(actor_id, ceremony)

            logger.warning(f'Ceremony {ceremony_id} has unknown visibility {ceremony.visibility!r}')
            return False

        except Exception as e:
            logger.exception(f'Error checking access for user {actor_id}, ceremony {ceremony_id}: {e}')
            return False

    def _is_invited_to_ceremony(self, actor_id: Any, ceremony: CeremonyRecord) -> bool:
        # Direct lookup through the invite's invitee link
        if self.store.find_invite(ceremony.id, actor_id, ADMITTING_INVITE_STATUSES):
            return True

        # Second path through the actor's own invitee record for the parent event.
        # Covers invites created before the invitee was linked to the user.
        invitee_id = self.store.find_invitee_by_event(ceremony.event_id, actor_id)
        if invitee_id is None:
            return False
        return self.store.find_invite_by_ceremony_and_invitee(ceremony.id, invitee_id)

    # =============================================================================
    # BATCH
    # =============================================================================

    def resolve_events_access(self, actor_id: Any, event_ids: Iterable[Any]) -> dict[Any, EventAccess]:
        """
        Resolve access for many events at once (listings, timeline).

        Returns one entry per distinct id. Each resolution is independent, so
        one failing lookup only denies its own event.
        """
        unique_ids = list(dict.fromkeys(event_ids))
        if not unique_ids:
            return {}

        workers = min(self.max_workers, len(unique_ids))
        if workers <= 1:
            return {event_id: self.resolve_event_access(actor_id, event_id) for event_id in unique_ids}

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix='event-access') as executor:
            results = executor.map(lambda event_id: self._resolve_in_worker(actor_id, event_id), unique_ids)
            return dict(zip(unique_ids, results))

    def _resolve_in_worker(self, actor_id: Any, event_id: Any) -> EventAccess:
        try:
            return self.resolve_event_access(actor_id, event_id)
        finally:
            # Pool threads get their own database connections
            try:
                connections.close_all()
            except Exception as e:
                logger.warning(f'Failed to close database connections after resolving event {event_id}: {e}')
