"""
Access Store Interface

The read-only lookups the access-control engine needs from persistence.
The engine depends on this interface rather than on the ORM, so it can be
exercised with an in-memory store in tests and wired to the Django DAL in
production.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from apps.events.access_types import CeremonyRecord
    from apps.events.access_types import EventRecord
    from apps.events.access_types import InviteeSummary


class IAccessStore(ABC):
    """
    Read-only view over events, ceremonies, invitees and invites.

    Implementations may raise on infrastructure failures; callers in the
    access engine are responsible for converting those into denials.
    """

    @abstractmethod
    def get_event(self, event_id: Any) -> EventRecord | None:
        """
        Fetch the access-relevant view of an event.

        Returns:
            EventRecord with id, owner_id, is_public, visibility, status,
            or None when no such event exists
        """

    @abstractmethod
    def get_ceremony_with_event(self, ceremony_id: Any) -> CeremonyRecord | None:
        """
        Fetch a ceremony together with its parent event's owner_id,
        visibility and is_public. None when the ceremony doesn't exist.
        """

    @abstractmethod
    def find_invitee(self, event_id: Any, user_id: Any, rsvp_statuses: Iterable[str]) -> InviteeSummary | None:
        """
        Find the invitee of an event linked to a user, restricted to the
        given RSVP statuses.

        Returns:
            InviteeSummary (id, rsvp_status, role) or None
        """

    @abstractmethod
    def find_invite(self, ceremony_id: Any, invitee_user_id: Any, statuses: Iterable[str]) -> bool:
        """
        Check whether an invite for the ceremony exists whose invitee is
        linked to the user and whose status is one of the given statuses.
        """

    @abstractmethod
    def find_invitee_by_event(self, event_id: Any, user_id: Any) -> Any | None:
        """Return the id of the user's invitee record for the event, regardless of RSVP, or None."""

    @abstractmethod
    def find_invite_by_ceremony_and_invitee(self, ceremony_id: Any, invitee_id: Any) -> bool:
        """Check whether the invitee has any invite row for the ceremony."""
