"""
Value types exchanged between the access store and the access engine.

Records are projections of the ORM rows: only the columns the decisions
read. EventAccess is the decision handed back to callers.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EventRecord:
    id: Any
    owner_id: Any
    is_public: bool
    visibility: str
    status: str


@dataclass(frozen=True)
class ParentEventRecord:
    owner_id: Any
    visibility: str
    is_public: bool


@dataclass(frozen=True)
class CeremonyRecord:
    id: Any
    event_id: Any
    visibility: str
    event: ParentEventRecord


@dataclass(frozen=True)
class InviteeSummary:
    id: Any
    rsvp_status: str
    role: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {'id': self.id, 'rsvp_status': self.rsvp_status, 'role': self.role}


@dataclass(frozen=True)
class EventAccess:
    """What an actor may do with one event."""

    can_view: bool
    can_interact: bool
    is_organizer: bool
    invitee: InviteeSummary | None = None

    @classmethod
    def denied(cls) -> 'EventAccess':
        """The decision for missing events, forbidden events and lookup failures alike."""
        return cls(can_view=False, can_interact=False, is_organizer=False)

    @classmethod
    def organizer(cls) -> 'EventAccess':
        return cls(can_view=True, can_interact=True, is_organizer=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            'can_view': self.can_view,
            'can_interact': self.can_interact,
            'is_organizer': self.is_organizer,
            'invitee': self.invitee.to_dict() if self.invitee else None,
        }
