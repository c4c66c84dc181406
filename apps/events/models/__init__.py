"""
Events models package
"""

from apps.events.models.ceremony import Ceremony
from apps.events.models.event import Event
from apps.events.models.event import EventQuerySet
from apps.events.models.event import Visibility
from apps.events.models.invite import Invite
from apps.events.models.invite import InviteQuerySet
from apps.events.models.invitee import Invitee
from apps.events.models.invitee import InviteeQuerySet

__all__ = [
    'Ceremony',
    'Event',
    'EventQuerySet',
    'Invite',
    'InviteQuerySet',
    'Invitee',
    'InviteeQuerySet',
    'Visibility',
]
