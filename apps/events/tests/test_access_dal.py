from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase
from django.test import TransactionTestCase

from apps.events.access_types import EventAccess
from apps.events.access_types import EventRecord
from apps.events.access_types import InviteeSummary
from apps.events.dal.access_dal import EventAccessDAL
from apps.events.models import Event
from apps.events.models import Invite
from apps.events.models import Invitee
from apps.events.models import Visibility
from apps.events.services.access_service import ADMITTING_INVITE_STATUSES
from apps.events.services.access_service import INTERACTIVE_RSVP_STATUSES
from apps.events.services.access_service import EventAccessService
from apps.events.tests.factories import AcceptedInviteeFactory
from apps.events.tests.factories import CeremonyFactory
from apps.events.tests.factories import DeclinedInviteeFactory
from apps.events.tests.factories import EventFactory
from apps.events.tests.factories import InviteeFactory
from apps.events.tests.factories import InviteFactory
from apps.events.tests.factories import PrivateEventFactory
from apps.events.tests.factories import UserFactory
from apps.shared.exceptions import ServiceUnavailableError


class EventAccessDALTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.owner = UserFactory()
        cls.guest = UserFactory()
        cls.event = PrivateEventFactory(owner=cls.owner)
        cls.ceremony = CeremonyFactory(event=cls.event, visibility=Visibility.INVITED_ONLY)

    def setUp(self):
        self.dal = EventAccessDAL()

    def test_get_event(self):
        record = self.dal.get_event(self.event.pk)

        self.assertEqual(
            record,
            EventRecord(
                id=self.event.pk,
                owner_id=self.owner.pk,
                is_public=False,
                visibility=Visibility.INVITED_ONLY,
                status=self.event.status,
            ),
        )

    def test_get_missing_event(self):
        self.assertIsNone(self.dal.get_event(0))

    def test_get_ceremony_with_event(self):
        record = self.dal.get_ceremony_with_event(self.ceremony.pk)

        self.assertEqual(record.id, self.ceremony.pk)
        self.assertEqual(record.event_id, self.event.pk)
        self.assertEqual(record.visibility, Visibility.INVITED_ONLY)
        self.assertEqual(record.event.owner_id, self.owner.pk)
        self.assertEqual(record.event.visibility, Visibility.INVITED_ONLY)
        self.assertFalse(record.event.is_public)

    def test_get_missing_ceremony(self):
        self.assertIsNone(self.dal.get_ceremony_with_event(0))

    def test_find_invitee_filters_by_rsvp(self):
        invitee = AcceptedInviteeFactory(event=self.event, user=self.guest)

        found = self.dal.find_invitee(self.event.pk, self.guest.pk, INTERACTIVE_RSVP_STATUSES)

        self.assertEqual(found, InviteeSummary(id=invitee.pk, rsvp_status=Invitee.RsvpStatus.ACCEPTED, role='family'))
        self.assertIsNone(self.dal.find_invitee(self.event.pk, self.guest.pk, [Invitee.RsvpStatus.DECLINED]))

    def test_find_invitee_ignores_declined_and_unlinked(self):
        DeclinedInviteeFactory(event=self.event, user=self.guest)
        InviteeFactory(event=self.event, user=None)

        self.assertIsNone(self.dal.find_invitee(self.event.pk, self.guest.pk, INTERACTIVE_RSVP_STATUSES))

    def test_find_invite(self):
        invitee = InviteeFactory(event=self.event, user=self.guest)
        InviteFactory(invitee=invitee, ceremony=self.ceremony, status=Invite.Status.DELIVERED)

        self.assertTrue(self.dal.find_invite(self.ceremony.pk, self.guest.pk, ADMITTING_INVITE_STATUSES))
        self.assertFalse(self.dal.find_invite(self.ceremony.pk, self.owner.pk, ADMITTING_INVITE_STATUSES))

    def test_find_invite_skips_failed_statuses(self):
        invitee = InviteeFactory(event=self.event, user=self.guest)
        InviteFactory(invitee=invitee, ceremony=self.ceremony, status=Invite.Status.BOUNCED)

        self.assertFalse(self.dal.find_invite(self.ceremony.pk, self.guest.pk, ADMITTING_INVITE_STATUSES))

    def test_find_invitee_by_event_ignores_rsvp(self):
        invitee = DeclinedInviteeFactory(event=self.event, user=self.guest)

        self.assertEqual(self.dal.find_invitee_by_event(self.event.pk, self.guest.pk), invitee.pk)
        self.assertIsNone(self.dal.find_invitee_by_event(self.event.pk, self.owner.pk))

    def test_find_invite_by_ceremony_and_invitee(self):
        invitee = InviteeFactory(event=self.event, user=self.guest)
        other = InviteeFactory(event=self.event)
        InviteFactory(invitee=invitee, ceremony=self.ceremony, status=Invite.Status.FAILED)

        self.assertTrue(self.dal.find_invite_by_ceremony_and_invitee(self.ceremony.pk, invitee.pk))
        self.assertFalse(self.dal.find_invite_by_ceremony_and_invitee(self.ceremony.pk, other.pk))

    def test_database_error_becomes_service_unavailable(self):
        with patch('apps.events.models.Event.objects.filter', side_effect=DatabaseError('connection lost')):
            with self.assertRaises(ServiceUnavailableError):
                self.dal.get_event(self.event.pk)


class EventAccessServiceWithDatabaseTest(TestCase):
    """Access decisions end to end through the ORM store"""

    @classmethod
    def setUpTestData(cls):
        cls.owner = UserFactory()
        cls.guest = UserFactory()
        cls.stranger = UserFactory()
        cls.public_event = EventFactory(owner=cls.owner)
        cls.private_event = PrivateEventFactory(owner=cls.owner)
        cls.invitee = AcceptedInviteeFactory(event=cls.private_event, user=cls.guest)

    def setUp(self):
        self.service = EventAccessService(store=EventAccessDAL(), max_workers=1)

    def test_anonymous_access(self):
        self.assertTrue(self.service.resolve_event_access(None, self.public_event.pk).can_view)
        self.assertEqual(self.service.resolve_event_access(None, self.private_event.pk), EventAccess.denied())

    def test_guest_access(self):
        access = self.service.resolve_event_access(self.guest.pk, self.private_event.pk)

        self.assertTrue(access.can_interact)
        self.assertEqual(access.invitee.id, self.invitee.pk)

    def test_ceremony_invite_through_database(self):
        ceremony = CeremonyFactory(event=self.private_event, visibility=Visibility.INVITED_ONLY)
        InviteFactory(invitee=self.invitee, ceremony=ceremony)

        self.assertTrue(self.service.can_access_ceremony(self.guest.pk, ceremony.pk))
        self.assertFalse(self.service.can_access_ceremony(self.stranger.pk, ceremony.pk))
        self.assertTrue(self.service.can_access_ceremony(self.owner.pk, ceremony.pk))

    def test_batch_through_database(self):
        result = self.service.resolve_events_access(
            self.stranger.pk, [self.public_event.pk, self.private_event.pk, 0]
        )

        self.assertTrue(result[self.public_event.pk].can_view)
        self.assertFalse(result[self.private_event.pk].can_interact)
        self.assertEqual(result[0], EventAccess.denied())

    def test_database_error_is_denied(self):
        with patch('apps.events.models.Event.objects.filter', side_effect=DatabaseError('connection lost')):
            with self.assertLogs('apps.events.services.access_service', level='ERROR'):
                access = self.service.resolve_event_access(self.owner.pk, self.public_event.pk)

        self.assertEqual(access, EventAccess.denied())


class ThreadedBatchWithDatabaseTest(TransactionTestCase):
    """Batch resolution on pool threads; rows are committed so worker connections can read them"""

    def setUp(self):
        self.owner = UserFactory()
        self.guest = UserFactory()
        self.events = [
            EventFactory(owner=self.owner),
            PrivateEventFactory(owner=self.owner),
            PrivateEventFactory(owner=self.guest),
            EventFactory(),
        ]
        AcceptedInviteeFactory(event=self.events[1], user=self.guest)
        self.service = EventAccessService(store=EventAccessDAL(), max_workers=4)

    def test_threaded_batch_matches_single_resolutions(self):
        event_ids = [event.pk for event in self.events] + [0]

        result = self.service.resolve_events_access(self.guest.pk, event_ids)

        self.assertEqual(list(result), event_ids)
        for event_id in event_ids:
            self.assertEqual(result[event_id], self.service.resolve_event_access(self.guest.pk, event_id))
        self.assertTrue(result[self.events[1].pk].can_interact)
        self.assertTrue(result[self.events[2].pk].is_organizer)
        self.assertEqual(result[0], EventAccess.denied())

    def test_caller_connection_survives_worker_cleanup(self):
        self.service.resolve_events_access(None, [event.pk for event in self.events])

        self.assertEqual(Event.objects.count(), len(self.events))
