from django.test import TestCase

from apps.events.access_types import EventAccess
from apps.events.dal.access_dal import EventAccessDAL
from apps.events.models import Event
from apps.events.models import Invite
from apps.events.models import Invitee
from apps.events.models import Visibility
from apps.events.services.access_service import EventAccessService
from apps.events.tests.factories import CeremonyFactory
from apps.events.tests.factories import EventFactory
from apps.events.tests.factories import InviteeFactory
from apps.events.tests.factories import InviteFactory
from apps.events.tests.factories import LegacyPublicEventFactory
from apps.events.tests.factories import PrivateEventFactory
from apps.events.tests.factories import UserFactory


class EventModelTest(TestCase):
    def test_defaults(self):
        event = Event.objects.create(owner=UserFactory(), title='Garden party')

        self.assertEqual(event.visibility, Visibility.PUBLIC)
        self.assertEqual(event.status, Event.Status.DRAFT)

    def test_public_visibility_sets_legacy_flag(self):
        event = EventFactory(visibility=Visibility.PUBLIC, is_public=False)

        event.refresh_from_db()
        self.assertTrue(event.is_public)

    def test_other_visibility_clears_legacy_flag(self):
        self.assertFalse(PrivateEventFactory(is_public=True).is_public)

    def test_making_public_event_private_hides_it_from_anonymous(self):
        event = EventFactory(visibility=Visibility.PUBLIC)
        self.assertTrue(event.is_public)

        event.visibility = Visibility.INVITED_ONLY
        event.save()

        event.refresh_from_db()
        self.assertFalse(event.is_public)
        access = EventAccessService(store=EventAccessDAL(), max_workers=1).resolve_event_access(None, event.pk)
        self.assertEqual(access, EventAccess.denied())

    def test_legacy_rows_keep_their_flag_until_saved(self):
        event = LegacyPublicEventFactory()

        event.refresh_from_db()
        self.assertTrue(event.is_public)
        self.assertEqual(event.visibility, Visibility.INVITED_ONLY)

    def test_slug_is_generated_and_unique(self):
        owner = UserFactory()
        first = EventFactory(owner=owner, title='  Our Wedding ')
        second = EventFactory(owner=owner, title='Our Wedding')

        self.assertEqual(first.title, 'Our Wedding')
        self.assertTrue(first.slug.startswith('our-wedding-'))
        self.assertNotEqual(first.slug, second.slug)

    def test_querysets(self):
        owner = UserFactory()
        public = EventFactory(owner=owner)
        legacy = LegacyPublicEventFactory()
        private = PrivateEventFactory(owner=owner)

        self.assertCountEqual(Event.objects.for_owner(owner.pk), [public, private])
        self.assertCountEqual(Event.objects.publicly_visible(), [public, legacy])
        self.assertCountEqual(Event.objects.visibility_out_of_sync(), [legacy])


class InviteeModelTest(TestCase):
    def test_save_normalizes_name_and_email(self):
        invitee = InviteeFactory(name='  Ann Lee ', email='Ann.Lee@Example.COM')

        self.assertEqual(invitee.name, 'Ann Lee')
        self.assertEqual(invitee.email, 'ann.lee@example.com')

    def test_querysets(self):
        user = UserFactory()
        event = EventFactory()
        linked = InviteeFactory(event=event, user=user, rsvp_status=Invitee.RsvpStatus.MAYBE)
        unlinked = InviteeFactory(event=event)

        self.assertCountEqual(Invitee.objects.linked_to(event.pk, user.pk), [linked])
        self.assertCountEqual(Invitee.objects.unlinked(), [unlinked])
        self.assertCountEqual(Invitee.objects.with_rsvp_in([Invitee.RsvpStatus.MAYBE]), [linked])


class InviteModelTest(TestCase):
    def test_querysets(self):
        user = UserFactory()
        ceremony = CeremonyFactory()
        invitee = InviteeFactory(event=ceremony.event, user=user)
        sent = InviteFactory(invitee=invitee, ceremony=ceremony)
        bounced = InviteFactory(
            invitee=InviteeFactory(event=ceremony.event), ceremony=ceremony, status=Invite.Status.BOUNCED
        )

        self.assertCountEqual(Invite.objects.for_ceremony(ceremony.pk), [sent, bounced])
        self.assertCountEqual(Invite.objects.for_user(user.pk), [sent])
        self.assertCountEqual(Invite.objects.active(), [sent])
        self.assertCountEqual(Invite.objects.with_status_in([Invite.Status.BOUNCED]), [bounced])
