from unittest.mock import Mock

from django.contrib.auth.models import AnonymousUser
from django.test import SimpleTestCase
from rest_framework.test import APIRequestFactory

from apps.events.access_types import EventAccess
from apps.events.models import Ceremony
from apps.events.models import Event
from apps.events.models import Invitee
from apps.events.permissions import CanAccessCeremony
from apps.events.permissions import CanInteractWithEvent
from apps.events.permissions import CanViewEvent
from apps.events.permissions import IsEventOrganizer


class EventPermissionsTest(SimpleTestCase):
    """Permission classes delegate to the access service with the request's actor"""

    def setUp(self):
        self.factory = APIRequestFactory()
        self.service = Mock()
        self.user = Mock(id=7, is_authenticated=True)
        self.event = Event(pk=10)

    def make_permission(self, permission_class):
        permission = permission_class()
        permission.access_service = self.service
        return permission

    def make_request(self, user):
        request = self.factory.get('/')
        request.user = user
        return request

    def test_can_view_event(self):
        self.service.resolve_event_access.return_value = EventAccess(can_view=True, can_interact=False, is_organizer=False)

        allowed = self.make_permission(CanViewEvent).has_object_permission(self.make_request(self.user), None, self.event)

        self.assertTrue(allowed)
        self.service.resolve_event_access.assert_called_once_with(7, 10)

    def test_can_view_event_leaves_decision_on_view(self):
        access = EventAccess(can_view=True, can_interact=True, is_organizer=False)
        self.service.resolve_event_access.return_value = access
        view = Mock(spec=[])

        self.make_permission(CanViewEvent).has_object_permission(self.make_request(self.user), view, self.event)

        self.assertIs(view.event_access, access)

    def test_can_view_event_as_anonymous(self):
        self.service.resolve_event_access.return_value = EventAccess.denied()

        allowed = self.make_permission(CanViewEvent).has_object_permission(
            self.make_request(AnonymousUser()), None, self.event
        )

        self.assertFalse(allowed)
        self.service.resolve_event_access.assert_called_once_with(None, 10)

    def test_event_is_read_from_related_object(self):
        self.service.can_interact.return_value = True
        invitee = Invitee(event_id=10)

        allowed = self.make_permission(CanInteractWithEvent).has_object_permission(
            self.make_request(self.user), None, invitee
        )

        self.assertTrue(allowed)
        self.service.can_interact.assert_called_once_with(7, 10)

    def test_object_without_event_is_denied(self):
        allowed = self.make_permission(CanViewEvent).has_object_permission(self.make_request(self.user), None, object())

        self.assertFalse(allowed)
        self.service.resolve_event_access.assert_not_called()

    def test_is_event_organizer(self):
        self.service.is_event_organizer.return_value = False

        allowed = self.make_permission(IsEventOrganizer).has_object_permission(
            self.make_request(self.user), None, self.event
        )

        self.assertFalse(allowed)
        self.service.is_event_organizer.assert_called_once_with(7, 10)

    def test_can_access_ceremony(self):
        self.service.can_access_ceremony.return_value = True
        ceremony = Ceremony(pk=20, event_id=10)

        allowed = self.make_permission(CanAccessCeremony).has_object_permission(
            self.make_request(self.user), None, ceremony
        )

        self.assertTrue(allowed)
        self.service.can_access_ceremony.assert_called_once_with(7, 20)

    def test_can_access_ceremony_rejects_other_objects(self):
        allowed = self.make_permission(CanAccessCeremony).has_object_permission(
            self.make_request(self.user), None, self.event
        )

        self.assertFalse(allowed)
        self.service.can_access_ceremony.assert_not_called()
