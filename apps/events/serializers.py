"""
Event access serializers

Decisions are plain dataclasses, so the access serializers are plain
Serializers fed with EventAccess.to_dict().
"""

from rest_framework import serializers

from apps.events.models import Ceremony
from apps.events.models import Event

MAX_BATCH_EVENT_IDS = 200

# =============================================================================
# ACCESS DECISION SERIALIZERS
# =============================================================================


class InviteeSummarySerializer(serializers.Serializer):
    """Invitee record that granted interaction"""

    id = serializers.IntegerField()
    rsvp_status = serializers.CharField()
    role = serializers.CharField(allow_null=True, required=False)


class EventAccessSerializer(serializers.Serializer):
    """View/interact decision for one event"""

    can_view = serializers.BooleanField()
    can_interact = serializers.BooleanField()
    is_organizer = serializers.BooleanField()
    invitee = InviteeSummarySerializer(allow_null=True, required=False)


class EventsAccessQuerySerializer(serializers.Serializer):
    """Batch access request body"""

    event_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        allow_empty=True,
        max_length=MAX_BATCH_EVENT_IDS,
    )


class EventsAccessResponseSerializer(serializers.Serializer):
    access = serializers.DictField(child=EventAccessSerializer())


class CeremonyAccessSerializer(serializers.Serializer):
    ceremony_id = serializers.IntegerField()
    can_access = serializers.BooleanField()


# =============================================================================
# RESOURCE SERIALIZERS
# =============================================================================


class EventSummarySerializer(serializers.ModelSerializer):
    """Event fields shown to anyone allowed to view it"""

    owner_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Event
        fields = ['id', 'title', 'slug', 'description', 'visibility', 'status', 'owner_id', 'created_at']
        read_only_fields = fields


class EventWithAccessSerializer(serializers.Serializer):
    event = EventSummarySerializer()
    access = EventAccessSerializer()


class CeremonySerializer(serializers.ModelSerializer):
    event_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Ceremony
        fields = ['id', 'event_id', 'name', 'visibility', 'created_at']
        read_only_fields = fields
