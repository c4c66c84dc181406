from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel


class InviteeQuerySet(models.QuerySet):
    """QuerySet for invitees"""

    def linked_to(self, event_id, user_id):
        """Invitee records of an event matched to a registered user"""
        return self.filter(event_id=event_id, user_id=user_id)

    def with_rsvp_in(self, statuses):
        return self.filter(rsvp_status__in=list(statuses))

    def unlinked(self):
        """Invitees not yet matched to a user account"""
        return self.filter(user__isnull=True)


class Invitee(BaseModel):
    """A guest of an Event, optionally linked to a user once they register."""

    class RsvpStatus(models.TextChoices):
        PENDING = 'PENDING', _('Pending')
        ACCEPTED = 'ACCEPTED', _('Accepted')
        DECLINED = 'DECLINED', _('Declined')
        MAYBE = 'MAYBE', _('Maybe')

    event = models.ForeignKey(
        'events.Event',
        on_delete=models.CASCADE,
        related_name='invitees',
        verbose_name=_('Event'),
        db_index=True,
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name='invitee_records',
        verbose_name=_('Linked User'),
        null=True,
        blank=True,
        db_index=True,
    )

    name = models.CharField(_('Name'), max_length=255)

    email = models.EmailField(_('Email'), blank=True, default='')

    role = models.CharField(_('Role'), max_length=100, blank=True, null=True)

    rsvp_status = models.CharField(
        _('RSVP Status'),
        max_length=20,
        choices=RsvpStatus.choices,
        default=RsvpStatus.PENDING,
        db_index=True,
    )

    objects = InviteeQuerySet.as_manager()

    class Meta:
        verbose_name = _('Invitee')
        verbose_name_plural = _('Invitees')
        ordering = ['event', 'created_at']
        indexes = [
            models.Index(fields=['event', 'user'], name='invitee_event_user_idx'),
            models.Index(fields=['event', 'rsvp_status'], name='invitee_event_rsvp_idx'),
        ]

    def __str__(self):
        return f'{self.name} - {self.get_rsvp_status_display()}'

    def save(self, *args, **kwargs):
        if self.name:
            self.name = self.name.strip()
        if self.email:
            self.email = self.email.lower().strip()
        super().save(*args, **kwargs)
