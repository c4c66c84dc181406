from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel


class InviteQuerySet(models.QuerySet):
    """QuerySet for per-ceremony invites"""

    def for_ceremony(self, ceremony_id):
        return self.filter(ceremony_id=ceremony_id)

    def for_user(self, user_id):
        """Invites whose invitee is linked to the user"""
        return self.filter(invitee__user_id=user_id)

    def with_status_in(self, statuses):
        return self.filter(status__in=list(statuses))

    def active(self):
        """Invites that did not fail delivery"""
        return self.exclude(status__in=Invite.FAILED_STATUSES)


class Invite(BaseModel):
    """Delivery record of an invitation to one ceremony for one invitee."""

    class Status(models.TextChoices):
        PENDING = 'PENDING', _('Pending')
        SENT = 'SENT', _('Sent')
        DELIVERED = 'DELIVERED', _('Delivered')
        OPENED = 'OPENED', _('Opened')
        CLICKED = 'CLICKED', _('Clicked')
        FAILED = 'FAILED', _('Failed')
        BOUNCED = 'BOUNCED', _('Bounced')

    FAILED_STATUSES = (Status.FAILED, Status.BOUNCED)

    invitee = models.ForeignKey(
        'events.Invitee',
        on_delete=models.CASCADE,
        related_name='invites',
        verbose_name=_('Invitee'),
    )

    ceremony = models.ForeignKey(
        'events.Ceremony',
        on_delete=models.CASCADE,
        related_name='invites',
        verbose_name=_('Ceremony'),
    )

    status = models.CharField(
        _('Status'),
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )

    sent_at = models.DateTimeField(_('Sent At'), null=True, blank=True)

    objects = InviteQuerySet.as_manager()

    class Meta:
        verbose_name = _('Invite')
        verbose_name_plural = _('Invites')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['ceremony', 'status'], name='invite_ceremony_status_idx'),
            models.Index(fields=['ceremony', 'invitee'], name='invite_ceremony_invitee_idx'),
        ]

    def __str__(self):
        return f'Invite {self.invitee_id} -> ceremony {self.ceremony_id} ({self.status})'
