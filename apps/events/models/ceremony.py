from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.events.models.event import Visibility
from apps.shared.base.models import BaseModel


class Ceremony(BaseModel):
    """A sub-event of an Event (e.g. mehndi, reception) with its own visibility."""

    event = models.ForeignKey(
        'events.Event',
        on_delete=models.CASCADE,
        related_name='ceremonies',
        verbose_name=_('Event'),
        db_index=True,
    )

    name = models.CharField(_('Name'), max_length=255)

    visibility = models.CharField(
        _('Visibility'),
        max_length=20,
        choices=Visibility.choices,
        default=Visibility.PUBLIC,
    )

    class Meta:
        verbose_name = _('Ceremony')
        verbose_name_plural = _('Ceremonies')
        ordering = ['event', 'created_at']

    def __str__(self):
        return f'{self.name} ({self.event_id})'
