import uuid

from django.conf import settings
from django.db import models
from django.utils.text import slugify
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel


class Visibility(models.TextChoices):
    """Who may see an event or a ceremony. Shared by both models."""

    PUBLIC = 'PUBLIC', _('Public')
    CONNECTED = 'CONNECTED', _('Connected')
    INVITED_ONLY = 'INVITED_ONLY', _('Invited Only')


class EventQuerySet(models.QuerySet):
    """QuerySet for events"""

    def for_owner(self, user_id):
        """Events owned by specific user"""
        return self.filter(owner_id=user_id)

    def publicly_visible(self):
        """Events an anonymous visitor may see"""
        return self.filter(models.Q(visibility=Visibility.PUBLIC) | models.Q(is_public=True))

    def visibility_out_of_sync(self):
        """Legacy public events whose visibility was never set to PUBLIC"""
        return self.filter(is_public=True).exclude(visibility=Visibility.PUBLIC)


class Event(BaseModel):
    """
    An organizer's event (wedding, celebration...) made of ceremonies.

    `visibility` is the primary authority for anonymous access; `is_public`
    is kept for older rows and only ever widens access.
    """

    class Status(models.TextChoices):
        DRAFT = 'DRAFT', _('Draft')
        PUBLISHED = 'PUBLISHED', _('Published')
        LIVE = 'LIVE', _('Live')
        COMPLETED = 'COMPLETED', _('Completed')
        CANCELLED = 'CANCELLED', _('Cancelled')

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='owned_events',
        verbose_name=_('Event Owner'),
        db_index=True,
    )

    title = models.CharField(_('Title'), max_length=255)

    slug = models.SlugField(_('Slug'), max_length=280, unique=True, blank=True)

    description = models.TextField(_('Description'), blank=True, default='')

    is_public = models.BooleanField(_('Public Event (legacy)'), default=False)

    visibility = models.CharField(
        _('Visibility'),
        max_length=20,
        choices=Visibility.choices,
        default=Visibility.PUBLIC,
        db_index=True,
    )

    status = models.CharField(
        _('Status'),
        max_length=20,
        choices=Status.choices,
        default=Status.DRAFT,
        db_index=True,
    )

    objects = EventQuerySet.as_manager()

    class Meta:
        verbose_name = _('Event')
        verbose_name_plural = _('Events')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['owner', 'status'], name='event_owner_status_idx'),
            models.Index(fields=['visibility', 'is_public'], name='event_visibility_idx'),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if self.title:
            self.title = self.title.strip()
        if not self.slug:
            self.slug = f'{slugify(self.title)[:250]}-{uuid.uuid4().hex[:8]}'

        # Legacy flag mirrors visibility on every save
        self.is_public = self.visibility == Visibility.PUBLIC

        super().save(*args, **kwargs)
