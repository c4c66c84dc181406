import django.db.models.deletion
from django.conf import settings
from django.db import migrations
from django.db import models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=255, verbose_name='Title')),
                ('slug', models.SlugField(blank=True, max_length=280, unique=True, verbose_name='Slug')),
                ('description', models.TextField(blank=True, default='', verbose_name='Description')),
                ('is_public', models.BooleanField(default=False, verbose_name='Public Event (legacy)')),
                (
                    'visibility',
                    models.CharField(
                        choices=[('PUBLIC', 'Public'), ('CONNECTED', 'Connected'), ('INVITED_ONLY', 'Invited Only')],
                        db_index=True,
                        default='PUBLIC',
                        max_length=20,
                        verbose_name='Visibility',
                    ),
                ),
                (
                    'status',
                    models.CharField(
                        choices=[
                            ('DRAFT', 'Draft'),
                            ('PUBLISHED', 'Published'),
                            ('LIVE', 'Live'),
                            ('COMPLETED', 'Completed'),
                            ('CANCELLED', 'Cancelled'),
                        ],
                        db_index=True,
                        default='DRAFT',
                        max_length=20,
                        verbose_name='Status',
                    ),
                ),
                (
                    'owner',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='owned_events',
                        to=settings.AUTH_USER_MODEL,
                        verbose_name='Event Owner',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Event',
                'verbose_name_plural': 'Events',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['owner', 'status'], name='event_owner_status_idx'),
                    models.Index(fields=['visibility', 'is_public'], name='event_visibility_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Ceremony',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                (
                    'visibility',
                    models.CharField(
                        choices=[('PUBLIC', 'Public'), ('CONNECTED', 'Connected'), ('INVITED_ONLY', 'Invited Only')],
                        default='PUBLIC',
                        max_length=20,
                        verbose_name='Visibility',
                    ),
                ),
                (
                    'event',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='ceremonies',
                        to='events.event',
                        verbose_name='Event',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Ceremony',
                'verbose_name_plural': 'Ceremonies',
                'ordering': ['event', 'created_at'],
            },
        ),
        migrations.CreateModel(
            name='Invitee',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('email', models.EmailField(blank=True, default='', max_length=254, verbose_name='Email')),
                ('role', models.CharField(blank=True, max_length=100, null=True, verbose_name='Role')),
                (
                    'rsvp_status',
                    models.CharField(
                        choices=[
                            ('PENDING', 'Pending'),
                            ('ACCEPTED', 'Accepted'),
                            ('DECLINED', 'Declined'),
                            ('MAYBE', 'Maybe'),
                        ],
                        db_index=True,
                        default='PENDING',
                        max_length=20,
                        verbose_name='RSVP Status',
                    ),
                ),
                (
                    'event',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='invitees',
                        to='events.event',
                        verbose_name='Event',
                    ),
                ),
                (
                    'user',
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name='invitee_records',
                        to=settings.AUTH_USER_MODEL,
                        verbose_name='Linked User',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Invitee',
                'verbose_name_plural': 'Invitees',
                'ordering': ['event', 'created_at'],
                'indexes': [
                    models.Index(fields=['event', 'user'], name='invitee_event_user_idx'),
                    models.Index(fields=['event', 'rsvp_status'], name='invitee_event_rsvp_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Invite',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                (
                    'status',
                    models.CharField(
                        choices=[
                            ('PENDING', 'Pending'),
                            ('SENT', 'Sent'),
                            ('DELIVERED', 'Delivered'),
                            ('OPENED', 'Opened'),
                            ('CLICKED', 'Clicked'),
                            ('FAILED', 'Failed'),
                            ('BOUNCED', 'Bounced'),
                        ],
                        db_index=True,
                        default='PENDING',
                        max_length=20,
                        verbose_name='Status',
                    ),
                ),
                ('sent_at', models.DateTimeField(blank=True, null=True, verbose_name='Sent At')),
                (
                    'ceremony',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='invites',
                        to='events.ceremony',
                        verbose_name='Ceremony',
                    ),
                ),
                (
                    'invitee',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='invites',
                        to='events.invitee',
                        verbose_name='Invitee',
                    ),
                ),
            ],
            options={
                'verbose_name': 'Invite',
                'verbose_name_plural': 'Invites',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['ceremony', 'status'], name='invite_ceremony_status_idx'),
                    models.Index(fields=['ceremony', 'invitee'], name='invite_ceremony_invitee_idx'),
                ],
            },
        ),
    ]
