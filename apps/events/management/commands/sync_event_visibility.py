# apps/events/management/commands/sync_event_visibility.py
from django.core.management.base import BaseCommand

from apps.events.dal.event_dal import EventDAL


class Command(BaseCommand):
    """
    Backfill event visibility for rows created before the visibility field.

    Usage: python manage.py sync_event_visibility [--all-public] [--dry-run]
    """

    help = 'Set PUBLIC visibility on events that are public through the legacy is_public flag'

    def add_arguments(self, parser):
        parser.add_argument(
            '--all-public',
            action='store_true',
            help='Make every event PUBLIC, not only those flagged is_public',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Report how many events would change without writing',
        )

    def handle(self, *args, **options):
        dal = EventDAL()
        dry_run = options['dry_run']

        if options['all_public']:
            count = dal.make_all_events_public(dry_run=dry_run)
        else:
            count = dal.sync_legacy_public_visibility(dry_run=dry_run)

        if dry_run:
            self.stdout.write(self.style.WARNING(f'Dry run: {count} events would be updated to PUBLIC visibility'))
        else:
            self.stdout.write(self.style.SUCCESS(f'Updated {count} events to PUBLIC visibility'))
