"""
Show email engagement stats from the tracking tables.

Usage:
    python manage.py tracking_stats                   # Totals and rates
    python manage.py tracking_stats --type inactive   # ...plus contacts that never opened
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS

from core.exceptions import PersistenceError
from tracking.repositories import ENGAGEMENT_FILTERS
from tracking.services import get_tracking_service


class Command(BaseCommand):
    help = "Show email open/click stats and list contacts by engagement"

    def add_arguments(self, parser):
        parser.add_argument(
            "--type", choices=sorted(ENGAGEMENT_FILTERS), default=None,
            help="Also list contacts in this segment",
        )
        parser.add_argument(
            "--database", default=DEFAULT_DB_ALIAS,
            help="Database alias to read from (default: %(default)s)",
        )

    def handle(self, *args, **options):
        service = get_tracking_service(using=options["database"])

        try:
            stats = service.stats()
            contacts = service.filter_contacts(options["type"]) if options["type"] else []
        except PersistenceError as e:
            raise CommandError(e.message)

        self.stdout.write(self.style.MIGRATE_HEADING("Email engagement"))
        self.stdout.write(f"  Contacts:   {stats['total']}")
        self.stdout.write(f"  Opened:     {stats['opened']} ({stats['openRate']})")
        self.stdout.write(f"  Clicked:    {stats['clicked']} ({stats['clickRate']})")

        if options["type"]:
            self.stdout.write("")
            self.stdout.write(self.style.MIGRATE_HEADING(
                f"{options['type'].capitalize()} contacts ({len(contacts)})"
            ))
            for contact in contacts:
                label = f"{contact.name} <{contact.email}>" if contact.name else contact.email
                self.stdout.write(f"  {label}")
