"""
Management command to create sample brews for local development.

Usage:
    python manage.py create_sample_brews
    python manage.py create_sample_brews --count 50 --days 14
    python manage.py create_sample_brews --dry-run

Brews are spread randomly over the last ``--days`` days and written through
the same store adapter the page uses, so each gets a shift from its
timestamp exactly like a real submission.
"""

import random
from datetime import timedelta

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from apps.brews.models import BrewRecord
from apps.brews.services import DatabaseRecordStore, StoreError, classify_shift


class Command(BaseCommand):
    help = 'Create sample espresso brews spread over recent days'

    def add_arguments(self, parser):
        parser.add_argument(
            '--count',
            type=int,
            default=20,
            help='Number of brews to create (default: 20)',
        )
        parser.add_argument(
            '--days',
            type=int,
            default=7,
            help='Spread brews over this many past days (default: 7)',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be created without saving anything',
        )

    def handle(self, *args, **options):
        count = options['count']
        days = options['days']

        if count < 1 or days < 1:
            raise CommandError('--count and --days must be positive')

        now = timezone.now()
        store = DatabaseRecordStore()

        self.stdout.write(f'\nCreating {count} brew(s) over the last {days} day(s):\n')

        for _ in range(count):
            timestamp = now - timedelta(seconds=random.randint(0, days * 24 * 3600))
            brew = BrewRecord(
                extraction_weight=round(random.uniform(32.0, 42.0), 1),
                extraction_time=round(random.uniform(24.0, 34.0), 1),
                grind_time=round(random.uniform(9.0, 14.0), 1),
                timestamp=timestamp,
                shift=classify_shift(timestamp),
            )
            self.stdout.write(
                f'  - {timezone.localtime(timestamp):%d/%m/%Y %H:%M} | {brew.shift} | '
                f'{brew.extraction_weight} g | {brew.extraction_time} s | {brew.grind_time} s'
            )

            if options['dry_run']:
                continue

            try:
                store.append(brew)
            except StoreError as e:
                raise CommandError(str(e)) from e

        if options['dry_run']:
            self.stdout.write(
                self.style.WARNING('\n--dry-run mode: No changes made.')
            )
            return

        self.stdout.write(
            self.style.SUCCESS(f'\n✓ Successfully created {count} brew(s)!')
        )
