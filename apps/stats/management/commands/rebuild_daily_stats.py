"""
Management command to recompute daily stats from the transaction table.

Repairs drift in the incrementally maintained aggregate.

Usage:
    python manage.py rebuild_daily_stats
    python manage.py rebuild_daily_stats --start 2024-01-01 --end 2024-01-31
"""

from datetime import date

from django.core.management.base import BaseCommand, CommandError

from apps.stats.services import rebuild_daily_stats


def _parse_day(value):
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise CommandError(f"Invalid date '{value}', expected YYYY-MM-DD")


class Command(BaseCommand):
    help = 'Recompute daily stats rows from transactions'

    def add_arguments(self, parser):
        parser.add_argument('--start', help='First day to rebuild (YYYY-MM-DD)')
        parser.add_argument('--end', help='Last day to rebuild (YYYY-MM-DD)')

    def handle(self, *args, **options):
        start = _parse_day(options['start']) if options['start'] else None
        end = _parse_day(options['end']) if options['end'] else None

        if start and end and start > end:
            raise CommandError('--start must not be after --end')

        written = rebuild_daily_stats(start, end)

        self.stdout.write(
            self.style.SUCCESS(f'Rebuilt {written} daily stats row(s).')
        )
