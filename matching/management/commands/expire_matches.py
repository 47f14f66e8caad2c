"""
Expire pending matches that nobody acted on.

Usage:
    python manage.py expire_matches                 # older than match_expiry_days
    python manage.py expire_matches --days 14
    python manage.py expire_matches --dry-run       # report only
"""

from django.core.management.base import BaseCommand

from core.exceptions import ConflictError
from matching.services import MatchLifecycleService


class Command(BaseCommand):
    help = 'Move stale pending matches to expired'

    def add_arguments(self, parser):
        parser.add_argument(
            '--days', type=int, default=None,
            help='Age in days after which a pending match expires (default: FOUNDIC_CONFIG match_expiry_days)',
        )
        parser.add_argument(
            '--dry-run', action='store_true',
            help='List matches that would expire without changing them',
        )

    def handle(self, *args, **options):
        stale = list(MatchLifecycleService.stale_pending(options['days']).order_by('id'))

        if options['dry_run']:
            for match in stale:
                self.stdout.write(f'  would expire match #{match.pk} ({match.created_at:%Y-%m-%d})')
            self.stdout.write(f'{len(stale)} matches would expire')
            return

        expired = 0
        for match in stale:
            try:
                MatchLifecycleService(match).expire()
                expired += 1
            except ConflictError:
                # acted on since it was selected
                continue

        self.stdout.write(self.style.SUCCESS(f'Expired {expired} matches'))
