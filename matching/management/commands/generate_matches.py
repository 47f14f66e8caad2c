"""
Run match generation for every active founder.

Usage:
    python manage.py generate_matches
    python manage.py generate_matches --limit 50         # first 50 founders only
    python manage.py generate_matches --threshold 70     # override match_threshold
"""

from django.core.management.base import BaseCommand

from core.models import User
from matching.services import MatchGenerationService


class Command(BaseCommand):
    help = 'Propose pending matches for every active founder'

    def add_arguments(self, parser):
        parser.add_argument(
            '--limit', type=int, default=0,
            help='Limit number of founders processed (0 = all)',
        )
        parser.add_argument(
            '--threshold', type=int, default=None,
            help='Minimum overall score (default: FOUNDIC_CONFIG match_threshold)',
        )

    def handle(self, *args, **options):
        limit = options['limit']
        threshold = options['threshold']

        founders = (
            User.objects
            .filter(role=User.Role.FOUNDER, is_active=True, is_banned=False)
            .order_by('id')
        )
        if limit:
            founders = founders[:limit]

        total = 0
        for founder in founders:
            created = MatchGenerationService(founder, threshold=threshold).generate()
            if created:
                self.stdout.write(f'  {founder.username}: {len(created)} new matches')
            total += len(created)

        self.stdout.write(self.style.SUCCESS(f'Created {total} matches'))
