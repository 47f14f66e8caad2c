"""
Match lifecycle and generation services.

MatchGenerationService proposes pending matches for an account by scoring
every eligible founder. MatchLifecycleService moves a single match through
its states and threads its message log.

Every mutation re-reads the match under select_for_update() inside
transaction.atomic(), so concurrent accepts from both sides keep both flags.
"""

import logging
from datetime import timedelta
from typing import List, Optional

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import Q
from django.utils import timezone

from core.exceptions import ConflictError, NotFoundError, UnauthorizedError, ValidationFailed
from core.models import User
from core.services import PointsLedger

from .models import Match, MatchFeedback, MatchMessage, make_pair_key
from .scoring import CompatibilityProfile, CompatibilityScorer

logger = logging.getLogger('matching.services')

CONFIG = getattr(settings, 'FOUNDIC_CONFIG', {})

MAX_MESSAGE_LENGTH = 1000


class MatchLifecycleService:
    """State transitions and messaging for one match."""

    def __init__(self, match: Match):
        self.match = match

    # -------------------------------------------------------------------
    # Lookup helpers
    # -------------------------------------------------------------------

    @classmethod
    def for_participant(cls, match_id, user) -> 'MatchLifecycleService':
        """
        Load a match the caller takes part in.

        Raises:
            NotFoundError: no such match
            UnauthorizedError: caller is not one of the two founders
        """
        match = (
            Match.objects
            .select_related('founder1', 'founder2')
            .filter(pk=match_id)
            .first()
        )
        if match is None:
            raise NotFoundError('Match not found')
        if not match.is_participant(user):
            raise UnauthorizedError('Not authorized to access this match')
        return cls(match)

    @staticmethod
    def participant_matches(user):
        return (
            Match.objects
            .filter(Q(founder1=user) | Q(founder2=user))
            .select_related('founder1', 'founder2')
        )

    @staticmethod
    def unread_count(user) -> int:
        """Unread messages addressed to the user across open matches."""
        return (
            MatchMessage.objects
            .filter(match__status__in=Match.OPEN_STATUSES, is_read=False)
            .filter(Q(match__founder1=user) | Q(match__founder2=user))
            .exclude(sender=user)
            .count()
        )

    # -------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------

    def _locked(self) -> Match:
        return (
            Match.objects
            .select_for_update()
            .select_related('founder1', 'founder2')
            .get(pk=self.match.pk)
        )

    @staticmethod
    def _require_side(match: Match, user) -> int:
        side = match.side_for(user)
        if side is None:
            raise UnauthorizedError('Not authorized to access this match')
        return side

    def accept(self, user) -> Match:
        """
        Record the caller's interest.

        The match becomes accepted once both sides are interested; both
        founders then earn the match_accepted award. Accepting an accepted
        match again is a no-op.
        """
        newly_accepted = False
        with transaction.atomic():
            match = self._locked()
            side = self._require_side(match, user)
            if match.status not in Match.OPEN_STATUSES:
                raise ConflictError(
                    f'Cannot accept a {match.status} match',
                    details={'status': match.status},
                )

            now = timezone.now()
            if not getattr(match, f'founder{side}_interested'):
                setattr(match, f'founder{side}_interested', True)
                setattr(match, f'founder{side}_interested_at', now)

            if match.status == Match.Status.PENDING and match.is_mutual:
                match.status = Match.Status.ACCEPTED
                match.accepted_at = now
                newly_accepted = True
            match.save()

            if newly_accepted:
                for founder in (match.founder1, match.founder2):
                    PointsLedger.award(
                        founder,
                        'match_accepted',
                        description=f'Mutual match #{match.pk}',
                    )

        if newly_accepted:
            logger.info("Match %s accepted by both founders", match.pk)
        else:
            logger.info("Match %s: founder%s interested", match.pk, side)
        self.match = match
        return match

    def reject(self, user) -> Match:
        """Reject unilaterally; the other side's interest flag is untouched."""
        with transaction.atomic():
            match = self._locked()
            side = self._require_side(match, user)
            if match.status not in (*Match.OPEN_STATUSES, Match.Status.REJECTED):
                raise ConflictError(
                    f'Cannot reject a {match.status} match',
                    details={'status': match.status},
                )

            setattr(match, f'founder{side}_interested', False)
            setattr(match, f'founder{side}_interested_at', None)
            if match.status != Match.Status.REJECTED:
                match.status = Match.Status.REJECTED
                match.rejected_at = timezone.now()
            match.save()

        logger.info("Match %s rejected by founder%s", match.pk, side)
        self.match = match
        return match

    def add_message(self, user, content) -> MatchMessage:
        if not isinstance(content, str) or not content.strip():
            raise ValidationFailed('Message content is required')
        content = content.strip()
        if len(content) > MAX_MESSAGE_LENGTH:
            raise ValidationFailed(
                f'Message must be at most {MAX_MESSAGE_LENGTH} characters',
                details={'length': len(content)},
            )

        with transaction.atomic():
            match = self._locked()
            self._require_side(match, user)

            now = timezone.now()
            message = MatchMessage.objects.create(
                match=match,
                sender=user,
                content=content,
                sent_at=now,
            )
            if match.first_message_at is None:
                match.first_message_at = now
            match.last_message_at = now
            match.save(update_fields=['first_message_at', 'last_message_at', 'updated_at'])

        self.match = match
        return message

    def mark_read(self, user) -> int:
        """Mark every message from the other founder as read."""
        self._require_side(self.match, user)
        return (
            self.match.messages
            .filter(is_read=False)
            .exclude(sender=user)
            .update(is_read=True)
        )

    def connect(self) -> Match:
        """Staff action: an accepted match has become a real connection."""
        with transaction.atomic():
            match = self._locked()
            if match.status != Match.Status.ACCEPTED:
                raise ConflictError(
                    'Only accepted matches can be connected',
                    details={'status': match.status},
                )
            match.status = Match.Status.CONNECTED
            match.connected_at = timezone.now()
            match.save(update_fields=['status', 'connected_at', 'updated_at'])

        logger.info("Match %s connected", match.pk)
        self.match = match
        return match

    def expire(self) -> Match:
        with transaction.atomic():
            match = self._locked()
            if match.status != Match.Status.PENDING:
                raise ConflictError(
                    'Only pending matches can expire',
                    details={'status': match.status},
                )
            match.status = Match.Status.EXPIRED
            match.expired_at = timezone.now()
            match.save(update_fields=['status', 'expired_at', 'updated_at'])

        logger.info("Match %s expired", match.pk)
        self.match = match
        return match

    def submit_feedback(self, user, rating: int, comment: str = '') -> MatchFeedback:
        """Create or replace the caller's feedback on this match."""
        self._require_side(self.match, user)
        feedback, _ = MatchFeedback.objects.update_or_create(
            match=self.match,
            author=user,
            defaults={'rating': rating, 'comment': comment},
        )
        return feedback

    @classmethod
    def stale_pending(cls, days: Optional[int] = None):
        days = CONFIG.get('match_expiry_days', 30) if days is None else days
        cutoff = timezone.now() - timedelta(days=days)
        return Match.objects.filter(status=Match.Status.PENDING, created_at__lt=cutoff)


class MatchGenerationService:
    """Proposes pending matches between an account and eligible founders."""

    def __init__(self, user: User, threshold: Optional[int] = None):
        self.user = user
        self.threshold = CONFIG.get('match_threshold', 50) if threshold is None else threshold

    def candidates(self):
        return (
            User.objects
            .filter(role=User.Role.FOUNDER, is_active=True, is_banned=False)
            .exclude(pk=self.user.pk)
            .order_by('id')
        )

    def existing_pair_keys(self) -> set:
        return set(
            MatchLifecycleService.participant_matches(self.user)
            .values_list('pair_key', flat=True)
        )

    def generate(self) -> List[Match]:
        """
        Score every candidate and create a pending match for each pair that
        meets the threshold and has never been matched before.

        Running it twice creates nothing the second time.

        Raises:
            UnauthorizedError: the account is not a founder
        """
        if not self.user.is_founder:
            raise UnauthorizedError('Only founders can generate matches')

        profile = CompatibilityProfile.from_account(self.user)
        existing = self.existing_pair_keys()
        created = []

        for candidate in self.candidates():
            pair_key = make_pair_key(self.user.pk, candidate.pk)
            if pair_key in existing:
                continue

            breakdown = CompatibilityScorer.score(profile, CompatibilityProfile.from_account(candidate))
            if breakdown.overall < self.threshold:
                continue

            match = Match(founder1=self.user, founder2=candidate)
            match.apply_breakdown(breakdown)
            try:
                with transaction.atomic():
                    match.save()
            except IntegrityError:
                # created concurrently by the other founder
                logger.warning("Skipped duplicate match for pair %s", pair_key)
                continue

            existing.add(pair_key)
            created.append(match)

        logger.info(
            "Generated %d matches for user=%s (threshold=%s)",
            len(created), self.user.pk, self.threshold,
        )
        return created
