from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import F, Q
from django.utils import timezone


def make_pair_key(first_id, second_id) -> str:
    """Order-independent key for an unordered pair of account ids."""
    low, high = sorted((int(first_id), int(second_id)))
    return f"{low}:{high}"


class Match(models.Model):
    """
    A proposed pairing of two founders.

    founder1 is the account that ran generation. Status only moves forward:
    pending -> accepted (both sides interested) or rejected (either side);
    accepted -> connected is a staff action, pending -> expired a sweep.
    """

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        ACCEPTED = 'accepted', 'Accepted'
        REJECTED = 'rejected', 'Rejected'
        EXPIRED = 'expired', 'Expired'
        CONNECTED = 'connected', 'Connected'

    class Quality(models.TextChoices):
        EXCELLENT = 'excellent', 'Excellent'
        GOOD = 'good', 'Good'
        FAIR = 'fair', 'Fair'
        POOR = 'poor', 'Poor'

    class MatchType(models.TextChoices):
        CO_FOUNDER = 'co-founder', 'Co-founder'
        MENTOR = 'mentor', 'Mentor'
        ADVISOR = 'advisor', 'Advisor'
        INVESTOR = 'investor', 'Investor'

    # statuses that still count towards unread messages
    OPEN_STATUSES = (Status.PENDING, Status.ACCEPTED)

    founder1 = models.ForeignKey(
        'core.User',
        on_delete=models.CASCADE,
        related_name='matches_initiated'
    )
    founder2 = models.ForeignKey(
        'core.User',
        on_delete=models.CASCADE,
        related_name='matches_received'
    )
    pair_key = models.CharField(max_length=41, unique=True, editable=False)

    # Sub-scores (0-100); null when a side is missing the attribute
    risk_score = models.PositiveSmallIntegerField(null=True, blank=True)
    work_style_score = models.PositiveSmallIntegerField(null=True, blank=True)
    communication_score = models.PositiveSmallIntegerField(null=True, blank=True)
    skills_score = models.PositiveSmallIntegerField(null=True, blank=True)
    experience_score = models.PositiveSmallIntegerField(null=True, blank=True)
    goals_score = models.PositiveSmallIntegerField(null=True, blank=True)
    overall_score = models.PositiveSmallIntegerField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
        db_index=True,
    )
    quality = models.CharField(max_length=10, choices=Quality.choices, default=Quality.FAIR)

    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )
    match_type = models.CharField(
        max_length=12,
        choices=MatchType.choices,
        default=MatchType.CO_FOUNDER,
    )

    founder1_interested = models.BooleanField(default=False)
    founder2_interested = models.BooleanField(default=False)
    founder1_interested_at = models.DateTimeField(null=True, blank=True)
    founder2_interested_at = models.DateTimeField(null=True, blank=True)

    first_message_at = models.DateTimeField(null=True, blank=True)
    last_message_at = models.DateTimeField(null=True, blank=True)
    accepted_at = models.DateTimeField(null=True, blank=True)
    rejected_at = models.DateTimeField(null=True, blank=True)
    expired_at = models.DateTimeField(null=True, blank=True)
    connected_at = models.DateTimeField(null=True, blank=True)

    metadata = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'matching_match'
        ordering = ['-overall_score', '-created_at']
        verbose_name = 'Match'
        verbose_name_plural = 'Matches'
        constraints = [
            models.CheckConstraint(
                condition=~Q(founder1=F('founder2')),
                name='match_distinct_founders',
            ),
        ]

    def __str__(self):
        return f"Match: {self.founder1_id} <-> {self.founder2_id} ({self.overall_score}, {self.status})"

    def save(self, *args, **kwargs):
        if self.founder1_id and self.founder2_id:
            self.pair_key = make_pair_key(self.founder1_id, self.founder2_id)
        super().save(*args, **kwargs)

    def side_for(self, user):
        """Return 1 or 2 for a participant, None otherwise."""
        if user.pk == self.founder1_id:
            return 1
        if user.pk == self.founder2_id:
            return 2
        return None

    def is_participant(self, user) -> bool:
        return self.side_for(user) is not None

    def other_founder(self, user):
        return self.founder2 if self.side_for(user) == 1 else self.founder1

    @property
    def is_mutual(self) -> bool:
        return self.founder1_interested and self.founder2_interested

    def apply_breakdown(self, breakdown):
        """Copy a CompatibilityBreakdown onto the score columns."""
        self.risk_score = breakdown.risk_tolerance
        self.work_style_score = breakdown.work_style
        self.communication_score = breakdown.communication
        self.skills_score = breakdown.skills
        self.experience_score = breakdown.experience
        self.goals_score = breakdown.goals
        self.overall_score = breakdown.overall
        self.quality = breakdown.quality
        self.metadata = {**(self.metadata or {}), 'match_reasons': list(breakdown.reasons)}

    def compatibility_dict(self) -> dict:
        return {
            'risk_tolerance': self.risk_score,
            'work_style': self.work_style_score,
            'communication': self.communication_score,
            'skills': self.skills_score,
            'experience': self.experience_score,
            'goals': self.goals_score,
            'overall': self.overall_score,
            'quality': self.quality,
        }

    def as_summary(self, viewer) -> dict:
        """Listing view of a match from one participant's side."""
        side = self.side_for(viewer)
        return {
            'id': self.pk,
            'other_founder': self.other_founder(viewer).as_summary(),
            'compatibility': self.compatibility_dict(),
            'status': self.status,
            'match_type': self.match_type,
            'my_interest': self.founder1_interested if side == 1 else self.founder2_interested,
            'their_interest': self.founder2_interested if side == 1 else self.founder1_interested,
            'match_reasons': (self.metadata or {}).get('match_reasons', []),
            'last_message_at': self.last_message_at.isoformat() if self.last_message_at else None,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def as_dict(self, viewer) -> dict:
        """Full view including the message log."""
        data = self.as_summary(viewer)
        data.update({
            'founder1': self.founder1.as_summary(),
            'founder2': self.founder2.as_summary(),
            'founder1_interested': self.founder1_interested,
            'founder2_interested': self.founder2_interested,
            'accepted_at': self.accepted_at.isoformat() if self.accepted_at else None,
            'rejected_at': self.rejected_at.isoformat() if self.rejected_at else None,
            'messages': [message.as_dict() for message in self.messages.select_related('sender')],
        })
        return data


class MatchMessage(models.Model):
    """One entry in a match's append-only message log."""

    match = models.ForeignKey(
        Match,
        on_delete=models.CASCADE,
        related_name='messages'
    )
    sender = models.ForeignKey(
        'core.User',
        on_delete=models.CASCADE,
        related_name='match_messages'
    )
    content = models.CharField(max_length=1000)
    sent_at = models.DateTimeField(default=timezone.now)
    is_read = models.BooleanField(default=False)

    class Meta:
        db_table = 'matching_message'
        ordering = ['sent_at', 'id']
        verbose_name = 'Match Message'
        verbose_name_plural = 'Match Messages'

    def __str__(self):
        return f"{self.sender_id} -> match {self.match_id}: {self.content[:40]}"

    def as_dict(self) -> dict:
        return {
            'id': self.pk,
            'sender': self.sender.as_summary(),
            'content': self.content,
            'sent_at': self.sent_at.isoformat(),
            'is_read': self.is_read,
        }


class MatchFeedback(models.Model):
    """A participant's rating of a match; one per author per match."""

    match = models.ForeignKey(
        Match,
        on_delete=models.CASCADE,
        related_name='feedback'
    )
    author = models.ForeignKey(
        'core.User',
        on_delete=models.CASCADE,
        related_name='match_feedback'
    )
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
        help_text='1 (poor) to 5 (excellent)'
    )
    comment = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'matching_feedback'
        ordering = ['-created_at']
        verbose_name = 'Match Feedback'
        verbose_name_plural = 'Match Feedback'
        constraints = [
            models.UniqueConstraint(fields=['match', 'author'], name='unique_feedback_per_author'),
        ]

    def __str__(self):
        return f"Feedback {self.rating}/5 on match {self.match_id}"

    def as_dict(self) -> dict:
        return {
            'id': self.pk,
            'match_id': self.match_id,
            'rating': self.rating,
            'comment': self.comment,
            'updated_at': self.updated_at.isoformat(),
        }
