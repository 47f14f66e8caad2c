import math

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import F, Q
from django.utils import timezone

from core.models import Category


def default_equity_distribution():
    return {'founder': 60, 'team': 30, 'reserved': 10}


def default_communication():
    return {'platform': 'slack', 'channel_url': '', 'meeting_schedule': ''}


class Pod(models.Model):
    """
    A time-boxed build sprint: a founder recruits members, sets goals and
    tracks completion.
    """

    class Stage(models.TextChoices):
        PLANNING = 'planning', 'Planning'
        ACTIVE = 'active', 'Active'
        COMPLETED = 'completed', 'Completed'
        PAUSED = 'paused', 'Paused'

    class CompensationModel(models.TextChoices):
        EQUITY = 'equity', 'Equity'
        BARTER = 'barter', 'Barter'
        REV_SHARE = 'rev_share', 'Revenue Share'
        HYBRID = 'hybrid', 'Hybrid'

    class Status(models.TextChoices):
        DRAFT = 'draft', 'Draft'
        OPEN = 'open', 'Open'
        FULL = 'full', 'Full'
        CLOSED = 'closed', 'Closed'
        COMPLETED = 'completed', 'Completed'

    FOUNDER_EQUITY = 60

    title = models.CharField(max_length=100)
    description = models.TextField(max_length=1000)
    founder = models.ForeignKey(
        'core.User',
        on_delete=models.CASCADE,
        related_name='pods_founded'
    )
    category = models.CharField(max_length=20, choices=Category.choices, db_index=True)
    stage = models.CharField(max_length=10, choices=Stage.choices, default=Stage.PLANNING)
    sprint_days = models.PositiveSmallIntegerField(
        default=60,
        validators=[MinValueValidator(30), MaxValueValidator(90)],
    )
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    compensation_model = models.CharField(max_length=10, choices=CompensationModel.choices)
    equity_distribution = models.JSONField(default=default_equity_distribution, blank=True)
    communication = models.JSONField(default=default_communication, blank=True)

    is_public = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)
    views = models.PositiveIntegerField(default=0)
    application_count = models.PositiveIntegerField(default=0)
    tags = models.JSONField(default=list, blank=True)
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.DRAFT,
        db_index=True,
    )
    max_members = models.PositiveSmallIntegerField(default=10)

    completion_percentage = models.PositiveSmallIntegerField(
        default=0,
        validators=[MaxValueValidator(100)],
    )
    progress_updated_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'pods_pod'
        ordering = ['-created_at']
        verbose_name = 'Pod'
        verbose_name_plural = 'Pods'
        constraints = [
            models.CheckConstraint(
                condition=Q(end_date__gt=F('start_date')),
                name='pod_ends_after_start',
            ),
        ]

    def __str__(self):
        return f"{self.title} ({self.status})"

    def active_members(self):
        return self.members.filter(status=PodMember.Status.ACTIVE)

    @property
    def member_count(self) -> int:
        return self.active_members().count()

    @property
    def days_remaining(self) -> int:
        remaining = (self.end_date - timezone.now()).total_seconds()
        return max(0, math.ceil(remaining / 86400))

    def is_active_member(self, user) -> bool:
        return self.active_members().filter(user=user).exists()

    def as_dict(self, include_members=False) -> dict:
        data = {
            'id': self.pk,
            'title': self.title,
            'description': self.description,
            'founder': self.founder.as_summary(),
            'category': self.category,
            'stage': self.stage,
            'sprint_days': self.sprint_days,
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat(),
            'days_remaining': self.days_remaining,
            'compensation_model': self.compensation_model,
            'equity_distribution': self.equity_distribution,
            'communication': self.communication,
            'is_public': self.is_public,
            'is_featured': self.is_featured,
            'tags': self.tags,
            'status': self.status,
            'max_members': self.max_members,
            'metrics': {
                'views': self.views,
                'applications': self.application_count,
                'active_members': self.member_count,
            },
            'progress': {
                'completion_percentage': self.completion_percentage,
                'total_goals': self.goals.count(),
                'updated_at': self.progress_updated_at.isoformat() if self.progress_updated_at else None,
            },
            'goals': [goal.as_dict() for goal in self.goals.all()],
            'created_at': self.created_at.isoformat(),
        }
        if include_members:
            data['members'] = [member.as_dict() for member in self.members.select_related('user')]
        return data


class PodMember(models.Model):

    class Role(models.TextChoices):
        FOUNDER = 'founder', 'Founder'
        CO_FOUNDER = 'co-founder', 'Co-founder'
        DEVELOPER = 'developer', 'Developer'
        DESIGNER = 'designer', 'Designer'
        MARKETER = 'marketer', 'Marketer'
        MENTOR = 'mentor', 'Mentor'
        INVESTOR = 'investor', 'Investor'

    class Contribution(models.TextChoices):
        EQUITY = 'equity', 'Equity'
        BARTER = 'barter', 'Barter'
        REV_SHARE = 'rev_share', 'Revenue Share'
        VOLUNTEER = 'volunteer', 'Volunteer'

    class Status(models.TextChoices):
        ACTIVE = 'active', 'Active'
        INACTIVE = 'inactive', 'Inactive'
        LEFT = 'left', 'Left'

    pod = models.ForeignKey(Pod, on_delete=models.CASCADE, related_name='members')
    user = models.ForeignKey('core.User', on_delete=models.CASCADE, related_name='pod_memberships')
    role = models.CharField(max_length=12, choices=Role.choices)
    contribution = models.CharField(max_length=10, choices=Contribution.choices)
    equity_percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    message = models.TextField(blank=True)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.ACTIVE)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'pods_member'
        ordering = ['joined_at', 'id']
        constraints = [
            models.UniqueConstraint(fields=['pod', 'user'], name='unique_member_per_pod'),
        ]

    def __str__(self):
        return f"{self.user_id} in pod {self.pod_id} ({self.role})"

    def as_dict(self) -> dict:
        return {
            'id': self.pk,
            'user': self.user.as_summary(),
            'role': self.role,
            'contribution': self.contribution,
            'equity_percentage': float(self.equity_percentage),
            'status': self.status,
            'joined_at': self.joined_at.isoformat(),
        }


class PodGoal(models.Model):

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        IN_PROGRESS = 'in_progress', 'In Progress'
        COMPLETED = 'completed', 'Completed'
        OVERDUE = 'overdue', 'Overdue'

    pod = models.ForeignKey(Pod, on_delete=models.CASCADE, related_name='goals')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    deadline = models.DateTimeField(null=True, blank=True)
    status = models.CharField(max_length=12, choices=Status.choices, default=Status.PENDING)
    completed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'pods_goal'
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.title} ({self.status})"

    def as_dict(self) -> dict:
        return {
            'id': self.pk,
            'title': self.title,
            'description': self.description,
            'deadline': self.deadline.isoformat() if self.deadline else None,
            'status': self.status,
            'completed_at': self.completed_at.isoformat() if self.completed_at else None,
        }
