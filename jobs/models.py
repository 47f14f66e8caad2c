from django.db import models
from django.utils import timezone

from core.models import Category


class Job(models.Model):
    """A role posted by a founder, optionally on behalf of a pod."""

    class JobType(models.TextChoices):
        FULL_TIME = 'full-time', 'Full-time'
        PART_TIME = 'part-time', 'Part-time'
        CONTRACT = 'contract', 'Contract'
        INTERNSHIP = 'internship', 'Internship'
        VOLUNTEER = 'volunteer', 'Volunteer'

    class SalaryPeriod(models.TextChoices):
        HOURLY = 'hourly', 'Hourly'
        MONTHLY = 'monthly', 'Monthly'
        YEARLY = 'yearly', 'Yearly'

    class Status(models.TextChoices):
        ACTIVE = 'active', 'Active'
        PAUSED = 'paused', 'Paused'
        CLOSED = 'closed', 'Closed'
        DELETED = 'deleted', 'Deleted'

    title = models.CharField(max_length=200)
    description = models.TextField(max_length=5000)
    employer = models.ForeignKey(
        'core.User',
        on_delete=models.CASCADE,
        related_name='jobs_posted'
    )
    category = models.CharField(max_length=20, choices=Category.choices, db_index=True)
    job_type = models.CharField(max_length=12, choices=JobType.choices)
    location = models.CharField(max_length=255)
    remote = models.BooleanField(default=False)

    # Compensation
    salary_min = models.PositiveIntegerField(null=True, blank=True)
    salary_max = models.PositiveIntegerField(null=True, blank=True)
    salary_currency = models.CharField(max_length=3, default='USD')
    salary_period = models.CharField(
        max_length=10,
        choices=SalaryPeriod.choices,
        default=SalaryPeriod.YEARLY,
    )

    requirements = models.JSONField(default=list, blank=True)
    benefits = models.JSONField(default=list, blank=True)
    tags = models.JSONField(default=list, blank=True)

    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.ACTIVE,
        db_index=True,
    )
    pod = models.ForeignKey(
        'pods.Pod',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='jobs'
    )

    views = models.PositiveIntegerField(default=0)
    shares = models.PositiveIntegerField(default=0)
    deadline = models.DateTimeField(null=True, blank=True)
    is_public = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'jobs_job'
        ordering = ['-created_at']
        verbose_name = 'Job'
        verbose_name_plural = 'Jobs'

    def __str__(self):
        return f"{self.title} ({self.job_type})"

    @property
    def is_accepting_applications(self) -> bool:
        if self.status != self.Status.ACTIVE:
            return False
        return self.deadline is None or self.deadline > timezone.now()

    @property
    def days_until_deadline(self):
        if self.deadline is None:
            return None
        return (self.deadline - timezone.now()).days

    def as_dict(self, viewer=None) -> dict:
        data = {
            'id': self.pk,
            'title': self.title,
            'description': self.description,
            'employer': self.employer.as_summary(),
            'category': self.category,
            'type': self.job_type,
            'location': self.location,
            'remote': self.remote,
            'salary': {
                'min': self.salary_min,
                'max': self.salary_max,
                'currency': self.salary_currency,
                'period': self.salary_period,
            },
            'requirements': self.requirements,
            'benefits': self.benefits,
            'tags': self.tags,
            'status': self.status,
            'pod_id': self.pod_id,
            'metrics': {
                'views': self.views,
                'applications': self.applications.count(),
                'shares': self.shares,
            },
            'deadline': self.deadline.isoformat() if self.deadline else None,
            'days_until_deadline': self.days_until_deadline,
            'is_featured': self.is_featured,
            'created_at': self.created_at.isoformat(),
        }
        if viewer is not None and viewer.is_authenticated and viewer.pk == self.employer_id:
            data['applications'] = [
                application.as_dict() for application in self.applications.select_related('applicant')
            ]
        return data


class JobApplication(models.Model):

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        REVIEWED = 'reviewed', 'Reviewed'
        ACCEPTED = 'accepted', 'Accepted'
        REJECTED = 'rejected', 'Rejected'

    job = models.ForeignKey(Job, on_delete=models.CASCADE, related_name='applications')
    applicant = models.ForeignKey(
        'core.User',
        on_delete=models.CASCADE,
        related_name='job_applications'
    )
    cover_letter = models.TextField(max_length=2000)
    resume = models.CharField(max_length=500, blank=True)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.PENDING)
    feedback = models.TextField(blank=True)
    applied_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'jobs_application'
        ordering = ['applied_at', 'id']
        verbose_name = 'Job Application'
        verbose_name_plural = 'Job Applications'
        constraints = [
            models.UniqueConstraint(fields=['job', 'applicant'], name='unique_application_per_job'),
        ]

    def __str__(self):
        return f"{self.applicant_id} -> {self.job_id} ({self.status})"

    def as_dict(self) -> dict:
        return {
            'id': self.pk,
            'job_id': self.job_id,
            'applicant': {**self.applicant.as_summary(), 'bio': self.applicant.bio, 'skills': self.applicant.skills},
            'cover_letter': self.cover_letter,
            'resume': self.resume,
            'status': self.status,
            'feedback': self.feedback,
            'applied_at': self.applied_at.isoformat(),
        }
