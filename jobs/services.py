"""
Job board service: postings, applications and the employer's review.
"""

import logging

from django.db import IntegrityError, transaction
from django.db.models import F

from core.exceptions import ConflictError, NotFoundError, UnauthorizedError, ValidationFailed

from .models import Job, JobApplication

logger = logging.getLogger('jobs.services')


class JobService:

    @staticmethod
    def _require_employer(job: Job, user, action='edit'):
        if job.employer_id != user.pk:
            raise UnauthorizedError(f'Not authorized to {action} this job')

    @staticmethod
    def create(employer, values: dict, pod_id=None) -> Job:
        """Only founders and platform admins may post jobs."""
        if not (employer.is_founder or employer.is_platform_admin):
            raise UnauthorizedError('Only founders can post jobs')

        pod = None
        if pod_id:
            from pods.models import Pod
            pod = Pod.objects.filter(pk=pod_id, founder=employer).first()
            if pod is None:
                raise NotFoundError('Pod not found')

        job = Job.objects.create(employer=employer, pod=pod, **values)
        logger.info("Job %s posted by user=%s", job.pk, employer.pk)
        return job

    @classmethod
    def update(cls, job: Job, user, values: dict) -> Job:
        cls._require_employer(job, user)
        for name, value in values.items():
            setattr(job, name, value)
        if values:
            job.save(update_fields=list(values) + ['updated_at'])
        return job

    @staticmethod
    def soft_delete(job: Job, user) -> Job:
        if job.employer_id != user.pk and not user.is_platform_admin:
            raise UnauthorizedError('Not authorized to delete this job')
        job.status = Job.Status.DELETED
        job.save(update_fields=['status', 'updated_at'])
        return job

    @staticmethod
    def apply(job: Job, applicant, cover_letter: str, resume: str = '') -> JobApplication:
        """
        Raises:
            ValidationFailed: job is not active or its deadline has passed
            ConflictError: the applicant already applied
        """
        if not job.is_accepting_applications:
            raise ValidationFailed('Job is not accepting applications', details={'status': job.status})

        try:
            with transaction.atomic():
                application = JobApplication.objects.create(
                    job=job,
                    applicant=applicant,
                    cover_letter=cover_letter,
                    resume=resume,
                )
        except IntegrityError:
            raise ConflictError('Already applied for this job')

        logger.info("User=%s applied to job %s", applicant.pk, job.pk)
        return application

    @classmethod
    def set_application_status(cls, job: Job, user, application_id, status: str, feedback: str = '') -> JobApplication:
        cls._require_employer(job, user, action='review applications for')
        application = job.applications.filter(pk=application_id).first()
        if application is None:
            raise NotFoundError('Application not found')

        application.status = status
        if feedback:
            application.feedback = feedback
        application.save(update_fields=['status', 'feedback', 'updated_at'])
        return application

    @staticmethod
    def record_view(job: Job) -> Job:
        Job.objects.filter(pk=job.pk).update(views=F('views') + 1)
        job.refresh_from_db(fields=['views'])
        return job
