"""
Pod membership and progress service.
"""

import logging
import math

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from core.exceptions import ConflictError, NotFoundError, UnauthorizedError, ValidationFailed

from .models import Pod, PodGoal, PodMember

logger = logging.getLogger('pods.services')


class PodService:

    @staticmethod
    def create(founder, *, goals=(), **fields) -> Pod:
        """
        Create a pod; its founder joins as the first member with the
        founder's equity share.
        """
        if not founder.is_founder:
            raise UnauthorizedError('Only founders can create pods')

        fields = {name: value for name, value in fields.items() if value not in (None, '')}
        with transaction.atomic():
            pod = Pod.objects.create(founder=founder, **fields)
            PodMember.objects.create(
                pod=pod,
                user=founder,
                role=PodMember.Role.FOUNDER,
                contribution=PodMember.Contribution.EQUITY,
                equity_percentage=Pod.FOUNDER_EQUITY,
            )
            for goal in goals:
                PodGoal.objects.create(pod=pod, **goal)

        logger.info("Pod %s created by user=%s", pod.pk, founder.pk)
        return pod

    @staticmethod
    def update(pod: Pod, user, values: dict) -> Pod:
        if pod.founder_id != user.pk:
            raise UnauthorizedError('Not authorized to edit this pod')
        for name, value in values.items():
            setattr(pod, name, value)
        if values:
            pod.save(update_fields=list(values) + ['updated_at'])
        return pod

    @staticmethod
    def apply(pod: Pod, user, role, contribution, equity_percentage=0, message='') -> PodMember:
        """
        Join an open pod.

        Raises:
            ValidationFailed: pod not open, or already full
            ConflictError: user is already a member
        """
        with transaction.atomic():
            locked = Pod.objects.select_for_update().get(pk=pod.pk)
            if locked.status != Pod.Status.OPEN:
                raise ValidationFailed('Pod is not accepting applications', details={'status': locked.status})
            if locked.members.filter(user=user).exists():
                raise ConflictError('Already a member of this pod')
            if locked.member_count >= locked.max_members:
                raise ValidationFailed('Pod is full')

            member = PodMember.objects.create(
                pod=locked,
                user=user,
                role=role,
                contribution=contribution,
                equity_percentage=equity_percentage or 0,
                message=message,
            )
            Pod.objects.filter(pk=locked.pk).update(application_count=F('application_count') + 1)
            if locked.member_count >= locked.max_members:
                Pod.objects.filter(pk=locked.pk).update(status=Pod.Status.FULL)

        pod.refresh_from_db()
        logger.info("User=%s joined pod %s as %s", user.pk, pod.pk, role)
        return member

    @classmethod
    def update_goal(cls, pod: Pod, user, goal_id, status) -> PodGoal:
        """Active members move a goal through its states; progress is recomputed."""
        if not pod.is_active_member(user):
            raise UnauthorizedError('Only active pod members can update goals')

        goal = pod.goals.filter(pk=goal_id).first()
        if goal is None:
            raise NotFoundError('Goal not found')

        goal.status = status
        if status == PodGoal.Status.COMPLETED:
            goal.completed_at = goal.completed_at or timezone.now()
        else:
            goal.completed_at = None
        goal.save(update_fields=['status', 'completed_at'])

        cls.update_progress(pod)
        return goal

    @staticmethod
    def update_progress(pod: Pod) -> Pod:
        """completion = completed goals / all goals, as a rounded percentage."""
        total = pod.goals.count()
        completed = pod.goals.filter(status=PodGoal.Status.COMPLETED).count()
        pod.completion_percentage = math.floor(completed * 100 / total + 0.5) if total else 0
        pod.progress_updated_at = timezone.now()
        pod.save(update_fields=['completion_percentage', 'progress_updated_at', 'updated_at'])
        return pod

    @staticmethod
    def record_view(pod: Pod) -> Pod:
        Pod.objects.filter(pk=pod.pk).update(views=F('views') + 1)
        pod.refresh_from_db(fields=['views'])
        return pod
