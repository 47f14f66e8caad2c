"""
Tests for pods (pods/services.py and pods/views.py).

Covers:
- Creation: founder membership and equity, goals, date validation
- Applying: open pods only, duplicates, capacity and the full status
- Goal updates and completion percentage
- Visibility of drafts and private pods
"""

import os
from datetime import timedelta
from decimal import Decimal

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.test_settings')

import pytest
from django.urls import reverse
from django.utils import timezone

from core.exceptions import ConflictError, UnauthorizedError, ValidationFailed
from pods.models import Pod, PodGoal, PodMember
from pods.services import PodService


def _create_pod(founder, goals=(), **kwargs):
    now = timezone.now()
    defaults = {
        'title': 'Ship the MVP',
        'description': 'Sixty days to launch',
        'category': 'tech',
        'compensation_model': Pod.CompensationModel.EQUITY,
        'start_date': now,
        'end_date': now + timedelta(days=60),
        'status': Pod.Status.OPEN,
    }
    defaults.update(kwargs)
    return PodService.create(founder, goals=goals, **defaults)


# ===========================================================================
# Service
# ===========================================================================

@pytest.mark.django_db
class TestPodService:

    def test_founder_joins_with_equity(self, founder):
        pod = _create_pod(founder, goals=[{'title': 'Landing page'}])

        member = pod.members.get()
        assert member.user == founder
        assert member.role == PodMember.Role.FOUNDER
        assert member.equity_percentage == Decimal('60')
        assert pod.member_count == 1
        assert pod.goals.count() == 1

    def test_investor_cannot_create(self, investor):
        with pytest.raises(UnauthorizedError):
            _create_pod(investor)

    def test_apply_to_draft_rejected(self, founder, other_founder):
        pod = _create_pod(founder, status=Pod.Status.DRAFT)
        with pytest.raises(ValidationFailed):
            PodService.apply(pod, other_founder, 'developer', 'equity')

    def test_duplicate_member_conflicts(self, founder, other_founder):
        pod = _create_pod(founder)
        PodService.apply(pod, other_founder, 'developer', 'equity', Decimal('5'))

        with pytest.raises(ConflictError):
            PodService.apply(pod, other_founder, 'designer', 'barter')
        with pytest.raises(ConflictError):
            PodService.apply(pod, founder, 'designer', 'barter')

    def test_reaching_capacity_marks_full(self, founder, other_founder, investor):
        pod = _create_pod(founder, max_members=2)

        PodService.apply(pod, other_founder, 'developer', 'equity')

        assert pod.status == Pod.Status.FULL
        assert pod.application_count == 1
        with pytest.raises(ValidationFailed):
            PodService.apply(pod, investor, 'investor', 'equity')

    def test_full_pod_rejects_even_if_reopened(self, founder, other_founder, investor):
        pod = _create_pod(founder, max_members=2)
        PodService.apply(pod, other_founder, 'developer', 'equity')
        Pod.objects.filter(pk=pod.pk).update(status=Pod.Status.OPEN)

        with pytest.raises(ValidationFailed) as exc:
            PodService.apply(pod, investor, 'investor', 'equity')
        assert exc.value.message == 'Pod is full'

    def test_goal_progress(self, founder):
        pod = _create_pod(founder, goals=[{'title': 'A'}, {'title': 'B'}, {'title': 'C'}])
        first, second, _ = pod.goals.all()

        PodService.update_goal(pod, founder, first.pk, PodGoal.Status.COMPLETED)
        assert pod.completion_percentage == 33

        PodService.update_goal(pod, founder, second.pk, PodGoal.Status.COMPLETED)
        assert pod.completion_percentage == 67

        goal = PodService.update_goal(pod, founder, second.pk, PodGoal.Status.IN_PROGRESS)
        assert goal.completed_at is None
        assert pod.completion_percentage == 33

    def test_non_member_cannot_update_goal(self, founder, other_founder):
        pod = _create_pod(founder, goals=[{'title': 'A'}])
        with pytest.raises(UnauthorizedError):
            PodService.update_goal(pod, other_founder, pod.goals.get().pk, PodGoal.Status.COMPLETED)

    def test_no_goals_means_zero(self, founder):
        pod = PodService.update_progress(_create_pod(founder))
        assert pod.completion_percentage == 0

    def test_days_remaining(self, founder):
        pod = _create_pod(founder)
        assert pod.days_remaining == 60

        pod.end_date = timezone.now() - timedelta(days=1)
        assert pod.days_remaining == 0


# ===========================================================================
# Views
# ===========================================================================

@pytest.mark.django_db
class TestPodViews:

    def test_create_pod(self, api, founder):
        api.login(founder)

        response = api.post(reverse('pods:pod-list'), {
            'title': 'Fintech sprint',
            'description': 'Build a budgeting app',
            'category': 'finance',
            'compensation_model': 'hybrid',
            'start_date': '2030-01-01T00:00:00Z',
            'end_date': '2030-03-01T00:00:00Z',
            'goals': [{'title': 'Prototype'}, {'title': 'Beta users'}],
        })

        assert response.status_code == 201
        body = response.json()
        assert body['status'] == 'draft'
        assert body['progress']['total_goals'] == 2
        assert body['members'][0]['equity_percentage'] == 60.0

    def test_end_before_start(self, api, founder):
        api.login(founder)
        response = api.post(reverse('pods:pod-list'), {
            'title': 'Backwards',
            'description': 'Time travel',
            'category': 'tech',
            'compensation_model': 'equity',
            'start_date': '2030-03-01T00:00:00Z',
            'end_date': '2030-01-01T00:00:00Z',
        })
        assert response.status_code == 400
        assert 'end_date' in response.json()['error']['details']

    def test_list_excludes_drafts_and_private(self, api, founder):
        open_pod = _create_pod(founder)
        _create_pod(founder, status=Pod.Status.DRAFT)
        _create_pod(founder, is_public=False)

        body = api.get(reverse('pods:pod-list')).json()

        assert [pod['id'] for pod in body['pods']] == [open_pod.pk]

    def test_private_pod_hidden_from_outsiders(self, api, founder, other_founder):
        pod = _create_pod(founder, is_public=False)
        url = reverse('pods:pod-detail', args=[pod.pk])

        assert api.get(url).status_code == 404
        api.login(other_founder)
        assert api.get(url).status_code == 404
        api.login(founder)
        assert api.get(url).status_code == 200

    def test_apply_and_joined(self, api, founder, other_founder):
        pod = _create_pod(founder)
        api.login(other_founder)

        response = api.post(reverse('pods:pod-apply', args=[pod.pk]), {
            'role': 'developer', 'contribution': 'equity', 'equity_percentage': 5,
        })
        assert response.status_code == 201

        joined = api.get(reverse('pods:pod-joined')).json()
        assert [p['id'] for p in joined['pods']] == [pod.pk]

        again = api.post(reverse('pods:pod-apply', args=[pod.pk]), {'role': 'developer', 'contribution': 'equity'})
        assert again.status_code == 409

    def test_apply_as_founder_role_rejected(self, api, founder, other_founder):
        pod = _create_pod(founder)
        api.login(other_founder)
        response = api.post(reverse('pods:pod-apply', args=[pod.pk]), {'role': 'founder', 'contribution': 'equity'})
        assert response.status_code == 400

    def test_goal_update_endpoint(self, api, founder):
        pod = _create_pod(founder, goals=[{'title': 'A'}, {'title': 'B'}])
        goal = pod.goals.first()
        api.login(founder)

        body = api.put(reverse('pods:pod-goal', args=[pod.pk, goal.pk]), {'status': 'completed'}).json()

        assert body['progress']['completion_percentage'] == 50

    def test_only_founder_updates_pod(self, api, founder, other_founder):
        pod = _create_pod(founder)
        url = reverse('pods:pod-detail', args=[pod.pk])

        api.login(other_founder)
        assert api.put(url, {'title': 'Hijacked'}).status_code == 403

        api.login(founder)
        body = api.put(url, {'stage': 'active'}).json()
        assert body['stage'] == 'active'
        assert body['title'] == 'Ship the MVP'

    def test_created_pods(self, api, founder, other_founder):
        mine = _create_pod(founder, status=Pod.Status.DRAFT)
        api.login(founder)
        body = api.get(reverse('pods:pod-created')).json()
        assert [pod['id'] for pod in body['pods']] == [mine.pk]
