"""
Views for pods.
"""

from django.http import JsonResponse
from django.views import View

from core.api import ApiLoginRequiredMixin, get_object_or_not_found, paginate, parse_body, require_authenticated
from core.exceptions import NotFoundError, ValidationFailed

from .forms import GoalStatusForm, PodApplicationForm, PodFilterForm, PodForm, PodUpdateForm
from .models import Pod, PodMember
from .services import PodService


class PodListView(View):
    """GET: public, non-draft pods. POST: create a pod (founders only)."""

    def get(self, request):
        form = PodFilterForm(request.GET)
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid filters')
        filters = form.cleaned_data

        queryset = (
            Pod.objects
            .filter(is_public=True)
            .exclude(status=Pod.Status.DRAFT)
            .select_related('founder')
        )
        for name in ('category', 'stage', 'status'):
            if filters[name]:
                queryset = queryset.filter(**{name: filters[name]})
        if filters['featured'] is not None:
            queryset = queryset.filter(is_featured=filters['featured'])

        queryset = queryset.order_by('-is_featured', '-created_at', '-id')
        return JsonResponse(paginate(request, queryset, lambda pod: pod.as_dict(), key='pods'))

    def post(self, request):
        user = require_authenticated(request)
        form = PodForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid pod')

        data = dict(form.cleaned_data)
        pod = PodService.create(user, goals=data.pop('goals'), **data)
        return JsonResponse(pod.as_dict(include_members=True), status=201)


class PodDetailView(View):

    def get(self, request, pk):
        pod = get_object_or_not_found(Pod.objects.select_related('founder'), 'Pod not found', pk=pk)
        if not pod.is_public and not (request.user.is_authenticated and pod.is_active_member(request.user)):
            raise NotFoundError('Pod not found')
        PodService.record_view(pod)
        return JsonResponse(pod.as_dict(include_members=True))

    def put(self, request, pk):
        user = require_authenticated(request)
        pod = get_object_or_not_found(Pod.objects.select_related('founder'), 'Pod not found', pk=pk)
        form = PodUpdateForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid pod')

        PodService.update(pod, user, form.model_values())
        return JsonResponse(pod.as_dict(include_members=True))


class PodApplyView(ApiLoginRequiredMixin, View):

    def post(self, request, pk):
        pod = get_object_or_not_found(Pod.objects.all(), 'Pod not found', pk=pk)
        form = PodApplicationForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid application')

        PodService.apply(pod, request.user, **form.cleaned_data)
        return JsonResponse({'message': 'Application submitted successfully'}, status=201)


class PodGoalView(ApiLoginRequiredMixin, View):

    def put(self, request, pk, goal_id):
        pod = get_object_or_not_found(Pod.objects.select_related('founder'), 'Pod not found', pk=pk)
        form = GoalStatusForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid goal status')

        PodService.update_goal(pod, request.user, goal_id, form.cleaned_data['status'])
        pod.refresh_from_db()
        return JsonResponse(pod.as_dict(include_members=True))

    post = put


class JoinedPodsView(ApiLoginRequiredMixin, View):

    def get(self, request):
        queryset = (
            Pod.objects
            .filter(members__user=request.user, members__status=PodMember.Status.ACTIVE)
            .select_related('founder')
            .order_by('-created_at', '-id')
        )
        return JsonResponse(paginate(request, queryset, lambda pod: pod.as_dict(), key='pods'))


class CreatedPodsView(ApiLoginRequiredMixin, View):

    def get(self, request):
        queryset = (
            Pod.objects
            .filter(founder=request.user)
            .select_related('founder')
            .order_by('-created_at', '-id')
        )
        return JsonResponse(paginate(request, queryset, lambda pod: pod.as_dict(), key='pods'))
