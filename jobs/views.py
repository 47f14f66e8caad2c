"""
Views for the job board.

Browsing is public; posting, applying and reviewing need a session.
"""

from django.http import JsonResponse
from django.views import View

from core.api import ApiLoginRequiredMixin, get_object_or_not_found, paginate, parse_body, require_authenticated
from core.exceptions import ValidationFailed

from .forms import ApplicationForm, ApplicationStatusForm, JobFilterForm, JobForm
from .models import Job
from .services import JobService


def live_jobs():
    return Job.objects.exclude(status=Job.Status.DELETED).select_related('employer')


class JobListView(View):
    """GET: active public jobs with filters. POST: post a job."""

    def get(self, request):
        form = JobFilterForm(request.GET)
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid filters')
        filters = form.cleaned_data

        queryset = Job.objects.filter(status=Job.Status.ACTIVE, is_public=True).select_related('employer')
        if filters['category']:
            queryset = queryset.filter(category=filters['category'])
        if filters['type']:
            queryset = queryset.filter(job_type=filters['type'])
        if filters['location']:
            queryset = queryset.filter(location__icontains=filters['location'])
        if filters['remote']:
            queryset = queryset.filter(remote=True)

        queryset = queryset.order_by('-created_at', '-id')
        return JsonResponse(paginate(request, queryset, lambda job: job.as_dict(), key='jobs'))

    def post(self, request):
        user = require_authenticated(request)
        form = JobForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid job')

        job = JobService.create(user, form.model_values(), pod_id=form.cleaned_data['pod_id'])
        return JsonResponse(job.as_dict(user), status=201)


class JobDetailView(View):

    def get(self, request, pk):
        job = JobService.record_view(get_object_or_not_found(live_jobs(), 'Job not found', pk=pk))
        return JsonResponse(job.as_dict(request.user))

    def put(self, request, pk):
        user = require_authenticated(request)
        job = get_object_or_not_found(live_jobs(), 'Job not found', pk=pk)
        form = JobForm(parse_body(request), instance=job)
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid job')

        JobService.update(job, user, form.model_values())
        return JsonResponse(job.as_dict(user))

    def delete(self, request, pk):
        user = require_authenticated(request)
        job = get_object_or_not_found(live_jobs(), 'Job not found', pk=pk)
        JobService.soft_delete(job, user)
        return JsonResponse({'message': 'Job deleted successfully'})


class JobApplyView(ApiLoginRequiredMixin, View):

    def post(self, request, pk):
        job = get_object_or_not_found(live_jobs(), 'Job not found', pk=pk)
        form = ApplicationForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid application')

        application = JobService.apply(
            job, request.user, form.cleaned_data['cover_letter'], form.cleaned_data['resume']
        )
        return JsonResponse(
            {'message': 'Application submitted successfully', 'application_id': application.pk},
            status=201,
        )


class ApplicationStatusView(ApiLoginRequiredMixin, View):
    """Employer marks an application reviewed / accepted / rejected."""

    def post(self, request, pk, application_id):
        job = get_object_or_not_found(live_jobs(), 'Job not found', pk=pk)
        form = ApplicationStatusForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid status')

        application = JobService.set_application_status(
            job, request.user, application_id,
            form.cleaned_data['status'], form.cleaned_data['feedback'],
        )
        return JsonResponse({'message': 'Application status updated', 'application': application.as_dict()})

    put = post


class PostedJobsView(ApiLoginRequiredMixin, View):

    def get(self, request):
        queryset = live_jobs().filter(employer=request.user).order_by('-created_at', '-id')
        return JsonResponse(
            paginate(request, queryset, lambda job: job.as_dict(request.user), key='jobs')
        )


class AppliedJobsView(ApiLoginRequiredMixin, View):
    """Jobs the caller applied to, with their application status."""

    def get(self, request):
        applications = (
            request.user.job_applications
            .select_related('job', 'job__employer', 'applicant')
            .order_by('-applied_at', '-id')
        )

        def serialize(application):
            return {**application.job.as_dict(), 'application': application.as_dict()}

        return JsonResponse(paginate(request, applications, serialize, key='jobs'))
