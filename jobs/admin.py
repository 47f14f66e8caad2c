from django.contrib import admin

from .models import Job, JobApplication


class JobApplicationInline(admin.TabularInline):
    model = JobApplication
    extra = 0
    fields = ['applicant', 'status', 'applied_at']
    readonly_fields = ['applicant', 'applied_at']


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ['title', 'employer', 'job_type', 'category', 'location', 'remote', 'status', 'created_at']
    list_filter = ['status', 'job_type', 'category', 'remote', 'is_featured']
    search_fields = ['title', 'description', 'employer__username', 'location']
    readonly_fields = ['views', 'shares', 'created_at', 'updated_at']
    inlines = [JobApplicationInline]
    actions = ['close_jobs']

    def close_jobs(self, request, queryset):
        updated = queryset.exclude(status=Job.Status.DELETED).update(status=Job.Status.CLOSED)
        self.message_user(request, f'Closed {updated} jobs.')
    close_jobs.short_description = 'Close selected jobs'


@admin.register(JobApplication)
class JobApplicationAdmin(admin.ModelAdmin):
    list_display = ['job', 'applicant', 'status', 'applied_at']
    list_filter = ['status']
    search_fields = ['applicant__username', 'job__title']
