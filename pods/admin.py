from django.contrib import admin

from .models import Pod, PodGoal, PodMember
from .services import PodService


class PodMemberInline(admin.TabularInline):
    model = PodMember
    extra = 0
    fields = ['user', 'role', 'contribution', 'equity_percentage', 'status']


class PodGoalInline(admin.TabularInline):
    model = PodGoal
    extra = 0
    fields = ['title', 'deadline', 'status', 'completed_at']
    readonly_fields = ['completed_at']


@admin.register(Pod)
class PodAdmin(admin.ModelAdmin):
    list_display = ['title', 'founder', 'category', 'stage', 'status',
                    'completion_percentage', 'max_members', 'start_date', 'end_date']
    list_filter = ['status', 'stage', 'category', 'compensation_model', 'is_featured']
    search_fields = ['title', 'description', 'founder__username']
    readonly_fields = ['views', 'application_count', 'completion_percentage',
                       'progress_updated_at', 'created_at', 'updated_at']
    inlines = [PodMemberInline, PodGoalInline]
    actions = ['recompute_progress']

    def recompute_progress(self, request, queryset):
        for pod in queryset:
            PodService.update_progress(pod)
        self.message_user(request, f'Recomputed progress for {queryset.count()} pods.')
    recompute_progress.short_description = 'Recompute goal completion'
