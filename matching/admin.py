from django.contrib import admin, messages

from core.exceptions import ConflictError

from .models import Match, MatchFeedback, MatchMessage
from .services import MatchLifecycleService


class MatchMessageInline(admin.TabularInline):
    model = MatchMessage
    extra = 0
    fields = ['sent_at', 'sender', 'content', 'is_read']
    readonly_fields = ['sent_at', 'sender', 'content']
    ordering = ['sent_at', 'id']


@admin.register(Match)
class MatchAdmin(admin.ModelAdmin):
    list_display = ['id', 'founder1', 'founder2', 'overall_score', 'quality', 'status',
                    'founder1_interested', 'founder2_interested', 'created_at']
    list_filter = ['status', 'quality', 'match_type']
    search_fields = ['founder1__username', 'founder2__username', 'founder1__name', 'founder2__name']
    readonly_fields = ['pair_key', 'created_at', 'updated_at', 'accepted_at', 'rejected_at',
                       'expired_at', 'connected_at']
    inlines = [MatchMessageInline]
    actions = ['mark_connected', 'expire_pending']

    def _transition(self, request, queryset, method, verb):
        done, skipped = 0, 0
        for match in queryset:
            try:
                getattr(MatchLifecycleService(match), method)()
                done += 1
            except ConflictError:
                skipped += 1
        self.message_user(request, f'{verb} {done} matches.')
        if skipped:
            self.message_user(request, f'Skipped {skipped} matches in the wrong status.', level=messages.WARNING)

    def mark_connected(self, request, queryset):
        self._transition(request, queryset, 'connect', 'Connected')
    mark_connected.short_description = 'Mark accepted matches as connected'

    def expire_pending(self, request, queryset):
        self._transition(request, queryset, 'expire', 'Expired')
    expire_pending.short_description = 'Expire pending matches'


@admin.register(MatchFeedback)
class MatchFeedbackAdmin(admin.ModelAdmin):
    list_display = ['match', 'author', 'rating', 'updated_at']
    list_filter = ['rating']
    search_fields = ['author__username', 'comment']
