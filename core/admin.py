from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import PointTransaction, User


class PointTransactionInline(admin.TabularInline):
    model = PointTransaction
    extra = 0
    fields = ['created_at', 'amount', 'action', 'description']
    readonly_fields = fields
    ordering = ['-created_at']

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(User)
class FoundicUserAdmin(UserAdmin):
    list_display = ['username', 'name', 'email', 'role', 'points', 'is_verified', 'is_banned']
    list_filter = ['role', 'is_verified', 'is_banned', 'startup_stage']
    search_fields = ['username', 'name', 'email', 'startup_name']
    readonly_fields = ['points', 'created_at', 'updated_at']
    inlines = [PointTransactionInline]
    actions = ['ban_accounts', 'unban_accounts', 'verify_accounts']
    fieldsets = UserAdmin.fieldsets + (
        ('Foundic', {'fields': ('name', 'role', 'bio', 'location', 'skills', 'experience', 'points')}),
        ('Startup', {'fields': ('startup_name', 'startup_description', 'startup_stage',
                                'startup_industry', 'startup_website')}),
        ('Investor', {'fields': ('investor_type', 'investment_min', 'investment_max', 'focus_areas')}),
        ('Mindset', {'fields': ('risk_tolerance', 'work_style', 'communication_style')}),
        ('Moderation', {'fields': ('is_verified', 'is_banned')}),
    )

    def ban_accounts(self, request, queryset):
        updated = queryset.update(is_banned=True)
        self.message_user(request, f'Banned {updated} accounts.')
    ban_accounts.short_description = 'Ban selected accounts'

    def unban_accounts(self, request, queryset):
        updated = queryset.update(is_banned=False)
        self.message_user(request, f'Unbanned {updated} accounts.')
    unban_accounts.short_description = 'Unban selected accounts'

    def verify_accounts(self, request, queryset):
        updated = queryset.update(is_verified=True)
        self.message_user(request, f'Verified {updated} accounts.')
    verify_accounts.short_description = 'Mark selected accounts as verified'


@admin.register(PointTransaction)
class PointTransactionAdmin(admin.ModelAdmin):
    list_display = ['user', 'amount', 'action', 'description', 'created_at']
    list_filter = ['action']
    search_fields = ['user__username', 'description']
    readonly_fields = ['user', 'amount', 'action', 'description', 'created_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
