from django.contrib import admin

from .models import Post, PostComment, PostLike, PostShare


class PostCommentInline(admin.TabularInline):
    model = PostComment
    extra = 0
    fields = ['created_at', 'user', 'content']
    readonly_fields = ['created_at', 'user']


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ['title', 'author', 'post_type', 'category', 'status',
                    'is_approved', 'is_featured', 'is_pinned', 'views', 'created_at']
    list_filter = ['post_type', 'category', 'status', 'is_approved', 'is_featured']
    search_fields = ['title', 'content', 'author__username']
    readonly_fields = ['views', 'created_at', 'updated_at']
    inlines = [PostCommentInline]
    actions = ['feature_posts', 'unapprove_posts']

    def feature_posts(self, request, queryset):
        updated = queryset.update(is_featured=True)
        self.message_user(request, f'Featured {updated} posts.')
    feature_posts.short_description = 'Feature selected posts'

    def unapprove_posts(self, request, queryset):
        updated = queryset.update(is_approved=False)
        self.message_user(request, f'Hid {updated} posts pending moderation.')
    unapprove_posts.short_description = 'Withdraw approval'


@admin.register(PostLike)
class PostLikeAdmin(admin.ModelAdmin):
    list_display = ['post', 'user', 'created_at']


@admin.register(PostShare)
class PostShareAdmin(admin.ModelAdmin):
    list_display = ['post', 'user', 'platform', 'created_at']
    list_filter = ['platform']
