from django.db import models
from django.db.models import Count, ExpressionWrapper, F, IntegerField, Value

from core.models import Category


# Enumerations for the type-specific `details` blocks
FAILURE_CATEGORIES = ('product', 'market', 'team', 'funding', 'execution', 'other')
FAILURE_IMPACTS = ('low', 'medium', 'high', 'critical')
SIGNAL_TYPES = ('first_users', 'mvp_launch', 'first_revenue', 'funding', 'partnership', 'milestone', 'other')
SIGNAL_IMPACTS = ('small', 'medium', 'large')
FUNDING_TYPES = ('seed', 'series_a', 'series_b', 'other')


class PostQuerySet(models.QuerySet):

    def visible(self):
        """Published, approved posts that anyone may read."""
        return self.filter(status=Post.Status.PUBLISHED, is_approved=True)

    def with_engagement(self):
        """Annotate like/comment/share counts and the engagement score."""
        return self.annotate(
            like_total=Count('likes', distinct=True),
            comment_total=Count('comments', distinct=True),
            share_total=Count('shares', distinct=True),
        ).annotate(
            engagement_score=ExpressionWrapper(
                F('like_total') + F('comment_total') * Value(2)
                + F('share_total') * Value(3) + F('views'),
                output_field=IntegerField(),
            ),
        )


class Post(models.Model):
    """
    A community post: fail-forward story, signal boost, investor connect
    or general update. Type-specific fields live in `details`.
    """

    class PostType(models.TextChoices):
        FAIL_FORWARD = 'fail_forward', 'Fail Forward'
        SIGNAL_BOOST = 'signal_boost', 'Signal Boost'
        INVESTOR_CONNECT = 'investor_connect', 'Investor Connect'
        GENERAL = 'general', 'General'

    class Visibility(models.TextChoices):
        PUBLIC = 'public', 'Public'
        COMMUNITY = 'community', 'Community'
        PRIVATE = 'private', 'Private'

    class Status(models.TextChoices):
        DRAFT = 'draft', 'Draft'
        PUBLISHED = 'published', 'Published'
        ARCHIVED = 'archived', 'Archived'
        DELETED = 'deleted', 'Deleted'

    # details key carrying each type's extra fields
    DETAIL_KEYS = {
        PostType.FAIL_FORWARD: 'failure',
        PostType.SIGNAL_BOOST: 'signal',
        PostType.INVESTOR_CONNECT: 'investor',
    }

    author = models.ForeignKey(
        'core.User',
        on_delete=models.CASCADE,
        related_name='posts'
    )
    post_type = models.CharField(max_length=20, choices=PostType.choices, db_index=True)
    title = models.CharField(max_length=200)
    content = models.TextField(max_length=5000)
    details = models.JSONField(default=dict, blank=True)
    media = models.JSONField(default=list, blank=True)
    category = models.CharField(max_length=20, choices=Category.choices, default=Category.OTHER)
    tags = models.JSONField(default=list, blank=True)

    visibility = models.CharField(max_length=10, choices=Visibility.choices, default=Visibility.PUBLIC)
    is_approved = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)
    is_pinned = models.BooleanField(default=False)
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.PUBLISHED,
        db_index=True,
    )
    views = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PostQuerySet.as_manager()

    class Meta:
        db_table = 'posts_post'
        ordering = ['-created_at']
        verbose_name = 'Post'
        verbose_name_plural = 'Posts'

    def __str__(self):
        return f"{self.title} ({self.post_type})"

    @property
    def engagement_total(self) -> int:
        return (
            self.likes.count()
            + self.comments.count() * 2
            + self.shares.count() * 3
            + self.views
        )

    def as_dict(self, viewer=None, include_comments=False) -> dict:
        data = {
            'id': self.pk,
            'author': self.author.as_summary(),
            'type': self.post_type,
            'title': self.title,
            'content': self.content,
            'details': self.details,
            'media': self.media,
            'category': self.category,
            'tags': self.tags,
            'visibility': self.visibility,
            'is_featured': self.is_featured,
            'is_pinned': self.is_pinned,
            'status': self.status,
            'engagement': {
                'likes': self.likes.count(),
                'comments': self.comments.count(),
                'shares': self.shares.count(),
                'views': self.views,
                'score': self.engagement_total,
            },
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat(),
        }
        if viewer is not None and viewer.is_authenticated:
            data['liked'] = self.likes.filter(user=viewer).exists()
        if include_comments:
            data['comments'] = [comment.as_dict() for comment in self.comments.select_related('user')]
        return data


class PostLike(models.Model):
    post = models.ForeignKey(Post, on_delete=models.CASCADE, related_name='likes')
    user = models.ForeignKey('core.User', on_delete=models.CASCADE, related_name='post_likes')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'posts_like'
        ordering = ['created_at', 'id']
        constraints = [
            models.UniqueConstraint(fields=['post', 'user'], name='unique_like_per_user'),
        ]

    def __str__(self):
        return f"{self.user_id} likes {self.post_id}"


class PostComment(models.Model):
    post = models.ForeignKey(Post, on_delete=models.CASCADE, related_name='comments')
    user = models.ForeignKey('core.User', on_delete=models.CASCADE, related_name='post_comments')
    content = models.CharField(max_length=1000)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'posts_comment'
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.user_id} on {self.post_id}: {self.content[:40]}"

    def as_dict(self) -> dict:
        return {
            'id': self.pk,
            'user': self.user.as_summary(),
            'content': self.content,
            'created_at': self.created_at.isoformat(),
        }


class PostShare(models.Model):
    post = models.ForeignKey(Post, on_delete=models.CASCADE, related_name='shares')
    user = models.ForeignKey('core.User', on_delete=models.CASCADE, related_name='post_shares')
    platform = models.CharField(max_length=50)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'posts_share'
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.user_id} shared {self.post_id} on {self.platform}"
