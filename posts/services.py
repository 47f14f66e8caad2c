"""
Post engagement service.

All writes that move F-Coins go through here so the author's award is
recorded in the same transaction as the engagement row.
"""

import logging

from django.db import IntegrityError, transaction
from django.db.models import F

from core.exceptions import ConflictError, UnauthorizedError
from core.models import Category
from core.services import PointsLedger

from .models import Post, PostComment, PostLike, PostShare

logger = logging.getLogger('posts.services')


class PostService:

    @staticmethod
    def create(author, *, post_type, title, content, category='', tags=None,
               media=None, details=None, award=True) -> Post:
        """Publish a post and award the author the per-type creation bonus."""
        with transaction.atomic():
            post = Post.objects.create(
                author=author,
                post_type=post_type,
                title=title,
                content=content,
                category=category or Category.OTHER,
                tags=tags or [],
                media=media or [],
                details=details or {},
            )
            if award:
                PointsLedger.award(
                    author, 'post_created',
                    description=f'Created {post_type} post',
                    variant=post_type,
                )

        logger.info("Post %s created by user=%s (%s)", post.pk, author.pk, post_type)
        return post

    @classmethod
    def create_milestone_post(cls, user, stage, milestone) -> Post:
        """Signal-boost post announcing a stage change; earns no creation bonus."""
        return cls.create(
            user,
            post_type=Post.PostType.SIGNAL_BOOST,
            title=f'Milestone: {milestone}'[:200],
            content=f'Just reached {stage} stage! {milestone}',
            details={'signal': {'type': 'milestone', 'impact': 'medium'}},
            award=False,
        )

    @classmethod
    def create_interest_post(cls, investor, founder, message, amount=0) -> Post:
        """Investor-connect post recording an investor's interest in a founder."""
        return cls.create(
            investor,
            post_type=Post.PostType.INVESTOR_CONNECT,
            title=f'Investment Interest: {founder.startup_name or founder.name}'[:200],
            content=message,
            details={
                'investor': {
                    'stage': founder.startup_stage or 'idea',
                    'founder_id': founder.pk,
                    'funding': {'amount': amount, 'type': 'seed'},
                },
            },
            award=False,
        )

    @staticmethod
    def update(post: Post, user, form) -> Post:
        """Apply a validated PostForm; only the author may edit."""
        if post.author_id != user.pk:
            raise UnauthorizedError('Not authorized to edit this post')

        fields = []
        for name in form.changed_fields():
            value = form.cleaned_data[name]
            if name == 'category' and not value:
                continue
            setattr(post, name, value)
            fields.append(name)
        if form.cleaned_data.get('details') is not None:
            post.details = form.cleaned_data['details']
            fields.append('details')

        if fields:
            post.save(update_fields=fields + ['updated_at'])
        return post

    @staticmethod
    def soft_delete(post: Post, user) -> Post:
        if post.author_id != user.pk and not user.is_platform_admin:
            raise UnauthorizedError('Not authorized to delete this post')
        post.status = Post.Status.DELETED
        post.save(update_fields=['status', 'updated_at'])
        logger.info("Post %s deleted by user=%s", post.pk, user.pk)
        return post

    # -------------------------------------------------------------------
    # Engagement
    # -------------------------------------------------------------------

    @staticmethod
    def add_like(post: Post, user) -> PostLike:
        """
        Raises:
            ConflictError: the user already likes this post
        """
        try:
            with transaction.atomic():
                like = PostLike.objects.create(post=post, user=user)
                PointsLedger.award(post.author, 'post_liked', description='Post received a like')
        except IntegrityError:
            raise ConflictError('You have already liked this post')
        return like

    @staticmethod
    def remove_like(post: Post, user) -> bool:
        """Remove the user's like and take back the author's like award."""
        with transaction.atomic():
            deleted, _ = PostLike.objects.filter(post=post, user=user).delete()
            if deleted:
                PointsLedger.revoke(post.author, 'post_liked', description='Post like removed')
        return bool(deleted)

    @classmethod
    def toggle_like(cls, post: Post, user) -> bool:
        """Like or unlike; returns whether the post is now liked."""
        if PostLike.objects.filter(post=post, user=user).exists():
            cls.remove_like(post, user)
            return False
        cls.add_like(post, user)
        return True

    @staticmethod
    def add_comment(post: Post, user, content: str) -> PostComment:
        with transaction.atomic():
            comment = PostComment.objects.create(post=post, user=user, content=content)
            PointsLedger.award(post.author, 'post_commented', description='Post received a comment')
        return comment

    @staticmethod
    def add_share(post: Post, user, platform: str) -> PostShare:
        with transaction.atomic():
            share = PostShare.objects.create(post=post, user=user, platform=platform)
            PointsLedger.award(post.author, 'post_shared', description='Post was shared')
        return share

    @staticmethod
    def record_view(post: Post) -> Post:
        Post.objects.filter(pk=post.pk).update(views=F('views') + 1)
        post.refresh_from_db(fields=['views'])
        return post
