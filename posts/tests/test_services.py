"""
Tests for posts/services.py: post creation and engagement awards.

Covers:
- Creation bonus per post type; milestone / interest posts earn nothing
- Likes: award, duplicate, unlike revokes, toggle
- Comments and shares award the author
- View counter
"""

import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.test_settings')

import pytest

from core.exceptions import ConflictError, UnauthorizedError
from posts.models import Post
from posts.services import PostService


def _create_post(author, post_type=Post.PostType.GENERAL, **kwargs):
    defaults = {'title': 'Hello', 'content': 'World', 'award': False}
    defaults.update(kwargs)
    return PostService.create(author, post_type=post_type, **defaults)


@pytest.mark.django_db
class TestCreate:

    @pytest.mark.parametrize('post_type,expected', [
        (Post.PostType.GENERAL, 10),
        (Post.PostType.FAIL_FORWARD, 15),
        (Post.PostType.SIGNAL_BOOST, 20),
        (Post.PostType.INVESTOR_CONNECT, 10),
    ])
    def test_creation_bonus(self, founder, post_type, expected):
        post = _create_post(founder, post_type, award=True)

        founder.refresh_from_db()
        assert founder.points == expected
        assert post.category == 'other'
        assert founder.point_transactions.get().action == 'post_created'

    def test_milestone_post(self, founder):
        post = PostService.create_milestone_post(founder, 'users', 'First paying customer')

        assert post.post_type == Post.PostType.SIGNAL_BOOST
        assert post.content == 'Just reached users stage! First paying customer'
        founder.refresh_from_db()
        assert founder.points == 0

    def test_soft_delete_hides_post(self, founder):
        post = _create_post(founder)
        PostService.soft_delete(post, founder)
        assert not Post.objects.visible().exists()

    def test_only_author_or_admin_deletes(self, founder, other_founder, admin_user):
        post = _create_post(founder)
        with pytest.raises(UnauthorizedError):
            PostService.soft_delete(post, other_founder)
        PostService.soft_delete(post, admin_user)
        assert post.status == Post.Status.DELETED


@pytest.mark.django_db
class TestEngagement:

    def test_like_awards_author(self, founder, other_founder):
        post = _create_post(founder)

        PostService.add_like(post, other_founder)

        founder.refresh_from_db()
        assert founder.points == 1
        assert post.likes.count() == 1

    def test_duplicate_like_conflicts(self, founder, other_founder):
        post = _create_post(founder)
        PostService.add_like(post, other_founder)

        with pytest.raises(ConflictError):
            PostService.add_like(post, other_founder)

        founder.refresh_from_db()
        assert founder.points == 1

    def test_toggle_like_revokes_award(self, founder, other_founder):
        post = _create_post(founder)

        assert PostService.toggle_like(post, other_founder) is True
        assert PostService.toggle_like(post, other_founder) is False

        founder.refresh_from_db()
        assert founder.points == 0
        assert post.likes.count() == 0
        assert list(founder.point_transactions.values_list('action', flat=True)) == [
            'post_liked', 'post_liked_revoked',
        ]

    def test_remove_missing_like(self, founder, other_founder):
        post = _create_post(founder)
        assert PostService.remove_like(post, other_founder) is False

    def test_comment_and_share_award_author(self, founder, other_founder):
        post = _create_post(founder)

        PostService.add_comment(post, other_founder, 'Great insight')
        PostService.add_share(post, other_founder, 'twitter')

        founder.refresh_from_db()
        assert founder.points == 5
        assert post.engagement_total == 2 + 3

    def test_record_view(self, founder):
        post = _create_post(founder)
        PostService.record_view(post)
        PostService.record_view(post)
        assert post.views == 2
