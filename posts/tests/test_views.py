"""
Tests for posts/views.py: community feed endpoints.

Covers:
- Public listing with filters and sorts
- Create (auth, validation of typed detail blocks)
- Detail, edit by author, soft delete
- Like toggle, comment, share, my/liked posts
"""

import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.test_settings')

import pytest
from django.urls import reverse

from posts.models import Post
from posts.services import PostService


def _create_post(author, post_type=Post.PostType.GENERAL, title='Hello', **kwargs):
    return PostService.create(author, post_type=post_type, title=title, content='Body', award=False, **kwargs)


@pytest.mark.django_db
class TestCreatePost:

    def test_anonymous_cannot_post(self, api):
        response = api.post(reverse('posts:post-list'), {'type': 'general', 'title': 'x', 'content': 'y'})
        assert response.status_code == 401

    def test_create_fail_forward(self, api, founder):
        api.login(founder)
        response = api.post(reverse('posts:post-list'), {
            'type': 'fail_forward',
            'title': 'We ran out of runway',
            'content': 'What I learned',
            'category': 'finance',
            'tags': 'funding, lessons',
            'failure': {'category': 'funding', 'impact': 'high', 'lessons': ['Raise earlier']},
        })

        assert response.status_code == 201
        body = response.json()
        assert body['type'] == 'fail_forward'
        assert body['tags'] == ['funding', 'lessons']
        assert body['details']['failure']['impact'] == 'high'
        assert body['details']['failure']['lessons'] == ['Raise earlier']
        founder.refresh_from_db()
        assert founder.points == 15

    def test_missing_title(self, api, founder):
        api.login(founder)
        response = api.post(reverse('posts:post-list'), {'type': 'general', 'content': 'y'})

        assert response.status_code == 400
        assert response.json()['error']['details']['title'][0]['message'] == 'Title is required'

    def test_signal_requires_type(self, api, founder):
        api.login(founder)
        response = api.post(reverse('posts:post-list'), {
            'type': 'signal_boost', 'title': 'Launch', 'content': 'We launched', 'signal': {},
        })
        assert response.status_code == 400
        assert 'signal' in response.json()['error']['details']

    def test_invalid_media(self, api, founder):
        api.login(founder)
        response = api.post(reverse('posts:post-list'), {
            'type': 'general', 'title': 'a', 'content': 'b', 'media': [{'url': 'x', 'type': 'gif'}],
        })
        assert response.status_code == 400


@pytest.mark.django_db
class TestListPosts:

    def test_public_listing_hides_deleted_and_unapproved(self, api, founder):
        visible = _create_post(founder, title='Visible')
        hidden = _create_post(founder, title='Hidden')
        hidden.is_approved = False
        hidden.save()
        deleted = _create_post(founder, title='Deleted')
        PostService.soft_delete(deleted, founder)

        body = api.get(reverse('posts:post-list')).json()

        assert [post['id'] for post in body['posts']] == [visible.pk]

    def test_filter_by_type(self, api, founder):
        _create_post(founder)
        signal = _create_post(founder, Post.PostType.SIGNAL_BOOST, details={'signal': {'type': 'funding'}})

        body = api.get(reverse('posts:post-list'), {'type': 'signal_boost'}).json()

        assert [post['id'] for post in body['posts']] == [signal.pk]

    def test_popular_sort(self, api, founder, other_founder, investor):
        quiet = _create_post(founder, title='Quiet')
        loved = _create_post(founder, title='Loved')
        PostService.add_like(quiet, other_founder)
        PostService.add_like(loved, other_founder)
        PostService.add_like(loved, investor)

        body = api.get(reverse('posts:post-list'), {'sort': 'popular'}).json()

        assert [post['title'] for post in body['posts']] == ['Loved', 'Quiet']

    def test_trending_sort_counts_shares(self, api, founder, other_founder):
        liked = _create_post(founder, title='Liked')
        shared = _create_post(founder, title='Shared')
        PostService.add_like(liked, other_founder)
        PostService.add_share(shared, other_founder, 'linkedin')

        body = api.get(reverse('posts:post-list'), {'sort': 'trending'}).json()

        assert [post['title'] for post in body['posts']] == ['Shared', 'Liked']


@pytest.mark.django_db
class TestPostDetail:

    def test_detail_counts_view_and_includes_comments(self, api, founder, other_founder):
        post = _create_post(founder)
        PostService.add_comment(post, other_founder, 'Nice')

        body = api.get(reverse('posts:post-detail', args=[post.pk])).json()

        assert body['engagement']['views'] == 1
        assert body['comments'][0]['content'] == 'Nice'

    def test_author_edits(self, api, founder):
        post = _create_post(founder)
        api.login(founder)

        body = api.put(reverse('posts:post-detail', args=[post.pk]), {'title': 'Updated'}).json()

        assert body['title'] == 'Updated'
        assert body['content'] == 'Body'

    def test_non_author_cannot_edit(self, api, founder, other_founder):
        post = _create_post(founder)
        api.login(other_founder)
        response = api.put(reverse('posts:post-detail', args=[post.pk]), {'title': 'Mine now'})
        assert response.status_code == 403

    def test_delete_then_404(self, api, founder):
        post = _create_post(founder)
        api.login(founder)

        assert api.delete(reverse('posts:post-detail', args=[post.pk])).status_code == 200
        assert api.get(reverse('posts:post-detail', args=[post.pk])).status_code == 404


@pytest.mark.django_db
class TestEngagementEndpoints:

    def test_like_toggle(self, api, founder, other_founder):
        post = _create_post(founder)
        api.login(other_founder)

        assert api.post(reverse('posts:post-like', args=[post.pk])).json()['liked'] is True
        liked = api.get(reverse('posts:post-liked')).json()
        assert [p['id'] for p in liked['posts']] == [post.pk]

        assert api.post(reverse('posts:post-like', args=[post.pk])).json()['liked'] is False

    def test_comment(self, api, founder, other_founder):
        post = _create_post(founder)
        api.login(other_founder)

        response = api.post(reverse('posts:post-comment', args=[post.pk]), {'content': 'Well said'})

        assert response.status_code == 201
        assert response.json()['engagement']['comments'] == 1

    def test_share_requires_platform(self, api, founder, other_founder):
        post = _create_post(founder)
        api.login(other_founder)
        assert api.post(reverse('posts:post-share', args=[post.pk]), {}).status_code == 400

    def test_my_posts_excludes_deleted(self, api, founder):
        kept = _create_post(founder)
        PostService.soft_delete(_create_post(founder), founder)
        api.login(founder)

        body = api.get(reverse('posts:post-mine')).json()

        assert [post['id'] for post in body['posts']] == [kept.pk]
