"""
Views for community posts.

Listing and reading are public; every write needs a session.
"""

import logging

from django.http import JsonResponse
from django.views import View

from core.api import ApiLoginRequiredMixin, get_object_or_not_found, paginate, parse_body, require_authenticated
from core.exceptions import NotFoundError, ValidationFailed

from .forms import CommentForm, PostFilterForm, PostForm, ShareForm
from .models import Post
from .services import PostService

logger = logging.getLogger(__name__)

SORT_ORDERINGS = {
    'newest': ('-created_at', '-id'),
    'popular': ('-like_total', '-created_at', '-id'),
    'trending': ('-engagement_score', '-created_at', '-id'),
}


def visible_post(pk) -> Post:
    return get_object_or_not_found(
        Post.objects.visible().select_related('author'), 'Post not found', pk=pk
    )


class PostListView(View):
    """
    GET: published posts, filterable by type, category and featured, sorted
    newest / popular / trending.
    POST: create a post (login required).
    """

    def get(self, request):
        form = PostFilterForm(request.GET)
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid filters')
        filters = form.cleaned_data

        queryset = Post.objects.visible().select_related('author').with_engagement()
        if filters['type']:
            queryset = queryset.filter(post_type=filters['type'])
        if filters['category']:
            queryset = queryset.filter(category=filters['category'])
        if filters['featured'] is not None:
            queryset = queryset.filter(is_featured=filters['featured'])

        queryset = queryset.order_by(*SORT_ORDERINGS[filters['sort'] or 'newest'])
        return JsonResponse(
            paginate(request, queryset, lambda post: post.as_dict(request.user), key='posts')
        )

    def post(self, request):
        user = require_authenticated(request)
        form = PostForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid post')

        data = form.cleaned_data
        post = PostService.create(
            user,
            post_type=data['type'],
            title=data['title'],
            content=data['content'],
            category=data['category'],
            tags=data['tags'],
            media=data['media'],
            details=data['details'],
        )
        return JsonResponse(post.as_dict(user), status=201)


class PostDetailView(View):
    """GET counts a view; PUT edits (author only); DELETE soft-deletes."""

    def get(self, request, pk):
        post = PostService.record_view(visible_post(pk))
        return JsonResponse(post.as_dict(request.user, include_comments=True))

    def put(self, request, pk):
        user = require_authenticated(request)
        post = get_object_or_not_found(
            Post.objects.exclude(status=Post.Status.DELETED), 'Post not found', pk=pk
        )
        form = PostForm(parse_body(request), instance=post)
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid post')

        PostService.update(post, user, form)
        return JsonResponse(post.as_dict(user))

    def delete(self, request, pk):
        user = require_authenticated(request)
        post = get_object_or_not_found(
            Post.objects.exclude(status=Post.Status.DELETED), 'Post not found', pk=pk
        )
        PostService.soft_delete(post, user)
        return JsonResponse({'message': 'Post deleted successfully'})


class PostLikeView(ApiLoginRequiredMixin, View):

    def post(self, request, pk):
        liked = PostService.toggle_like(visible_post(pk), request.user)
        return JsonResponse({'message': 'Post liked' if liked else 'Post unliked', 'liked': liked})


class PostCommentView(ApiLoginRequiredMixin, View):

    def post(self, request, pk):
        post = visible_post(pk)
        form = CommentForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid comment')

        PostService.add_comment(post, request.user, form.cleaned_data['content'])
        return JsonResponse(post.as_dict(request.user, include_comments=True), status=201)


class PostShareView(ApiLoginRequiredMixin, View):

    def post(self, request, pk):
        post = visible_post(pk)
        form = ShareForm(parse_body(request))
        if not form.is_valid():
            raise ValidationFailed.from_form(form, 'Invalid share')

        PostService.add_share(post, request.user, form.cleaned_data['platform'])
        return JsonResponse({'message': 'Post shared successfully'})


class MyPostsView(ApiLoginRequiredMixin, View):
    """The caller's own posts, drafts included, deleted excluded."""

    def get(self, request):
        queryset = (
            Post.objects
            .filter(author=request.user)
            .exclude(status=Post.Status.DELETED)
            .select_related('author')
            .order_by('-created_at', '-id')
        )
        return JsonResponse(
            paginate(request, queryset, lambda post: post.as_dict(request.user), key='posts')
        )


class LikedPostsView(ApiLoginRequiredMixin, View):

    def get(self, request):
        queryset = (
            Post.objects.visible()
            .filter(likes__user=request.user)
            .select_related('author')
            .order_by('-created_at', '-id')
        )
        return JsonResponse(
            paginate(request, queryset, lambda post: post.as_dict(request.user), key='posts')
        )
