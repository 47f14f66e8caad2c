"""
URL patterns for community posts.
"""

from django.urls import path

from . import views

app_name = 'posts'

urlpatterns = [
    path('', views.PostListView.as_view(), name='post-list'),
    path('mine/', views.MyPostsView.as_view(), name='post-mine'),
    path('liked/', views.LikedPostsView.as_view(), name='post-liked'),
    path('<int:pk>/', views.PostDetailView.as_view(), name='post-detail'),
    path('<int:pk>/like/', views.PostLikeView.as_view(), name='post-like'),
    path('<int:pk>/comment/', views.PostCommentView.as_view(), name='post-comment'),
    path('<int:pk>/share/', views.PostShareView.as_view(), name='post-share'),
]
