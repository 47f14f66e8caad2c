"""
URL patterns for pods.
"""

from django.urls import path

from . import views

app_name = 'pods'

urlpatterns = [
    path('', views.PodListView.as_view(), name='pod-list'),
    path('joined/', views.JoinedPodsView.as_view(), name='pod-joined'),
    path('created/', views.CreatedPodsView.as_view(), name='pod-created'),
    path('<int:pk>/', views.PodDetailView.as_view(), name='pod-detail'),
    path('<int:pk>/apply/', views.PodApplyView.as_view(), name='pod-apply'),
    path('<int:pk>/goals/<int:goal_id>/', views.PodGoalView.as_view(), name='pod-goal'),
]
