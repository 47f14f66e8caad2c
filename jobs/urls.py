"""
URL patterns for the job board.
"""

from django.urls import path

from . import views

app_name = 'jobs'

urlpatterns = [
    path('', views.JobListView.as_view(), name='job-list'),
    path('posted/', views.PostedJobsView.as_view(), name='job-posted'),
    path('applied/', views.AppliedJobsView.as_view(), name='job-applied'),
    path('<int:pk>/', views.JobDetailView.as_view(), name='job-detail'),
    path('<int:pk>/apply/', views.JobApplyView.as_view(), name='job-apply'),
    path(
        '<int:pk>/applications/<int:application_id>/',
        views.ApplicationStatusView.as_view(),
        name='application-status',
    ),
]
