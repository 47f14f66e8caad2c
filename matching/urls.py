"""
URL patterns for the matching module.

Handles co-founder match generation, the match lifecycle and messaging.
"""

from django.urls import path

from . import views

app_name = 'matching'

urlpatterns = [
    path('matches/', views.MatchListView.as_view(), name='match-list'),
    path('matches/generate/', views.GenerateMatchesView.as_view(), name='match-generate'),
    path('matches/unread/count/', views.UnreadCountView.as_view(), name='unread-count'),
    path('matches/<int:pk>/', views.MatchDetailView.as_view(), name='match-detail'),
    path('matches/<int:pk>/accept/', views.AcceptMatchView.as_view(), name='match-accept'),
    path('matches/<int:pk>/reject/', views.RejectMatchView.as_view(), name='match-reject'),
    path('matches/<int:pk>/message/', views.MatchMessageView.as_view(), name='match-message'),
    path('matches/<int:pk>/read/', views.MarkReadView.as_view(), name='match-read'),
    path('matches/<int:pk>/feedback/', views.MatchFeedbackView.as_view(), name='match-feedback'),
]
