"""
URL configuration for the core app.
Handles authentication, the caller's account, points and the account directory.
"""

from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # Authentication
    path('register/', views.SignupView.as_view(), name='register'),
    path('login/', views.LoginView.as_view(), name='login'),
    path('logout/', views.LogoutView.as_view(), name='logout'),

    # Own account
    path('accounts/me/', views.MyProfileView.as_view(), name='me'),
    path('accounts/me/mindset/', views.MindsetView.as_view(), name='mindset'),
    path('accounts/me/startup/', views.StartupView.as_view(), name='startup'),
    path('accounts/me/stage/', views.StageProgressionView.as_view(), name='stage'),
    path('accounts/me/points/', views.MyPointsView.as_view(), name='points'),

    # Directory
    path('accounts/leaders/', views.LeaderboardView.as_view(), name='leaders'),
    path('accounts/search/', views.AccountSearchView.as_view(), name='search'),
    path('accounts/<int:pk>/', views.AccountDetailView.as_view(), name='account_detail'),
    path('accounts/<int:pk>/interest/', views.InvestorInterestView.as_view(), name='investor_interest'),
]
