"""
URL configuration for the Foundic platform.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import path, include

from core.views_health import HealthCheckView, ReadinessCheckView

urlpatterns = [
    # Admin
    path("admin/", admin.site.urls),

    # Health checks
    path('health/', HealthCheckView.as_view(), name='health'),
    path('health/ready/', ReadinessCheckView.as_view(), name='health-ready'),

    # Core app (authentication, accounts, points)
    path("", include("core.urls")),

    # Feature apps
    path("matching/", include("matching.urls")),
    path("posts/", include("posts.urls")),
    path("jobs/", include("jobs.urls")),
    path("pods/", include("pods.urls")),
]
