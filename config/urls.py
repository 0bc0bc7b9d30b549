"""
URL configuration for the Daily Wins project.

Everything user-facing lives in tracker.urls; admin is kept for looking
at entries and streaks directly.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),

    # Dashboard, auth and widget endpoints
    path("", include("tracker.urls")),
]
