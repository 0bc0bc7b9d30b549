from django.urls import path
from . import views

urlpatterns = [
    # Dashboard - form, streak, stats, recent wins
    path("", views.dashboard, name="dashboard"),

    # Authentication
    path("auth/", views.auth_view, name="auth"),
    path("logout/", views.sign_out_view, name="logout"),

    # AJAX endpoints for dashboard widgets
    path("api/streak/", views.streak_json, name="streak_json"),
    path("api/stats/", views.stats_json, name="stats_json"),
    path("api/recent/", views.recent_json, name="recent_json"),
    path("api/today/", views.today_json, name="today_json"),
]
