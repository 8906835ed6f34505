"""
URL configuration for the notice board.

The websocket endpoint lives in `config.routing`; everything here is plain HTTP.
"""

from django.contrib import admin
from django.urls import include, path, re_path

from apps.notice.views import BoardIndexView, HealthCheckView

urlpatterns = [
    # Admin
    path("admin/", admin.site.urls),
    # API URLs
    path("api/health", HealthCheckView.as_view(), name="health"),
    path("api/notices/", include("apps.notice.urls", namespace="notice")),
    # SPA fallback: 나머지 경로는 모두 프론트엔드가 처리
    re_path(r"^(?!api/|admin/|static/).*$", BoardIndexView.as_view(), name="board-index"),
]
