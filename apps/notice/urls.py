from django.urls import path

from .views import NoticeListView

app_name = "notice"

urlpatterns = [
    path("", NoticeListView.as_view(), name="notice-list"),
]
