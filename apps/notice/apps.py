from django.apps import AppConfig


class NoticeConfig(AppConfig):
    """공지사항 앱의 설정을 정의합니다."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.notice"
    verbose_name = "공지사항"
