from django.contrib import admin

from .models import Notice


@admin.register(Notice)
class NoticeAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "category", "priority", "author", "created_at", "expires_at")
    list_filter = ("category", "priority", "created_at")
    search_fields = ("title", "content", "author")
    readonly_fields = ("title", "content", "category", "priority", "author", "created_at", "expires_at")

    def has_add_permission(self, request):
        # 새 공지는 웹소켓 허브를 거쳐야 접속자에게 전파됩니다.
        return False
