from django.conf import settings
from django.urls import path

from .consumers import NoticeBoardConsumer
from .hub import NoticeHub

# 프로세스당 하나의 허브가 모든 게시판 연결을 관리합니다.
board_hub = NoticeHub()

websocket_urlpatterns = [
    path(settings.NOTICE_BOARD["WEBSOCKET_PATH"], NoticeBoardConsumer.as_asgi(hub=board_hub)),
]
