import logging
import typing
from pathlib import Path

from django.conf import settings
from django.http import FileResponse, Http404
from django.views import View
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, generics, permissions
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from utils.response import HEALTH_OK, NOTICE_FILTER_INVALID, NOTICE_LIST_SUCCESS, BaseResponseMixin

from .models import Notice
from .serializers import NoticeSerializer


class NoticeListView(BaseResponseMixin, generics.ListAPIView):
    """
    공지사항 목록을 조회하는 읽기 전용 뷰입니다.

    생성과 삭제는 웹소켓 허브를 통해서만 이루어집니다. 그래야 모든 변경이 접속 중인
    클라이언트에게 브로드캐스트됩니다.
    """

    logger = logging.getLogger("apps")
    queryset = Notice.objects.all()
    serializer_class = NoticeSerializer
    permission_classes: typing.ClassVar = [permissions.AllowAny]
    pagination_class = None
    filter_backends: typing.ClassVar = [
        DjangoFilterBackend,
        filters.SearchFilter,
    ]
    filterset_fields: typing.ClassVar = ["category", "priority"]
    search_fields: typing.ClassVar = ["title", "content"]

    def get_queryset(self):
        return Notice.objects.order_by("-created_at", "-id")

    def list(self, request, *args, **kwargs):
        try:
            queryset = self.filter_queryset(self.get_queryset())
        except ValidationError as e:
            return self.error(data=e.detail, **NOTICE_FILTER_INVALID)
        serializer = self.get_serializer(queryset, many=True)
        return self.success(data={"results": serializer.data}, **NOTICE_LIST_SUCCESS)


class HealthCheckView(APIView):
    """서버 생존 확인용 엔드포인트."""

    permission_classes: typing.ClassVar = [permissions.AllowAny]
    authentication_classes: typing.ClassVar = []

    def get(self, request):
        return Response(HEALTH_OK)


class BoardIndexView(View):
    """
    프론트엔드(SPA) 진입점입니다.

    API 와 관리자 경로를 제외한 모든 GET 요청에 빌드된 index.html 을 돌려주고,
    라우팅은 브라우저에서 처리합니다. 빌드 결과물이 없으면 404 입니다.
    정적 에셋(js, css)은 운영 환경에서 앞단 웹 서버가 제공합니다.
    """

    def get(self, request, *args, **kwargs):
        index = Path(settings.NOTICE_BOARD["FRONTEND_DIR"]) / "index.html"
        if not index.is_file():
            raise Http404("Frontend build not found")
        return FileResponse(index.open("rb"), content_type="text/html; charset=utf-8")
