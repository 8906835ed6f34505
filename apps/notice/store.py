import logging

from django.db import transaction

from utils.exceptions import NoticeValidationError

from .models import Notice
from .serializers import NoticeInputSerializer

logger = logging.getLogger("apps")


class NoticeStore:
    """
    공지사항 테이블에 대한 유일한 쓰기 경로입니다.

    모든 메서드는 커밋이 끝난 뒤에 반환합니다. 허브는 이 보장을 전제로
    저장 이후에만 브로드캐스트합니다.
    """

    def create(self, data):
        """입력값을 검증한 뒤 공지사항을 저장하고, id와 생성일시가 채워진 객체를 반환합니다."""
        if not isinstance(data, dict):
            raise NoticeValidationError({"non_field_errors": ["notice 는 객체여야 합니다."]})
        serializer = NoticeInputSerializer(data=data)
        if not serializer.is_valid():
            raise NoticeValidationError(serializer.errors)
        with transaction.atomic():
            notice = serializer.save()
        logger.debug(f"Notice {notice.pk} stored")
        return notice

    def delete(self, notice_id):
        """해당 id의 공지사항을 삭제합니다. 없는 id여도 오류 없이 False를 반환합니다."""
        with transaction.atomic():
            deleted, _ = Notice.objects.filter(pk=notice_id).delete()
        return deleted > 0

    def list_all(self):
        return list(Notice.objects.order_by("-created_at", "-id"))
