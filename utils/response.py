import logging

from rest_framework.response import Response

# 공통 응답 상수 정의
NOTICE_LIST_SUCCESS = {"code": 200, "message": "공지사항 목록 조회 성공"}
NOTICE_FILTER_INVALID = {"code": 400, "message": "잘못된 필터 값입니다.", "status": 400}
HEALTH_OK = {"status": "ok"}


class BaseResponseMixin:
    logger = logging.getLogger("apps")

    def success(self, data=None, message="성공", code=200, status=200):
        self.logger.info(f"SUCCESS: {message}")
        return Response({"success": True, "code": code, "message": message, "data": data}, status=status)

    def error(self, message="오류", code=400, status=400, data=None):
        self.logger.warning(f"ERROR: {message}")
        return Response({"success": False, "code": code, "message": message, "data": data}, status=status)
