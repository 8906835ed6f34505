class NoticeValidationError(Exception):
    """공지사항 입력값 검증 실패. errors 에는 필드별 오류 목록이 담깁니다."""

    def __init__(self, errors):
        super().__init__(errors)
        self.errors = errors


class MalformedMessage(Exception):
    """해석할 수 없는 웹소켓 메시지."""


class TransportError(Exception):
    """이미 닫혔거나 더 이상 받을 수 없는 연결로 전송을 시도한 경우."""
