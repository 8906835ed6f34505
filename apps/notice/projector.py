import json
import logging
import uuid

from .protocol import (
    ADD_NOTICE,
    COMMAND_REJECTED,
    DELETE_NOTICE,
    INITIAL_STATE,
    NOTICE_ADDED,
    NOTICE_DELETED,
)

logger = logging.getLogger("apps")


class NoticeProjector:
    """
    클라이언트 한 명이 보는 공지 목록의 로컬 사본입니다.

    목록은 서버가 보낸 사실(fact)을 접어서만 바뀝니다. 명령을 보낼 때는
    로컬 목록을 미리 고치지 않고, 되돌아오는 브로드캐스트를 기다립니다.
    add_notice / delete_notice 는 명령 메시지를 만들어 돌려주고, send 가 주어졌으면
    JSON 으로 인코딩한 명령을 send 에 넘깁니다. send 는 동기 함수여야 합니다.
    """

    def __init__(self, send=None):
        self._send = send
        self.notices = []
        self.rejections = []

    def apply(self, fact):
        if hasattr(fact, "to_message"):
            fact = fact.to_message()
        handler = self._handlers.get(fact.get("type"))
        if handler is None:
            logger.warning(f"Unknown fact ignored: {fact.get('type')!r}")
            return self.notices
        handler(self, fact)
        return self.notices

    def _apply_initial_state(self, fact):
        self.notices = list(fact["notices"])

    def _apply_added(self, fact):
        self.notices = [fact["notice"], *self.notices]

    def _apply_deleted(self, fact):
        self.notices = [notice for notice in self.notices if notice["id"] != fact["id"]]

    def _apply_rejected(self, fact):
        self.rejections.append(fact)

    _handlers = {
        INITIAL_STATE: _apply_initial_state,
        NOTICE_ADDED: _apply_added,
        NOTICE_DELETED: _apply_deleted,
        COMMAND_REJECTED: _apply_rejected,
    }

    def get(self, notice_id):
        for notice in self.notices:
            if notice["id"] == notice_id:
                return notice
        return None

    def add_notice(self, notice_input):
        return self._emit({"type": ADD_NOTICE, "notice": dict(notice_input)})

    def delete_notice(self, notice_id):
        return self._emit({"type": DELETE_NOTICE, "id": notice_id})

    def _emit(self, command):
        command["requestId"] = uuid.uuid4().hex
        if self._send is not None:
            self._send(self.encode(command))
        return command

    @staticmethod
    def encode(command):
        return json.dumps(command, ensure_ascii=False)
